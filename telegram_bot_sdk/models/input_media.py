from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import field_serializer

from .input_file import InputFile
from .objects import BaseObject

ATTACH_PREFIX = "attach://"

MediaSource = Union[InputFile, str]


class InputMedia(BaseObject):
    """Content of a media message to be sent.

    ``media`` and ``thumbnail`` take a ``file_id``, an HTTP URL, or an
    :class:`InputFile`. An ``InputFile`` is written as ``attach://<filename>``
    and has to travel in the same multipart body under that name; see
    :meth:`attachments`.
    """

    type: str
    media: MediaSource
    thumbnail: Optional[MediaSource] = None
    caption: Optional[str] = None
    parse_mode: Optional[str] = None
    caption_entities: Optional[List[Dict[str, Any]]] = None

    @field_serializer("media", "thumbnail")
    def _serialize_source(self, value: Optional[MediaSource]) -> Optional[str]:
        if isinstance(value, InputFile):
            return f"{ATTACH_PREFIX}{value.filename}"
        return value

    def attachments(self) -> Dict[str, InputFile]:
        """Files referenced with ``attach://``, keyed by their part name."""
        return {
            value.filename: value
            for value in (self.media, self.thumbnail)
            if isinstance(value, InputFile)
        }


class InputMediaVideo(InputMedia):
    """Reference: https://core.telegram.org/bots/api#inputmediavideo"""

    type: Literal["video"] = "video"
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[int] = None
    supports_streaming: Optional[bool] = None
    has_spoiler: Optional[bool] = None
