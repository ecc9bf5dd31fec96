from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseObject(BaseModel):
    """Typed view over a Bot API object.

    Declared fields are typed; anything else the API sends is kept as an
    extra field, so new API fields never break decoding. ``get`` and ``set``
    work over both kinds of fields by their wire name.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    @classmethod
    def make(cls, **fields: Any):
        return cls.model_validate(fields)

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def set(self, key: str, value: Any):
        for name, info in type(self).model_fields.items():
            if key in (name, info.alias):
                setattr(self, name, value)
                return self
        setattr(self, key, value)
        return self

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return self.to_json()


class User(BaseObject):
    id: int
    is_bot: bool = False
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None


class Chat(BaseObject):
    id: int
    type: str
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PhotoSize(BaseObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    file_size: Optional[int] = None


class Document(BaseObject):
    file_id: str
    file_unique_id: str
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(BaseObject):
    file_id: str
    file_unique_id: str
    width: int
    height: int
    duration: int
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Message(BaseObject):
    message_id: int
    date: int
    chat: Chat
    from_user: Optional[User] = Field(default=None, alias="from")
    text: Optional[str] = None
    caption: Optional[str] = None
    photo: Optional[List[PhotoSize]] = None
    document: Optional[Document] = None
    video: Optional[Video] = None
