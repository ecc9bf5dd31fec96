import os
from pathlib import Path
from typing import IO, Optional, Union

from .exceptions import CouldNotUploadInputFile

FileSource = Union[str, os.PathLike, bytes, bytearray, IO[bytes]]


class InputFile:
    """A file that has to be uploaded to Telegram with multipart/form-data.

    Wrapping a value in ``InputFile`` is what marks a parameter as a file
    rather than a string. Strings that are not wrapped are sent as they are,
    which is how a ``file_id`` or an HTTP URL of an existing file is passed.

    Examples:
        ```python
        InputFile("photos/cat.jpg")
        InputFile(b"...raw bytes...", filename="cat.jpg")
        InputFile(open("cat.jpg", "rb"))
        ```

    Args:
        file: A local path, raw bytes, or a binary file-like object.
        filename (Optional[str]): Name sent with the upload. Defaults to the
            basename of the path or of the stream's ``name``.
    """

    def __init__(self, file: FileSource, filename: Optional[str] = None) -> None:
        if not isinstance(file, (str, os.PathLike, bytes, bytearray)) and not hasattr(
            file, "read"
        ):
            raise CouldNotUploadInputFile.resource_should_be_file_or_stream()

        self._file = file
        self._filename = filename

    @classmethod
    def create(cls, file: FileSource, filename: Optional[str] = None) -> "InputFile":
        return cls(file, filename)

    @property
    def file(self) -> FileSource:
        return self._file

    @property
    def filename(self) -> str:
        if self._filename:
            return self._filename

        if isinstance(self._file, (str, os.PathLike)):
            return Path(self._file).name

        name = getattr(self._file, "name", None)
        if isinstance(name, str) and name:
            return os.path.basename(name)

        raise CouldNotUploadInputFile.filename_not_provided(self._file)

    def get_filename(self) -> str:
        return self.filename

    def get_contents(self) -> bytes:
        """Read the raw content to upload.

        Streams are read from their current position, so an ``InputFile``
        built on a stream is meant to be sent once.
        """
        if isinstance(self._file, (bytes, bytearray)):
            return bytes(self._file)

        if isinstance(self._file, (str, os.PathLike)):
            path = Path(self._file)
            if not path.is_file():
                raise CouldNotUploadInputFile.file_does_not_exist_or_not_readable(
                    self._file
                )
            try:
                return path.read_bytes()
            except OSError as e:
                raise CouldNotUploadInputFile.file_does_not_exist_or_not_readable(
                    self._file
                ) from e

        contents = self._file.read()
        if isinstance(contents, str):
            raise CouldNotUploadInputFile.resource_should_be_file_or_stream()
        return contents

    def __repr__(self) -> str:
        if isinstance(self._file, (bytes, bytearray)):
            source = f"<{len(self._file)} bytes>"
        else:
            source = repr(self._file)
        return f"InputFile({source}, filename={self._filename!r})"
