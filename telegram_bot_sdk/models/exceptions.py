from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .._services._response import TelegramResponse
    from .._utils._request_spec import TelegramRequest


class TelegramSDKException(Exception):
    """Base class for every error raised by the SDK."""


class CouldNotUploadInputFile(TelegramSDKException):
    """Raised when a file parameter cannot be turned into a multipart upload.

    Always raised before any network I/O takes place.
    """

    @classmethod
    def missing_param(cls, input_file_field: str) -> "CouldNotUploadInputFile":
        return cls(f"Input field [{input_file_field}] is missing in your params.")

    @classmethod
    def input_file_parameter_should_be_input_file_entity(
        cls, input_file_field: str
    ) -> "CouldNotUploadInputFile":
        return cls(
            f"A path to local file, a URL, or a file resource should be uploaded "
            f"using `InputFile`. Please wrap the [{input_file_field}] parameter "
            f"value with `InputFile`."
        )

    @classmethod
    def file_does_not_exist_or_not_readable(
        cls, file: Any
    ) -> "CouldNotUploadInputFile":
        return cls(f"File: `{file}` does not exist or is not readable!")

    @classmethod
    def filename_not_provided(cls, path: Any) -> "CouldNotUploadInputFile":
        return cls(f"Filename not provided for {path!r}.")

    @classmethod
    def resource_should_be_file_or_stream(cls) -> "CouldNotUploadInputFile":
        return cls("Resource should be a path, bytes, or a binary file stream.")


class TelegramResponseException(TelegramSDKException):
    """An error returned by the Bot API in a response envelope (`ok: false`).

    Built eagerly by :class:`TelegramResponse` and raised by the client on
    the synchronous path only.
    """

    def __init__(
        self,
        message: str,
        *,
        http_status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        request: Optional["TelegramRequest"] = None,
    ) -> None:
        self.message = message
        self.http_status_code = http_status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.request = request
        super().__init__(self.message)

    @classmethod
    def create(cls, response: "TelegramResponse") -> "TelegramResponseException":
        data = response.decoded_body
        message = data.get("description") or "Unknown error from API Response."

        return cls(
            str(message),
            http_status_code=response.http_status_code,
            response_data=data,
            request=response.request,
        )

    @property
    def error_code(self) -> Optional[int]:
        return self.response_data.get("error_code")

    @property
    def description(self) -> Optional[str]:
        return self.response_data.get("description")

    @property
    def parameters(self) -> Dict[str, Any]:
        parameters = self.response_data.get("parameters")
        return parameters if isinstance(parameters, dict) else {}

    @property
    def retry_after(self) -> Optional[int]:
        """Seconds to wait before repeating the request (flood control)."""
        return self.parameters.get("retry_after")

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        """New identifier when a group was migrated to a supergroup."""
        return self.parameters.get("migrate_to_chat_id")

    def __str__(self) -> str:
        if self.http_status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.http_status_code})"
