from logging import getLogger
from typing import Any, Dict, Mapping, Optional

from .._utils import (
    TelegramRequest,
    has_file_id,
    is_input_file,
    normalize_params,
    prepare_multipart_params,
    reply_markup_to_string,
)
from .._utils._params import Params
from .._utils.constants import (
    DEFAULT_BASE_BOT_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    OPTION_QUERY,
)
from ..models.exceptions import CouldNotUploadInputFile
from ..tracing._traced import traced
from ._response import TelegramResponse
from ._transport import HttpClientInterface, HttpxHttpClient, RawResponse


def _request_input_processor(inputs: Dict[str, Any]) -> Dict[str, Any]:
    """Record only what identifies the call; params may hold file contents."""
    processed_inputs = {"endpoint": inputs.get("endpoint")}
    params = inputs.get("params")
    if isinstance(params, Mapping):
        processed_inputs["params"] = sorted(params)
    return processed_inputs


def _upload_input_processor(inputs: Dict[str, Any]) -> Dict[str, Any]:
    processed_inputs = _request_input_processor(inputs)
    field = inputs.get("input_file_field")
    processed_inputs["input_file_field"] = field
    value = (inputs.get("params") or {}).get(field)
    processed_inputs["file"] = (
        "<Redacted InputFile>" if is_input_file(value) else "<Remote File Reference>"
    )
    return processed_inputs


class TelegramClient:
    """Low-level client for the Telegram Bot API.

    Builds a :class:`TelegramRequest` for each call, sends it through the
    configured :class:`HttpClientInterface` and wraps the outcome in a
    :class:`TelegramResponse`. Synchronous calls raise the response's
    exception when the API answers with ``ok: false``; asynchronous calls
    return a pending response that never raises at dispatch.

    An instance keeps the last completed response, so it is meant to be used
    by one task at a time.

    Examples:
        ```python
        from telegram_bot_sdk import TelegramClient

        client = TelegramClient("123:ABC")
        me = client.get("getMe").get_result()
        ```
    """

    def __init__(
        self,
        token: Optional[str] = None,
        http_client_handler: Optional[HttpClientInterface] = None,
        *,
        base_bot_url: str = DEFAULT_BASE_BOT_URL,
        is_async_request: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> None:
        self._logger = getLogger("telegram_bot_sdk")
        self._access_token = token
        self._http_client_handler = http_client_handler
        self._base_bot_url = base_bot_url
        self._is_async_request = is_async_request
        self._timeout = timeout
        self._connect_timeout = connect_timeout
        self._last_response: Optional[TelegramResponse] = None

    @property
    def http_client_handler(self) -> HttpClientInterface:
        if self._http_client_handler is None:
            self._http_client_handler = HttpxHttpClient()
        return self._http_client_handler

    def set_http_client_handler(
        self, http_client_handler: HttpClientInterface
    ) -> "TelegramClient":
        self._http_client_handler = http_client_handler
        return self

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    def set_access_token(self, token: str) -> "TelegramClient":
        self._access_token = token
        return self

    @property
    def base_bot_url(self) -> str:
        return self._base_bot_url

    def set_base_bot_url(self, base_bot_url: str) -> "TelegramClient":
        self._base_bot_url = base_bot_url
        return self

    @property
    def is_async_request(self) -> bool:
        return self._is_async_request

    def set_async_request(self, is_async_request: bool) -> "TelegramClient":
        self._is_async_request = is_async_request
        return self

    @property
    def timeout(self) -> float:
        return self._timeout

    def set_timeout(self, timeout: float) -> "TelegramClient":
        self._timeout = timeout
        return self

    @property
    def connect_timeout(self) -> float:
        return self._connect_timeout

    def set_connect_timeout(self, connect_timeout: float) -> "TelegramClient":
        self._connect_timeout = connect_timeout
        return self

    @property
    def last_response(self) -> Optional[TelegramResponse]:
        """The last completed response, or ``None``."""
        return self._last_response

    @traced(
        name="telegram_get",
        run_type="telegram",
        input_processor=_request_input_processor,
    )
    def get(
        self, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> TelegramResponse:
        """Send a GET request to the Bot API.

        Args:
            endpoint (str): Bot API method, e.g. ``getMe``.
            params (Optional[Mapping[str, Any]]): Query parameters.

        Returns:
            TelegramResponse: The decoded response.

        Raises:
            TelegramResponseException: If the API answered with ``ok: false``.
            TokenMissingError: If no bot token is configured.
        """
        return self._send_request("GET", endpoint, reply_markup_to_string(params or {}))

    @traced(
        name="telegram_post",
        run_type="telegram",
        input_processor=_request_input_processor,
    )
    def post(
        self,
        endpoint: str,
        params: Optional[Params] = None,
        is_file_upload: bool = False,
    ) -> TelegramResponse:
        """Send a POST request to the Bot API.

        Args:
            endpoint (str): Bot API method, e.g. ``sendMessage``.
            params: Form parameters, or multipart parts when ``is_file_upload``.
            is_file_upload (bool): Send the body as multipart/form-data.

        Returns:
            TelegramResponse: The decoded response.

        Raises:
            TelegramResponseException: If the API answered with ``ok: false``.
            TokenMissingError: If no bot token is configured.
        """
        return self._send_request(
            "POST", endpoint, normalize_params(params or {}, is_file_upload)
        )

    @traced(
        name="telegram_upload_file",
        run_type="telegram",
        input_processor=_upload_input_processor,
    )
    def upload_file(
        self, endpoint: str, params: Mapping[str, Any], input_file_field: str
    ) -> TelegramResponse:
        """Send a file parameter to the Bot API.

        A file Telegram already has (a ``file_id`` or a URL string) is sent as
        an ordinary POST. An :class:`InputFile` is uploaded as
        multipart/form-data.

        Args:
            endpoint (str): Bot API method, e.g. ``sendDocument``.
            params (Mapping[str, Any]): Request parameters.
            input_file_field (str): The parameter holding the file.

        Returns:
            TelegramResponse: The decoded response.

        Raises:
            CouldNotUploadInputFile: If the file parameter is missing or is not
                an ``InputFile``. Raised before anything is sent.
            TelegramResponseException: If the API answered with ``ok: false``.
        """
        if params.get(input_file_field) is None:
            raise CouldNotUploadInputFile.missing_param(input_file_field)

        if has_file_id(input_file_field, params):
            return self.post(endpoint, params)

        return self.post(
            endpoint, prepare_multipart_params(params, input_file_field), True
        )

    def _resolve_telegram_request(
        self, method: str, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> TelegramRequest:
        return (
            TelegramRequest(
                self._access_token,
                method,
                endpoint,
                params,
                self._is_async_request,
            )
            .set_timeout(self._timeout)
            .set_connect_timeout(self._connect_timeout)
        )

    def _send_request(
        self, method: str, endpoint: str, params: Optional[Mapping[str, Any]] = None
    ) -> TelegramResponse:
        request = self._resolve_telegram_request(method, endpoint, params)

        self._logger.debug(f"Request: {request.method} {request.endpoint}")

        raw_response = self.http_client_handler.send(
            self._make_api_url(request),
            request.method,
            request.headers,
            self._get_option(request),
            request.is_async_request,
            timeout=request.timeout,
            connect_timeout=request.connect_timeout,
        )

        response = self._get_response(request, raw_response)

        if response.is_error():
            response.throw_exception()

        if not response.is_pending:
            self._last_response = response

        return response

    def _make_api_url(self, request: TelegramRequest) -> str:
        return f"{self._base_bot_url}{request.access_token}/{request.endpoint}"

    def _get_response(
        self, request: TelegramRequest, raw_response: RawResponse
    ) -> TelegramResponse:
        return TelegramResponse(request, raw_response)

    def _get_option(self, request: TelegramRequest) -> Dict[str, Any]:
        if request.method == "POST":
            return dict(request.post_params)

        return {OPTION_QUERY: dict(request.params)}

    def close(self) -> None:
        if self._http_client_handler is not None:
            self._http_client_handler.close()

    async def aclose(self) -> None:
        if self._http_client_handler is not None:
            await self._http_client_handler.aclose()

    def __enter__(self) -> "TelegramClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    async def __aenter__(self) -> "TelegramClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
