import asyncio
import json
from typing import Any, Dict, Optional, Union
from urllib.parse import parse_qsl

from httpx import Response

from .._utils._request_spec import TelegramRequest
from ..models.exceptions import TelegramResponseException, TelegramSDKException


class TelegramResponse:
    """Decoded result of one Bot API call.

    A completed ``httpx.Response`` is decoded right away, and an ``ok: false``
    envelope is turned into a :class:`TelegramResponseException` that is kept,
    not raised. A pending handle (async dispatch) is stored as is: there is no
    status code or body to look at until :meth:`resolve` is awaited.

    Args:
        request (TelegramRequest): The request that produced this response.
        response: A completed ``httpx.Response`` or an ``asyncio.Future``.

    Raises:
        TypeError: If ``response`` is neither.
    """

    def __init__(
        self,
        request: TelegramRequest,
        response: Union[Response, "asyncio.Future[Response]"],
    ) -> None:
        self._request = request
        self._endpoint = request.endpoint
        self._decoded_body: Dict[str, Any] = {}
        self._thrown_exception: Optional[TelegramSDKException] = None
        self._pending: Optional["asyncio.Future[Response]"] = None

        if isinstance(response, Response):
            self._http_status_code: Optional[int] = response.status_code
            self._headers: Dict[str, str] = dict(response.headers)
            self._body: str = response.text

            self.decode_body()
        elif isinstance(response, asyncio.Future):
            self._http_status_code = None
            self._headers = {}
            self._body = ""
            self._pending = response
        else:
            raise TypeError(
                'Second constructor argument "response" must be an httpx.Response '
                "or an asyncio.Future"
            )

    def decode_body(self) -> None:
        """Decode the raw body, then classify the envelope.

        JSON is tried first, URL-encoded form data second. Anything that does
        not decode to a mapping leaves the decoded body empty.
        """
        try:
            decoded = json.loads(self._body)
        except ValueError:
            decoded = None

        if not isinstance(decoded, dict):
            decoded = dict(parse_qsl(self._body))

        self._decoded_body = decoded

        if self.is_error():
            self.make_exception()

    def is_error(self) -> bool:
        return self._decoded_body.get("ok") is False

    def make_exception(self) -> None:
        self._thrown_exception = TelegramResponseException.create(self)

    @property
    def request(self) -> TelegramRequest:
        return self._request

    @property
    def http_status_code(self) -> Optional[int]:
        """The HTTP status code, or ``None`` while the request is pending."""
        return self._http_status_code

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def headers(self) -> Dict[str, str]:
        return self._headers

    @property
    def body(self) -> str:
        return self._body

    @property
    def decoded_body(self) -> Dict[str, Any]:
        return self._decoded_body

    @property
    def is_pending(self) -> bool:
        return self._pending is not None

    @property
    def pending(self) -> Optional["asyncio.Future[Response]"]:
        return self._pending

    def get_result(self) -> Any:
        """Payload of a successful call. Check :meth:`is_error` first."""
        return self._decoded_body["result"]

    @property
    def thrown_exception(self) -> Optional[TelegramSDKException]:
        return self._thrown_exception

    def throw_exception(self) -> None:
        if self._thrown_exception is not None:
            raise self._thrown_exception

    async def resolve(self) -> "TelegramResponse":
        """Wait for a pending request and return its completed response.

        The completed response is not raised on error; inspect
        :meth:`is_error` or call :meth:`throw_exception`.
        """
        if self._pending is None:
            return self

        return TelegramResponse(self._request, await self._pending)

    def __repr__(self) -> str:
        return (
            f"TelegramResponse(endpoint={self._endpoint!r}, "
            f"http_status_code={self._http_status_code!r}, "
            f"is_error={self.is_error()!r})"
        )
