import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from httpx import AsyncClient, Client, Response, Timeout
from pydantic import BaseModel

from .._utils._params import MultipartPart, json_default
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    OPTION_FORM,
    OPTION_MULTIPART,
    OPTION_QUERY,
)
from ..models.exceptions import TelegramSDKException

RawResponse = Union[Response, "asyncio.Future[Response]"]


class HttpClientInterface(ABC):
    """The HTTP mechanism the client sends its calls through.

    ``send`` returns a completed ``httpx.Response``, or an ``asyncio.Future``
    resolving to one when ``is_async_request`` is set. Transport errors are
    raised unchanged; HTTP error statuses are not errors at this level.
    """

    @abstractmethod
    def send(
        self,
        url: str,
        method: str,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
        is_async_request: bool = False,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> RawResponse: ...

    def close(self) -> None:
        return None

    async def aclose(self) -> None:
        return None


def _field_value(value: Any) -> Union[str, bytes]:
    if isinstance(value, (str, bytes)):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True, exclude_none=True)
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, default=json_default)
    return str(value)


def _fields(params: Mapping[str, Any]) -> Dict[str, Union[str, bytes]]:
    return {
        name: _field_value(value) for name, value in params.items() if value is not None
    }


def _multipart(
    parts: List[MultipartPart],
) -> Tuple[Dict[str, Union[str, bytes]], List[Tuple[str, Tuple[str, bytes]]]]:
    data: Dict[str, Union[str, bytes]] = {}
    files: List[Tuple[str, Tuple[str, bytes]]] = []
    for part in parts:
        if part.is_file:
            files.append((part.name, (part.filename, part.contents)))
        else:
            data[part.name] = _field_value(part.contents)
    return data, files


def request_kwargs(options: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Translate transport options into ``httpx`` request arguments."""
    options = options or {}
    kwargs: Dict[str, Any] = {}

    if options.get(OPTION_QUERY):
        kwargs["params"] = _fields(options[OPTION_QUERY])

    if options.get(OPTION_FORM):
        kwargs["data"] = _fields(options[OPTION_FORM])

    if options.get(OPTION_MULTIPART):
        data, files = _multipart(options[OPTION_MULTIPART])
        kwargs["data"] = data
        if files:
            kwargs["files"] = files

    return kwargs


class HttpxHttpClient(HttpClientInterface):
    """Default transport built on ``httpx``.

    The sync and async clients are created on first use. Extra keyword
    arguments (e.g. ``transport=``) are passed to both of them.
    """

    def __init__(self, **client_kwargs: Any) -> None:
        self._client_kwargs = client_kwargs
        self._client: Optional[Client] = None
        self._client_async: Optional[AsyncClient] = None

    def _build_kwargs(self) -> Dict[str, Any]:
        return {**get_httpx_client_kwargs(), **self._client_kwargs}

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = Client(**self._build_kwargs())
        return self._client

    @property
    def client_async(self) -> AsyncClient:
        if self._client_async is None:
            self._client_async = AsyncClient(**self._build_kwargs())
        return self._client_async

    def send(
        self,
        url: str,
        method: str,
        headers: Optional[Mapping[str, str]] = None,
        options: Optional[Mapping[str, Any]] = None,
        is_async_request: bool = False,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    ) -> RawResponse:
        kwargs = request_kwargs(options)
        kwargs["headers"] = dict(headers or {})
        kwargs["timeout"] = Timeout(timeout, connect=connect_timeout)

        if not is_async_request:
            return self.client.request(method, url, **kwargs)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise TelegramSDKException(
                "Asynchronous requests need a running event loop."
            ) from e

        return loop.create_task(self.client_async.request(method, url, **kwargs))

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    async def aclose(self) -> None:
        self.close()
        if self._client_async is not None:
            await self._client_async.aclose()
            self._client_async = None
