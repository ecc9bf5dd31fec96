from ._response import TelegramResponse
from ._transport import HttpClientInterface, HttpxHttpClient
from .api_client import TelegramClient

__all__ = [
    "TelegramResponse",
    "HttpClientInterface",
    "HttpxHttpClient",
    "TelegramClient",
]
