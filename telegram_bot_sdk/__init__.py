"""Telegram Bot API SDK for Python.

The main entry point is the Telegram class. TelegramClient is the low-level
client it wraps: it builds requests, uploads files and decodes the Bot API's
response envelope.

Example:
```python
    # export TELEGRAM_BOT_TOKEN="123456:ABC-DEF..."

    from telegram_bot_sdk import Telegram
    telegram = Telegram()
    telegram.send_message(chat_id=42, text="Hello")
```
"""

from ._services import (
    HttpClientInterface,
    HttpxHttpClient,
    TelegramClient,
    TelegramResponse,
)
from ._telegram import Telegram
from ._utils import MultipartPart, TelegramRequest
from .models import (
    CouldNotUploadInputFile,
    InputFile,
    InputMedia,
    InputMediaVideo,
    TelegramResponseException,
    TelegramSDKException,
    TokenMissingError,
)

__all__ = [
    "Telegram",
    "TelegramClient",
    "TelegramResponse",
    "TelegramRequest",
    "HttpClientInterface",
    "HttpxHttpClient",
    "MultipartPart",
    "InputFile",
    "InputMedia",
    "InputMediaVideo",
    "TelegramSDKException",
    "TelegramResponseException",
    "CouldNotUploadInputFile",
    "TokenMissingError",
]
