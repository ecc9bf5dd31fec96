from os import environ as env
from typing import Any, Dict, Optional, Type, TypeVar, Union

from dotenv import load_dotenv
from pydantic import ValidationError

from ._config import Config
from ._services import HttpClientInterface, TelegramClient, TelegramResponse
from ._utils import setup_logging
from ._utils.constants import (
    ENV_BASE_BOT_URL,
    ENV_BOT_TOKEN,
    ENV_CONNECT_TIMEOUT,
    ENV_TIMEOUT,
)
from .models import BaseObject, InputFile, Message, User
from .models.errors import TokenMissingError
from .models.exceptions import TelegramSDKException

load_dotenv(override=True)

T = TypeVar("T", bound=BaseObject)

FileParam = Union[InputFile, str]


class Telegram:
    """Entry point of the SDK.

    Values not passed explicitly are read from the environment (a ``.env``
    file is loaded on import):

    - ``TELEGRAM_BOT_TOKEN``
    - ``TELEGRAM_BASE_BOT_URL``
    - ``TELEGRAM_TIMEOUT`` / ``TELEGRAM_CONNECT_TIMEOUT``

    Example:
    ```python
        from telegram_bot_sdk import Telegram, InputFile

        telegram = Telegram()
        telegram.send_message(chat_id=42, text="Hello")
        telegram.send_document(chat_id=42, document=InputFile("report.pdf"))
    ```

    The typed methods below are thin wrappers over :attr:`client`; use the
    client directly for any other Bot API method.
    """

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        base_bot_url: Optional[str] = None,
        async_request: bool = False,
        debug: bool = False,
        http_client_handler: Optional[HttpClientInterface] = None,
    ) -> None:
        values = {
            "token": token or env.get(ENV_BOT_TOKEN),
            "base_bot_url": base_bot_url or env.get(ENV_BASE_BOT_URL),
            "timeout": env.get(ENV_TIMEOUT),
            "connect_timeout": env.get(ENV_CONNECT_TIMEOUT),
        }

        try:
            self._config = Config(
                **{key: value for key, value in values.items() if value is not None}
            )
        except ValidationError as e:
            for error in e.errors():
                if error["loc"][0] == "token":
                    raise TokenMissingError() from e
            raise

        setup_logging(debug)

        self._client = TelegramClient(
            self._config.token,
            http_client_handler,
            base_bot_url=self._config.base_bot_url,
            is_async_request=async_request,
            timeout=self._config.timeout,
            connect_timeout=self._config.connect_timeout,
        )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def client(self) -> TelegramClient:
        return self._client

    def get_me(self) -> User:
        """A simple method for testing your bot's auth token.

        Reference: https://core.telegram.org/bots/api#getme
        """
        return self._result(self._client.get("getMe"), User)

    def send_message(
        self,
        chat_id: Union[int, str],
        text: str,
        *,
        parse_mode: Optional[str] = None,
        reply_markup: Any = None,
        **params: Any,
    ) -> Message:
        """Send a text message.

        Reference: https://core.telegram.org/bots/api#sendmessage
        """
        response = self._client.post(
            "sendMessage",
            {
                "chat_id": chat_id,
                "text": text,
                "parse_mode": parse_mode,
                "reply_markup": reply_markup,
                **params,
            },
        )
        return self._result(response, Message)

    def send_photo(
        self, chat_id: Union[int, str], photo: FileParam, **params: Any
    ) -> Message:
        """Reference: https://core.telegram.org/bots/api#sendphoto"""
        return self._send_file("sendPhoto", "photo", chat_id, photo, params)

    def send_document(
        self, chat_id: Union[int, str], document: FileParam, **params: Any
    ) -> Message:
        """Reference: https://core.telegram.org/bots/api#senddocument"""
        return self._send_file("sendDocument", "document", chat_id, document, params)

    def send_video(
        self, chat_id: Union[int, str], video: FileParam, **params: Any
    ) -> Message:
        """Reference: https://core.telegram.org/bots/api#sendvideo"""
        return self._send_file("sendVideo", "video", chat_id, video, params)

    def _send_file(
        self,
        endpoint: str,
        field: str,
        chat_id: Union[int, str],
        file: FileParam,
        params: Dict[str, Any],
    ) -> Message:
        response = self._client.upload_file(
            endpoint, {"chat_id": chat_id, field: file, **params}, field
        )
        return self._result(response, Message)

    def _result(self, response: TelegramResponse, model: Type[T]) -> T:
        if response.is_pending:
            raise TelegramSDKException(
                "Typed methods need a completed response. Await "
                "`response.resolve()` on the client's result instead."
            )
        return model.model_validate(response.get_result())

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Telegram":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
