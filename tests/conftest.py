from typing import Any, Callable, List

import httpx
import pytest

from telegram_bot_sdk import HttpxHttpClient, TelegramClient

from .helpers import TOKEN, RecordingHttpClient


@pytest.fixture
def recorder() -> RecordingHttpClient:
    return RecordingHttpClient()


@pytest.fixture
def make_client():
    """Build a client whose httpx transport is served by ``handler``."""
    clients: List[TelegramClient] = []

    def factory(
        handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any
    ) -> TelegramClient:
        client = TelegramClient(
            TOKEN,
            HttpxHttpClient(transport=httpx.MockTransport(handler)),
            **kwargs,
        )
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
