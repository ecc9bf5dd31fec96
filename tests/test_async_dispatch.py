import httpx
import pytest

from telegram_bot_sdk import (
    TelegramClient,
    TelegramResponseException,
    TelegramSDKException,
)

from .helpers import TOKEN, RecordingHttpClient, json_handler, ok

ERROR_BODY = {
    "ok": False,
    "error_code": 400,
    "description": "Bad Request: chat not found",
}


@pytest.mark.asyncio
async def test_async_dispatch_never_raises(make_client):
    client = make_client(json_handler(400, ERROR_BODY), is_async_request=True)

    response = client.post("sendMessage", {"chat_id": 1, "text": "hi"})

    assert response.is_pending is True
    assert response.http_status_code is None
    assert response.is_error() is False
    assert response.thrown_exception is None
    assert client.last_response is None

    resolved = await response.resolve()

    assert resolved.http_status_code == 400
    assert resolved.is_error() is True
    with pytest.raises(TelegramResponseException, match="chat not found"):
        resolved.throw_exception()
    # the caller owns the resolved response; the client slot stays untouched
    assert client.last_response is None

    await client.aclose()


@pytest.mark.asyncio
async def test_async_dispatch_success(make_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(
            200, json=ok({"id": 1, "is_bot": True, "first_name": "Bot"})
        )

    client = make_client(handler).set_async_request(True)

    resolved = await client.get("getMe").resolve()

    assert seen["url"].endswith(f"{TOKEN}/getMe")
    assert resolved.get_result()["first_name"] == "Bot"

    await client.aclose()


def test_async_flag_reaches_transport():
    recorder = RecordingHttpClient()
    client = TelegramClient(TOKEN, recorder, is_async_request=True)

    client.get("getMe")

    assert recorder.calls[0]["is_async_request"] is True


def test_async_dispatch_without_event_loop_is_rejected(make_client):
    client = make_client(json_handler(200, ok(True)), is_async_request=True)

    with pytest.raises(TelegramSDKException, match="running event loop"):
        client.get("getMe")
