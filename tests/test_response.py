import asyncio

import httpx
import pytest

from telegram_bot_sdk import (
    TelegramRequest,
    TelegramResponse,
    TelegramResponseException,
)

from .helpers import TOKEN


@pytest.fixture
def request_spec():
    return TelegramRequest(TOKEN, "POST", "sendMessage", {"form": {"chat_id": 1}})


def test_successful_envelope(request_spec):
    raw = httpx.Response(
        200,
        content=b'{"ok":true,"result":{"id":1}}',
        headers={"Content-Type": "application/json"},
    )

    response = TelegramResponse(request_spec, raw)

    assert response.is_error() is False
    assert response.get_result() == {"id": 1}
    assert response.http_status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.body == '{"ok":true,"result":{"id":1}}'
    assert response.endpoint == "sendMessage"
    assert response.request is request_spec
    assert response.thrown_exception is None
    assert response.is_pending is False


def test_error_envelope_builds_exception_without_raising(request_spec):
    raw = httpx.Response(
        400, json={"ok": False, "error_code": 400, "description": "Bad Request"}
    )

    response = TelegramResponse(request_spec, raw)

    assert response.is_error() is True
    exception = response.thrown_exception
    assert isinstance(exception, TelegramResponseException)
    assert exception.http_status_code == 400
    assert exception.error_code == 400
    assert exception.description == "Bad Request"
    assert exception.response_data == response.decoded_body
    assert exception.request is request_spec
    with pytest.raises(TelegramResponseException, match="Bad Request"):
        response.throw_exception()


def test_error_parameters_are_exposed(request_spec):
    raw = httpx.Response(
        429,
        json={
            "ok": False,
            "error_code": 429,
            "description": "Too Many Requests: retry after 7",
            "parameters": {"retry_after": 7},
        },
    )

    exception = TelegramResponse(request_spec, raw).thrown_exception

    assert exception.retry_after == 7
    assert exception.migrate_to_chat_id is None


def test_error_without_description_gets_generic_message(request_spec):
    response = TelegramResponse(request_spec, httpx.Response(500, json={"ok": False}))

    assert (
        str(response.thrown_exception)
        == "Unknown error from API Response. (HTTP 500)"
    )


def test_form_encoded_fallback(request_spec):
    response = TelegramResponse(
        request_spec, httpx.Response(200, content=b"ok=true&result=done")
    )

    assert response.decoded_body == {"ok": "true", "result": "done"}
    assert response.is_error() is False


@pytest.mark.parametrize(
    "body", [b"<html>gateway down</html>", b"", b"[1, 2, 3]", b"null"]
)
def test_unparseable_body_degrades_to_empty_mapping(request_spec, body):
    response = TelegramResponse(request_spec, httpx.Response(502, content=body))

    assert response.decoded_body == {}
    assert response.is_error() is False
    with pytest.raises(KeyError):
        response.get_result()


def test_only_boolean_false_is_an_error(request_spec):
    response = TelegramResponse(request_spec, httpx.Response(200, content=b"ok=false"))

    assert response.decoded_body == {"ok": "false"}
    assert response.is_error() is False


def test_rejects_unknown_raw_response(request_spec):
    with pytest.raises(TypeError):
        TelegramResponse(request_spec, {"ok": True})  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_pending_envelope_defers_decoding(request_spec):
    future = asyncio.get_running_loop().create_future()

    response = TelegramResponse(request_spec, future)

    assert response.is_pending is True
    assert response.pending is future
    assert response.http_status_code is None
    assert response.decoded_body == {}
    assert response.is_error() is False

    future.set_result(
        httpx.Response(403, json={"ok": False, "description": "Forbidden"})
    )
    resolved = await response.resolve()

    assert resolved is not response
    assert resolved.is_pending is False
    assert resolved.http_status_code == 403
    assert resolved.is_error() is True
    assert resolved.request is request_spec


@pytest.mark.asyncio
async def test_resolve_on_completed_response_returns_itself(request_spec):
    response = TelegramResponse(request_spec, httpx.Response(200, json={"ok": True}))

    assert await response.resolve() is response


def test_token_stays_out_of_printed_envelope_and_error(request_spec):
    raw = httpx.Response(401, json={"ok": False, "description": "Unauthorized"})

    response = TelegramResponse(request_spec, raw)

    for text in (repr(response), str(response.thrown_exception)):
        assert TOKEN not in text
    assert TOKEN not in repr(response.thrown_exception)
    # reachable only through the request descriptor
    assert response.request.access_token == TOKEN
