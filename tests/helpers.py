import json
from typing import Any, Dict, List, Optional

import httpx

from telegram_bot_sdk import HttpClientInterface

TOKEN = "123456:TEST-TOKEN"
BASE_URL = "https://api.telegram.org/bot"


def ok(result: Any) -> Dict[str, Any]:
    return {"ok": True, "result": result}


def json_handler(status_code: int, body: Any):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(body).encode())

    return handler


class RecordingHttpClient(HttpClientInterface):
    """Transport double that records each call and replays a fixed response."""

    def __init__(self, response: Optional[httpx.Response] = None) -> None:
        self.response = response or httpx.Response(200, json=ok(True))
        self.calls: List[Dict[str, Any]] = []

    def send(
        self,
        url,
        method,
        headers=None,
        options=None,
        is_async_request=False,
        *,
        timeout=60,
        connect_timeout=10,
    ):
        self.calls.append(
            {
                "url": url,
                "method": method,
                "headers": dict(headers or {}),
                "options": options,
                "is_async_request": is_async_request,
                "timeout": timeout,
                "connect_timeout": connect_timeout,
            }
        )
        return self.response
