from pydantic import BaseModel, Field

from ._utils.constants import (
    DEFAULT_BASE_BOT_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
)


class Config(BaseModel):
    token: str = Field(min_length=1)
    base_bot_url: str = DEFAULT_BASE_BOT_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    connect_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)
