from importlib import metadata

from .constants import HEADER_USER_AGENT


def user_agent_value() -> str:
    product = "Telegram.Python.BotSdk"

    try:
        version = metadata.version("telegram-bot-sdk")
    except metadata.PackageNotFoundError:
        version = "unknown"

    return f"{product}/{version}"


def header_user_agent() -> dict[str, str]:
    return {HEADER_USER_AGENT: user_agent_value()}
