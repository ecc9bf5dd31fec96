from .exceptions import TelegramSDKException


class TokenMissingError(TelegramSDKException):
    def __init__(
        self,
        message="Required bot access token not supplied. Set TELEGRAM_BOT_TOKEN "
        "or pass `token` explicitly.",
    ):
        self.message = message
        super().__init__(self.message)
