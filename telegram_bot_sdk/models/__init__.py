from .errors import TokenMissingError
from .exceptions import (
    CouldNotUploadInputFile,
    TelegramResponseException,
    TelegramSDKException,
)
from .input_file import InputFile
from .input_media import InputMedia, InputMediaVideo
from .keyboard import (
    ForceReply,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    Keyboard,
    KeyboardButton,
    ReplyKeyboardMarkup,
    ReplyKeyboardRemove,
)
from .objects import BaseObject, Chat, Document, Message, PhotoSize, User, Video

__all__ = [
    "TokenMissingError",
    "CouldNotUploadInputFile",
    "TelegramResponseException",
    "TelegramSDKException",
    "InputFile",
    "InputMedia",
    "InputMediaVideo",
    "ForceReply",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "Keyboard",
    "KeyboardButton",
    "ReplyKeyboardMarkup",
    "ReplyKeyboardRemove",
    "BaseObject",
    "Chat",
    "Document",
    "Message",
    "PhotoSize",
    "User",
    "Video",
]
