from typing import List, Optional

from .objects import BaseObject


class Keyboard(BaseObject):
    """Base class for reply layouts sent in the ``reply_markup`` parameter.

    ``str()`` gives the JSON the Bot API expects for the field.
    """


class KeyboardButton(BaseObject):
    text: str
    request_contact: Optional[bool] = None
    request_location: Optional[bool] = None


class InlineKeyboardButton(BaseObject):
    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None


class ReplyKeyboardMarkup(Keyboard):
    keyboard: List[List[KeyboardButton]]
    is_persistent: Optional[bool] = None
    resize_keyboard: Optional[bool] = None
    one_time_keyboard: Optional[bool] = None
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None


class InlineKeyboardMarkup(Keyboard):
    inline_keyboard: List[List[InlineKeyboardButton]]


class ReplyKeyboardRemove(Keyboard):
    remove_keyboard: bool = True
    selective: Optional[bool] = None


class ForceReply(Keyboard):
    force_reply: bool = True
    input_field_placeholder: Optional[str] = None
    selective: Optional[bool] = None
