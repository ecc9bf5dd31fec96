from ._logs import setup_logging
from ._params import (
    MultipartPart,
    normalize_params,
    prepare_multipart_params,
    reply_markup_to_string,
    validate_input_file_field,
)
from ._request_spec import TelegramRequest
from ._user_agent import header_user_agent, user_agent_value
from ._validator import has_file_id, is_input_file, is_json

__all__ = [
    "setup_logging",
    "MultipartPart",
    "normalize_params",
    "prepare_multipart_params",
    "reply_markup_to_string",
    "validate_input_file_field",
    "TelegramRequest",
    "header_user_agent",
    "user_agent_value",
    "has_file_id",
    "is_input_file",
    "is_json",
]
