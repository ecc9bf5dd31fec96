import json
from typing import Any, Mapping

from ..models.input_file import InputFile


def is_input_file(value: Any) -> bool:
    return isinstance(value, InputFile)


def is_json(value: Any) -> bool:
    if not isinstance(value, str):
        return False

    try:
        json.loads(value)
    except ValueError:
        return False

    return True


def has_file_id(input_file_field: str, params: Mapping[str, Any]) -> bool:
    """Whether the field holds a file that Telegram already has.

    A plain string (file_id or URL) needs no upload. A JSON string is a
    pre-serialized file reference and still goes through multipart.
    """
    value = params.get(input_file_field)
    return isinstance(value, str) and not is_json(value)
