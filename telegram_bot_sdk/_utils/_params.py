import json
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel

from ..models.exceptions import CouldNotUploadInputFile
from ._validator import is_input_file, is_json
from .constants import OPTION_FORM, OPTION_MULTIPART, REPLY_MARKUP_PARAM


@dataclass(frozen=True)
class MultipartPart:
    """One field of a multipart/form-data body."""

    name: str
    contents: Any
    filename: Optional[str] = None

    @property
    def is_file(self) -> bool:
        return self.filename is not None


Params = Union[Mapping[str, Any], Sequence[MultipartPart]]


def json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True, mode="json")
    return str(value)


def reply_markup_to_string(params: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert a ``reply_markup`` value to its string form.

    Plain mappings and lists are JSON-encoded; anything else (a ``Keyboard``
    model, an already encoded string) goes through ``str()``.
    """
    params = dict(params)
    value = params.get(REPLY_MARKUP_PARAM)
    if isinstance(value, (Mapping, list, tuple)):
        params[REPLY_MARKUP_PARAM] = json.dumps(
            value, default=json_default, separators=(",", ":")
        )
    elif value is not None:
        params[REPLY_MARKUP_PARAM] = str(value)

    return params


def validate_input_file_field(
    params: Mapping[str, Any], input_file_field: str
) -> None:
    if params.get(input_file_field) is None:
        raise CouldNotUploadInputFile.missing_param(input_file_field)

    value = params[input_file_field]

    # Paths, URLs and file objects must come wrapped in InputFile
    if not (is_input_file(value) or is_json(value)):
        raise CouldNotUploadInputFile.input_file_parameter_should_be_input_file_entity(
            input_file_field
        )


def generate_multipart_data(contents: Any, name: str) -> MultipartPart:
    if not is_input_file(contents):
        return MultipartPart(name=name, contents=contents)

    return MultipartPart(
        name=name,
        contents=contents.get_contents(),
        filename=contents.filename,
    )


def prepare_multipart_params(
    params: Mapping[str, Any], input_file_field: Optional[str] = None
) -> List[MultipartPart]:
    """Turn a parameter mapping into multipart parts.

    ``None`` values are left out entirely. Parts keep the mapping's order.

    Raises:
        CouldNotUploadInputFile: If ``input_file_field`` is given and does not
            hold an ``InputFile`` (or a JSON-encoded file reference).
    """
    if input_file_field is not None:
        validate_input_file_field(params, input_file_field)

    return [
        generate_multipart_data(contents, name)
        for name, contents in params.items()
        if contents is not None
    ]


def normalize_params(params: Params, is_file_upload: bool = False) -> Dict[str, Any]:
    if is_file_upload:
        if isinstance(params, Mapping):
            return {OPTION_MULTIPART: prepare_multipart_params(params)}
        return {OPTION_MULTIPART: list(params)}

    if not isinstance(params, Mapping):
        raise TypeError("Multipart parts can only be sent as a file upload.")

    return {OPTION_FORM: reply_markup_to_string(params)}
