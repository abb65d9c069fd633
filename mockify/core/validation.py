"""Request body validation against a resource schema.

Bodies are checked with the pydantic models of the schema. Only the first
failure (in declared field order) is reported, as a single message such as
``"naam" is required`` or ``"visibility" must be one of [public, private]``.
"""
from typing import Any, Literal

import pydantic

from mockify.core.errors import ValidationError
from mockify.core.schema import ResourceSchema

Operation = Literal["create", "replace", "patch"]

_MESSAGES = {
    "missing": "is required",
    "extra_forbidden": "is not allowed",
    "int_type": "must be an integer",
    "int_from_float": "must be an integer",
    "string_type": "must be a string",
    "list_type": "must be an array",
    "string_too_short": "is not allowed to be empty",
    "too_short": "must contain at least 1 items",
}


def _label(loc: tuple) -> str:
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out or "value"


def format_error(schema: ResourceSchema, error: dict) -> str:
    """Turn one pydantic error dict into a one-line message."""
    loc = tuple(error.get("loc") or ())
    label = _label(loc)
    kind = error.get("type", "")
    if kind == "literal_error" and len(loc) == 1:
        allowed = schema.allowed_values(str(loc[0]))
        if allowed:
            return f'"{label}" must be one of [{", ".join(allowed)}]'
    text = _MESSAGES.get(kind)
    if text is None:
        msg = error.get("msg", "is invalid")
        text = msg[:1].lower() + msg[1:]
    return f'"{label}" {text}'


def validate(schema: ResourceSchema, operation: Operation, body: Any) -> dict:
    """Validate a request body; return the cleaned fields or raise ValidationError.

    create: all required fields, no ``id``. replace: same plus a required
    integer ``id``. patch: any subset of fields; only supplied fields are
    returned.
    """
    if not isinstance(body, dict):
        raise ValidationError('"value" must be of type object')
    if operation == "create":
        model = schema.create_model
    elif operation == "replace":
        model = schema.replace_model
    elif operation == "patch":
        model = schema.patch_model
    else:
        raise ValueError(f"Unknown operation: {operation}")
    try:
        parsed = model.model_validate(body)
    except pydantic.ValidationError as e:
        errors = e.errors()
        raise ValidationError(format_error(schema, errors[0])) from None
    if operation == "patch":
        return parsed.model_dump(exclude_unset=True)
    return parsed.model_dump()
