import re
from typing import Any, TypeVar

from pydantic import ValidationError

from app.core.errors import InvalidInputError
from app.schemas.common import CreateRequest

RequestT = TypeVar("RequestT", bound=CreateRequest)

INVALID_EMAIL_MESSAGE = "Invalid input: Ensure 'email' is a valid email address."

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def validate_payload(schema: type[RequestT], payload: Any) -> RequestT:
    """Turn a decoded JSON body into a typed request or raise InvalidInputError.

    When the only problem is a malformed email the dedicated email message is
    used, otherwise the schema's own message.
    """
    if not isinstance(payload, dict):
        raise InvalidInputError(schema.invalid_input_message)

    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        if errors and all(_is_email_format_error(error) for error in errors):
            raise InvalidInputError(INVALID_EMAIL_MESSAGE) from exc
        raise InvalidInputError(schema.invalid_input_message) from exc


def _is_email_format_error(error: dict[str, Any]) -> bool:
    return error.get("type") == "string_pattern_mismatch" and tuple(error.get("loc", ())) == ("email",)


def parse_int_param(value: str) -> int | None:
    """Leading-integer parse of a path segment: "12" -> 12, "3abc" -> 3, "abc" -> None."""
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))
