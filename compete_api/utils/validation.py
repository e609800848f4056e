"""Declarative request validation.

Each rule is a pydantic ``BeforeValidator`` carrying its own failure message,
attached to schema fields and path/query parameters through ``Annotated``::

    class NewTeamSchema(BaseModel):
        team_name: Annotated[str, text("Team name is required")]
        leader_id: Annotated[int, numeric("Leader ID must be a number")]

Pydantic checks every field, so one request yields one report holding every
failure. :func:`collect_field_errors` turns that report into the
``[{"field": ..., "message": ...}]`` list returned with ``ValidationFailed``.
"""
import re
from datetime import datetime
from typing import Any, Callable, Iterable, Sequence

from pydantic import BeforeValidator, validate_email
from pydantic_core import PydanticCustomError

_DIGITS = re.compile(r"^\d+$")
_TRUE = {"true", "1"}
_FALSE = {"false", "0"}

# ids live in 32-bit INTEGER columns
MAX_ID = 2147483647


def is_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError("not a string")
    return value


def is_text(value: Any) -> str:
    if not is_string(value).strip():
        raise ValueError("empty string")
    return value


def is_numeric(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("booleans are not numbers")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _DIGITS.match(value.strip()):
        return int(value.strip())
    raise ValueError("not a number")


def is_email(value: Any) -> str:
    _, email = validate_email(is_string(value))
    return email.lower()


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise ValueError("not a boolean")


def is_iso_date(value: Any) -> datetime:
    return datetime.fromisoformat(is_string(value))


def rule(check: Callable[[Any], Any], message: str) -> BeforeValidator:
    def validator(value: Any) -> Any:
        try:
            return check(value)
        except (TypeError, ValueError):
            raise PydanticCustomError("invalid_field", message)

    return BeforeValidator(validator)


def string(message: str) -> BeforeValidator:
    return rule(is_string, message)


def text(message: str) -> BeforeValidator:
    return rule(is_text, message)


def numeric(message: str) -> BeforeValidator:
    return rule(is_numeric, message)


def email(message: str) -> BeforeValidator:
    return rule(is_email, message)


def boolean(message: str) -> BeforeValidator:
    return rule(is_boolean, message)


def iso_date(message: str) -> BeforeValidator:
    return rule(is_iso_date, message)


def one_of(choices: Iterable[str], message: str) -> BeforeValidator:
    allowed = tuple(choices)

    def check(value: Any) -> str:
        if value not in allowed:
            raise ValueError(f"{value!r} not in {allowed}")
        return value

    return rule(check, message)


def min_length(length: int, message: str) -> BeforeValidator:
    def check(value: Any) -> str:
        if len(is_string(value)) < length:
            raise ValueError("too short")
        return value

    return rule(check, message)


def humanize(field: str) -> str:
    return field.replace("_", " ").strip().capitalize()


def collect_field_errors(errors: Sequence[dict]) -> list[dict[str, str]]:
    report = []
    for error in errors:
        loc = error.get("loc", ())
        if not loc or isinstance(loc[-1], int) or error.get("type") == "json_invalid":
            field = "body"
        else:
            field = str(loc[-1])
        if error.get("type") == "missing":
            message = f"{humanize(field)} is required"
        else:
            message = error.get("msg", "Invalid value")
        report.append({"field": field, "message": message})
    return report
