# app/core/validation.py
from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

from pydantic import ValidationError
from sqlmodel import SQLModel

SchemaT = TypeVar("SchemaT", bound=SQLModel)


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


@dataclass
class ValidationResult(Generic[SchemaT]):
    """
    Tagged result of validate_payload().

    Exactly one of `value` / `errors` is meaningful:
      - ok      => value is the parsed schema instance
      - not ok  => errors lists one FieldError per violation, in field order
    """

    value: SchemaT | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def first_message(self) -> str | None:
        return self.errors[0].message if self.errors else None


def _message_for(
    error: dict[str, Any],
    messages: Mapping[str, str],
    item_messages: Mapping[str, str],
) -> FieldError:
    loc = error.get("loc") or ()
    name = str(loc[0]) if loc else "__root__"

    # Messages raised by our own field validators are already user-facing.
    if error.get("type") == "value_error":
        ctx_error = (error.get("ctx") or {}).get("error")
        if ctx_error is not None:
            return FieldError(name, str(ctx_error))

    # Errors inside a mapping value, e.g. ("socialMediaLinks", "facebook", "str")
    if len(loc) > 1 and name in item_messages:
        return FieldError(name, item_messages[name].format(key=loc[1]))

    return FieldError(name, messages.get(name, error.get("msg", "Invalid value")))


def validate_payload(
    schema: type[SchemaT],
    data: Any,
    messages: Mapping[str, str],
    item_messages: Mapping[str, str] | None = None,
) -> ValidationResult[SchemaT]:
    """
    Validate a raw JSON body against `schema`.

    Args:
        schema: SQLModel (non-table) schema class.
        data: decoded request body.
        messages: field alias -> message used for built-in errors
                  (missing, wrong type, out of range, too long).
        item_messages: field alias -> message template (with `{key}`) for
                       errors on individual values of a mapping field.

    Returns:
        ValidationResult with either the parsed value or the field errors.
    """
    if not isinstance(data, dict):
        return ValidationResult(
            errors=[FieldError("__root__", "Request body must be a JSON object.")]
        )

    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        return ValidationResult(
            errors=[
                _message_for(err, messages, item_messages or {})
                for err in exc.errors()
            ]
        )
    return ValidationResult(value=value)
