"""Validation helpers for legalchunk configuration."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from legalchunk.lib.errors import ValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one message per field.

    Args:
        exc: Pydantic ValidationError raised by ChunkerConfig

    Returns:
        Human-readable messages such as
        "Field 'max_chars': Input should be greater than 0 (received: -5)"

    Example:
        >>> try:
        ...     ChunkerConfig(max_chars=0)
        ... except PydanticValidationError as e:
        ...     flatten_pydantic_errors(e)
        ["Field 'max_chars': Input should be greater than 0 (received: 0)"]
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"
        msg = error.get("msg", "Unknown error")

        if "input" in error and error.get("type") != "missing":
            errors.append(f"Field '{field_path}': {msg} (received: {error['input']!r})")
        else:
            errors.append(f"Field '{field_path}': {msg}")

    return errors if errors else ["Validation failed with unknown error"]


def parse_bool(field: str, value: Any) -> bool:
    """Interpret a config or environment value as a boolean.

    Raises:
        ValidationError: If the value is not a recognized boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in ("true", "1", "yes", "on"):
        return True
    if normalized in ("false", "0", "no", "off"):
        return False
    raise ValidationError(
        field,
        "Value is not a boolean",
        expected="one of true/false, 1/0, yes/no, on/off",
        actual=repr(value),
    )


def parse_positive_int(field: str, value: Any) -> int:
    """Interpret a config or environment value as a positive integer.

    Raises:
        ValidationError: If the value is not an integer greater than zero.
    """
    try:
        number = int(str(value).strip())
    except ValueError as e:
        raise ValidationError(
            field, "Value is not an integer", expected="integer > 0", actual=repr(value)
        ) from e
    if number <= 0:
        raise ValidationError(
            field, "Value must be positive", expected="integer > 0", actual=repr(value)
        )
    return number
