"""Validation of caller-supplied path segments."""

from sogrinha.errors import ValidationError

_FORBIDDEN_CHARS = ("/", "\\", "\x00")
_RESERVED_NAMES = (".", "..")


def validate_segment(value: str, label: str) -> str:
    """Ensure ``value`` is usable as exactly one path segment.

    Args:
        value: Segment supplied by the caller (identifier, entity id or file name)
        label: Name of the argument, used in the error message

    Returns:
        The value unchanged

    Raises:
        ValidationError: If the value is empty, reserved or would escape its directory
    """
    if not value or not value.strip():
        raise ValidationError(f"{label} must not be empty")
    if value in _RESERVED_NAMES:
        raise ValidationError(f"{label} must not be '{value}'")
    if any(char in value for char in _FORBIDDEN_CHARS):
        raise ValidationError(f"{label} must not contain path separators: {value!r}")
    return value
