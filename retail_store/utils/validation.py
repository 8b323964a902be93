from typing import Optional

from retail_store.exceptions import ValidationError

def parse_int(value: Optional[str], field: str = 'value') -> int:
    """Parse an integer typed at a prompt.

    Args:
        value: Raw input
        field: Field name used in the error message

    Returns:
        Parsed integer

    Raises:
        ValidationError if the input is not an integer
    """
    try:
        return int((value or '').strip())
    except ValueError:
        raise ValidationError(f"Not a valid {field}: {value!r}")

def parse_positive_int(value: Optional[str], field: str = 'value') -> int:
    """Parse an integer that must be greater than zero."""
    number = parse_int(value, field)
    if number <= 0:
        raise ValidationError(f"{field.capitalize()} must be greater than zero")
    return number

def parse_non_negative_int(value: Optional[str], field: str = 'value') -> int:
    """Parse an integer that must not be negative."""
    number = parse_int(value, field)
    if number < 0:
        raise ValidationError(f"{field.capitalize()} cannot be negative")
    return number

def parse_coordinate(value: Optional[str], field: str = 'coordinate') -> float:
    """Parse a latitude or longitude."""
    try:
        return float((value or '').strip())
    except ValueError:
        raise ValidationError(f"Not a valid {field}: {value!r}")

def require_text(value: Optional[str], field: str = 'value') -> str:
    """Return the stripped input, rejecting blank values."""
    text = (value or '').strip()
    if not text:
        raise ValidationError(f"{field.capitalize()} is required")
    return text
