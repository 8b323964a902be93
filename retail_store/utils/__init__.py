from .geo_utils import calculate_distance
from .validation import (
    parse_int,
    parse_positive_int,
    parse_non_negative_int,
    parse_coordinate,
    require_text
)

__all__ = [
    'calculate_distance',
    'parse_int',
    'parse_positive_int',
    'parse_non_negative_int',
    'parse_coordinate',
    'require_text'
]
