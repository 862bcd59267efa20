import math
from collections.abc import Mapping

from weather_api.errors import ValidationError

REQUIRED_FIELDS = (
    'city', 'temperature', 'humidity', 'pressure',
    'description', 'wind_speed', 'visibility',
)
TEXT_FIELDS = ('city', 'description')
NUMERIC_FIELDS = ('temperature', 'humidity', 'pressure', 'wind_speed', 'visibility')

MISSING_FIELDS_MESSAGE = f"All fields are required: {', '.join(REQUIRED_FIELDS)}"
INVALID_TYPES_MESSAGE = 'Invalid data types provided'
OUT_OF_RANGE_MESSAGE = 'Values are outside acceptable ranges'

# Widest integer the database driver binds
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _is_number(value):
    # bool is an int subclass but never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(value, int):
        return INT64_MIN <= value <= INT64_MAX
    # NaN and Infinity have no JSON form
    return math.isfinite(value)


def missing_fields(data):
    """Return required field names that are absent or None, in declaration order."""
    if not isinstance(data, Mapping):
        return list(REQUIRED_FIELDS)
    return [f for f in REQUIRED_FIELDS if data.get(f) is None]


def has_all_required_fields(data):
    """True iff every required field is present and not None."""
    return not missing_fields(data)


def has_valid_types(data):
    """True iff city/description are strings and the measurements are numeric."""
    if not isinstance(data, Mapping):
        return False
    return (
        all(isinstance(data.get(f), str) for f in TEXT_FIELDS)
        and all(_is_number(data.get(f)) for f in NUMERIC_FIELDS)
    )


def is_in_range(data):
    """True iff every measurement lies in its accepted range (bounds inclusive)."""
    if not isinstance(data, Mapping):
        return False
    if not all(_is_number(data.get(f)) for f in NUMERIC_FIELDS):
        return False
    return (
        0 <= data['humidity'] <= 100
        and data['pressure'] > 0
        and data['wind_speed'] >= 0
        and data['visibility'] >= 0
        and -100 <= data['temperature'] <= 100
    )


def sanitize_city_name(value):
    """Trim whitespace and drop angle brackets. Non-strings become ''."""
    if not isinstance(value, str):
        return ''
    return value.strip().replace('<', '').replace('>', '')


def round_to_one_decimal(value):
    """Round half-up to one decimal place."""
    return math.floor(value * 10 + 0.5) / 10


def validate_weather_payload(data, enforce_ranges=False):
    """
    Run the write-path checks in order and raise on the first failure:
    1. required fields present (blank city/description count as missing)
    2. primitive types
    3. value ranges, only when enforce_ranges is set
    Ranges are never evaluated on data whose types are wrong.
    """
    if not has_all_required_fields(data):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if any(isinstance(data[f], str) and not data[f].strip() for f in TEXT_FIELDS):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if not has_valid_types(data):
        raise ValidationError(INVALID_TYPES_MESSAGE)
    if enforce_ranges and not is_in_range(data):
        raise ValidationError(OUT_OF_RANGE_MESSAGE)
    return {f: data[f] for f in REQUIRED_FIELDS}
