import math
from decimal import Decimal, InvalidOperation


def to_float(value) -> float:
    """
    Coerce a stored monetary or quantity value to a float.

    Numeric columns come back as Decimal, and some legacy rows hold numbers as
    strings. None, blanks, non-numeric text, NaN and infinities all become 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, str):
            value = Decimal(value.strip())
        result = float(value)
    except (InvalidOperation, TypeError, ValueError):
        return 0.0
    if math.isnan(result) or math.isinf(result):
        return 0.0
    return result


def safe_divide(numerator, denominator) -> float:
    """Divide, returning 0 when the denominator is zero, negative or missing."""
    denominator = to_float(denominator)
    if denominator <= 0:
        return 0.0
    return to_float(numerator) / denominator
