"""
Cholesterol unit conversion (mg/dL <-> mmol/L).

Known non-idempotence: mg/dL -> mmol/L rounds to 2 decimals while
mmol/L -> mg/dL rounds to a whole number, so a round trip can drift by
up to about 0.5 mg/dL. Output compatibility depends on this rounding.
"""
import math
import re
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Union

CHOLESTEROL_FACTOR = 38.67
MAX_DECIMAL_ROUNDING = 1e15

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class CholesterolUnit(str, Enum):
    """Declared unit of submitted lipid values."""
    MGDL = "mgdL"
    MMOLL = "mmolL"


def round_half_up(value: float, places: int) -> float:
    """
    Round half away from zero on the decimal representation (JS toFixed semantics).

    Non-finite values and magnitudes of 1e15 or more are returned unchanged;
    floats that large carry no fractional digits to round.
    """
    if not math.isfinite(value) or abs(value) >= MAX_DECIMAL_ROUNDING:
        return float(value)
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mgdl_to_mmoll(mgdl: float) -> float:
    """Convert mg/dL to mmol/L, rounded to 2 decimals."""
    return round_half_up(mgdl / CHOLESTEROL_FACTOR, 2)


def mmoll_to_mgdl(mmoll: float) -> float:
    """Convert mmol/L to mg/dL, rounded to a whole number."""
    return round_half_up(mmoll * CHOLESTEROL_FACTOR, 0)


def parse_float(value: Optional[Union[str, float, int]]) -> Optional[float]:
    """
    Lenient numeric parse of a form value.

    Reads the leading numeric part of the text ("5.2 mmol" -> 5.2) the way
    browser form parsing does; returns None for empty, non-numeric or
    non-finite ("1e999") values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return None
    parsed = float(match.group(0))
    return parsed if math.isfinite(parsed) else None


def has_numeric_prefix(value: Optional[str]) -> bool:
    """True when the text starts with a number, finite or not."""
    return value is not None and _FLOAT_PREFIX.match(str(value)) is not None


def parse_int(value: Optional[Union[str, float, int]]) -> Optional[int]:
    """Lenient integer parse of the leading digits ("72.9" -> 72)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    match = _INT_PREFIX.match(str(value))
    return int(match.group(0)) if match else None


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def convert_cholesterol(
    value: str,
    from_unit: Union[CholesterolUnit, str],
    to_unit: Union[CholesterolUnit, str]
) -> str:
    """
    Convert a cholesterol value between units.

    Returns the input unchanged when it is empty, not numeric, or when
    both units are the same.
    """
    if not value or not value.strip():
        return value

    numeric = parse_float(value)
    if numeric is None:
        return value

    from_unit = CholesterolUnit(from_unit)
    to_unit = CholesterolUnit(to_unit)
    if from_unit == to_unit:
        return value

    if from_unit == CholesterolUnit.MGDL:
        return _format_number(mgdl_to_mmoll(numeric))
    return _format_number(mmoll_to_mgdl(numeric))


def get_unit_label(unit: Union[CholesterolUnit, str]) -> str:
    """Display label for a cholesterol unit."""
    return "mg/dL" if CholesterolUnit(unit) == CholesterolUnit.MGDL else "mmol/L"
