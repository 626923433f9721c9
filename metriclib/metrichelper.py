"""Conversions between values and the text form metrics store them in."""

from __future__ import annotations

import math
import re
import struct
from decimal import Decimal
from typing import Any

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_TRUE_CHARS = frozenset("YyTt1")


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _special(value: float) -> str | None:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    return None


def _shortest_layout(digits_text: str, negative: bool) -> str:
    """Lay out shortest digits in fixed or scientific form, whichever is shorter."""
    _, digit_tuple, exponent = Decimal(digits_text).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    count = len(digits)
    sci_exponent = count - 1 + exponent

    scientific = digits[0]
    if count > 1:
        scientific += "." + digits[1:]
    scientific += f"e{'+' if sci_exponent >= 0 else '-'}{abs(sci_exponent):02d}"

    if exponent >= 0:
        fixed = digits + "0" * exponent
    elif -exponent < count:
        fixed = f"{digits[:count + exponent]}.{digits[count + exponent:]}"
    else:
        fixed = "0." + "0" * (-exponent - count) + digits

    text = fixed if len(fixed) <= len(scientific) else scientific
    return "-" + text if negative else text


def float_to_string(value: float) -> str:
    """Format a single-precision value with the fewest digits that read back exactly."""
    single = _to_float32(float(value))
    special = _special(single)
    if special is not None:
        return special
    magnitude = abs(single)
    text = repr(magnitude)
    for precision in range(9):
        candidate = f"{magnitude:.{precision}e}"
        if _to_float32(float(candidate)) == magnitude:
            text = candidate
            break
    return _shortest_layout(text, single < 0)


def double_to_string(value: float) -> str:
    """Format a double-precision value with the fewest digits that read back exactly."""
    double = float(value)
    special = _special(double)
    if special is not None:
        return special
    return _shortest_layout(repr(abs(double)), double < 0)


def format_value(value: Any) -> str:
    """Return the stored text form of a value.

    Booleans become "1" or "0", ``None`` the empty string, floats their
    shortest exact form.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return double_to_string(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def parse_value(text: str, kind: type) -> Any:
    """Read stored text as ``kind`` (str, bool, int or float).

    Numbers are read from the leading part of the text; text that holds no
    number reads as zero. Booleans are true when the text starts with
    Y, y, T, t or 1.
    """
    if kind is str:
        return text
    if kind is bool:
        return bool(text) and text[0] in _TRUE_CHARS
    if kind is int:
        match = _INT_PREFIX.match(text)
        return int(match.group(1)) if match else 0
    if kind is float:
        match = _FLOAT_PREFIX.match(text)
        return float(match.group(1)) if match else 0.0
    raise TypeError(f"unsupported value kind: {kind!r}")