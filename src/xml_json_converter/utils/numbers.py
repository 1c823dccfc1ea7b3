"""JSON number grammar and canonical number formatting."""

import math
import re
from typing import Optional


NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

# Integral floats at or above this magnitude are printed with repr() so that
# precision loss stays visible instead of printing a long run of digits.
_INTEGRAL_LIMIT = 1e16


def parse_number(lexeme: str) -> Optional[float]:
    """
    Parse a lexeme using the JSON number grammar.

    Args:
        lexeme: Candidate number text, without surrounding whitespace

    Returns:
        The float value, or None if the lexeme is malformed or not finite
    """
    if not NUMBER_RE.fullmatch(lexeme):
        return None
    value = float(lexeme)
    if not math.isfinite(value):
        return None
    return value


def format_number(value: float) -> str:
    """Canonical decimal form: no trailing ``.0`` for integral values."""
    if not math.isfinite(value):
        raise ValueError(f"Non-finite number has no JSON form: {value!r}")
    if value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)
