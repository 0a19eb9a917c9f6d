import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))")

# BSON stores integers as at most 8 bytes
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def parse_int_prefix(value: str) -> Optional[int]:
    """Read an integer from the start of ``value``, ``None`` if there is none.

    "12", " 12", "12abc" all give 12 and "0x10" gives 16. Values that no
    stored id can hold give ``None`` as well. Used for path ids, which reach
    the handlers as raw strings.
    """
    match = _LEADING_INT.match(value)
    if not match:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        number = int(hex_digits, 16)
    else:
        number = int(digits)
    if sign == "-":
        number = -number
    if not fits_int64(number):
        return None
    return number


def state_pattern(state: str) -> str:
    """Anchored, escaped pattern for an exact state name match."""
    return f"^{re.escape(state.strip().lower())}$"
