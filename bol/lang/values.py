"""Runtime values. A Bol value is one of: float (number), str, bool, None (shunya) or Function."""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


NULL_KEYWORD = "shunya"
TRUE_KEYWORD = "khara"
FALSE_KEYWORD = "khota"


@dataclass(frozen=True, eq=False)
class Function:
    """A declared function. Compared by identity: two declarations are never the same function."""
    name: str
    params: Tuple[str, ...]
    body: tuple

    def __repr__(self):
        return f"<karya {self.name}>"


def is_number(value):
    return type(value) is float


def is_boolean(value):
    return type(value) is bool


def format_number(value):
    """Shortest decimal text for value, laid out like JavaScript numbers: integral values have no fractional part
    (120, not 120.0) and exponent notation is only used below 1e-6 or from 1e21 on (1e-7, 1e+21).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip; only their layout changes below
    __, digits, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digits))
    point = exponent + len(digits)  # position of the decimal point relative to the first digit

    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    elif -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{sign}{mantissa}e{point - 1:+d}"


def display(value):
    """Converts value to the text print shows (also used by string concatenation)."""
    if value is None:
        return NULL_KEYWORD
    elif is_boolean(value):
        return TRUE_KEYWORD if value else FALSE_KEYWORD
    elif is_number(value):
        return format_number(value)
    elif isinstance(value, Function):
        return f"<karya {value.name}>"
    return value


def type_name(value):
    """Name of value's type, for error messages."""
    if value is None:
        return "null"
    elif is_boolean(value):
        return "boolean"
    elif is_number(value):
        return "number"
    elif isinstance(value, Function):
        return "function"
    return "string"


def values_equal(left, right):
    """Value equality between two Bol values of the same type. Values of different types are never equal."""
    if type(left) is not type(right):
        return False
    if isinstance(left, Function):
        return left is right
    return left == right
