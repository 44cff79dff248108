"""Float rendering shared by the text encoders."""

from __future__ import annotations

import math
from decimal import Decimal

from ..config import EXPONENT_HIGH, EXPONENT_LOW


def format_float(value: float) -> str:
    """Render the shortest text that parses back to the same double.

    Uses %g layout: exponent form when the decimal exponent is below -4 or
    at least 6, plain digits otherwise. Exponents are signed and have at
    least two digits ("3e-08", "8.451394857194e+12").

    Args:
        value: Number to render

    Returns:
        Text such as "1", "-1234", "0.23423" or "NaN", "Infinity", "-Infinity"
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    # repr() gives the shortest round-trip digits
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    text = "".join(str(d) for d in digits)
    prefix = "-" if sign else ""
    nd = len(text)
    dp = nd + exponent  # position of the decimal point within text
    exp = dp - 1

    if exp < EXPONENT_LOW or exp >= EXPONENT_HIGH:
        mantissa = text[0]
        if nd > 1:
            mantissa += "." + text[1:]
        exp_sign = "-" if exp < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp):02d}"

    if dp <= 0:
        return f"{prefix}0.{'0' * -dp}{text}"
    if dp >= nd:
        return f"{prefix}{text}{'0' * (dp - nd)}"
    return f"{prefix}{text[:dp]}.{text[dp:]}"
