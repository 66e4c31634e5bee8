"""Number-to-text conversions with ECMAScript Number semantics.

Pattern-driven formatting counts digits in the textual form of a number, so
the textual form has to be stable and predictable:

- js_str: shortest round-trip digits, rendered without exponent notation
- to_fixed: fixed fraction digits, half-up on the exact binary value
- to_precision: significant digits, exponent form when the exponent is
  below -6 or at least the precision
- to_exponential: d.ddde+N form

Rounding goes through decimal.Decimal constructed from the float, which is
the exact binary value, so 1.005 (stored as 1.00499999...) rounds to 1.00.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal

__all__ = [
    "js_str",
    "to_exponential",
    "to_fixed",
    "to_precision",
]

type Number = int | float | Decimal

# Wide enough for the exact value of any double plus 21 fraction digits.
_EXACT = Context(prec=1200, rounding=ROUND_HALF_UP)


def js_str(value: Number) -> str:
    """Shortest decimal text of a number, never in exponent form.

    Example:
        >>> js_str(1234567.5)
        '1234567.5'
        >>> js_str(2.0)
        '2'
        >>> js_str(1e-7)
        '0.0000001'
    """
    if isinstance(value, int):
        return str(value)
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def to_fixed(value: Number, digits: int) -> str:
    """Render with exactly ``digits`` fraction digits.

    Example:
        >>> to_fixed(1234567.5, 2)
        '1234567.50'
        >>> to_fixed(0.125, 2)
        '0.13'
    """
    exact = Decimal(float(value)) if not isinstance(value, int) else Decimal(value)
    quantum = Decimal(1).scaleb(-digits)
    return format(exact.quantize(quantum, context=_EXACT), "f")


def _round_significant(exact: Decimal, precision: int) -> Decimal:
    rounded = exact.quantize(Decimal(1).scaleb(exact.adjusted() - precision + 1), context=_EXACT)
    if rounded.adjusted() != exact.adjusted():
        # carry into a new leading digit (9.99 -> 10.0)
        rounded = rounded.quantize(
            Decimal(1).scaleb(rounded.adjusted() - precision + 1), context=_EXACT
        )
    return rounded


def _exponent_text(digits: str, exponent: int) -> str:
    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def to_precision(value: Number, precision: int) -> str:
    """Render with ``precision`` significant digits.

    Example:
        >>> to_precision(123.456, 4)
        '123.5'
        >>> to_precision(123456, 2)
        '1.2e+5'
        >>> to_precision(0.5, 3)
        '0.500'
    """
    exact = Decimal(float(value)) if not isinstance(value, int) else Decimal(value)
    if exact == 0:
        return "0" + ("." + "0" * (precision - 1) if precision > 1 else "")
    rounded = _round_significant(abs(exact), precision)
    sign = "-" if exact < 0 else ""
    exponent = rounded.adjusted()
    if exponent < -6 or exponent >= precision:
        digits = "".join(str(d) for d in rounded.as_tuple().digits)
        return sign + _exponent_text(digits, exponent)
    return sign + format(rounded, "f")


def to_exponential(value: Number, fraction_digits: int | None = None) -> str:
    """Render in exponent form with ``fraction_digits`` mantissa digits.

    When ``fraction_digits`` is None the shortest round-trip mantissa is used.

    Example:
        >>> to_exponential(12345, 2)
        '1.23e+4'
        >>> to_exponential(12345)
        '1.2345e+4'
    """
    number = float(value)
    sign = "-" if number < 0 else ""
    if number == 0:
        zeros = "0" * (fraction_digits or 0)
        return sign + _exponent_text("0" + zeros, 0)
    if fraction_digits is None:
        exact = Decimal(repr(abs(number))).normalize()
    else:
        exact = _round_significant(Decimal(abs(number)), fraction_digits + 1)
    digits = "".join(str(d) for d in exact.as_tuple().digits)
    return sign + _exponent_text(digits, exact.adjusted())
