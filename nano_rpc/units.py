"""
Exact conversion between Nano denominations.

Balances are 128 bit integers of raw, far beyond what a float can hold, so
every quantity here is a ``Decimal`` or a decimal string. The named units are
powers of ten of raw:

    Gxrb = 10^33 raw
    Mxrb = 10^30 raw (the reference wallet's unit, formerly Mrai)
    kxrb = 10^27 raw (formerly krai)
    xrb  = 10^24 raw (formerly rai)
    mxrb = 10^21 raw
    uxrb = 10^18 raw
    raw  = 1, the smallest possible division
"""

from __future__ import annotations

import re
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    Context,
    Decimal,
    DecimalException,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from types import MappingProxyType
from typing import List, Mapping, Union

from nano_rpc.errors import ParseError, UnknownUnitError

DecimalInput = Union[str, int, Decimal]

# Plain ASCII decimal with an optional exponent; no underscores, no padding.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _power_of_ten(exponent: int) -> Decimal:
    return Decimal((0, (1,), exponent))


RATIOS: Mapping[str, Decimal] = MappingProxyType(
    {
        "Gxrb": _power_of_ten(33),
        "Mxrb": _power_of_ten(30),
        "kxrb": _power_of_ten(27),
        "xrb": _power_of_ten(24),
        "mxrb": _power_of_ten(21),
        "uxrb": _power_of_ten(18),
        "raw": _power_of_ten(0),
    }
)

UNIT_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Mrai": "Mxrb",
        "krai": "kxrb",
        "rai": "xrb",
    }
)


def units_for() -> List[str]:
    """Canonical unit names, largest first."""
    return sorted(RATIOS, key=lambda unit: RATIOS[unit], reverse=True)


def ratio(unit: str) -> Decimal:
    """Return the exact number of raw in one ``unit``."""
    canonical = UNIT_ALIASES.get(unit, unit)
    try:
        return RATIOS[canonical]
    except KeyError:
        raise UnknownUnitError(f"Unknown unit {unit!r}.", code=unit) from None


def _parse(value: DecimalInput) -> Decimal:
    if isinstance(value, bool) or isinstance(value, float):
        raise ParseError(f"Refusing inexact value {value!r}; pass a decimal string.")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, str):
        if not _DECIMAL_PATTERN.fullmatch(value):
            raise ParseError(f"Invalid decimal value {value!r}.")
        try:
            amount = Decimal(value)
        except InvalidOperation:
            raise ParseError(f"Invalid decimal value {value!r}.") from None
    else:
        raise ParseError(f"Invalid decimal value {value!r}.")
    if not amount.is_finite():
        raise ParseError(f"Invalid decimal value {value!r}.")
    return amount


def _exact_context(amount: Decimal) -> Context:
    # Scaling by a power of ten never grows the coefficient, so its digit
    # count is enough precision. Any rounding left over traps as Inexact.
    digits = max(len(amount.as_tuple().digits), 1)
    return Context(
        prec=digits,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
        traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
    )


def _format(amount: Decimal) -> str:
    if amount.is_zero():
        return "0"
    return format(amount.normalize(_exact_context(amount)), "f")


def convert(value: DecimalInput, from_unit: str, to_unit: str) -> str:
    """
    Convert ``value`` expressed in ``from_unit`` into ``to_unit``.

    The result is the exact decimal string with no exponent and without
    trailing fractional zeros. Raises UnknownUnitError for an unregistered
    unit and ParseError for a malformed value or one whose exponent is out
    of range.
    """
    from_ratio = ratio(from_unit)
    to_ratio = ratio(to_unit)
    amount = _parse(value)
    shift = from_ratio.adjusted() - to_ratio.adjusted()
    try:
        return _format(amount.scaleb(shift, context=_exact_context(amount)))
    except DecimalException:
        raise ParseError(f"Value {value!r} is out of range in {to_unit}.") from None


def mrai_to_raw(value: DecimalInput) -> str:
    return convert(value, "Mxrb", "raw")


def mrai_from_raw(value: DecimalInput) -> str:
    return convert(value, "raw", "Mxrb")


def krai_to_raw(value: DecimalInput) -> str:
    return convert(value, "kxrb", "raw")


def krai_from_raw(value: DecimalInput) -> str:
    return convert(value, "raw", "kxrb")


def rai_to_raw(value: DecimalInput) -> str:
    return convert(value, "xrb", "raw")


def rai_from_raw(value: DecimalInput) -> str:
    return convert(value, "raw", "xrb")
