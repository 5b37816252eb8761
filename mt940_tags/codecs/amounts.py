"""
Amount codec for mt940-tags.

SWIFT amounts are unsigned digit strings with a comma as decimal
separator (e.g. "1250,5"). The sign comes from the mark in front of it:

- ``D`` debit (negative) / ``C`` credit (positive);
- an optional leading ``R`` (reversal) flips the sign once more,
  an optional leading ``E`` (expected) leaves it alone.

The value is truncated (never rounded up) to 2 fractional digits.
"""

from __future__ import annotations

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from mt940_tags.exceptions import FieldValueError

_CENTS = Decimal("0.01")

# Optional sign (rejected below), digits, at most one separator
_AMOUNT = re.compile(r"([+-]?)[0-9]*[.,]?[0-9]*")


def parse_amount(mark: str, amount: str) -> Decimal:
    """Parse an amount string and sign it from a debit/credit mark.

    Args:
        mark: ``D``/``C``, optionally prefixed by ``E`` or ``R``.
        amount: Unsigned digits with at most one comma/point separator.

    Returns:
        Signed ``Decimal`` truncated toward zero to 2 decimal places.

    Raises:
        FieldValueError: On an unknown mark, an unparseable amount or an
            amount string that carries its own sign.

    Examples::

        parse_amount("D", "150,00")   # Decimal('-150.00')
        parse_amount("RD", "150,00")  # Decimal('150.00')
        parse_amount("C", "10,005")   # Decimal('10.00')
    """
    prefix, dc = "", mark
    if len(mark) == 2:
        prefix, dc = mark[0], mark[1]
        if prefix not in ("E", "R"):
            raise FieldValueError(f"Not a reversal/expected mark: {mark}")
    if dc not in ("D", "C"):
        raise FieldValueError(f"Wrong debit/credit mark: {mark}")

    syntax = _AMOUNT.fullmatch(amount)
    if syntax is None:
        raise FieldValueError(f"Amount cannot be parsed: {amount!r}")
    if syntax.group(1):
        raise FieldValueError(f"Positive amount string expected: {amount}")
    try:
        value = Decimal(amount.replace(",", ".", 1))
    except InvalidOperation:
        raise FieldValueError(f"Amount cannot be parsed: {amount!r}") from None

    if dc == "D":  # bank debit = minus
        value = -value
    if prefix == "R":
        value = -value
    try:
        return value.quantize(_CENTS, rounding=ROUND_DOWN)
    except InvalidOperation:
        raise FieldValueError(f"Amount cannot be parsed: {amount!r}") from None
