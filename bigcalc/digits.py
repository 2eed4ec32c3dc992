"""Decimal digit sequences: parsing, inspection and formatting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def parse_digits(text: str) -> list[int]:
    """Return the decimal digits found in *text*, most significant first.

    Characters other than ``0``-``9`` are ignored.
    """
    return [int(char) for char in text if "0" <= char <= "9"]


def is_zero(digits: Iterable[int]) -> bool:
    """Return True if every digit is zero. An empty sequence counts as zero."""
    return all(digit == 0 for digit in digits)


def format_digits(digits: Sequence[int], negative: bool = False) -> str:
    """Render *digits* as text.

    A minus sign is written when *negative* is set and the value is not zero,
    or when the leading digit itself carries a negative mark. An empty
    sequence renders as an empty string.
    """
    if not digits:
        return ""
    lead, *rest = digits
    signed = (negative and not is_zero(digits)) or lead < 0
    body = str(abs(lead)) + "".join(str(digit) for digit in rest)
    return f"-{body}" if signed else body