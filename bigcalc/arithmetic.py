"""Arbitrary precision arithmetic on decimal digit lists (most significant first)."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

from bigcalc.digits import is_zero


def compare(first: Sequence[int], second: Sequence[int]) -> int:
    """Compare two digit sequences.

    The longer sequence is the larger one; sequences of equal length are
    compared digit by digit from the most significant end. Returns 1, -1 or 0.
    """
    if len(first) != len(second):
        return 1 if len(first) > len(second) else -1
    for a, b in zip(first, second):
        if a != b:
            return 1 if a > b else -1
    return 0


def add(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the digit-wise sum of two numbers."""
    result: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        result.append(digit)
    if carry:
        result.append(carry)
    result.reverse()
    return result


def subtract(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return ``first - second`` where *first* is the larger number.

    Leading zeros are removed from the result, keeping at least one digit.
    """
    result: list[int] = []
    borrow = 0
    padded_second = list(reversed(second))
    for position, a in enumerate(reversed(first)):
        minuend = a - borrow
        subtrahend = padded_second[position] if position < len(padded_second) else 0
        if minuend < subtrahend:
            minuend += 10
            borrow = 1
        else:
            borrow = 0
        result.append(minuend - subtrahend)
    result.reverse()
    start = 0
    while start < len(result) - 1 and result[start] == 0:
        start += 1
    return result[start:]


def subtract_signed(first: Sequence[int], second: Sequence[int]) -> tuple[list[int], bool]:
    """Return the magnitude of ``first - second`` and whether it is negative."""
    order = compare(first, second)
    if order == 0:
        return [0], False
    if order > 0:
        return subtract(first, second), False
    return subtract(second, first), True


def multiply(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the product of two numbers by long multiplication."""
    result: list[int] = []
    for shift, multiplier in enumerate(reversed(second)):
        partial: list[int] = []
        carry = 0
        for digit in reversed(first):
            carry, low = divmod(digit * multiplier + carry, 10)
            partial.append(low)
        if carry > 0:
            partial.append(carry)
        partial.reverse()
        if shift == 0:
            result = partial
            continue
        partial.extend([0] * shift)
        if result:
            result = add(result, partial)
    return result


def divide(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the integer quotient of ``first / second`` by repeated subtraction.

    Raises ZeroDivisionError when *second* is zero.
    """
    if is_zero(second):
        raise ZeroDivisionError("Division by zero")
    if compare(first, second) < 0:
        return [0]
    dividend = list(first)
    count = 0
    while compare(dividend, second) >= 0:
        dividend = subtract(dividend, second)
        count += 1
    return [int(char) for char in str(count)]