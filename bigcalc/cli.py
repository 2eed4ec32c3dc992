"""Command line calculator for arbitrarily large integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from bigcalc.arithmetic import add, divide, multiply, subtract_signed
from bigcalc.digits import format_digits, is_zero, parse_digits

OPERATORS = "+-x/"
USAGE = "Usage: bigcalc <num1><op><num2>"


class CalculationError(Exception):
    """Raised when an expression cannot be evaluated."""


def _split_sign(operand: str) -> tuple[int, str]:
    if operand.startswith("-"):
        return -1, operand[1:]
    return 1, operand


def _find_operator(expression: str) -> int:
    # The first character may be the sign of the first operand.
    for index, char in enumerate(expression[1:], start=1):
        if char in OPERATORS:
            return index
    raise CalculationError("Invalid operator")


def evaluate(expression: str) -> str:
    """Evaluate an expression of the form ``<num1><op><num2>``.

    The operator is one of ``+``, ``-``, ``x`` or ``/``; either operand may
    carry a leading minus sign. Division truncates toward zero.
    """
    position = _find_operator(expression)
    operator = expression[position]
    sign1, text1 = _split_sign(expression[:position])
    sign2, text2 = _split_sign(expression[position + 1:])
    first = parse_digits(text1)
    second = parse_digits(text2)

    if operator in "+-":
        if operator == "-":
            sign2 = -sign2
        if sign1 == sign2:
            result = add(first, second)
            result_sign = sign1
        else:
            result, second_larger = subtract_signed(first, second)
            result_sign = sign2 if second_larger else sign1
    elif operator == "x":
        result_sign = sign1 * sign2
        if is_zero(first) or is_zero(second):
            result = [0]
        else:
            result = multiply(first, second)
    else:
        result_sign = sign1 * sign2
        if is_zero(second):
            raise CalculationError("Division by zero")
        result = divide(first, second)

    return format_digits(result, result_sign < 0)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator on a single expression argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 1
    try:
        text = evaluate(args[0])
    except CalculationError as exc:
        print(exc)
        return 1
    if text:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())