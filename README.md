# bigcalc

A small calculator for integers of any length. Numbers are held as lists
of decimal digits, most significant first. Addition, subtraction,
multiplication and integer division are carried out digit by digit, the
way you would do them on paper.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

Pass the whole expression as one argument, with no spaces:

```
bigcalc 123456789012345678901234567890+987654321098765432109876543210
bigcalc -500-250
bigcalc 12345678901234567890x98765432109876543210
bigcalc 1000/7
```

`python -m bigcalc.cli <expression>` does the same.

Supported operators:

| Operator | Meaning                            |
|----------|------------------------------------|
| `+`      | addition                           |
| `-`      | subtraction                        |
| `x`      | multiplication                     |
| `/`      | integer division, truncated to zero |

Either operand can start with `-`. The operator is the first `+`, `-`,
`x` or `/` after the first character, so `-5-3` reads as minus five
minus three and prints `-8`. A zero result is never shown as `-0`.

Characters in an operand that are not digits are ignored. The result is
printed on one line and the command exits with status 0. It prints a
message and exits with status 1 when it is not given exactly one
argument (`Usage: bigcalc <num1><op><num2>`), when no operator is found
(`Invalid operator`), or on division by zero (`Division by zero`).

## Library use

```python
from bigcalc.cli import evaluate, CalculationError
from bigcalc.digits import parse_digits, format_digits
from bigcalc.arithmetic import add, multiply, divide, compare

evaluate("99999999999999999999+1")      # "100000000000000000000"
evaluate("-6x7")                        # "-42"

a = parse_digits("123456789")
b = parse_digits("987")
format_digits(multiply(a, b), False)    # "121851850743"
compare(a, b)                           # 1

try:
    evaluate("5/0")
except CalculationError as exc:
    print(exc)                          # Division by zero
```

### `bigcalc.digits`

- `parse_digits(text)`: the digits `0`-`9` found in `text`, as a list of ints.
- `is_zero(digits)`: true when every digit is zero (an empty list counts as zero).
- `format_digits(digits, negative=False)`: the digits as text, with a
  leading `-` when `negative` is set and the value is not zero.

### `bigcalc.arithmetic`

These work on unsigned digit sequences, most significant digit first.

- `compare(first, second)`: returns `1`, `-1` or `0`. A longer sequence
  counts as larger, so operands should not carry leading zeros.
- `add(first, second)`: the sum.
- `subtract(first, second)`: `first - second` for `first` not smaller
  than `second`, with leading zeros removed.
- `subtract_signed(first, second)`: a pair of the magnitude of
  `first - second` and whether the result is negative.
- `multiply(first, second)`: the product, by long multiplication.
- `divide(first, second)`: the integer quotient, by repeated
  subtraction; raises `ZeroDivisionError` when `second` is zero.

Signs are handled by `evaluate` in `bigcalc.cli`, which raises
`CalculationError` for a missing operator or division by zero.

## Limits

- Division is done by repeated subtraction, so it takes time in
  proportion to the quotient; very large quotients are slow.
- There is no remainder or modulo operator, no fractions or decimals,
  and only one operation per expression.