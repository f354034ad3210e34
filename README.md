# smartcalc

A small calculator library with a command-line tool. It does three things:

* it evaluates infix arithmetic expressions that may use functions and an `x` variable;
* it samples an expression over a range of `x` values, which gives points for a plot;
* it works out annuity and differentiated credit payments.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Expressions

An expression may contain:

* numbers, with or without a decimal point, such as `3`, `0.25` or `97.3456`;
* the variable `x`;
* the operators `+`, `-`, `*`, `/`, `^` and `mod`;
* parentheses;
* the functions `sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `sqrt`, `ln` (natural logarithm) and `log` (base 10). A function's argument must be in parentheses, as in `sin(0.1)`.

`^` binds tightest. `*`, `/` and `mod` come next, and `+` and `-` bind loosest. A `-` or `+` with no number before it is a sign on the number that follows it, as in `acos(-0.83)`.

### From Python

```python
from smartcalc.evaluator import calculate, evaluate, format_result

calculate("1.25+3.45", 1)        # '       4.7'
calculate("sin(0.3*0.6)", 1)     # '0.17902957'
evaluate("x^2+1", 3.0)           # 10.0
format_result(257.8971312)       # ' 257.89713'
```

`calculate(expression, x=0.0)` checks the expression and then evaluates it. It
returns the result as a string that `format_result` has formatted: right-aligned in
ten characters, with up to eight significant digits. Anything past 255 characters
is ignored. `evaluate(expression, x=0.0)` skips the checks and returns a float.

An expression that fails the checks raises `smartcalc.validation.ExpressionError`.
This is a subclass of `ValueError`, and its `code` attribute names the failure:

| code | cause |
|---|---|
| `ERROR_FIRST_SIGN_INPUT` | the expression is empty or starts with `.`, `*`, `/`, `^` or `)` |
| `ERROR_MESSED_INPUT` | a character that no expression may contain |
| `PARANTHESIS_ERROR` | unbalanced or empty parentheses, or no number or `x` at all |
| `DOTS_ERROR` | a dot with no digit before it, or a number with two dots |
| `SEQUENCE_ERROR` | two numbers separated only by spaces |
| `FUNCTION_INPUT_ERROR` | an unknown function name, or `m` not followed by `od` |
| `INPUT_ERROR` | `calculate` was given `None` |

When more than one check fails, the code comes from the last of them in the order
shown above. To run the checks without evaluating, call
`smartcalc.validation.validate`. The functions `has_valid_parentheses`,
`has_valid_dots`, `has_valid_number_sequence` and `has_valid_functions` each run one
check and return a bool.

`smartcalc.evaluator` also has the lower-level pieces:

* `apply_operator(sign, left, right)` applies one binary operator.
* `apply_function(name, value)` applies one named function.

These return NaN or an infinity where the mathematics calls for one, such as
`sqrt` of a negative number or division by zero. They do not raise.

## Plotting data

`smartcalc.graph` turns an expression in `x` into a list of `(x, y)` points, which
you can pass to any plotting tool.

```python
from smartcalc.graph import GraphSettings, default_settings, sample

settings = default_settings()        # x and y from -5 to 5, step 0.5
points = sample("sin(x)", settings)  # [(-5.0, 0.95892427), ...]
```

`sample` steps `x` from `x_min` to `x_max`, and it raises `ExpressionError` if the
expression is invalid. `GraphSettings.normalized()` returns settings that can be used.
If any bound is zero or either range is empty, it goes back to the default window.
A zero step becomes 0.5, and a negative step is made positive. `sample` normalizes the
settings before it uses them. The y bounds do not affect the sampled points.

## Credit calculator

`smartcalc.credit` computes loan payments. You give it the principal, the term in
months, and the yearly interest rate in percent.

```python
from smartcalc.credit import TermUnit, annuity, differentiated, to_months

months = to_months(2, TermUnit.YEARS)          # 24
plan = annuity(100000, months, 12)             # fixed monthly payment
schedule = differentiated(100000, months, 12)  # decreasing monthly payments
```

`to_months` takes `TermUnit.MONTHS`, `YEARS` or `DAYS`, or the matching string. It
counts a month as 30 days. `annuity` and `differentiated` both return a
`CreditSummary`, which holds `payments` (one per whole month), `total_payment` and
`overpayment`. The single formulas are `annuity_payment`, `annuity_total`,
`annuity_overpayment` and `differentiated_payment`.

## Command line

The `smartcalc` command has two subcommands.

```
smartcalc calc "(5.23+1.25)*(0.25+0.001)"
smartcalc calc "sin(x)" --x-min -3 --x-max 3 --step 0.5
smartcalc credit 100000 2 12 --unit years --kind differentiated
```

If the expression has no `x`, `calc` prints its value. If it has an `x`, `calc`
prints one `x y` line for each sampled point. The window comes from `--x-min`,
`--x-max`, `--y-min`, `--y-max` and `--step`, which default to -5, 5, -5, 5 and 0.5.

`credit PRINCIPAL TERM RATE` takes `--unit` (`months`, `years` or `days`; default
`months`) and `--kind` (`annuity` or `differentiated`; default `annuity`). It prints
the monthly payment, or each month's payment for a differentiated loan, then the
total payment and the overpayment.

An invalid expression, or one longer than 255 characters (`TOO_LONG`), prints its
error code on standard error, and the command exits with status 1.

## What it does not do

smartcalc has no graphical window, and it does not draw plots. It only produces the
points to plot. It has no deposit calculator.