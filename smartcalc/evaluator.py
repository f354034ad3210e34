"""Evaluation of infix expressions with a two-stack shunting-yard scheme."""

from __future__ import annotations

import math
import re
from collections import deque
from typing import Callable, Union

from smartcalc.validation import (
    FUNCTIONS,
    MESSED_INPUT_ERROR,
    SIGN_CHARS,
    ExpressionError,
    find_function,
    sign_priority,
    validate,
)

MAX_LEN = 255
INPUT_ERROR = "INPUT_ERROR"

Token = Union[float, str]

_TOKEN_PATTERN = re.compile(
    r"(?P<number>[0-9.]+)"
    r"|(?P<variable>x)"
    r"|(?P<sign>[-()+*/^])"
    r"|(?P<function>[sincotalgmdqr][^(0-9.]*)"
    r"|(?P<space> )"
    r"|(?P<bad>.)",
    re.DOTALL,
)
_NUMBER_PREFIX = re.compile(r"\d*(?:\.\d*)?")


def _log(value: float, base_log: Callable[[float], float]) -> float:
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return base_log(value)


def _sqrt(value: float) -> float:
    return math.nan if value < 0 else math.sqrt(value)


def _domain_safe(func: Callable[[float], float]) -> Callable[[float], float]:
    def wrapped(value: float) -> float:
        try:
            return func(value)
        except ValueError:
            return math.nan

    return wrapped


_FUNCTION_TABLE: tuple[tuple[str, Callable[[float], float]], ...] = (
    ("sin", _domain_safe(math.sin)),
    ("cos", _domain_safe(math.cos)),
    ("tan", _domain_safe(math.tan)),
    ("acos", _domain_safe(math.acos)),
    ("asin", _domain_safe(math.asin)),
    ("atan", math.atan),
    ("sqrt", _sqrt),
    ("ln", lambda v: _log(v, math.log)),
    ("log", lambda v: _log(v, math.log10)),
)


def apply_function(name: str, value: float) -> float:
    """Apply the first function whose name contains ``name``; 0.0 if none does."""
    for func_name, func in _FUNCTION_TABLE:
        if name in func_name:
            return func(value)
    return 0.0


def _divide(left: float, right: float) -> float:
    if right != 0:
        return left / right
    if left == 0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _power(left: float, right: float) -> float:
    try:
        return math.pow(left, right)
    except OverflowError:
        if left < 0 and _is_odd_integer(right):
            return -math.inf
        return math.inf
    except ValueError:
        if left == 0 and right < 0:
            if _is_odd_integer(right):
                return math.copysign(math.inf, left)
            return math.inf
        return math.nan


def _modulo(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "-": lambda a, b: a - b,
    "+": lambda a, b: a + b,
    "/": _divide,
    "^": _power,
    "*": lambda a, b: a * b,
}


def apply_operator(sign: str, left: float, right: float) -> float:
    """Apply a binary operator named by its first character, or ``mod``; else 0.0."""
    operator = _OPERATORS.get(sign[:1])
    if operator is not None:
        return operator(left, right)
    if sign in "mod":
        return _modulo(left, right)
    return 0.0


def _parse_number(run: str) -> float:
    prefix = _NUMBER_PREFIX.match(run).group()
    return float(prefix) if prefix not in ("", ".") else 0.0


def _first_line(text: str) -> str:
    return text.split("\0", 1)[0].split("\n", 1)[0]


def _tokenize(text: str, x: float) -> list[Token]:
    tokens: list[Token] = []
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind == "number":
            tokens.append(_parse_number(match.group()))
        elif kind == "variable":
            tokens.append(float(x))
        elif kind in ("sign", "function"):
            tokens.append(match.group())
        elif kind == "bad":
            raise ExpressionError(MESSED_INPUT_ERROR)
    return tokens


def _pop(values: list[float]) -> float:
    return values.pop() if values else 0.0


def _reduce(values: list[float], sign: str) -> None:
    right = _pop(values)
    left = _pop(values)
    values.append(apply_operator(sign, left, right))


def evaluate(expression: str, x: float = 0.0) -> float:
    """Evaluate ``expression`` with ``x`` substituted for the variable."""
    tokens = _tokenize(_first_line(expression), x)
    pending = deque(token for token in tokens if isinstance(token, float))
    values: list[float] = []
    operators: list[str] = []
    prev_was_number = False

    for token in tokens:
        if isinstance(token, float):
            values.append(pending.popleft())
            prev_was_number = True
            continue
        if token not in SIGN_CHARS and not token.startswith("m"):
            operators.append(token)
            continue
        if not prev_was_number and token == "-":
            if pending:
                pending[0] = -pending[0]
            continue
        if not prev_was_number and token == "+":
            continue
        if not operators or token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                _reduce(values, operators.pop())
            if operators:
                operators.pop()
            if operators and find_function(operators[-1]) != -1:
                name = operators.pop()
                values.append(apply_function(name, _pop(values)))
        else:
            while (
                operators
                and operators[-1] != "("
                and sign_priority(operators[-1]) <= sign_priority(token)
            ):
                _reduce(values, operators.pop())
            operators.append(token)
        prev_was_number = False

    while operators:
        _reduce(values, operators.pop())
    return values[-1] if values else 0.0


def format_result(value: float) -> str:
    """Format a result the way the calculator displays it."""
    return "%10.8g" % value


def calculate(expression: str | None, x: float = 0.0) -> str:
    """Validate and evaluate ``expression``; return the formatted result."""
    if expression is None or x is None:
        raise ExpressionError(INPUT_ERROR)
    text = expression[:MAX_LEN]
    validate(text)
    return format_result(evaluate(text, x))


__all__ = [
    "FUNCTIONS",
    "apply_function",
    "apply_operator",
    "evaluate",
    "format_result",
    "calculate",
]