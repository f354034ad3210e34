"""Syntax checks that an expression must pass before it is evaluated."""

from __future__ import annotations

FIRST_POSITION_FORBIDDEN = ".*/^)"
ALLOWED_CHARS = " 1234567890.sincotamdlgxqr()-+*/^"
SIGN_CHARS = "()-+*/^"
FUNCTION_LETTERS = "sincotalgmdqr"
NUMBER_CHARS = "1234567890."
OPERAND_CHARS = "1234567890.x"

FUNCTIONS = ("mod", "sin", "cos", "tan", "acos", "asin", "atan", "sqrt", "ln", "log")
_PRIORITY_ORDER = ("-", "+", "mod", "*", "/", "^")

FIRST_SIGN_ERROR = "ERROR_FIRST_SIGN_INPUT"
MESSED_INPUT_ERROR = "ERROR_MESSED_INPUT"
SIGNS_ERROR = "ERROR_SIGNS"
PARENTHESIS_ERROR = "PARANTHESIS_ERROR"
DOTS_ERROR = "DOTS_ERROR"
SEQUENCE_ERROR = "SEQUENCE_ERROR"
FUNCTION_ERROR = "FUNCTION_INPUT_ERROR"


class ExpressionError(ValueError):
    """Raised when an expression fails validation; ``code`` names the failure."""

    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code


def _terminated(text: str) -> str:
    """The text up to the first NUL character."""
    return text.split("\0", 1)[0]


def _first_line(text: str) -> str:
    """The text up to the first NUL or newline character."""
    return _terminated(text).split("\n", 1)[0]


def find_function(name: str) -> int:
    """Index in FUNCTIONS of the first name containing ``name``, or -1."""
    return next((index for index, func in enumerate(FUNCTIONS) if name in func), -1)


def sign_priority(sign: str) -> int:
    """Priority class of an operator: 4 for + and -, 3 for * / mod, 2 otherwise."""
    index = next(
        (i for i, op in enumerate(_PRIORITY_ORDER) if sign in op),
        len(_PRIORITY_ORDER) - 1,
    )
    if index < 2:
        return 4
    if index < 5:
        return 3
    return 2


def _is_flagged_sign(char: str) -> bool:
    """Whether a character falls in the sign ranges the sign check inspects."""
    return ("0" < char < "/") or char == "=" or char == "^"


def has_valid_signs(expression: str) -> bool:
    """Check sign sequences.

    A sign is rejected only when it equals the character one code point
    below itself, which no character does, so every sequence passes.
    """
    for char in _first_line(expression)[1:]:
        if char == " ":
            continue
        below = chr(ord(char) - 1)
        if char == below and _is_flagged_sign(char):
            return False
    return True


def has_valid_parentheses(expression: str) -> bool:
    """Check that brackets balance, none is empty, and an operand is present."""
    text = _terminated(expression)
    first = text[:1]
    depth = 1 if first == "(" else 0
    operands = 1 if first == "" or first in OPERAND_CHARS else 0
    for previous, char in zip(text, _first_line(text[1:])):
        if char == " ":
            continue
        if previous == "(" and char == ")":
            return False
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char in OPERAND_CHARS:
            operands += 1
        if depth < 0:
            return False
    return depth == 0 and operands > 0


def has_valid_functions(expression: str) -> bool:
    """Check that every run of letters names a known function or ``mod``."""
    text = _first_line(expression)
    i = 0
    while i < len(text):
        char = text[i]
        if char not in FUNCTION_LETTERS:
            i += 1
            continue
        if char == "m":
            if text[i + 1 : i + 3] != "od":
                return False
            i += 3
            continue
        end = i
        while end < len(text) and text[end] != "(":
            if text[end] in NUMBER_CHARS:
                return False
            end += 1
        if find_function(text[i:end]) == -1:
            return False
        i = end + 1
    return True


def has_valid_dots(expression: str) -> bool:
    """Check that every dot follows a digit and numbers hold at most one dot."""
    seen_digit = seen_dot = False
    for char in _first_line(expression):
        if char in NUMBER_CHARS:
            if char == ".":
                if seen_digit and not seen_dot:
                    seen_dot = True
                else:
                    return False
            else:
                seen_digit = True
        else:
            seen_digit = seen_dot = False
    return True


def has_valid_number_sequence(expression: str) -> bool:
    """Check that two operands are never separated by spaces alone."""
    text = _first_line(expression)
    after_operand = False
    i = 0
    while i < len(text):
        char = text[i]
        if char in OPERAND_CHARS:
            if after_operand:
                return False
            after_operand = True
            if char == "x":
                # A variable swallows the remainder of the line.
                break
            while i < len(text) and text[i] in NUMBER_CHARS:
                i += 1
            continue
        if char != " ":
            after_operand = False
        i += 1
    return True


def validate(expression: str) -> None:
    """Raise ExpressionError with the last failing check's code, if any."""
    text = _terminated(expression)
    if not text or text[0] in FIRST_POSITION_FORBIDDEN:
        raise ExpressionError(FIRST_SIGN_ERROR)

    code = None
    has_letters = False
    for char in text:
        if char not in ALLOWED_CHARS:
            code = MESSED_INPUT_ERROR
            break
        if char in FUNCTION_LETTERS:
            has_letters = True

    checks = [
        (has_valid_signs, SIGNS_ERROR),
        (has_valid_parentheses, PARENTHESIS_ERROR),
        (has_valid_dots, DOTS_ERROR),
        (has_valid_number_sequence, SEQUENCE_ERROR),
    ]
    if has_letters:
        checks.append((has_valid_functions, FUNCTION_ERROR))
    for check, failure in checks:
        if not check(text):
            code = failure

    if code is not None:
        raise ExpressionError(code)