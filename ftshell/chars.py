"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")

CodeLike = "int | str"


def _code(value: int | str) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def _wrap_int32(value: int) -> int:
    """Reduce a value to the range of a 32-bit signed integer."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; text with no digits yields 0.
    The result wraps like a 32-bit signed integer.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    result = 0
    while position < length and "0" <= text[position] <= "9":
        result = result * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return _wrap_int32(sign * result)


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def isalpha(code: int | str) -> bool:
    """True for ASCII letters."""
    value = _code(code)
    return 65 <= value <= 90 or 97 <= value <= 122


def isdigit(code: int | str) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(code) <= 57


def isalnum(code: int | str) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(code) or isdigit(code)


def isascii(code: int | str) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(code) <= 127


def isprint(code: int | str) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(code) <= 126


def toupper(code: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values pass through.

    The result has the same type as the argument.
    """
    value = _code(code)
    if 97 <= value <= 122:
        value -= 32
    return chr(value) if isinstance(code, str) else value


def tolower(code: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values pass through.

    The result has the same type as the argument.
    """
    value = _code(code)
    if 65 <= value <= 90:
        value += 32
    return chr(value) if isinstance(code, str) else value