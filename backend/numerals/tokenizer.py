"""Digit group tokenizer shared by every locale engine."""
import math

from .errors import NotAnIntegerError

RADIX = 10
DEFAULT_GROUP_WIDTH = 3


def ensure_integer(number: object) -> int:
    """Return ``number`` as an ``int`` or raise NotAnIntegerError.

    Integral floats (``12.0``) are accepted, booleans, fractions,
    non-finite floats and negative values are not.
    """
    if isinstance(number, bool):
        raise NotAnIntegerError(number)
    if isinstance(number, int):
        value = number
    elif isinstance(number, float) and math.isfinite(number) and number.is_integer():
        value = int(number)
    else:
        raise NotAnIntegerError(number)
    if value < 0:
        raise NotAnIntegerError(number)
    return value


def tokenize(number: object, group_width: int = DEFAULT_GROUP_WIDTH) -> list[int]:
    """Split a number into fixed-width digit groups, least significant first.

    Examples:
        tokenize(1234, 1)  # [4, 3, 2, 1]
        tokenize(1234, 2)  # [34, 12]
        tokenize(1234, 3)  # [234, 1]
    """
    if group_width < 1:
        raise ValueError(f"Group width must be positive, got {group_width}")
    value = ensure_integer(number)
    if value == 0:
        return [0]

    base = RADIX ** group_width
    tokens = []
    while value:
        value, token = divmod(value, base)
        tokens.append(token)
    return tokens


def join_tokens(tokens: list[int], group_width: int = DEFAULT_GROUP_WIDTH) -> int:
    """Rebuild the number a token sequence was split from."""
    base = RADIX ** group_width
    return sum(token * base ** index for index, token in enumerate(tokens))
