# src/pla_kit/parsers/_numbers.py

import re

U32_MAX = 2**32 - 1

_ASCII_DIGITS = re.compile(r"[0-9]+")


def parse_u32(token: str | None) -> int | None:
    """Parse an unsigned 32-bit integer written as plain ASCII digits.

    Returns None for a missing token, signs, whitespace, underscores,
    non-ASCII digits or values above U32_MAX.
    """
    if token is None or not _ASCII_DIGITS.fullmatch(token):
        return None
    value = int(token)
    if value > U32_MAX:
        return None
    return value
