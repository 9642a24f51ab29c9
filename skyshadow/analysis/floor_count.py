"""
Floor count from cadastral construction codes

Cadastral "constru" strings describe a building's volumes as signed Roman
numerals: "III+I" is three floors plus a one-floor volume, "II-I" is two
floors above ground and one basement. Only the above-ground numerals count.
"""

import re
from typing import List

ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_TOKEN_RE = re.compile(r"[+-]?[^+-]*")
_ROMAN_RE = re.compile(r"[IVXLCDM]+")


def tokenize_height_code(height_code: str) -> List[str]:
    """Split on sign boundaries, each sign staying attached to the token it starts"""
    return [token for token in _TOKEN_RE.findall(height_code) if token]


def positive_roman_tokens(height_code: str) -> List[str]:
    """Unsigned or '+' tokens made only of Roman numeral symbols"""
    numerals = []
    for token in tokenize_height_code(height_code):
        if token.startswith("-"):
            continue
        if token.startswith("+"):
            token = token[1:]
        if _ROMAN_RE.fullmatch(token):
            numerals.append(token)
    return numerals


def roman_to_int(roman: str) -> int:
    """Decode right to left, subtracting a symbol smaller than the one after it"""
    total = 0
    previous = 0
    for symbol in reversed(roman):
        value = ROMAN_VALUES[symbol]
        if value >= previous:
            total += value
        else:
            total -= value
        previous = value
    return total


def parse_floor_count(height_code: str) -> int:
    """
    Number of floors of a building from its construction code

    Returns the highest above-ground numeral, 0 when there is none.
    """
    if not isinstance(height_code, str) or not height_code:
        return 0
    values = [roman_to_int(token) for token in positive_roman_tokens(height_code)]
    return max(values, default=0)
