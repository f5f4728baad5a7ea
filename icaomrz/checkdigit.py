from __future__ import annotations

import logging
from typing import Sequence

from icaomrz.errors import InvalidCharacter
from icaomrz.models import FILLER, TextRange

LOGGER = logging.getLogger(__name__)

MRZ_WEIGHTS = (7, 3, 1)


def _char_value(text: str, index: int) -> int:
    ch = text[index]
    if ch == FILLER:
        return 0
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    raise InvalidCharacter(f"Invalid character in MRZ record: {ch}", text, TextRange(index, index + 1, 0))


def compute_check_digit(text: str) -> int:
    """ICAO 9303 check digit of ``text``, 0..9."""
    total = 0
    for idx in range(len(text)):
        total += _char_value(text, idx) * MRZ_WEIGHTS[idx % len(MRZ_WEIGHTS)]
    return total % 10


def check_digit_char(text: str) -> str:
    return str(compute_check_digit(text))


def verify(col: int, row: int, text: str, rows: Sequence[str], field_name: str | None = None) -> bool:
    """Compares the digit printed at (col, row) with the one computed over ``text``.

    A filler at the check position reads as ``0``. Returns False instead of
    raising when the digit cannot be computed or the position is missing.
    """
    try:
        expected = check_digit_char(text)
    except InvalidCharacter as exc:
        LOGGER.info("Check digit verification failed for %s: %s", field_name, exc.message)
        return False
    try:
        actual = rows[row][col]
    except IndexError:
        LOGGER.info("Check digit verification failed for %s: no character at %s,%s", field_name, col, row)
        return False
    if actual == FILLER:
        actual = "0"
    if actual != expected:
        LOGGER.info("Check digit verification failed for %s: expected %s but got %s", field_name, expected, actual)
        return False
    return True


__all__ = ["MRZ_WEIGHTS", "compute_check_digit", "check_digit_char", "verify"]
