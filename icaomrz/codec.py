from __future__ import annotations

import logging
import re
import unicodedata
from typing import List, Tuple

from icaomrz import checkdigit
from icaomrz.errors import InvalidArgument, InvalidCharacter
from icaomrz.formats import detect, split_rows
from icaomrz.models import FILLER, Format, MrzDate, Sex, TextRange

LOGGER = logging.getLogger(__name__)

EXPAND_CHARACTERS = {
    "Ä": "AE",
    "ä": "AE",
    "Å": "AA",
    "å": "AA",
    "Æ": "AE",
    "æ": "AE",
    "Ĳ": "IJ",
    "ĳ": "IJ",
    "Ö": "OE",
    "ö": "OE",
    "Ø": "OE",
    "ø": "OE",
    "Ü": "UE",
    "ü": "UE",
    "ß": "SS",
}
APOSTROPHES = ("'", "’")
_NAME_SPLIT_RE = re.compile(r"[ \n\t\f\r]+")


def is_valid_char(ch: str) -> bool:
    return ch == FILLER or "0" <= ch <= "9" or "A" <= ch <= "Z"


class MrzReader:
    """Field-level access to one MRZ text.

    Detects the format on construction; every range addresses ``rows``.
    """

    def __init__(self, text: str):
        self.text = text
        self.rows: List[str] = split_rows(text)
        self.format: Format = detect(text)

    def raw_value(self, *ranges: TextRange) -> str:
        return "".join(self.rows[r.row][r.start : r.end] for r in ranges)

    def check_valid_characters(self, text_range: TextRange) -> None:
        value = self.raw_value(text_range)
        for idx, ch in enumerate(value):
            if not is_valid_char(ch):
                raise InvalidCharacter(
                    f"Invalid character in MRZ record: {ch}",
                    self.text,
                    TextRange(text_range.start + idx, text_range.start + idx + 1, text_range.row),
                    self.format,
                )

    def parse_string(self, text_range: TextRange) -> str:
        """Reads a plain field: ``<<`` becomes ``", "`` and ``<`` a space."""
        self.check_valid_characters(text_range)
        value = self.raw_value(text_range).rstrip(FILLER)
        return value.replace(FILLER * 2, ", ").replace(FILLER, " ")

    def parse_name(self, text_range: TextRange) -> Tuple[str, str]:
        """Splits ``SURNAME<<GIVEN<NAMES`` into (surname, given names)."""
        self.check_valid_characters(text_range)
        value = self.raw_value(text_range).rstrip(FILLER)
        start, row = text_range.start, text_range.row
        split_at = value.find(FILLER * 2)
        if split_at < 0:
            return "", self.parse_string(TextRange(start, start + len(value), row))
        surname = self.parse_string(TextRange(start, start + split_at, row))
        given_names = self.parse_string(TextRange(start + split_at + 2, start + len(value), row))
        return surname, given_names

    def parse_date(self, text_range: TextRange) -> MrzDate:
        if text_range.length != 6:
            raise InvalidArgument(f"Parameter range: invalid value {text_range}: must be 6 characters long")
        return MrzDate.from_mrz(self.raw_value(text_range))

    def parse_sex(self, col: int, row: int) -> Sex:
        return Sex.from_mrz(self.rows[row][col])

    def check_digit(self, col: int, row: int, value: str | TextRange, field_name: str | None = None) -> bool:
        text = self.raw_value(value) if isinstance(value, TextRange) else value
        return checkdigit.verify(col, row, text, self.rows, field_name)


def _deaccent(text: str) -> str:
    normalized = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in normalized if ord(ch) < 128).lower()


def to_mrz(text: str | None, length: int) -> str:
    """Transliterates free text into the MRZ alphabet.

    ``to_mrz("Sedím na konári", 20) == "SEDIM<NA<KONARI<<<<<"``. The result is
    truncated or filler-padded to ``length``; a negative length leaves the size
    untouched.
    """
    value = text or ""
    for src, dst in EXPAND_CHARACTERS.items():
        value = value.replace(src, dst)
    for apostrophe in APOSTROPHES:
        value = value.replace(apostrophe, "")
    value = _deaccent(value).upper()
    if 0 <= length < len(value):
        value = value[:length]
    value = "".join(ch if is_valid_char(ch) else FILLER for ch in value)
    if len(value) < length:
        value += FILLER * (length - len(value))
    return value


def _is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def _extract_names(name: str) -> List[str]:
    tokens = _NAME_SPLIT_RE.split(name.replace(", ", " ").strip())
    return [to_mrz(token, -1) for token in tokens]


def _name_size(surnames: List[str], given: List[str]) -> int:
    return sum(len(s) + 1 for s in surnames) + sum(len(g) + 1 for g in given)


def _join_name(surnames: List[str], given: List[str]) -> str:
    return FILLER.join(surnames) + FILLER + "".join(FILLER + g for g in given)


def _truncate_names(surnames: List[str], given: List[str], length: int, surname: str, given_names: str) -> None:
    # Doc 9303 6.7: shorten the rightmost components first, down to initials.
    name_size = _name_size(surnames, given)
    current = given
    index = len(given) - 1
    while name_size > length:
        token = current[index]
        if name_size - len(token) + 1 <= length:
            current[index] = token[: len(token) - (name_size - length)]
        else:
            current[index] = token[:1]
            index -= 1
            if index < 0:
                if current is surnames:
                    if _name_size(surnames, given) > length:
                        raise InvalidArgument(
                            f"Cannot truncate name {surname} {given_names}: length too small: {length}; "
                            f"truncated to {_join_name(surnames, given)}"
                        )
                    return
                current = surnames
                index = len(surnames) - 1
        name_size = _name_size(surnames, given)


def name_to_mrz(surname: str, given_names: str, length: int) -> str:
    """Builds ``SURNAME<<GIVEN<NAMES`` of exactly ``length`` characters."""
    if _is_blank(surname):
        raise InvalidArgument(f"Parameter surname: invalid value {surname!r}: blank")
    if _is_blank(given_names):
        raise InvalidArgument(f"Parameter given_names: invalid value {given_names!r}: blank")
    if length <= 0:
        raise InvalidArgument(f"Parameter length: invalid value {length}: not positive")
    surnames = _extract_names(surname)
    given = _extract_names(given_names)
    _truncate_names(surnames, given, length, surname, given_names)
    return to_mrz(_join_name(surnames, given), length)


__all__ = ["EXPAND_CHARACTERS", "MrzReader", "is_valid_char", "split_rows", "to_mrz", "name_to_mrz"]
