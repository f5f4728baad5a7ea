from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence

from icaomrz.errors import InvalidArgument, InvalidFormat, UnsupportedDocumentCode

LOGGER = logging.getLogger(__name__)

FILLER = "<"


@dataclass(frozen=True)
class TextRange:
    """Columns ``start`` (inclusive) to ``end`` (exclusive) of one MRZ row."""

    start: int
    end: int
    row: int

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidArgument(f"Parameter start: invalid value {self.start}: must not exceed {self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}-{self.end},{self.row}"


def _parse_component(raw: str, name: str) -> int:
    if len(raw) == 2 and raw.isascii() and raw.isdigit():
        return int(raw)
    LOGGER.debug("Failed to parse MRZ date %s %r", name, raw)
    return -1


@dataclass(frozen=True, order=True)
class MrzDate:
    """A YYMMDD date as printed in the MRZ.

    Components that could not be read are -1. ``raw`` keeps the printed six
    characters so that garbled dates serialize back unchanged; it takes no
    part in comparisons.
    """

    year: int
    month: int
    day: int
    raw: Optional[str] = field(default=None, compare=False)
    is_valid: bool = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "is_valid", self._check())

    @classmethod
    def from_mrz(cls, text: str) -> "MrzDate":
        if len(text) != 6:
            raise InvalidArgument(f"Parameter text: invalid value {text!r}: must be 6 characters long")
        year = _parse_component(text[0:2], "year")
        month = _parse_component(text[2:4], "month")
        day = _parse_component(text[4:6], "day")
        return cls(year, month, day, text)

    def _check(self) -> bool:
        if not 0 <= self.year <= 99:
            LOGGER.debug("Invalid year value %s: must be 0..99", self.year)
            return False
        if not 1 <= self.month <= 12:
            LOGGER.debug("Invalid month value %s: must be 1..12", self.month)
            return False
        if not 1 <= self.day <= 31:
            LOGGER.debug("Invalid day value %s: must be 1..31", self.day)
            return False
        return True

    def to_mrz(self) -> str:
        if self.raw is not None:
            return self.raw
        return f"{self.year:02d}{self.month:02d}{self.day:02d}"

    def to_dict(self) -> Dict[str, object]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "mrz": self.to_mrz(),
            "valid": self.is_valid,
        }

    def __str__(self) -> str:
        return f"{{{self.day}/{self.month}/{self.year}}}"


class Sex(Enum):
    MALE = "M"
    FEMALE = "F"
    UNSPECIFIED = "X"
    UNKNOWN = "<"

    @property
    def mrz(self) -> str:
        return self.value

    @classmethod
    def from_mrz(cls, char: str) -> "Sex":
        try:
            return cls(char)
        except ValueError as exc:
            raise InvalidArgument(f"Invalid MRZ sex character: {char!r}") from exc


_TWO_LETTER_CODES = {
    "AC": "CREW_MEMBER",
    "ME": "MIGRANT",
    "TD": "MIGRANT",
    "IP": "PASSPORT",
}
_ONE_LETTER_CODES = {
    "P": "PASSPORT",
    "T": "PASSPORT",
    "A": "TYPE_A",
    "C": "TYPE_C",
    "V": "TYPE_V",
    "I": "TYPE_I",
    "R": "MIGRANT",
}


class DocumentCode(Enum):
    PASSPORT = "passport"
    TYPE_I = "type_i"
    TYPE_A = "type_a"
    CREW_MEMBER = "crew_member"
    TYPE_C = "type_c"
    TYPE_V = "type_v"
    MIGRANT = "migrant"

    @classmethod
    def parse(cls, text: str) -> "DocumentCode":
        """Derives the document code from the first two characters of row 0."""
        code = (text or "")[:2]
        location = TextRange(0, 2, 0)
        if code == "IV":
            raise InvalidFormat("IV document code is not allowed", text, location)
        if code in _TWO_LETTER_CODES:
            return cls[_TWO_LETTER_CODES[code]]
        if code[:1] in _ONE_LETTER_CODES:
            return cls[_ONE_LETTER_CODES[code[:1]]]
        raise UnsupportedDocumentCode(f"Unsupported document code: {code}", text, location)


class Format(Enum):
    """Supported layouts, in detection order."""

    TD1 = ("td1", 3, 30, None)
    FRENCH_ID = ("french_id", 2, 36, "IDFRA")
    MRV_B = ("mrv_b", 2, 36, "V")
    TD2 = ("td2", 2, 36, None)
    MRV_A = ("mrv_a", 2, 44, "V")
    PASSPORT = ("passport", 2, 44, None)
    SLOVAK_ID = ("slovak_id", 2, 34, None)

    def __init__(self, label: str, rows: int, columns: int, prefix: Optional[str]):
        self.label = label
        self.rows = rows
        self.columns = columns
        self.prefix = prefix

    def matches(self, rows: Sequence[str]) -> bool:
        if len(rows) != self.rows:
            return False
        if any(len(row) != self.columns for row in rows):
            return False
        return self.prefix is None or rows[0].startswith(self.prefix)

    @classmethod
    def from_label(cls, label: str) -> "Format":
        for fmt in cls:
            if fmt.label == label or fmt.name == label:
                return fmt
        raise InvalidArgument(f"Unknown format: {label}")


@dataclass(frozen=True)
class MrzRecord:
    format: Format
    code: Optional[DocumentCode] = None
    code1: str = ""
    code2: str = ""
    issuing_country: str = ""
    document_number: str = ""
    surname: str = ""
    given_names: str = ""
    date_of_birth: Optional[MrzDate] = None
    sex: Optional[Sex] = None
    expiration_date: Optional[MrzDate] = None
    nationality: str = ""
    valid_document_number: bool = True
    valid_date_of_birth: bool = True
    valid_expiration_date: bool = True
    valid_composite: bool = True
    personal_number: Optional[str] = None
    valid_personal_number: bool = True
    optional: Optional[str] = None
    optional2: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return (
            self.valid_document_number
            and self.valid_date_of_birth
            and self.valid_expiration_date
            and self.valid_composite
            and self.valid_personal_number
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "format": self.format.label,
            "code": self.code.value if self.code else None,
            "code1": self.code1,
            "code2": self.code2,
            "issuing_country": self.issuing_country,
            "document_number": self.document_number,
            "surname": self.surname,
            "given_names": self.given_names,
            "date_of_birth": self.date_of_birth.to_dict() if self.date_of_birth else None,
            "sex": self.sex.mrz if self.sex else None,
            "expiration_date": self.expiration_date.to_dict() if self.expiration_date else None,
            "nationality": self.nationality,
            "personal_number": self.personal_number,
            "optional": self.optional,
            "optional2": self.optional2,
            "valid_document_number": self.valid_document_number,
            "valid_date_of_birth": self.valid_date_of_birth,
            "valid_expiration_date": self.valid_expiration_date,
            "valid_composite": self.valid_composite,
            "valid_personal_number": self.valid_personal_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "MrzRecord":
        if "format" not in data:
            raise InvalidArgument("Record data has no format")
        kwargs: Dict[str, object] = {"format": Format.from_label(str(data["format"]))}
        if data.get("code"):
            kwargs["code"] = DocumentCode(data["code"])
        for key in ("code1", "code2", "issuing_country", "document_number", "surname", "given_names", "nationality"):
            if data.get(key) is not None:
                kwargs[key] = str(data[key])
        for key in ("personal_number", "optional", "optional2"):
            if data.get(key) is not None:
                kwargs[key] = str(data[key])
        for key in ("date_of_birth", "expiration_date"):
            value = data.get(key)
            if isinstance(value, dict) and value.get("mrz"):
                kwargs[key] = MrzDate.from_mrz(str(value["mrz"]))
            elif isinstance(value, dict):
                kwargs[key] = MrzDate(int(value["year"]), int(value["month"]), int(value["day"]))
            elif isinstance(value, str):
                kwargs[key] = MrzDate.from_mrz(value)
        if data.get("sex") is not None:
            kwargs["sex"] = Sex.from_mrz(str(data["sex"]))
        return cls(**kwargs)


__all__ = ["FILLER", "TextRange", "MrzDate", "Sex", "DocumentCode", "Format", "MrzRecord"]
