from icaomrz.checkdigit import check_digit_char, compute_check_digit
from icaomrz.codec import MrzReader, name_to_mrz, to_mrz
from icaomrz.errors import (
    InvalidArgument,
    InvalidCharacter,
    InvalidFormat,
    MrzError,
    MrzNotFound,
    MrzParseError,
    UnrecognizedFormat,
    UnsupportedDocumentCode,
)
from icaomrz.finder import find_mrz
from icaomrz.formats import detect
from icaomrz.models import DocumentCode, Format, MrzDate, MrzRecord, Sex, TextRange
from icaomrz.parser import encode, parse

__version__ = "0.1.0"

__all__ = [
    "check_digit_char",
    "compute_check_digit",
    "MrzReader",
    "name_to_mrz",
    "to_mrz",
    "InvalidArgument",
    "InvalidCharacter",
    "InvalidFormat",
    "MrzError",
    "MrzNotFound",
    "MrzParseError",
    "UnrecognizedFormat",
    "UnsupportedDocumentCode",
    "find_mrz",
    "detect",
    "DocumentCode",
    "Format",
    "MrzDate",
    "MrzRecord",
    "Sex",
    "TextRange",
    "encode",
    "parse",
]
