"""French national identity card (IDFRA), 2 rows of 36 characters.

The surname sits on row 0 and the given names on row 1. The layout has no
expiry date.
"""
from __future__ import annotations

from icaomrz.codec import to_mrz
from icaomrz.models import Format, MrzRecord, TextRange
from icaomrz.schemas.base import (
    ISSUING_COUNTRY,
    composite_char,
    date_with_check,
    decode_date,
    decode_header,
    field_with_check,
    join_rows,
    open_reader,
    require,
    verify_composite,
    verify_field,
    width,
)
from icaomrz.schemas.registry import Schema, register_schema

PREFIX = "IDFRA"

FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "surname": TextRange(5, 30, 0),
    "optional": TextRange(30, 36, 0),
    "document_number": TextRange(0, 12, 1),
    "document_number_check": TextRange(12, 13, 1),
    "given_names": TextRange(13, 27, 1),
    "date_of_birth": TextRange(27, 33, 1),
    "date_of_birth_check": TextRange(33, 34, 1),
    "sex": TextRange(34, 35, 1),
    "composite_check": TextRange(35, 36, 1),
}
COMPOSITE = (TextRange(0, 36, 0), TextRange(0, 35, 1))


def decode(text: str) -> MrzRecord:
    reader = open_reader(text, Format.FRENCH_ID)
    date_of_birth, valid_dob = decode_date(reader, FIELDS, "date_of_birth")
    sex_at = FIELDS["sex"]
    return MrzRecord(
        **decode_header(reader),
        surname=reader.parse_string(FIELDS["surname"]),
        given_names=reader.parse_string(FIELDS["given_names"]),
        nationality=reader.parse_string(FIELDS["issuing_country"]),
        optional=reader.parse_string(FIELDS["optional"]),
        document_number=reader.parse_string(FIELDS["document_number"]),
        valid_document_number=verify_field(reader, FIELDS, "document_number"),
        date_of_birth=date_of_birth,
        valid_date_of_birth=valid_dob,
        sex=reader.parse_sex(sex_at.start, sex_at.row),
        valid_composite=verify_composite(reader, FIELDS, COMPOSITE),
    )


def encode(record: MrzRecord) -> str:
    require(record, "date_of_birth", "sex")
    first = (
        PREFIX
        + to_mrz(record.surname, width(FIELDS, "surname"))
        + to_mrz(record.optional, width(FIELDS, "optional"))
    )
    second = (
        field_with_check(record.document_number, width(FIELDS, "document_number"))
        + to_mrz(record.given_names, width(FIELDS, "given_names"))
        + date_with_check(record.date_of_birth)
        + record.sex.mrz
    )
    second += composite_char([first, second], COMPOSITE)
    return join_rows([first, second])


SCHEMA = register_schema(Schema(Format.FRENCH_ID, FIELDS, decode, encode))
