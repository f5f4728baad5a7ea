"""TD1 identity card, 3 rows of 30 characters."""
from __future__ import annotations

from icaomrz.codec import name_to_mrz, to_mrz
from icaomrz.models import Format, MrzRecord, TextRange
from icaomrz.schemas.base import (
    ISSUING_COUNTRY,
    composite_char,
    date_with_check,
    decode_document_fields,
    decode_header,
    decode_name,
    document_prefix,
    field_with_check,
    join_rows,
    open_reader,
    require,
    verify_composite,
    width,
)
from icaomrz.schemas.registry import Schema, register_schema

FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "document_number": TextRange(5, 14, 0),
    "document_number_check": TextRange(14, 15, 0),
    "optional": TextRange(15, 30, 0),
    "date_of_birth": TextRange(0, 6, 1),
    "date_of_birth_check": TextRange(6, 7, 1),
    "sex": TextRange(7, 8, 1),
    "expiration_date": TextRange(8, 14, 1),
    "expiration_date_check": TextRange(14, 15, 1),
    "nationality": TextRange(15, 18, 1),
    "optional2": TextRange(18, 29, 1),
    "composite_check": TextRange(29, 30, 1),
    "name": TextRange(0, 30, 2),
}
COMPOSITE = (TextRange(5, 30, 0), TextRange(0, 7, 1), TextRange(8, 15, 1), TextRange(18, 29, 1))


def decode(text: str) -> MrzRecord:
    reader = open_reader(text, Format.TD1)
    return MrzRecord(
        **decode_header(reader),
        **decode_document_fields(reader, FIELDS),
        optional=reader.parse_string(FIELDS["optional"]),
        optional2=reader.parse_string(FIELDS["optional2"]),
        valid_composite=verify_composite(reader, FIELDS, COMPOSITE),
        **decode_name(reader, FIELDS),
    )


def encode(record: MrzRecord) -> str:
    require(record, "date_of_birth", "sex", "expiration_date")
    first = (
        document_prefix(record, "I")
        + to_mrz(record.issuing_country, width(FIELDS, "issuing_country"))
        + field_with_check(record.document_number, width(FIELDS, "document_number"))
        + to_mrz(record.optional, width(FIELDS, "optional"))
    )
    second = (
        date_with_check(record.date_of_birth)
        + record.sex.mrz
        + date_with_check(record.expiration_date)
        + to_mrz(record.nationality, width(FIELDS, "nationality"))
        + to_mrz(record.optional2, width(FIELDS, "optional2"))
    )
    second += composite_char([first, second], COMPOSITE)
    third = name_to_mrz(record.surname, record.given_names, width(FIELDS, "name"))
    return join_rows([first, second, third])


SCHEMA = register_schema(Schema(Format.TD1, FIELDS, decode, encode))
