"""TD3 machine readable passport, 2 rows of 44 characters."""
from __future__ import annotations

from icaomrz.codec import name_to_mrz, to_mrz
from icaomrz.models import Format, MrzRecord, TextRange
from icaomrz.schemas.base import (
    DOCUMENT_ROW,
    ISSUING_COUNTRY,
    composite_char,
    decode_document_fields,
    decode_header,
    decode_name,
    document_prefix,
    encode_document_row,
    field_with_check,
    join_rows,
    open_reader,
    verify_composite,
    verify_field,
    width,
)
from icaomrz.schemas.registry import Schema, register_schema

FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "name": TextRange(5, 44, 0),
    **DOCUMENT_ROW,
    "personal_number": TextRange(28, 42, 1),
    "personal_number_check": TextRange(42, 43, 1),
    "composite_check": TextRange(43, 44, 1),
}
COMPOSITE = (TextRange(0, 10, 1), TextRange(13, 20, 1), TextRange(21, 43, 1))


def decode(text: str) -> MrzRecord:
    reader = open_reader(text, Format.PASSPORT)
    return MrzRecord(
        **decode_header(reader),
        **decode_name(reader, FIELDS),
        **decode_document_fields(reader, FIELDS),
        personal_number=reader.parse_string(FIELDS["personal_number"]),
        valid_personal_number=verify_field(reader, FIELDS, "personal_number"),
        valid_composite=verify_composite(reader, FIELDS, COMPOSITE),
    )


def encode(record: MrzRecord) -> str:
    first = (
        document_prefix(record, "P")
        + to_mrz(record.issuing_country, width(FIELDS, "issuing_country"))
        + name_to_mrz(record.surname, record.given_names, width(FIELDS, "name"))
    )
    second = encode_document_row(record) + field_with_check(record.personal_number, width(FIELDS, "personal_number"))
    second += composite_char([first, second], COMPOSITE)
    return join_rows([first, second])


SCHEMA = register_schema(Schema(Format.PASSPORT, FIELDS, decode, encode))
