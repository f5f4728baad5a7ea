"""TD2 travel document, 2 rows of 36 characters."""
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
    join_rows,
    open_reader,
    verify_composite,
    width,
)
from icaomrz.schemas.registry import Schema, register_schema

FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "name": TextRange(5, 36, 0),
    **DOCUMENT_ROW,
    "optional": TextRange(28, 35, 1),
    "composite_check": TextRange(35, 36, 1),
}
COMPOSITE = (TextRange(0, 10, 1), TextRange(13, 20, 1), TextRange(21, 35, 1))


def decode(text: str) -> MrzRecord:
    reader = open_reader(text, Format.TD2)
    return MrzRecord(
        **decode_header(reader),
        **decode_name(reader, FIELDS),
        **decode_document_fields(reader, FIELDS),
        optional=reader.parse_string(FIELDS["optional"]),
        valid_composite=verify_composite(reader, FIELDS, COMPOSITE),
    )


def encode(record: MrzRecord) -> str:
    first = (
        document_prefix(record, "I")
        + to_mrz(record.issuing_country, width(FIELDS, "issuing_country"))
        + name_to_mrz(record.surname, record.given_names, width(FIELDS, "name"))
    )
    second = encode_document_row(record) + to_mrz(record.optional, width(FIELDS, "optional"))
    second += composite_char([first, second], COMPOSITE)
    return join_rows([first, second])


SCHEMA = register_schema(Schema(Format.TD2, FIELDS, decode, encode))
