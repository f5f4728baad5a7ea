"""Slovak identity card of the 2x34 generation.

This layout has no composite check digit.
"""
from __future__ import annotations

from icaomrz.codec import name_to_mrz, to_mrz
from icaomrz.models import Format, MrzRecord, TextRange
from icaomrz.schemas.base import (
    DOCUMENT_ROW,
    ISSUING_COUNTRY,
    decode_document_fields,
    decode_header,
    decode_name,
    document_prefix,
    encode_document_row,
    join_rows,
    open_reader,
    width,
)
from icaomrz.schemas.registry import Schema, register_schema

FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "name": TextRange(5, 34, 0),
    **DOCUMENT_ROW,
    "optional": TextRange(28, 34, 1),
}


def decode(text: str) -> MrzRecord:
    reader = open_reader(text, Format.SLOVAK_ID)
    return MrzRecord(
        **decode_header(reader),
        **decode_name(reader, FIELDS),
        **decode_document_fields(reader, FIELDS),
        optional=reader.parse_string(FIELDS["optional"]),
    )


def encode(record: MrzRecord) -> str:
    first = (
        document_prefix(record, "I")
        + to_mrz(record.issuing_country, width(FIELDS, "issuing_country"))
        + name_to_mrz(record.surname, record.given_names, width(FIELDS, "name"))
    )
    second = encode_document_row(record) + to_mrz(record.optional, width(FIELDS, "optional"))
    return join_rows([first, second])


SCHEMA = register_schema(Schema(Format.SLOVAK_ID, FIELDS, decode, encode))
