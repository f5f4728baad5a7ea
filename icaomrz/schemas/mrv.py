"""Machine readable visas: type A (2x44) and type B (2x36).

Neither layout carries a composite check digit, so ``valid_composite``
keeps its default.
"""
from __future__ import annotations

from typing import Dict

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
from icaomrz.schemas.registry import DecodeFunc, EncodeFunc, Schema, register_schema

MRV_A_FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "name": TextRange(5, 44, 0),
    **DOCUMENT_ROW,
    "optional": TextRange(28, 44, 1),
}
MRV_B_FIELDS = {
    "issuing_country": ISSUING_COUNTRY,
    "name": TextRange(5, 36, 0),
    **DOCUMENT_ROW,
    "optional": TextRange(28, 36, 1),
}


def _decoder(fmt: Format, fields: Dict[str, TextRange]) -> DecodeFunc:
    def decode(text: str) -> MrzRecord:
        reader = open_reader(text, fmt)
        return MrzRecord(
            **decode_header(reader),
            **decode_name(reader, fields),
            **decode_document_fields(reader, fields),
            optional=reader.parse_string(fields["optional"]),
        )

    return decode


def _encoder(fields: Dict[str, TextRange]) -> EncodeFunc:
    def encode(record: MrzRecord) -> str:
        first = (
            document_prefix(record, "V")
            + to_mrz(record.issuing_country, width(fields, "issuing_country"))
            + name_to_mrz(record.surname, record.given_names, width(fields, "name"))
        )
        second = encode_document_row(record, fields) + to_mrz(record.optional, width(fields, "optional"))
        return join_rows([first, second])

    return encode


decode_mrv_a = _decoder(Format.MRV_A, MRV_A_FIELDS)
encode_mrv_a = _encoder(MRV_A_FIELDS)
decode_mrv_b = _decoder(Format.MRV_B, MRV_B_FIELDS)
encode_mrv_b = _encoder(MRV_B_FIELDS)

MRV_A_SCHEMA = register_schema(Schema(Format.MRV_A, MRV_A_FIELDS, decode_mrv_a, encode_mrv_a))
MRV_B_SCHEMA = register_schema(Schema(Format.MRV_B, MRV_B_FIELDS, decode_mrv_b, encode_mrv_b))
