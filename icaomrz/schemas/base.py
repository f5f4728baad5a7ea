from __future__ import annotations

from typing import Dict, List, Mapping, Sequence

from icaomrz.checkdigit import check_digit_char
from icaomrz.codec import MrzReader, to_mrz
from icaomrz.errors import InvalidArgument, InvalidFormat
from icaomrz.models import DocumentCode, Format, MrzDate, MrzRecord, TextRange

ISSUING_COUNTRY = TextRange(2, 5, 0)

# Second row shared by TD2, TD3, both visas and the Slovak card.
DOCUMENT_ROW: Dict[str, TextRange] = {
    "document_number": TextRange(0, 9, 1),
    "document_number_check": TextRange(9, 10, 1),
    "nationality": TextRange(10, 13, 1),
    "date_of_birth": TextRange(13, 19, 1),
    "date_of_birth_check": TextRange(19, 20, 1),
    "sex": TextRange(20, 21, 1),
    "expiration_date": TextRange(21, 27, 1),
    "expiration_date_check": TextRange(27, 28, 1),
}


def open_reader(text: str, fmt: Format) -> MrzReader:
    reader = MrzReader(text)
    if reader.format is not fmt:
        raise InvalidFormat(f"invalid format: {reader.format.name}", text, TextRange(0, 0, 0), fmt)
    return reader


def decode_header(reader: MrzReader) -> Dict[str, object]:
    return {
        "format": reader.format,
        "code": DocumentCode.parse(reader.text),
        "code1": reader.rows[0][0],
        "code2": reader.rows[0][1],
        "issuing_country": reader.parse_string(ISSUING_COUNTRY),
    }


def verify_field(reader: MrzReader, fields: Mapping[str, TextRange], name: str) -> bool:
    """Checks ``fields[name]`` against the digit at ``fields[name + "_check"]``."""
    at = fields[f"{name}_check"]
    return reader.check_digit(at.start, at.row, fields[name], name.replace("_", " "))


def verify_composite(reader: MrzReader, fields: Mapping[str, TextRange], ranges: Sequence[TextRange]) -> bool:
    at = fields["composite_check"]
    return reader.check_digit(at.start, at.row, reader.raw_value(*ranges), "composite")


def decode_date(reader: MrzReader, fields: Mapping[str, TextRange], name: str):
    value = reader.parse_date(fields[name])
    return value, verify_field(reader, fields, name) and value.is_valid


def decode_document_fields(reader: MrzReader, fields: Mapping[str, TextRange]) -> Dict[str, object]:
    date_of_birth, valid_dob = decode_date(reader, fields, "date_of_birth")
    expiration_date, valid_expiry = decode_date(reader, fields, "expiration_date")
    sex_at = fields["sex"]
    return {
        "document_number": reader.parse_string(fields["document_number"]),
        "valid_document_number": verify_field(reader, fields, "document_number"),
        "nationality": reader.parse_string(fields["nationality"]),
        "date_of_birth": date_of_birth,
        "valid_date_of_birth": valid_dob,
        "sex": reader.parse_sex(sex_at.start, sex_at.row),
        "expiration_date": expiration_date,
        "valid_expiration_date": valid_expiry,
    }


def decode_name(reader: MrzReader, fields: Mapping[str, TextRange]) -> Dict[str, str]:
    surname, given_names = reader.parse_name(fields["name"])
    return {"surname": surname, "given_names": given_names}


def document_prefix(record: MrzRecord, default_code1: str, default_code2: str = "<") -> str:
    return to_mrz(record.code1 or default_code1, 1) + to_mrz(record.code2 or default_code2, 1)


def require(record: MrzRecord, *names: str) -> None:
    missing = [name for name in names if getattr(record, name) is None]
    if missing:
        raise InvalidArgument(f"Cannot encode {record.format.label}: missing {', '.join(missing)}")


def width(fields: Mapping[str, TextRange], name: str) -> int:
    return fields[name].length


def field_with_check(value: str | None, length: int) -> str:
    text = to_mrz(value, length)
    return text + check_digit_char(text)


def date_with_check(value: MrzDate) -> str:
    text = value.to_mrz()
    return text + check_digit_char(text)


def encode_document_row(record: MrzRecord, fields: Mapping[str, TextRange] = DOCUMENT_ROW) -> str:
    require(record, "date_of_birth", "sex", "expiration_date")
    return (
        field_with_check(record.document_number, width(fields, "document_number"))
        + to_mrz(record.nationality, width(fields, "nationality"))
        + date_with_check(record.date_of_birth)
        + record.sex.mrz
        + date_with_check(record.expiration_date)
    )


def composite_char(rows: Sequence[str], ranges: Sequence[TextRange]) -> str:
    return check_digit_char("".join(rows[r.row][r.start : r.end] for r in ranges))


def join_rows(rows: List[str]) -> str:
    return "".join(f"{row}\n" for row in rows)


__all__ = [
    "ISSUING_COUNTRY",
    "DOCUMENT_ROW",
    "open_reader",
    "decode_header",
    "verify_field",
    "verify_composite",
    "decode_date",
    "decode_document_fields",
    "decode_name",
    "document_prefix",
    "require",
    "width",
    "field_with_check",
    "date_with_check",
    "encode_document_row",
    "composite_char",
    "join_rows",
]
