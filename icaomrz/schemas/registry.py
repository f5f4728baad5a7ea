from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Mapping

from icaomrz.errors import InvalidArgument
from icaomrz.models import Format, MrzRecord, TextRange

DecodeFunc = Callable[[str], MrzRecord]
EncodeFunc = Callable[[MrzRecord], str]


@dataclass(frozen=True)
class Schema:
    format: Format
    fields: Mapping[str, TextRange]
    decode: DecodeFunc
    encode: EncodeFunc


_REGISTRY: Dict[Format, Schema] = {}


def register_schema(schema: Schema) -> Schema:
    _REGISTRY[schema.format] = schema
    return schema


def get_schema(fmt: Format) -> Schema:
    try:
        return _REGISTRY[fmt]
    except KeyError as exc:
        raise InvalidArgument(f"No schema registered for format: {fmt}") from exc


def list_schemas() -> Dict[Format, Schema]:
    return dict(_REGISTRY)


__all__ = ["DecodeFunc", "EncodeFunc", "Schema", "register_schema", "get_schema", "list_schemas"]
