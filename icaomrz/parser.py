from __future__ import annotations

from icaomrz.formats import detect
from icaomrz.models import MrzRecord
from icaomrz.schemas import get_schema


def parse(text: str) -> MrzRecord:
    """Decodes MRZ text into a record of whichever format it matches."""
    return get_schema(detect(text)).decode(text)


def encode(record: MrzRecord) -> str:
    """Serializes a record into MRZ rows, each terminated by a line break."""
    return get_schema(record.format).encode(record)


__all__ = ["parse", "encode"]
