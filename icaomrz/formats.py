from __future__ import annotations

from typing import Dict, List

from icaomrz.errors import UnrecognizedFormat
from icaomrz.models import Format, TextRange


def split_rows(text: str | None) -> List[str]:
    rows = (text or "").split("\n")
    while len(rows) > 1 and rows[-1] == "":
        rows.pop()
    return rows


def detect(text: str | None) -> Format:
    """Classifies MRZ text by its row count, row width and leading characters."""
    rows = split_rows(text)
    cols = len(rows[0])
    for idx, row in enumerate(rows[1:], start=1):
        if len(row) != cols:
            raise UnrecognizedFormat(
                f"Different row lengths: 0: {cols} and {idx}: {len(row)}",
                text,
                TextRange(0, 0, 0),
            )
    for fmt in Format:
        if fmt.matches(rows):
            return fmt
    raise UnrecognizedFormat(
        f"Unknown format / unsupported number of cols/rows: {cols}/{len(rows)}",
        text,
        TextRange(0, 0, 0),
    )


def list_formats() -> Dict[str, Dict[str, object]]:
    return {
        fmt.label: {"rows": fmt.rows, "columns": fmt.columns, "prefix": fmt.prefix}
        for fmt in Format
    }


__all__ = ["split_rows", "detect", "list_formats"]
