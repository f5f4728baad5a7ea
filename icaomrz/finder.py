from __future__ import annotations

import logging
import re

from icaomrz.errors import MrzNotFound
from icaomrz.formats import detect

LOGGER = logging.getLogger(__name__)

# Document code, code or filler, issuing state (or D<< for Germany), rest of a 30-44 row.
MRZ_FIRST_LINE_RE = re.compile(r"[PVACI][A-Z0-9<](?:[A-Z]{3}|D<<)[A-Z0-9<]{25,39}")
MRZ_LINE_RE = re.compile(r"[A-Z0-9<]{30,44}")


def _extract_mrz(text: str) -> str:
    rows = []
    for line in text.split("\n"):
        candidate = line.strip()
        if rows:
            if not MRZ_LINE_RE.fullmatch(candidate):
                break
            rows.append(candidate)
        elif MRZ_FIRST_LINE_RE.fullmatch(candidate):
            rows.append(candidate)
    return "\n".join(rows)


def find_mrz(text: str | None) -> str:
    """Locates the MRZ block inside free-form text.

    Raises MrzNotFound when nothing MRZ-shaped is present. A block that looks
    like an MRZ but fails format detection raises the detection error.
    """
    if not text:
        raise MrzNotFound()
    mrz = _extract_mrz(text)
    if not mrz:
        raise MrzNotFound()
    LOGGER.debug("MRZ candidate with %s rows found", mrz.count("\n") + 1)
    detect(mrz)
    return mrz


__all__ = ["MRZ_FIRST_LINE_RE", "MRZ_LINE_RE", "find_mrz"]
