from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from icaomrz.models import Format, TextRange


class MrzError(Exception):
    """Base class for every error raised by icaomrz."""


class MrzParseError(MrzError):
    """Raised when MRZ text cannot be decoded.

    Carries the source text and the range of the offending characters so a
    caller can highlight them.
    """

    def __init__(
        self,
        message: str,
        source_text: str | None,
        text_range: "TextRange",
        fmt: Optional["Format"] = None,
    ):
        fmt_name = fmt.name if fmt is not None else None
        super().__init__(f"Failed to parse MRZ {fmt_name} {source_text} at {text_range}: {message}")
        self.message = message
        self.source_text = source_text
        self.range = text_range
        self.format = fmt


class UnrecognizedFormat(MrzParseError):
    """The text does not match the geometry of any known format."""


class InvalidFormat(MrzParseError):
    """The geometry matched but the document code or layout is invalid."""


class UnsupportedDocumentCode(InvalidFormat):
    """The document code is not one of the supported codes."""


class InvalidCharacter(MrzParseError):
    """A field contains a character outside of [0-9A-Z<]."""


class InvalidArgument(MrzError, ValueError):
    """Raised for malformed call parameters."""


class MrzNotFound(MrzError, LookupError):
    """Raised when no MRZ block can be located in the input."""

    def __init__(self, message: str = "Could not find a MRZ"):
        super().__init__(message)


__all__ = [
    "MrzError",
    "MrzParseError",
    "UnrecognizedFormat",
    "InvalidFormat",
    "UnsupportedDocumentCode",
    "InvalidCharacter",
    "InvalidArgument",
    "MrzNotFound",
]
