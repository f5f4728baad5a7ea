import pytest

from icaomrz.errors import InvalidArgument, UnrecognizedFormat
from icaomrz.models import Format, MrzRecord
from icaomrz.parser import encode, parse
from icaomrz.schemas import get_schema, list_schemas
from tests.samples import CZECH_PASSPORT, FRENCH_ID, MRV_A_VISA, MRV_B_VISA, TD1_CARD, TD2_CARD


def test_every_format_has_a_schema():
    assert set(list_schemas()) == set(Format)
    assert get_schema(Format.TD2).fields["composite_check"].start == 35


@pytest.mark.parametrize(
    "text,fmt",
    [
        (CZECH_PASSPORT, Format.PASSPORT),
        (TD1_CARD, Format.TD1),
        (TD2_CARD, Format.TD2),
        (MRV_A_VISA, Format.MRV_A),
        (MRV_B_VISA, Format.MRV_B),
        (FRENCH_ID, Format.FRENCH_ID),
    ],
)
def test_parse_dispatches_by_format(text, fmt):
    assert parse(text).format is fmt


def test_parse_unknown_geometry():
    with pytest.raises(UnrecognizedFormat):
        parse("P<UTOERIKSSON")


def test_encode_needs_mandatory_fields():
    with pytest.raises(InvalidArgument):
        encode(MrzRecord(format=Format.PASSPORT, surname="ERIKSSON", given_names="ANNA"))
