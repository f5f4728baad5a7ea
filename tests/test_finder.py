import pytest

from icaomrz.errors import MrzNotFound, MrzParseError
from icaomrz.finder import find_mrz
from tests.samples import FRENCH_ID, MRV_B_VISA

VALID_MRZ = "I<SVKNOVAK<<JAN<<<<<<<<<<<<<<<<<<<<<<<<<<<<<\n123456<AA5SVK8110251M1801020749313<<<<<<<<70"
INVALID_MRZ = "I<SVKNOVAK<<JAN<<<<<<<<<<<<<<<<<<<<<<<<<<<<<\n123456"


def test_find_valid_mrz():
    assert find_mrz(VALID_MRZ) == VALID_MRZ


def test_find_wrapped_mrz():
    assert find_mrz("xx\n\nyyy\n" + VALID_MRZ + "\nZZZZ") == VALID_MRZ


def test_find_strips_indentation():
    indented = "\n".join("   " + row + "  " for row in VALID_MRZ.split("\n"))
    assert find_mrz("Passport scan\n" + indented + "\n") == VALID_MRZ


@pytest.mark.parametrize("sample", [FRENCH_ID, MRV_B_VISA])
def test_find_other_layouts(sample):
    assert find_mrz("header\n" + sample + "footer") == sample.rstrip("\n")


def test_invalid_mrz_raises_parse_error():
    with pytest.raises(MrzParseError):
        find_mrz(INVALID_MRZ)
    with pytest.raises(MrzParseError):
        find_mrz("XX\nAZ09<\nYYY\n" + INVALID_MRZ + "\nAZ09<\nZZZZ")


@pytest.mark.parametrize("text", [None, "", "AZ09<\n\nBBB\n\nAZ09<\nCCCCC"])
def test_missing_mrz(text):
    with pytest.raises(MrzNotFound):
        find_mrz(text)
