import pytest

from icaomrz.errors import InvalidArgument, InvalidFormat
from icaomrz.models import DocumentCode, Format, MrzDate, MrzRecord, Sex
from icaomrz.parser import parse
from icaomrz.schemas import td1
from tests.samples import TD1_CARD, TD2_CARD


def test_decode():
    r = parse(TD1_CARD)
    assert r.format is Format.TD1
    assert r.code is DocumentCode.TYPE_C
    assert (r.code1, r.code2) == ("C", "I")
    assert r.issuing_country == "UTO"
    assert r.nationality == "UTO"
    assert r.document_number == "D23145890"
    assert r.optional == "A123X5328434D23"
    assert r.optional2 == ""
    assert r.expiration_date == MrzDate(95, 7, 12)
    assert r.date_of_birth == MrzDate(34, 7, 12)
    assert r.sex is Sex.MALE
    assert r.surname == "STEVENSON"
    assert r.given_names == "PETER"
    assert r.is_valid


def test_encode():
    record = MrzRecord(
        format=Format.TD1,
        code1="C",
        code2="I",
        issuing_country="UTO",
        nationality="UTO",
        document_number="D23145890",
        optional="A123X5328434D23",
        optional2="",
        expiration_date=MrzDate(95, 7, 12),
        date_of_birth=MrzDate(34, 7, 12),
        sex=Sex.MALE,
        surname="Stevenson",
        given_names="Peter",
    )
    assert td1.encode(record) == TD1_CARD


def test_composite_mismatch_is_flagged():
    tampered = TD1_CARD.replace("UTO<<<<<<<<<<<6", "UTO<<<<<<<<<<<5")
    assert not parse(tampered).valid_composite


def test_encode_requires_dates():
    with pytest.raises(InvalidArgument):
        td1.encode(MrzRecord(format=Format.TD1, surname="A", given_names="B", sex=Sex.MALE))


def test_decode_rejects_other_layouts():
    with pytest.raises(InvalidFormat):
        td1.decode(TD2_CARD)


def test_encoded_record_decodes_to_itself():
    record = MrzRecord(
        format=Format.TD1,
        code=DocumentCode.TYPE_I,
        code1="I",
        code2="<",
        issuing_country="UTO",
        document_number="D23145890",
        optional="",
        optional2="",
        date_of_birth=MrzDate(34, 7, 12),
        sex=Sex.FEMALE,
        expiration_date=MrzDate(95, 7, 12),
        nationality="UTO",
        surname="STEVENSON",
        given_names="ANNA MARIA",
    )
    assert parse(td1.encode(record)) == record
