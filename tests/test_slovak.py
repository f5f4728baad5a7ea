from icaomrz.models import DocumentCode, Format, MrzDate, MrzRecord, Sex
from icaomrz.parser import encode, parse
from icaomrz.schemas import slovak


def _record():
    return MrzRecord(
        format=Format.SLOVAK_ID,
        issuing_country="SVK",
        nationality="SVK",
        document_number="SP123456",
        date_of_birth=MrzDate(81, 10, 25),
        sex=Sex.FEMALE,
        expiration_date=MrzDate(25, 3, 1),
        surname="Nováková",
        given_names="Jana",
        optional="ABC",
    )


def test_encode_layout():
    rows = slovak.encode(_record()).split("\n")
    assert rows[-1] == ""
    assert [len(row) for row in rows[:-1]] == [34, 34]
    assert rows[0] == "I<SVKNOVAKOVA<<JANA<<<<<<<<<<<<<<<"
    assert rows[1].startswith("SP123456<")
    assert rows[1].endswith("ABC<<<")


def test_decode_encoded_card():
    r = parse(encode(_record()))
    assert r.format is Format.SLOVAK_ID
    assert r.code is DocumentCode.TYPE_I
    assert r.issuing_country == "SVK"
    assert r.document_number == "SP123456"
    assert r.surname == "NOVAKOVA"
    assert r.given_names == "JANA"
    assert r.date_of_birth == MrzDate(81, 10, 25)
    assert r.expiration_date == MrzDate(25, 3, 1)
    assert r.sex is Sex.FEMALE
    assert r.optional == "ABC"
    assert r.is_valid
