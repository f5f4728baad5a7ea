import json

from typer.testing import CliRunner

from icaomrz.cli import EXIT_ERROR, EXIT_INVALID, app
from icaomrz.parser import parse
from tests.samples import GERMAN_PASSPORT, SLOVAK_PASSPORT, TD2_CARD, UK_PASSPORT, pad

runner = CliRunner()


def test_formats_listing():
    result = runner.invoke(app, ["formats"])
    assert result.exit_code == 0
    assert "td1\t3x30" in result.output
    assert "passport\t2x44" in result.output


def test_parse_prints_json(write_file):
    result = runner.invoke(app, ["parse", str(write_file("td2.txt", TD2_CARD))])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["format"] == "td2"
    assert data["surname"] == "STEVENSON"
    assert data["date_of_birth"]["mrz"] == "340712"


def test_parse_strict_flags_bad_check_digits(write_file):
    path = write_file("de.txt", GERMAN_PASSPORT)
    assert runner.invoke(app, ["parse", str(path)]).exit_code == 0
    assert runner.invoke(app, ["parse", "--strict", str(path)]).exit_code == EXIT_INVALID


def test_parse_with_find(write_file):
    path = write_file("scan.txt", "Scanned page\n\n" + SLOVAK_PASSPORT + "end\n")
    result = runner.invoke(app, ["parse", "--find", str(path)])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["personal_number"] == "749313"


def test_parse_error_marks_the_column(write_file):
    text = pad("P<UTOERIKSSONa", 44) + "\n" + "<" * 44
    result = runner.invoke(app, ["parse", str(write_file("bad.txt", text))])
    assert result.exit_code == EXIT_ERROR
    assert "Invalid character in MRZ record: a" in result.output
    assert "\n" + " " * 13 + "^\n" in result.output


def test_find(write_file):
    result = runner.invoke(app, ["find", str(write_file("scan.txt", "xx\n" + SLOVAK_PASSPORT + "ZZ"))])
    assert result.exit_code == 0
    assert result.stdout == SLOVAK_PASSPORT


def test_find_without_mrz(write_file):
    result = runner.invoke(app, ["find", str(write_file("empty.txt", "nothing here"))])
    assert result.exit_code == EXIT_ERROR
    assert "Could not find a MRZ" in result.output


def test_encode_from_parse_output(write_file):
    parsed = runner.invoke(app, ["parse", str(write_file("td2.txt", TD2_CARD))])
    result = runner.invoke(app, ["encode", str(write_file("td2.json", parsed.stdout))])
    assert result.exit_code == 0
    assert result.stdout == TD2_CARD + "\n"


def test_encode_reports_missing_fields(write_file):
    path = write_file("rec.json", json.dumps({"format": "passport", "surname": "X"}))
    result = runner.invoke(app, ["encode", str(path)])
    assert result.exit_code == EXIT_ERROR


def test_check_digit():
    result = runner.invoke(app, ["check-digit", "520727"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "3"
    assert runner.invoke(app, ["check-digit", "52a727"]).exit_code == EXIT_ERROR


def test_encode_keeps_garbled_dates(write_file):
    garbled = UK_PASSPORT.replace("GBR8809117F", "GBRBB09117F")
    parsed = runner.invoke(app, ["parse", str(write_file("uk.txt", garbled))])
    assert parsed.exit_code == 0
    result = runner.invoke(app, ["encode", str(write_file("uk.json", parsed.stdout))])
    assert result.exit_code == 0
    assert "GBRBB0911" in result.stdout
    assert parse(result.stdout).date_of_birth.to_mrz() == "BB0911"
