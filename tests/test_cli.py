import json

import pytest

from greatcircle.cli import main

MILAN = "45.465422,9.185924"
MINSK = "53.9,27.566667"


def test_distance_prints_value_and_units(capsys):
    assert main(["distance", "--from", MILAN, "--to", MINSK, "--precision", "2"]) == 0
    assert capsys.readouterr().out.strip() == "1600.0 km"


def test_distance_within(capsys):
    assert main(["distance", "--from", MILAN, "--to", MINSK, "--within", "1500"]) == 0
    assert capsys.readouterr().out.strip() == "false"

    assert main(["distance", "--from", MILAN, "--to", MINSK, "--within", "10000"]) == 0
    assert capsys.readouterr().out.strip() == "true"


def test_distance_json(capsys):
    assert main(["distance", "--from", MILAN, "--to", MINSK, "--units", "mi", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["units"] == "mi"
    assert 990 < data["distance"] < 1015


def test_negative_latitude_with_equals_form(capsys):
    assert main(["distance", "--from=-33.8688,151.2093", "--to=-33.8688,151.2093"]) == 0
    assert capsys.readouterr().out.strip() == "0.0 km"


def test_invalid_point_is_an_argparse_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["distance", "--from", "45.4", "--to", MINSK])
    assert exc.value.code == 2
    assert "expected LAT,LON" in capsys.readouterr().err


def test_unknown_unit_when_strict_exits_2(capsys, monkeypatch):
    monkeypatch.setenv("GREATCIRCLE_STRICT_UNITS", "1")
    assert main(["distance", "--from", MILAN, "--to", MINSK, "--units", "parsecs"]) == 2
    assert "parsecs" in capsys.readouterr().err


def test_units_listing(capsys):
    assert main(["units", "--json"]) == 0
    table = json.loads(capsys.readouterr().out)
    assert table["ft"] == pytest.approx(table["yd"] * 3)
