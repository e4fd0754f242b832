# tests/test_cli.py

import json

import pytest

from fancal.cli import _parse_ymd, main


def test_parse_ymd():
    assert _parse_ymd("2024-02-29") == (2024, 1, 29)
    assert _parse_ymd("-44-3-15") == (-44, 2, 15)
    with pytest.raises(SystemExit):
        _parse_ymd("yesterday")


def test_validate_pattern(capsys):
    assert main(["validate-pattern", "400,!100,4"]) == 0
    assert capsys.readouterr().out.strip() == "valid"
    assert main(["validate-pattern", "4,x"]) == 1
    assert 'Invalid interval: "x"' in capsys.readouterr().out


def test_leap(capsys):
    assert main(["leap", "1896", "1912"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("gregorian: rule=gregorian")
    assert lines[-1] == "1896 1904 1908 1912"


def test_day_json(capsys):
    assert main(["day", "2024-02-29", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["is_leap_year"] is True
    assert out["days_in_month"] == 29
    assert out["point"]["day_of_month"] == 28


def test_day_shorthand(capsys):
    assert main(["1372-10-02", "--calendar", "harptos", "--attr", "festival"]) == 0
    out = capsys.readouterr().out
    assert "Midsummer" in out
    assert "Shieldmeet" in out


def test_day_from_file(tmp_path, capsys):
    path = tmp_path / "cal.json"
    path.write_text(json.dumps({"name": "filed", "months": [{"name": "Only", "days": 100}]}), encoding="utf-8")
    assert main(["day", "7-01-50", "--file", str(path)]) == 0
    assert "day 50 of 100" in capsys.readouterr().out


def test_list_and_info(capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out.split() == ["gregorian", "harptos", "twin_moons"]
    assert main(["info", "harptos"]) == 0
    assert json.loads(capsys.readouterr().out)["leap_rule"] == "simple"


def test_month_grid(capsys):
    assert main(["month", "--calendar", "harptos", "--year", "1372", "--month", "10"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("harptos  Midsummer 1372 DR")
    assert "(leap year)" in out
    assert "*Shiel" in out


def test_month_is_one_indexed(capsys):
    assert main(["month", "--year", "2024", "--month", "2"]) == 0
    assert capsys.readouterr().out.startswith("gregorian  February 2024 CE")
    with pytest.raises(SystemExit):
        main(["month", "--month", "0"])
    with pytest.raises(SystemExit):
        main(["month", "--month", "13"])
