# tests/test_cli.py

import logging

import pytest
from rich.logging import RichHandler

from polycal import api, cli


@pytest.fixture(autouse=True)
def clean_root_logger(monkeypatch):
    for key in ("POLYCAL_MAX_SEARCH_STEPS", "POLYCAL_WEEK_STARTS_ON", "POLYCAL_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    level = root.level
    registry = api._registry
    yield
    api.set_registry(registry)
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    root.setLevel(level)


def run(capsys, *argv):
    rc = cli.main(list(argv))
    out, err = capsys.readouterr()
    return rc, out, err


def test_convert(capsys):
    rc, out, _ = run(capsys, "--no-color", "convert", "2000-01-01", "--to", "hebrew")
    assert rc == 0
    assert "hebrew: 5760-10-23" in out
    assert "Saturday, Tevet 23, 5760 AM" in out


def test_convert_unknown_calendar_exits_1(capsys):
    rc, out, err = run(capsys, "--no-color", "convert", "2000-01-01", "--to", "klingon")
    assert rc == 1
    assert out == ""
    assert "Unknown calendar" in err


def test_label(capsys):
    rc, out, _ = run(capsys, "label", "2000-01-01", "--range", "month", "--calendar", "islamic")
    assert rc == 0
    assert out.strip() == "Ramadan 1420 AH"


def test_label_bounds_and_week_start(capsys):
    rc, out, _ = run(capsys, "label", "2000-01-01", "--range", "week", "--week-starts-on", "1", "--bounds")
    assert rc == 0
    lines = out.splitlines()
    assert lines[0] == "Week of Dec 27, 1999"
    assert "1999-12-27 .. 2000-01-02" in lines[1]


def test_label_week_start_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("POLYCAL_WEEK_STARTS_ON", "6")
    rc, out, _ = run(capsys, "label", "2000-01-01", "--range", "week")
    assert rc == 0
    assert out.strip() == "Week of Jan 1, 2000"


def test_bad_environment_exits_1(capsys, monkeypatch):
    monkeypatch.setenv("POLYCAL_MAX_SEARCH_STEPS", "lots")
    rc, _, err = run(capsys, "list")
    assert rc == 1
    assert "POLYCAL_MAX_SEARCH_STEPS" in err


def test_list(capsys):
    rc, out, _ = run(capsys, "list")
    assert rc == 0
    lines = out.splitlines()
    assert len(lines) == 17
    assert lines[0].startswith("gregorian")
    rc, out, _ = run(capsys, "list", "-v")
    assert "valid" in out


def test_jdn_and_back(capsys):
    rc, out, _ = run(capsys, "jdn", "2000-01-01")
    assert (rc, out.strip()) == (0, "2451545")
    rc, out, _ = run(capsys, "from-jdn", "2451545", "--calendar", "mayan-longcount")
    assert rc == 0
    assert "mayan-longcount: 12-19-6  uinal=15 kin=2" in out


def test_bad_date_exits_1(capsys):
    rc, _, err = run(capsys, "jdn", "2000-02-30")
    assert rc == 1
    assert "day out of range" in err


def test_usage_errors_exit_2(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["label"])
    assert exc.value.code == 2
    with pytest.raises(SystemExit) as exc:
        cli.main(["frobnicate"])
    assert exc.value.code == 2


def test_month_grid(capsys):
    rc, out, _ = run(capsys, "month", "5784", "7", "--calendar", "hebrew")
    assert rc == 0
    assert out.startswith("Hebrew (Jewish)  Tishrei 5784")
    assert "09-16" in out  # 1 Tishrei 5784 = 2023-09-16


def test_seasons(capsys):
    rc, out, _ = run(capsys, "seasons", "2024")
    assert rc == 0
    assert "March equinox      2024-03-20" in out
    assert "December solstice  2024-12-21" in out


def test_astronomy_tools(capsys):
    rc, out, _ = run(capsys, "astro-args", "--jd-tt", "2448724.5")
    assert rc == 0
    assert "L'     = 134.29018" in out
    rc, out, _ = run(capsys, "solar", "--longitude", "51.42")
    assert rc == 0
    assert "apparent noon" in out
    rc, out, _ = run(capsys, "lunar")
    assert rc == 0
    assert "next new moon" in out


def test_diag_round_trip(capsys):
    rc, out, _ = run(capsys, "diag", "round-trip", "--samples", "20", "--calendar", "hebrew", "--calendar", "islamic")
    assert rc == 0
    assert "hebrew" in out and "ok" in out


def test_debug_flag_installs_debug_handler(capsys):
    rc, _, _ = run(capsys, "--debug", "--no-color", "jdn", "2000-01-01")
    assert rc == 0
    rich = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert len(rich) == 1
    assert rich[0].level == logging.DEBUG


def test_log_level_flag(capsys):
    run(capsys, "--log-level", "error", "jdn", "2000-01-01")
    rich = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert rich[0].level == logging.ERROR


def test_search_cap_from_environment_reaches_the_converters(capsys, monkeypatch):
    monkeypatch.setenv("POLYCAL_MAX_SEARCH_STEPS", "0")
    rc, out, err = run(capsys, "--no-color", "convert", "2024-03-20", "--to", "hebrew")
    assert rc == 1
    assert out == ""
    assert "did not converge" in err


def test_week_start_out_of_range_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["label", "2000-01-01", "--range", "week", "--week-starts-on", "9"])
    assert exc.value.code == 2
