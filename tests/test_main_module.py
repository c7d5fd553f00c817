import logging
from datetime import timedelta

import pytest

from smartsleep import main, sleeping


def test_format_duration():
    assert main.format_duration(timedelta(milliseconds=1500)) == "1500"
    assert main.format_duration(timedelta(milliseconds=1500), "s") == "1.5"
    assert main.format_duration(timedelta(hours=1), "s") == "3600"
    with pytest.raises(ValueError):
        main.format_duration(timedelta(0), "h")


def test_parse_command_prints_milliseconds(capsys):
    assert main.main(["parse", "1h2m3s", "1.5s", "0h0m0s"]) == main.EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out == ["1h2m3s\t3723000", "1.5s\t1500", "0h0m0s\t0"]


def test_parse_command_prints_seconds(capsys):
    assert main.main(["parse", "2s500ms", "--unit", "s"]) == main.EXIT_OK
    assert capsys.readouterr().out.strip() == "2s500ms\t2.5"


def test_parse_command_reports_invalid_duration(capsys):
    assert main.main(["parse", "abc"]) == main.EXIT_INVALID
    err = capsys.readouterr().err
    assert "[error] Invalid duration format: 'abc'" in err


def test_wait_command(sleep_calls):
    assert main.main(["wait", "2s"]) == main.EXIT_OK
    assert main.main(["wait", "0"]) == main.EXIT_OK
    assert main.main(["wait", "-50"]) == main.EXIT_OK
    assert sleep_calls == [2.0]


def test_wait_command_invalid(sleep_calls, capsys):
    assert main.main(["wait", "tomorrow"]) == main.EXIT_INVALID
    assert "tomorrow" in capsys.readouterr().err
    assert sleep_calls == []


def test_wait_command_interrupted(monkeypatch, capsys):
    def interrupted(seconds):
        raise KeyboardInterrupt

    monkeypatch.setattr(sleeping.time, "sleep", interrupted)
    assert main.main(["wait", "1m"]) == main.EXIT_INTERRUPTED
    assert "[interrupt]" in capsys.readouterr().err


def test_verbose_logs_resolution(sleep_calls, caplog):
    caplog.set_level(logging.DEBUG, logger="smartsleep")
    assert main.main(["wait", "1.5s", "--verbose"]) == main.EXIT_OK
    assert "fractional" in caplog.text
    assert "sleeping for" in caplog.text
