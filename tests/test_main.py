"""
Test the daynav command line.

Output format: one line, ISO 8601 result followed by the short weekday label.
Invalid input is logged and exits with status 2.
"""

from __future__ import annotations

import pytest

from daynav.main import main


def _run(capsys, *argv: str) -> str:
    main(list(argv))
    return capsys.readouterr().out.strip()


def test_previous_monday(clean_env, capsys):
    assert _run(capsys, "previous", "monday", "--date", "2024-04-15") == "2024-04-08T00:00:00 (Mon)"


def test_next_numeric_weekday(clean_env, capsys):
    # 4 == Friday
    assert _run(capsys, "next", "4", "--date", "2024-04-15T08:30") == "2024-04-19T08:30:00 (Fri)"


def test_end_boundary(clean_env, capsys):
    out = _run(capsys, "previous", "sun", "--date", "2024-04-15", "--boundary", "end")

    assert out == "2024-04-14T23:59:59.999999 (Sun)"


def test_timezone_start_of_next_monday(clean_env, capsys):
    # Etc/GMT+5 is UTC-5; UTC 02:00 Monday is still Sunday there
    out = _run(
        capsys,
        "next",
        "monday",
        "--date",
        "2024-04-15T02:00:00+00:00",
        "--boundary",
        "start",
        "--tz",
        "Etc/GMT+5",
    )

    assert out == "2024-04-15T05:00:00+00:00 (Mon)"


def test_default_timezone_from_environment(clean_env, monkeypatch, capsys):
    monkeypatch.setenv("DEFAULT_TIMEZONE", "Etc/GMT+5")

    out = _run(capsys, "next", "monday", "--date", "2024-04-15T02:00", "--boundary", "start")

    assert out == "2024-04-15T05:00:00+00:00 (Mon)"


def test_output_settings_from_yaml(clean_env, capsys):
    (clean_env / "configuration.yaml").write_text(
        "output:\n  show_weekday_label: false\n  timespec: minutes\n", encoding="utf-8"
    )

    assert _run(capsys, "next", "wed", "--date", "2024-04-15T09:15:42") == "2024-04-17T09:15"


@pytest.mark.parametrize(
    "argv",
    [
        ["next", "funday", "--date", "2024-04-15"],
        ["next", "9", "--date", "2024-04-15"],
        ["next", "monday", "--date", "15/04/2024"],
        ["next", "monday", "--date", "2024-04-15T02:00", "--tz", "Mars/Olympus_Mons"],
    ],
)
def test_bad_input_exits_with_status_2(clean_env, capsys, argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_unknown_direction_is_an_argparse_error(clean_env):
    with pytest.raises(SystemExit) as excinfo:
        main(["sideways", "monday"])

    assert excinfo.value.code == 2


@pytest.mark.parametrize(
    "yaml_text",
    [
        "output: [unclosed\n",
        "- just\n- a list\n",
        "output:\n  timespec: fortnights\n",
    ],
)
def test_bad_configuration_exits_with_status_2(clean_env, capsys, yaml_text):
    (clean_env / "configuration.yaml").write_text(yaml_text, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["next", "monday", "--date", "2024-04-15"])

    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_invalid_env_setting_exits_with_status_2(clean_env, monkeypatch, capsys):
    monkeypatch.setenv("ENV", "staging")

    with pytest.raises(SystemExit) as excinfo:
        main(["next", "monday", "--date", "2024-04-15"])

    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""
