from __future__ import annotations

import json

import pytest

from skillradar.cli import main as cli_main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    # config is read from pyproject.toml in the working directory
    monkeypatch.chdir(tmp_path)


def _run_cli(argv):
    return cli_main(argv)


def test_comment_from_tokens(capsys):
    code = _run_cli(["comment", "Speed=3", "Accuracy=4", "Creativity=3", "Persistence=4", "Teamwork=3"])
    captured = capsys.readouterr()

    assert code == 0
    assert captured.out.startswith("[Summary]\nThe average score is 3.4.")
    assert '"Accuracy" stands out as a strength (4)' in captured.out


def test_comment_with_no_axes_prints_nothing(capsys):
    code = _run_cli(["comment"])
    assert code == 0
    assert capsys.readouterr().out == ""


def test_comment_defaults_profile(capsys):
    code = _run_cli(["comment", "--defaults"])
    assert code == 0
    assert "・Teamwork: 3 (average)" in capsys.readouterr().out


def test_malformed_token_exits_2(capsys):
    code = _run_cli(["comment", "Speed"])
    captured = capsys.readouterr()
    assert code == 2
    assert "Label=value" in captured.err


def test_bad_profile_file_exits_2(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{oops", encoding="utf-8")

    code = _run_cli(["chart", "--from", str(bad)])

    assert code == 2
    assert "Invalid profile file" in capsys.readouterr().err


def test_chart_csv(capsys):
    code = _run_cli(["chart", "Speed=7", "=2"])
    lines = capsys.readouterr().out.splitlines()

    assert code == 0
    assert lines == ["subject,score,fullMark", "Speed,5,5", "Untitled,2,5"]


def test_chart_json_from_yaml_file(tmp_path, capsys):
    profile = tmp_path / "profile.yaml"
    profile.write_text("- label: Speed\n  value: -1\n- label: Accuracy\n  value: 4.5\n", encoding="utf-8")

    code = _run_cli(["chart", "--from", str(profile), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert payload == [
        {"subject": "Speed", "score": 0.0, "fullMark": 5.0},
        {"subject": "Accuracy", "score": 4.5, "fullMark": 5.0},
    ]


def test_config_override_changes_placeholder(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("placeholder_label: No name\n", encoding="utf-8")

    code = _run_cli(["chart", "--config", str(cfg), "=3"])

    assert code == 0
    assert "No name,3,5" in capsys.readouterr().out


def test_export_json_to_file(tmp_path):
    out = tmp_path / "export.json"

    code = _run_cli(["export", "--defaults", "--json", "--output", str(out)])
    payload = json.loads(out.read_text(encoding="utf-8"))

    assert code == 0
    assert payload["title"] == "My skill profile"
    assert payload["average"] == "3.4"
    assert len(payload["axes"]) == 5
    assert payload["comment"].startswith("[Summary]")


def test_export_csv_to_stdout(capsys):
    code = _run_cli(["export", "Speed=5"])
    out = capsys.readouterr().out.splitlines()

    assert code == 0
    assert out[0] == "[Profile]"
    assert "Speed,5,5" in out


def test_export_empty_profile_fails(capsys):
    code = _run_cli(["export"])
    assert code == 1
    assert "no axes" in capsys.readouterr().err


def test_non_utf8_profile_file_exits_2(tmp_path, capsys):
    profile = tmp_path / "latin1.json"
    profile.write_bytes(b'[{"label": "\xff", "value": 3}]')

    code = _run_cli(["comment", "--from", str(profile)])

    assert code == 2
    assert "Could not read profile" in capsys.readouterr().err
