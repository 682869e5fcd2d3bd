import json
from pathlib import Path

import pytest

from skillradar.axis_store import AxisStore
from skillradar.exporter import ExportError, build_export, export_to_json, write_csv


def test_build_export_collects_chart_points_and_comment(sample_axes):
    store = AxisStore(sample_axes)

    result = build_export("Q3 review", store.snapshot())

    assert result.title == "Q3 review"
    assert result.average == "3.4"
    assert [p.subject for p in result.points] == ["Speed", "Accuracy", "Creativity", "Persistence", "Teamwork"]
    assert result.comment.startswith("[Summary]\n")


def test_build_export_fails_on_empty_profile():
    with pytest.raises(ExportError):
        build_export("Empty", ())


def test_write_csv_sections(tmp_path: Path):
    store = AxisStore([("Speed", 3.5), ("", 5)])
    out = tmp_path / "profile.csv"

    write_csv(build_export("Mine", store.snapshot()), out)

    content = out.read_text(encoding="utf-8").splitlines()
    assert content[0] == "[Profile]"
    assert content[1] == "title,Mine"
    assert content[2] == "average,4.3"
    assert content[4] == "[Axes]"
    assert content[5] == "Speed,3.5,5"
    assert content[6] == "Untitled,5,5"
    assert content[8] == "[Comment]"
    assert content[9] == "[Summary]"


def test_export_to_json_is_serializable():
    store = AxisStore([("Speed", 7)])
    payload = export_to_json(build_export("Solo", store.snapshot()))

    assert json.loads(json.dumps(payload)) == payload
    assert payload["axes"] == [{"subject": "Speed", "score": 5.0, "fullMark": 5.0}]
    assert payload["average"] == "5.0"
