import json

import pytest

from skillradar import api
from skillradar.axis_store import counter_id_factory
from skillradar.config import AppConfig


def test_parse_axis_token_splits_on_last_equals():
    assert api.parse_axis_token("Speed=3") == ("Speed", "3")
    assert api.parse_axis_token("a=b=4") == ("a=b", "4")
    assert api.parse_axis_token("=2") == ("", "2")


def test_parse_axis_token_rejects_missing_value():
    with pytest.raises(api.ProfileLoadError):
        api.parse_axis_token("Speed")


def test_load_profile_from_json_list(tmp_path):
    path = tmp_path / "axes.json"
    path.write_text(json.dumps([{"label": "Speed", "value": 3}, {"value": "4"}]), encoding="utf-8")

    profile = api.load_profile(path)

    assert profile.title is None
    assert profile.axes == [("Speed", 3), ("", "4")]


def test_load_profile_from_yaml_object(tmp_path):
    path = tmp_path / "profile.yaml"
    path.write_text("title: Mine\naxes:\n  - label: Speed\n    value: 2\n", encoding="utf-8")

    profile = api.load_profile(path)

    assert profile.title == "Mine"
    assert profile.axes == [("Speed", 2)]


@pytest.mark.parametrize("text", ["{not json", '"just a string"', '{"axes": 3}', "[1, 2]"])
def test_load_profile_rejects_bad_files(tmp_path, text):
    path = tmp_path / "bad.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(api.ProfileLoadError):
        api.load_profile(path)


def test_load_profile_missing_file(tmp_path):
    with pytest.raises(api.ProfileLoadError):
        api.load_profile(tmp_path / "missing.json")


def test_collect_profile_orders_defaults_file_then_tokens(tmp_path):
    path = tmp_path / "axes.json"
    path.write_text(json.dumps({"title": "From file", "axes": [{"label": "File", "value": 1}]}), encoding="utf-8")

    profile = api.collect_profile(["Token=2"], from_path=path, use_defaults=True)

    assert profile.title == "From file"
    assert [label for label, _ in profile.axes] == [
        "Speed", "Accuracy", "Creativity", "Persistence", "Teamwork", "File", "Token",
    ]


def test_store_from_profile_uses_config_defaults():
    cfg = AppConfig(new_axis_label="Skill", new_axis_value=2)
    profile = api.collect_profile(["Speed=9"], app_config=cfg)

    store = api.store_from_profile(profile, app_config=cfg, id_factory=counter_id_factory())

    assert store.get("axis-1").value == 5
    assert store.add().label == "Skill"


def test_comment_for_raw_pairs():
    assert api.comment_for([]) == ""
    assert "・Speed: 5 (excellent)" in api.comment_for([("Speed", "5")])


def test_load_profile_rejects_non_utf8_bytes(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_bytes(b"- label: \xff\n  value: 1\n")
    with pytest.raises(api.ProfileLoadError):
        api.load_profile(path)
