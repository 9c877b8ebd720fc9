import json

import pytest

from build_settings import (BuildSettingsError, collect_build_scenes, load_build_settings,
                            setup_build_settings)
from scene_selector import Setting


def test_dedup_keeps_first_occurrence_after_active():
    settings = [Setting("a", "S1"), Setting("b", "S2"), Setting("c", "S1"),
                Setting("d", "S3")]
    assert collect_build_scenes(settings, "active") == ["active", "S1", "S2", "S3"]


def test_unassigned_scenes_skipped():
    settings = [Setting("a", None), Setting("b", "S2")]
    assert collect_build_scenes(settings, "boot") == ["boot", "S2"]


def test_empty_settings_registers_active_only():
    assert collect_build_scenes([], "boot") == ["boot"]


def test_write_and_load(tmp_path):
    out = tmp_path / "build.json"
    paths = setup_build_settings([Setting("a", "S1"), Setting("b", "S1")], "boot", str(out))
    assert paths == ["boot", "S1"]

    data = json.loads(out.read_text())
    assert data["scenes"] == [{"path": "boot", "enabled": True},
                              {"path": "S1", "enabled": True}]
    assert load_build_settings(str(out)) == ["boot", "S1"]


def test_load_skips_disabled(tmp_path):
    out = tmp_path / "build.json"
    out.write_text(json.dumps({"scenes": [{"path": "a", "enabled": False},
                                          {"path": "b"}]}))
    assert load_build_settings(str(out)) == ["b"]


def test_missing_file_means_no_build_list(tmp_path):
    assert load_build_settings(str(tmp_path / "nope.json")) is None
    assert load_build_settings(None) is None


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"scenes": [{"enabled": True}]}),
    json.dumps(["boot"]),
])
def test_malformed_file_names_the_file(tmp_path, content):
    out = tmp_path / "build.json"
    out.write_text(content)
    with pytest.raises(BuildSettingsError, match="build.json"):
        load_build_settings(str(out))
