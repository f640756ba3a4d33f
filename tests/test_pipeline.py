"""Tests for configuration and the generate-then-export pipeline."""

import json

import pytest

from frame_timeline.config import TimelineConfig
from frame_timeline.scene_loader import load_scene
from frame_timeline.timeline import GenerationMode
from frame_timeline.timeline_pipeline import build_bundles, export_bundles


def test_config_defaults():
    config = TimelineConfig()

    assert (config.total_steps, config.frame_rate) == (255, 60.0)
    assert config.duration == pytest.approx(4.25)
    assert config.step_to_seconds(300) == pytest.approx(4.25)


@pytest.mark.parametrize(
    "kwargs",
    [{"total_steps": 0}, {"frame_rate": 0.0}, {"frame_rate": -1.0}, {"epsilon": 0.0}],
)
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        TimelineConfig(**kwargs)


def test_config_from_env():
    config = TimelineConfig.from_env(
        {"FRAME_TIMELINE_TOTAL_STEPS": "120", "FRAME_TIMELINE_FRAME_RATE": "30"}
    )

    assert (config.total_steps, config.frame_rate) == (120, 30.0)
    assert TimelineConfig.from_env({}) == TimelineConfig()


def test_config_from_env_rejects_garbage():
    with pytest.raises(ValueError, match="FRAME_TIMELINE_TOTAL_STEPS"):
        TimelineConfig.from_env({"FRAME_TIMELINE_TOTAL_STEPS": "lots"})


def test_build_bundles_for_frames_and_cycles(scene_data):
    bundles = build_bundles(load_scene(scene_data), TimelineConfig())

    assert [bundle.mode for bundle in bundles] == [
        GenerationMode.LINEAR,
        GenerationMode.MATERIAL_CYCLE,
    ]
    assert bundles[0].names == ("Outfit_lin",)
    assert bundles[1].names == ("Outfit_materials_lin",)
    assert bundles[1].output_location == "Generated/Outfit"


def test_build_bundles_name_override(scene_data):
    del scene_data["material_cycles"]

    bundles = build_bundles(load_scene(scene_data), TimelineConfig(), name="Look")

    assert len(bundles) == 1
    assert bundles[0].names == ("Look_lin",)


def test_build_bundles_cycles_only(scene_data):
    del scene_data["frames"]

    bundles = build_bundles(load_scene(scene_data), TimelineConfig())

    assert [bundle.names for bundle in bundles] == [("Outfit_materials_lin",)]


def test_export_bundles_writes_every_timeline(tmp_path, scene_data):
    bundles = build_bundles(load_scene(scene_data), TimelineConfig())

    written = export_bundles(bundles, "json", str(tmp_path))

    assert [path.name for path in written] == ["Outfit_lin.json", "Outfit_materials_lin.json"]
    document = json.loads(written[0].read_text(encoding="utf-8"))
    assert document["name"] == "Outfit_lin"


def test_build_bundles_null_frames_still_generate_cycles(scene_data):
    scene_data["frames"] = [None]

    bundles = build_bundles(load_scene(scene_data), TimelineConfig())

    assert [bundle.names for bundle in bundles] == [("Outfit_materials_lin",)]
