"""Tests for loading scene documents."""

import json

import pytest

from frame_timeline.frames import BlendWeightState, Frame, FrameSequence, MaterialState, ObjectState
from frame_timeline.scene_loader import SceneFormatError, load_scene, load_scene_file
from frame_timeline.timeline import generate_timelines


def test_load_scene_builds_hierarchy(scene_data):
    document = load_scene(scene_data)

    root = document.nodes["Avatar"]
    body = document.nodes["Avatar/Body"]
    assert root.is_root
    assert body.parent is root
    assert body.material_slots == ("Skin", "Cloth")
    assert document.sequence.owner is document.nodes["Avatar/Menu"]
    assert document.sequence.name == "Outfit"
    assert document.sequence.output_location == "Generated/Outfit"


def test_load_scene_builds_frames(scene_data):
    frames = load_scene(scene_data).sequence.frames

    assert len(frames) == 4
    assert frames[1] is None
    assert frames[0].objects[0].target.name == "Hat"
    assert frames[0].objects[0].active is True
    material = frames[3].materials[0]
    assert (material.slot_index, material.active_material) == (1, "Denim")
    assert material.resolved_base_material == "Cloth"
    assert frames[3].blend_weights[0].target_value == 80.0


def test_load_scene_builds_material_cycles(scene_data):
    cycles = load_scene(scene_data).material_cycles

    assert len(cycles) == 1
    assert cycles[0].materials == ("Red", "Green", "Blue")
    assert cycles[0].target.full_path == "Avatar/Body"


def test_intermediate_nodes_are_created():
    document = load_scene({"nodes": [{"path": "Avatar/Body/Jacket"}]})

    assert document.nodes["Avatar/Body/Jacket"].full_path == "Avatar/Body/Jacket"
    assert document.nodes["Avatar/Body"].children == [document.nodes["Avatar/Body/Jacket"]]


def test_unknown_target_becomes_missing(scene_data):
    scene_data["frames"] = [{"objects": [{"target": "Avatar/Nowhere"}]}]

    frame = load_scene(scene_data).sequence.frames[0]

    assert frame.objects[0].target is None
    assert not frame.has_valid_entry()


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({}, "needs a 'nodes' list"),
        ([], "must be a JSON object"),
        ({"nodes": [{"root": True}]}, "Node 0 needs a 'path'"),
        ({"nodes": [{"path": 5}]}, "Node 0 needs a 'path' string"),
        ({"nodes": [{"path": "Avatar", "material_slots": None}]}, "must be a list"),
        ({"nodes": [], "frames": ["oops"]}, "Frame 0 must be an object"),
        ({"nodes": [], "frames": [{"materials": [{"slot": "x"}]}]}, "Invalid entry in frame 0"),
        ({"nodes": [], "material_cycles": [{"target": "A"}]}, "needs a 'materials' list"),
    ],
)
def test_malformed_documents(data, message):
    with pytest.raises(SceneFormatError, match=message):
        load_scene(data)


def test_load_scene_file(tmp_path, scene_data):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(scene_data), encoding="utf-8")

    document = load_scene_file(str(path))

    assert len(document.sequence.frames) == 4


def test_load_scene_file_missing(tmp_path):
    with pytest.raises(SceneFormatError, match="not found"):
        load_scene_file(str(tmp_path / "missing.json"))


def test_load_scene_file_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SceneFormatError, match="Invalid JSON"):
        load_scene_file(str(path))


def test_loaded_scene_generates_same_bundle_as_hand_built(rig, scene_data):
    """Timelines depend on paths and values, not on which node objects were built."""
    hand_built = FrameSequence(
        frames=(
            Frame(objects=(ObjectState(rig.hat),)),
            None,
            Frame(objects=(ObjectState(rig.glasses),)),
            Frame(
                materials=(MaterialState(rig.body, 1, "Denim"),),
                blend_weights=(BlendWeightState(rig.body, "Smile", 80.0),),
            ),
        ),
        name="Outfit",
        output_location="Generated/Outfit",
        owner=rig.menu,
    )

    loaded = generate_timelines(load_scene(scene_data).sequence)

    assert loaded == generate_timelines(hand_built)
