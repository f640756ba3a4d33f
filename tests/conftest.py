"""Shared fixtures: a small avatar hierarchy."""

from types import SimpleNamespace

import pytest

from frame_timeline.scene import SceneNode


@pytest.fixture
def rig() -> SimpleNamespace:
    """
    Avatar (root)
    ├── Body      slots: Skin, Cloth
    ├── Hat
    ├── Glasses
    └── Menu      owner of the frame sequence
    """
    root = SceneNode("Avatar", is_root=True)
    body = root.add_child("Body", material_slots=("Skin", "Cloth"))
    hat = root.add_child("Hat")
    glasses = root.add_child("Glasses")
    menu = root.add_child("Menu")
    stray = SceneNode("Stray")
    return SimpleNamespace(root=root, body=body, hat=hat, glasses=glasses, menu=menu, stray=stray)


@pytest.fixture
def scene_data() -> dict:
    """A scene document with three frames and one material cycle."""
    return {
        "name": "Outfit",
        "output_location": "Generated/Outfit",
        "owner": "Avatar/Menu",
        "nodes": [
            {"path": "Avatar", "root": True},
            {"path": "Avatar/Body", "material_slots": ["Skin", "Cloth"]},
            {"path": "Avatar/Hat"},
            {"path": "Avatar/Glasses"},
            {"path": "Avatar/Menu"},
        ],
        "frames": [
            {"objects": [{"target": "Avatar/Hat"}]},
            None,
            {"objects": [{"target": "Avatar/Glasses"}]},
            {
                "materials": [{"target": "Avatar/Body", "slot": 1, "material": "Denim"}],
                "blend_weights": [{"target": "Avatar/Body", "property": "Smile", "value": 80}],
            },
        ],
        "material_cycles": [
            {"target": "Avatar/Body", "slot": 0, "materials": ["Red", "Green", "Blue"]},
        ],
    }
