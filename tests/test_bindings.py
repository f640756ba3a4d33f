"""Tests for root discovery and binding resolution."""

import pytest

from frame_timeline.errors import RootNotFound, ValidationError
from frame_timeline.frames import BlendWeightState, Frame, FrameSequence, MaterialState, ObjectState
from frame_timeline.scene import SceneNode
from frame_timeline.timeline.bindings import (
    Binding,
    EndpointKind,
    Unresolvable,
    find_root,
    relative_path,
    resolve_binding,
)


def test_relative_path_walks_up_to_root(rig):
    jacket = rig.body.add_child("Jacket")

    assert relative_path(rig.root, jacket) == "Body/Jacket"
    assert relative_path(rig.root, rig.hat) == "Hat"


def test_relative_path_is_empty_for_root_and_outsiders(rig):
    assert relative_path(rig.root, rig.root) == ""
    assert relative_path(rig.root, rig.stray) == ""


def test_find_root_from_owner(rig):
    sequence = FrameSequence(frames=(), name="Outfit", owner=rig.menu)

    assert find_root(sequence) is rig.root


def test_find_root_from_frame_targets(rig):
    sequence = FrameSequence(
        frames=(None, Frame(objects=(ObjectState(rig.stray), ObjectState(rig.hat)))),
        name="Outfit",
        owner=rig.stray,
    )

    assert find_root(sequence) is rig.root


def test_find_root_raises_when_no_root_exists():
    orphan = SceneNode("Orphan")
    sequence = FrameSequence(frames=(Frame(objects=(ObjectState(orphan),)),), name="Outfit")

    with pytest.raises(RootNotFound) as exc_info:
        find_root(sequence)

    assert isinstance(exc_info.value, ValidationError)
    assert exc_info.value.code == "RootNotFound"


def test_nearest_root_wins_for_nested_roots(rig):
    prop = rig.hat.add_child("Prop", is_root=True)
    feather = prop.add_child("Feather")
    sequence = FrameSequence(frames=(Frame(objects=(ObjectState(feather),)),), name="Outfit")

    assert find_root(sequence) is prop


def test_resolve_object_binding(rig):
    binding = resolve_binding(ObjectState(rig.hat), rig.root)

    assert binding == Binding("Hat", EndpointKind.OBJECT_ACTIVE)
    assert binding.attribute == "m_IsActive"


def test_resolve_material_binding(rig):
    binding = resolve_binding(MaterialState(rig.body, 1, "Red"), rig.root)

    assert binding == Binding.material_slot("Body", 1)
    assert binding.attribute == "m_Materials.Array.data[1]"


@pytest.mark.parametrize("slot_index", [-1, 2, 10])
def test_out_of_range_material_slot_is_unresolvable(rig, slot_index):
    resolved = resolve_binding(MaterialState(rig.body, slot_index, "Red"), rig.root)

    assert isinstance(resolved, Unresolvable)
    assert "out of range" in resolved.reason


def test_material_on_node_without_slots_is_unresolvable(rig):
    assert isinstance(resolve_binding(MaterialState(rig.hat, 0, "Red"), rig.root), Unresolvable)


def test_resolve_blend_weight_binding(rig):
    binding = resolve_binding(BlendWeightState(rig.body, "Smile", 40.0), rig.root)

    assert binding == Binding.blend_weight("Body", "Smile")
    assert binding.attribute == "blendShape.Smile"


def test_blend_weight_without_name_is_unresolvable(rig):
    assert isinstance(resolve_binding(BlendWeightState(rig.body, "", 40.0), rig.root), Unresolvable)


def test_missing_or_foreign_targets_are_unresolvable(rig):
    assert isinstance(resolve_binding(ObjectState(None), rig.root), Unresolvable)
    assert isinstance(resolve_binding(ObjectState(rig.stray), rig.root), Unresolvable)
    assert isinstance(resolve_binding(ObjectState(rig.root), rig.root), Unresolvable)


def test_bindings_for_same_target_are_equal(rig):
    first = resolve_binding(ObjectState(rig.hat, active=True), rig.root)
    second = resolve_binding(ObjectState(rig.hat, active=False), rig.root)

    assert first == second
    assert hash(first) == hash(second)


def test_binding_sort_order_is_total():
    bindings = [
        Binding.blend_weight("Body", "Smile"),
        Binding.material_slot("Body", 1),
        Binding.object_active("Hat"),
        Binding.material_slot("Body", 0),
        Binding.object_active("Body"),
    ]

    assert sorted(bindings, key=Binding.sort_key) == [
        Binding.object_active("Body"),
        Binding.material_slot("Body", 0),
        Binding.material_slot("Body", 1),
        Binding.blend_weight("Body", "Smile"),
        Binding.object_active("Hat"),
    ]
