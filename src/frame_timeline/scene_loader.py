"""Loading scene documents (hierarchy, frames, material cycles) from JSON."""

import json
from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict

from .frames import BlendWeightState, Frame, FrameSequence, MaterialState, ObjectState
from .scene import SceneNode
from .timeline.material_cycle import MaterialCycle


class NodeData(TypedDict):
    path: str
    root: NotRequired[bool]
    material_slots: NotRequired[list[str]]


class ObjectData(TypedDict):
    target: str
    active: NotRequired[bool]


class MaterialData(TypedDict):
    target: str
    slot: NotRequired[int]
    material: NotRequired[str | None]
    base_material: NotRequired[str | None]


class BlendWeightData(TypedDict):
    target: str
    property: str
    value: NotRequired[float]


class FrameData(TypedDict):
    objects: NotRequired[list[ObjectData | None]]
    materials: NotRequired[list[MaterialData | None]]
    blend_weights: NotRequired[list[BlendWeightData | None]]


class MaterialCycleData(TypedDict):
    target: str
    slot: NotRequired[int]
    materials: list[str]


class SceneData(TypedDict):
    name: NotRequired[str]
    output_location: NotRequired[str]
    owner: NotRequired[str]
    nodes: list[NodeData]
    frames: NotRequired[list[FrameData | None]]
    material_cycles: NotRequired[list[MaterialCycleData]]


class SceneFormatError(Exception):
    """Raised when a scene document is malformed."""


@dataclass(frozen=True)
class SceneDocument:
    """A parsed scene: its node lookup, frame sequence and material cycles."""
    nodes: dict[str, SceneNode]
    sequence: FrameSequence
    material_cycles: tuple[MaterialCycle, ...] = ()


def load_scene_file(file_path: str) -> SceneDocument:
    """
    Load a scene document from a JSON file.

    Raises:
        SceneFormatError: If the file is missing, not JSON or malformed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise SceneFormatError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise SceneFormatError(f"Invalid JSON in '{file_path}': {e}")
    return load_scene(data)


def load_scene(data: SceneData) -> SceneDocument:
    """
    Build nodes, frames and material cycles from plain data.

    Nodes are declared by full ``/``-separated path; missing intermediate
    nodes are created. Entries whose target path is not declared keep a
    missing target, so generation skips them instead of failing.

    Raises:
        SceneFormatError: If required fields are missing or have the wrong type
    """
    if not isinstance(data, dict):
        raise SceneFormatError("Scene document must be a JSON object")
    nodes = _build_nodes(_require_list(data, "nodes"))

    frames = tuple(
        None if frame is None else _build_frame(frame, nodes, index)
        for index, frame in enumerate(data.get("frames") or [])
    )
    owner_path = data.get("owner")
    sequence = FrameSequence(
        frames=frames,
        name=str(data.get("name") or ""),
        output_location=str(data.get("output_location") or ""),
        owner=nodes.get(owner_path) if owner_path else None,
    )
    cycles = tuple(
        _build_cycle(cycle, nodes, index)
        for index, cycle in enumerate(data.get("material_cycles") or [])
    )
    return SceneDocument(nodes=nodes, sequence=sequence, material_cycles=cycles)


def _build_nodes(node_data: list[Any]) -> dict[str, SceneNode]:
    nodes: dict[str, SceneNode] = {}
    for index, entry in enumerate(node_data):
        if not isinstance(entry, dict) or not isinstance(entry.get("path"), str) or not entry["path"]:
            raise SceneFormatError(f"Node {index} needs a 'path' string")
        slots = entry.get("material_slots", [])
        if not isinstance(slots, list):
            raise SceneFormatError(f"Node {index} 'material_slots' must be a list")
        node = _ensure_node(nodes, entry["path"])
        node.is_root = bool(entry.get("root", False))
        node.material_slots = tuple(str(slot) for slot in slots)
    return nodes


def _ensure_node(nodes: dict[str, SceneNode], path: str) -> SceneNode:
    parts = [part for part in path.split("/") if part]
    if not parts:
        raise SceneFormatError(f"Invalid node path: {path!r}")
    parent: SceneNode | None = None
    for depth in range(1, len(parts) + 1):
        key = "/".join(parts[:depth])
        node = nodes.get(key)
        if node is None:
            node = SceneNode(parts[depth - 1], parent=parent)
            nodes[key] = node
        parent = node
    return nodes["/".join(parts)]


def _lookup(nodes: dict[str, SceneNode], path: Any) -> SceneNode | None:
    if not isinstance(path, str):
        return None
    return nodes.get("/".join(part for part in path.split("/") if part))


def _build_frame(data: Any, nodes: dict[str, SceneNode], index: int) -> Frame:
    if not isinstance(data, dict):
        raise SceneFormatError(f"Frame {index} must be an object or null")
    try:
        return Frame(
            objects=tuple(
                None if entry is None else ObjectState(
                    target=_lookup(nodes, entry.get("target")),
                    active=bool(entry.get("active", True)),
                )
                for entry in data.get("objects") or []
            ),
            materials=tuple(
                None if entry is None else MaterialState(
                    target=_lookup(nodes, entry.get("target")),
                    slot_index=int(entry.get("slot", 0)),
                    active_material=entry.get("material"),
                    base_material=entry.get("base_material"),
                )
                for entry in data.get("materials") or []
            ),
            blend_weights=tuple(
                None if entry is None else BlendWeightState(
                    target=_lookup(nodes, entry.get("target")),
                    property_name=str(entry.get("property") or ""),
                    target_value=float(entry.get("value", 0.0)),
                )
                for entry in data.get("blend_weights") or []
            ),
        )
    except (AttributeError, TypeError, ValueError) as e:
        raise SceneFormatError(f"Invalid entry in frame {index}: {e}")


def _build_cycle(data: Any, nodes: dict[str, SceneNode], index: int) -> MaterialCycle:
    if not isinstance(data, dict) or not isinstance(data.get("materials"), list):
        raise SceneFormatError(f"Material cycle {index} needs a 'materials' list")
    try:
        slot_index = int(data.get("slot", 0))
    except (TypeError, ValueError) as e:
        raise SceneFormatError(f"Invalid slot in material cycle {index}: {e}")
    return MaterialCycle(
        target=_lookup(nodes, data.get("target")),
        slot_index=slot_index,
        materials=tuple(str(material) for material in data["materials"]),
    )


def _require_list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise SceneFormatError(f"Scene document needs a '{key}' list")
    return value
