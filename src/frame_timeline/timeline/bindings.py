"""Stable (path, endpoint-kind) keys for animatable targets."""

from dataclasses import dataclass
from enum import Enum

from ..constants import (
    BLEND_WEIGHT_PROPERTY,
    MATERIAL_SLOT_PROPERTY,
    OBJECT_ACTIVE_PROPERTY,
)
from ..errors import RootNotFound
from ..frames import BlendWeightState, Endpoint, FrameSequence, MaterialState, ObjectState
from ..scene import SceneNode


class EndpointKind(Enum):
    OBJECT_ACTIVE = "object_active"
    MATERIAL_SLOT = "material_slot"
    BLEND_WEIGHT = "blend_weight"


_KIND_ORDER = {kind: order for order, kind in enumerate(EndpointKind)}


@dataclass(frozen=True, slots=True)
class Binding:
    """Identifies one animatable target; equal bindings share a curve."""

    path: str
    kind: EndpointKind
    slot_index: int | None = None
    property_name: str | None = None

    @classmethod
    def object_active(cls, path: str) -> "Binding":
        return cls(path, EndpointKind.OBJECT_ACTIVE)

    @classmethod
    def material_slot(cls, path: str, slot_index: int) -> "Binding":
        return cls(path, EndpointKind.MATERIAL_SLOT, slot_index=slot_index)

    @classmethod
    def blend_weight(cls, path: str, property_name: str) -> "Binding":
        return cls(path, EndpointKind.BLEND_WEIGHT, property_name=property_name)

    @property
    def attribute(self) -> str:
        """Host property path animated by this binding."""
        if self.kind is EndpointKind.MATERIAL_SLOT:
            return MATERIAL_SLOT_PROPERTY.format(index=self.slot_index)
        if self.kind is EndpointKind.BLEND_WEIGHT:
            return BLEND_WEIGHT_PROPERTY.format(name=self.property_name)
        return OBJECT_ACTIVE_PROPERTY

    def sort_key(self) -> tuple[str, int, int, str]:
        return (
            self.path,
            _KIND_ORDER[self.kind],
            -1 if self.slot_index is None else self.slot_index,
            self.property_name or "",
        )

    def __str__(self) -> str:
        return f"{self.path}:{self.attribute}"


@dataclass(frozen=True, slots=True)
class Unresolvable:
    """An endpoint that cannot be bound; only that endpoint is skipped."""
    reason: str


def find_root(sequence: FrameSequence) -> SceneNode:
    """
    Find the node carrying the root marker above the sequence.

    The owner is searched first, then each endpoint target in frame order.

    Raises:
        RootNotFound: If no start node has a root among its ancestors
    """
    for start in _root_search_starts(sequence):
        root = find_root_from(start)
        if root is not None:
            return root
    raise RootNotFound()


def find_root_from(node: SceneNode | None) -> SceneNode | None:
    """Walk upward from ``node`` until a root-marked node is found."""
    if node is None:
        return None
    return next((ancestor for ancestor in node.ancestors() if ancestor.is_root), None)


def _root_search_starts(sequence: FrameSequence):
    if sequence.owner is not None:
        yield sequence.owner
    for frame in sequence.frames:
        if frame is None:
            continue
        for endpoint in frame.endpoints():
            if endpoint.target is not None:
                yield endpoint.target


def relative_path(root: SceneNode, node: SceneNode) -> str:
    """
    Path of ``node`` below ``root`` as ``/``-joined names.

    Empty when ``node`` is the root itself or is not below it.
    """
    segments: list[str] = []
    current: SceneNode | None = node
    while current is not None and current is not root:
        segments.append(current.name)
        current = current.parent
    if current is not root:
        return ""
    return "/".join(reversed(segments))


def resolve_binding(endpoint: Endpoint, root: SceneNode) -> Binding | Unresolvable:
    """Compute the binding for one endpoint, or why it cannot be bound."""
    if endpoint.target is None:
        return Unresolvable("target is missing")

    path = relative_path(root, endpoint.target)
    if not path:
        return Unresolvable(f"{endpoint.target!r} is not below root {root.name!r}")

    if isinstance(endpoint, ObjectState):
        return Binding.object_active(path)

    if isinstance(endpoint, MaterialState):
        slot_count = endpoint.target.slot_count
        if not 0 <= endpoint.slot_index < slot_count:
            return Unresolvable(
                f"material slot {endpoint.slot_index} out of range for {path!r} "
                f"({slot_count} slots)"
            )
        if endpoint.resolved_base_material is None:
            return Unresolvable(f"no base material for slot {endpoint.slot_index} of {path!r}")
        return Binding.material_slot(path, endpoint.slot_index)

    if isinstance(endpoint, BlendWeightState):
        if not endpoint.property_name:
            return Unresolvable(f"empty blend weight name on {path!r}")
        return Binding.blend_weight(path, endpoint.property_name)

    raise TypeError(f"Unsupported endpoint type: {type(endpoint).__name__}")
