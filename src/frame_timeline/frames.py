"""Frame payloads describing discrete appearance states."""

from dataclasses import dataclass, field
from typing import Iterator, Union

from .constants import BLEND_WEIGHT_MAX, BLEND_WEIGHT_MIN
from .scene import SceneNode


@dataclass(frozen=True)
class ObjectState:
    """Whether a node is visible while the frame is selected."""

    target: SceneNode | None
    active: bool = True

    @property
    def is_valid(self) -> bool:
        return self.target is not None


@dataclass(frozen=True)
class MaterialState:
    """Which material occupies a render slot while the frame is selected."""

    target: SceneNode | None
    slot_index: int = 0
    active_material: str | None = None
    base_material: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.target is not None

    @property
    def resolved_base_material(self) -> str | None:
        """The configured base material, or the node's current one for the slot."""
        if self.base_material is not None:
            return self.base_material
        if self.target is None or not 0 <= self.slot_index < self.target.slot_count:
            return None
        return self.target.material_slots[self.slot_index]

    @property
    def resolved_active_material(self) -> str | None:
        if self.active_material is not None:
            return self.active_material
        return self.resolved_base_material


@dataclass(frozen=True)
class BlendWeightState:
    """Weight a blend (deformation) target holds while the frame is selected."""

    target: SceneNode | None
    property_name: str = ""
    target_value: float = 0.0

    def __post_init__(self) -> None:
        clamped = min(max(float(self.target_value), BLEND_WEIGHT_MIN), BLEND_WEIGHT_MAX)
        object.__setattr__(self, "target_value", clamped)

    @property
    def is_valid(self) -> bool:
        return self.target is not None and bool(self.property_name)


Endpoint = Union[ObjectState, MaterialState, BlendWeightState]


@dataclass(frozen=True)
class Frame:
    """A full appearance state: object, material and blend weight entries."""

    objects: tuple[ObjectState | None, ...] = ()
    materials: tuple[MaterialState | None, ...] = ()
    blend_weights: tuple[BlendWeightState | None, ...] = ()

    def endpoints(self) -> Iterator[Endpoint]:
        """Yield non-empty entries: objects first, then materials, then blend weights."""
        for entries in (self.objects, self.materials, self.blend_weights):
            for entry in entries:
                if entry is not None:
                    yield entry

    def has_valid_entry(self) -> bool:
        return any(endpoint.is_valid for endpoint in self.endpoints())


@dataclass(frozen=True)
class FrameSequence:
    """Ordered frames plus the metadata needed to name and place the output."""

    frames: tuple[Frame | None, ...] = ()
    name: str = ""
    output_location: str = ""
    owner: SceneNode | None = field(default=None, compare=False)
