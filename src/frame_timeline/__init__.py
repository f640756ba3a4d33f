"""Step keyframe timelines generated from sequences of appearance frames."""

from .config import TimelineConfig
from .errors import EndpointResolutionWarning, ExportError, RootNotFound, ValidationError
from .frames import BlendWeightState, Frame, FrameSequence, MaterialState, ObjectState
from .scene import SceneNode
from .timeline import (
    Binding,
    Curve,
    GenerationMode,
    Keyframe,
    MaterialCycle,
    Timeline,
    TimelineBundle,
    generate_material_cycle,
    generate_timelines,
)

__all__ = [
    "TimelineConfig",
    "EndpointResolutionWarning",
    "ExportError",
    "RootNotFound",
    "ValidationError",
    "BlendWeightState",
    "Frame",
    "FrameSequence",
    "MaterialState",
    "ObjectState",
    "SceneNode",
    "Binding",
    "Curve",
    "GenerationMode",
    "Keyframe",
    "MaterialCycle",
    "Timeline",
    "TimelineBundle",
    "generate_material_cycle",
    "generate_timelines",
]
