"""Timeline synthesis: validation, regions, bindings, curves and strategies."""

from .bindings import (
    Binding,
    EndpointKind,
    Unresolvable,
    find_root,
    relative_path,
    resolve_binding,
)
from .curve import CONSTANT_INTERPOLATION, Curve, Keyframe
from .material_cycle import MaterialCycle, generate_material_cycle
from .regions import TimeRegion, check_regions, plan_regions
from .strategies import (
    ABStrategy,
    BaseStrategy,
    LinearStrategy,
    OnOffStrategy,
    create_strategy,
)
from .synthesizer import generate_timelines
from .timeline import GenerationMode, Timeline, TimelineBundle
from .validation import select_mode, validate_sequence

__all__ = [
    "Binding",
    "EndpointKind",
    "Unresolvable",
    "find_root",
    "relative_path",
    "resolve_binding",
    "CONSTANT_INTERPOLATION",
    "Curve",
    "Keyframe",
    "MaterialCycle",
    "generate_material_cycle",
    "TimeRegion",
    "check_regions",
    "plan_regions",
    "BaseStrategy",
    "OnOffStrategy",
    "ABStrategy",
    "LinearStrategy",
    "create_strategy",
    "generate_timelines",
    "GenerationMode",
    "Timeline",
    "TimelineBundle",
    "select_mode",
    "validate_sequence",
]
