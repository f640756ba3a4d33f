"""Linear timelines that step render slots through groups of materials."""

import logging
from dataclasses import dataclass
from typing import Sequence

from ..config import TimelineConfig
from ..constants import LINEAR_SUFFIX
from ..errors import EndpointResolutionWarning, RootNotFound, ValidationError
from ..scene import SceneNode
from .bindings import Binding, find_root_from, relative_path
from .regions import plan_regions
from .timeline import GenerationMode, Timeline, TimelineBundle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MaterialCycle:
    """A render slot that shows each material of a group in turn."""
    target: SceneNode | None
    slot_index: int
    materials: tuple[str, ...]


def generate_material_cycle(
    name: str,
    cycles: Sequence[MaterialCycle],
    config: TimelineConfig | None = None,
    *,
    owner: SceneNode | None = None,
    output_location: str = "",
) -> TimelineBundle:
    """
    Build one ``<name>_lin`` timeline cycling every slot through its materials.

    Each cycle splits the step budget over its own material count, keys the
    start of every region and closes with a key holding the last material.

    Args:
        name: Base name of the timeline
        cycles: Slots and the materials they step through
        config: Step budget and frame rate (defaults when omitted)
        owner: Node used to locate the root before the cycle targets
        output_location: Where the bundle should be exported

    Raises:
        ValidationError: EmptyName, NoValidSlots or RootNotFound
    """
    config = config or TimelineConfig()
    if not name or not name.strip():
        raise ValidationError("EmptyName", "An animation name is required")
    root = _find_cycle_root(owner, cycles)

    warnings: list[EndpointResolutionWarning] = []
    timeline = Timeline(f"{name.strip()}{LINEAR_SUFFIX}", config.frame_rate, config.epsilon)
    for cycle in cycles:
        binding = _bind_cycle(cycle, root, config, warnings)
        if binding is None:
            continue
        if binding in timeline:
            # A later cycle on the same slot replaces the whole curve
            logger.info("Replacing earlier material cycle for %s", binding)
            timeline.discard(binding)
        _write_cycle(timeline, binding, cycle.materials, config)

    if not len(timeline):
        raise ValidationError("NoValidSlots", "No slots linked to a valid material group")

    return TimelineBundle(
        mode=GenerationMode.MATERIAL_CYCLE,
        timelines=(timeline,),
        output_location=output_location,
        warnings=tuple(warnings),
    )


def _find_cycle_root(owner: SceneNode | None, cycles: Sequence[MaterialCycle]) -> SceneNode:
    for start in (owner, *(cycle.target for cycle in cycles)):
        root = find_root_from(start)
        if root is not None:
            return root
    raise RootNotFound()


def _bind_cycle(
    cycle: MaterialCycle,
    root: SceneNode,
    config: TimelineConfig,
    warnings: list[EndpointResolutionWarning],
) -> Binding | None:
    reason = None
    path = relative_path(root, cycle.target) if cycle.target is not None else ""
    if cycle.target is None:
        reason = "target is missing"
    elif not path:
        reason = f"{cycle.target!r} is not below root {root.name!r}"
    elif not 0 <= cycle.slot_index < cycle.target.slot_count:
        reason = f"material slot {cycle.slot_index} out of range for {path!r}"
    elif len(cycle.materials) < 2:
        reason = f"slot {cycle.slot_index} of {path!r} needs at least two materials"
    elif len(cycle.materials) > config.total_steps:
        reason = f"{len(cycle.materials)} materials do not fit into {config.total_steps} steps"

    if reason is not None:
        warning = EndpointResolutionWarning(cycle, reason)
        logger.warning("%s", warning)
        warnings.append(warning)
        return None
    return Binding.material_slot(path, cycle.slot_index)


def _write_cycle(
    timeline: Timeline,
    binding: Binding,
    materials: tuple[str, ...],
    config: TimelineConfig,
) -> None:
    for region, material in zip(plan_regions(len(materials), config.total_steps), materials):
        timeline.set_key(binding, config.step_to_seconds(region.start_step), material)

    end_time = config.step_to_seconds(config.total_steps)
    if not timeline.curve(binding).has_key_near(end_time):
        timeline.set_key(binding, end_time, materials[-1])
