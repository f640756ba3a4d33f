"""Partitioning of the step budget into per-frame regions."""

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class TimeRegion:
    """Inclusive span of steps assigned to one frame."""
    start_step: int
    end_step: int

    @property
    def step_count(self) -> int:
        return self.end_step - self.start_step + 1


def plan_regions(frame_count: int, total_steps: int) -> tuple[TimeRegion, ...]:
    """
    Split ``[0, total_steps]`` into one region per frame.

    Every region gets ``total_steps // frame_count`` steps; the last region
    runs through ``total_steps`` and absorbs the remainder.

    Args:
        frame_count: Number of frames to place on the timeline
        total_steps: Last step of the budget

    Returns:
        Contiguous regions in frame order

    Raises:
        ValueError: If frame_count is below 1 or above total_steps
    """
    if frame_count < 1:
        raise ValueError(f"frame_count must be at least 1 (got {frame_count})")
    if frame_count > total_steps:
        raise ValueError(
            f"Cannot split {total_steps} steps into {frame_count} regions"
        )

    steps_per_region = total_steps // frame_count
    regions = [
        TimeRegion(index * steps_per_region, (index + 1) * steps_per_region - 1)
        for index in range(frame_count - 1)
    ]
    regions.append(TimeRegion((frame_count - 1) * steps_per_region, total_steps))
    return tuple(regions)


def check_regions(regions: Sequence[TimeRegion], total_steps: int) -> bool:
    """Return whether regions start at 0, touch without gaps and end at total_steps."""
    if not regions:
        return False
    if regions[0].start_step != 0 or regions[-1].end_step != total_steps:
        return False
    for previous, current in zip(regions, regions[1:]):
        if current.start_step != previous.end_step + 1:
            return False
    return all(region.step_count > 0 for region in regions)
