"""Base strategy interface for timeline generation strategies."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...config import TimelineConfig
from ...errors import EndpointResolutionWarning
from ...frames import Endpoint, Frame, MaterialState, ObjectState
from ...scene import SceneNode
from ..bindings import Binding, Unresolvable, resolve_binding
from ..curve import KeyValue
from ..timeline import GenerationMode, Timeline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SynthesisContext:
    """Validated input for one generation run."""
    name: str
    frames: tuple[Frame, ...]
    root: SceneNode
    config: TimelineConfig


def active_value(endpoint: Endpoint) -> KeyValue | None:
    """Value an endpoint holds while its frame is selected."""
    if isinstance(endpoint, ObjectState):
        return 1.0 if endpoint.active else 0.0
    if isinstance(endpoint, MaterialState):
        return endpoint.resolved_active_material
    return endpoint.target_value


def not_selected_value(endpoint: Endpoint) -> KeyValue | None:
    """
    Value an endpoint holds while another frame is selected.

    Objects flip their configured flag; materials fall back to the base
    material and blend weights to zero.
    """
    if isinstance(endpoint, ObjectState):
        return 0.0 if endpoint.active else 1.0
    if isinstance(endpoint, MaterialState):
        return endpoint.resolved_base_material
    return 0.0


def absent_value(endpoint: Endpoint) -> KeyValue | None:
    """Value a binding holds in a region whose frame does not mention it."""
    if isinstance(endpoint, MaterialState):
        return endpoint.resolved_base_material
    return 0.0


class BaseStrategy(ABC):
    """Abstract base class for timeline generation strategies."""

    mode: GenerationMode

    def __init__(self) -> None:
        self.warnings: list[EndpointResolutionWarning] = []
        self._skipped: set[tuple[int, int | None, str]] = set()

    @abstractmethod
    def generate(self, context: SynthesisContext) -> tuple[Timeline, ...]:
        """
        Build every timeline this mode produces.

        Args:
            context: Validated frames, derived name, root and config

        Returns:
            Fully populated timelines in a fixed order
        """
        raise NotImplementedError

    def new_timeline(self, context: SynthesisContext, suffix: str) -> Timeline:
        return Timeline(
            f"{context.name}{suffix}",
            frame_rate=context.config.frame_rate,
            epsilon=context.config.epsilon,
        )

    def bind(self, endpoint: Endpoint, root: SceneNode, frame_index: int) -> Binding | None:
        """Resolve an endpoint, recording a warning and returning None when it cannot be bound."""
        resolved = resolve_binding(endpoint, root)
        if isinstance(resolved, Unresolvable):
            self.skip(endpoint, resolved.reason, frame_index)
            return None
        return resolved

    def skip(self, endpoint: Endpoint, reason: str, frame_index: int | None) -> None:
        """Record a skipped endpoint once, even when several timelines visit it."""
        key = (id(endpoint), frame_index, reason)
        if key in self._skipped:
            return
        self._skipped.add(key)
        warning = EndpointResolutionWarning(endpoint, reason, frame_index)
        logger.warning("%s", warning)
        self.warnings.append(warning)

    def write_frame(
        self,
        timeline: Timeline,
        context: SynthesisContext,
        frame_index: int,
        *,
        selected: bool,
        time: float = 0.0,
    ) -> None:
        """Write every endpoint of one frame at ``time`` with selected or not-selected values."""
        frame = context.frames[frame_index]
        for endpoint in frame.endpoints():
            binding = self.bind(endpoint, context.root, frame_index)
            if binding is None:
                continue
            value = active_value(endpoint) if selected else not_selected_value(endpoint)
            timeline.set_key(binding, time, value)
