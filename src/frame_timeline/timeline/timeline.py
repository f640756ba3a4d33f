"""Named bundles of curves produced by one generation call."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from ..constants import DEFAULT_FRAME_RATE, KEY_TIME_EPSILON
from ..errors import EndpointResolutionWarning
from .bindings import Binding
from .curve import Curve, KeyValue, Keyframe


class GenerationMode(Enum):
    ON_OFF = "on_off"
    AB = "ab"
    LINEAR = "linear"
    MATERIAL_CYCLE = "material_cycle"


class Timeline:
    """A named set of step curves keyed by binding."""

    def __init__(
        self,
        name: str,
        frame_rate: float = DEFAULT_FRAME_RATE,
        epsilon: float = KEY_TIME_EPSILON,
    ):
        self.name = name
        self.frame_rate = frame_rate
        self.epsilon = epsilon
        self._curves: dict[Binding, Curve] = {}

    def set_key(self, binding: Binding, time: float, value: KeyValue) -> Keyframe:
        """Merge a key into the binding's curve, creating the curve on first write."""
        curve = self._curves.get(binding)
        if curve is None:
            curve = Curve(self.epsilon)
            self._curves[binding] = curve
        return curve.merge(time, value)

    def curve(self, binding: Binding) -> Curve:
        """
        Get the curve for a binding.

        Raises:
            KeyError: If nothing was written for the binding
        """
        return self._curves[binding]

    def discard(self, binding: Binding) -> None:
        """Drop the binding's curve, if any, so it can be written from scratch."""
        self._curves.pop(binding, None)

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """Bindings in sort order, independent of write order."""
        return tuple(sorted(self._curves, key=Binding.sort_key))

    def items(self) -> Iterator[tuple[Binding, Curve]]:
        for binding in self.bindings:
            yield binding, self._curves[binding]

    @property
    def duration(self) -> float:
        """Time of the latest key across all curves."""
        return max((curve.times[-1] for curve in self._curves.values() if len(curve)), default=0.0)

    def __contains__(self, binding: object) -> bool:
        return binding in self._curves

    def __len__(self) -> int:
        return len(self._curves)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timeline):
            return NotImplemented
        return (
            self.name == other.name
            and self.frame_rate == other.frame_rate
            and list(self.items()) == list(other.items())
        )

    def __repr__(self) -> str:
        return f"Timeline({self.name!r}, curves={len(self._curves)})"


@dataclass(frozen=True)
class TimelineBundle:
    """Everything one generation call hands to an output provider."""

    mode: GenerationMode
    timelines: tuple[Timeline, ...]
    output_location: str = ""
    warnings: tuple[EndpointResolutionWarning, ...] = field(default=(), compare=False)

    def timeline(self, name: str) -> Timeline:
        """
        Get a timeline by name.

        Raises:
            KeyError: If no timeline has that name
        """
        for timeline in self.timelines:
            if timeline.name == name:
                return timeline
        raise KeyError(name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(timeline.name for timeline in self.timelines)

    def __iter__(self) -> Iterator[Timeline]:
        return iter(self.timelines)

    def __len__(self) -> int:
        return len(self.timelines)
