"""Step-interpolated keyframe curves with time-tolerant merging."""

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterator, Union

from ..constants import KEY_TIME_EPSILON

KeyValue = Union[float, str]
CONSTANT_INTERPOLATION = "constant"


@dataclass(frozen=True, slots=True)
class Keyframe:
    """A value held from ``time`` until the next key."""
    time: float
    value: KeyValue


class Curve:
    """
    Keyframes for one binding, kept sorted by time.

    No two keys lie within ``epsilon`` of each other, and every key holds its
    value until the next one (constant interpolation).
    """

    interpolation = CONSTANT_INTERPOLATION

    def __init__(self, epsilon: float = KEY_TIME_EPSILON):
        self.epsilon = epsilon
        self._keys: list[Keyframe] = []

    def merge(self, time: float, value: KeyValue) -> Keyframe:
        """
        Write a key, overwriting any key within epsilon of ``time``.

        Args:
            time: Key time in seconds
            value: Value held from this key on

        Returns:
            The key now stored for that time
        """
        index = self._index_near(time)
        if index is not None:
            key = Keyframe(self._keys[index].time, value)
            self._keys[index] = key
            return key

        key = Keyframe(time, value)
        position = bisect_left([existing.time for existing in self._keys], time)
        self._keys.insert(position, key)
        return key

    def has_key_near(self, time: float) -> bool:
        return self._index_near(time) is not None

    def _index_near(self, time: float) -> int | None:
        times = [key.time for key in self._keys]
        position = bisect_left(times, time)
        for candidate in (position - 1, position):
            if 0 <= candidate < len(times) and abs(times[candidate] - time) < self.epsilon:
                return candidate
        return None

    @property
    def keys(self) -> tuple[Keyframe, ...]:
        return tuple(self._keys)

    @property
    def times(self) -> tuple[float, ...]:
        return tuple(key.time for key in self._keys)

    @property
    def values(self) -> tuple[KeyValue, ...]:
        return tuple(key.value for key in self._keys)

    def __iter__(self) -> Iterator[Keyframe]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Curve):
            return NotImplemented
        return self._keys == other._keys

    def __repr__(self) -> str:
        keys = ", ".join(f"({key.time:g}, {key.value!r})" for key in self._keys)
        return f"Curve([{keys}])"
