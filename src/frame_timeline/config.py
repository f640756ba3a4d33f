"""Immutable generation settings."""

import os
from dataclasses import dataclass
from typing import Mapping

from .constants import (
    DEFAULT_FRAME_RATE,
    DEFAULT_TOTAL_STEPS,
    ENV_FRAME_RATE,
    ENV_TOTAL_STEPS,
    KEY_TIME_EPSILON,
)


@dataclass(frozen=True, slots=True)
class TimelineConfig:
    """Step budget and playback rate shared by every generation call."""

    total_steps: int = DEFAULT_TOTAL_STEPS
    frame_rate: float = DEFAULT_FRAME_RATE
    epsilon: float = KEY_TIME_EPSILON

    def __post_init__(self) -> None:
        if self.total_steps < 1:
            raise ValueError(f"total_steps must be at least 1 (got {self.total_steps})")
        if self.frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive (got {self.frame_rate})")
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be positive (got {self.epsilon})")

    @property
    def duration(self) -> float:
        """Clip length in seconds."""
        return self.total_steps / self.frame_rate

    def step_to_seconds(self, step: int) -> float:
        """Convert a step index to seconds, clamped to the step budget."""
        return min(step, self.total_steps) / self.frame_rate

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TimelineConfig":
        """
        Build a config from environment variables, falling back to defaults.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Raises:
            ValueError: If a variable is set but not a valid number
        """
        env = os.environ if environ is None else environ
        total_steps = _read_env(env, ENV_TOTAL_STEPS, int, DEFAULT_TOTAL_STEPS)
        frame_rate = _read_env(env, ENV_FRAME_RATE, float, DEFAULT_FRAME_RATE)
        return cls(total_steps=total_steps, frame_rate=frame_rate)


def _read_env(env: Mapping[str, str], key: str, parse, default):
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {key}: {raw!r}")
