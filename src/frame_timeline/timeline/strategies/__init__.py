"""Strategy implementations for timeline generation."""

from .ab_strategy import ABStrategy
from .base_strategy import BaseStrategy, SynthesisContext
from .linear_strategy import LinearStrategy
from .on_off_strategy import OnOffStrategy
from ..timeline import GenerationMode

STRATEGY_TYPES: dict[GenerationMode, type[BaseStrategy]] = {
    GenerationMode.ON_OFF: OnOffStrategy,
    GenerationMode.AB: ABStrategy,
    GenerationMode.LINEAR: LinearStrategy,
}


def supported_modes() -> tuple[GenerationMode, ...]:
    """Return frame-driven modes in deterministic order."""
    return tuple(STRATEGY_TYPES.keys())


def create_strategy(mode: GenerationMode) -> BaseStrategy:
    """Create a fresh strategy instance for a generation mode."""
    strategy_class = STRATEGY_TYPES.get(mode)
    if strategy_class is None:
        available = ", ".join(m.value for m in supported_modes())
        raise ValueError(f"No frame strategy for mode '{mode.value}'. Available: {available}")
    return strategy_class()


__all__ = [
    "BaseStrategy",
    "SynthesisContext",
    "OnOffStrategy",
    "ABStrategy",
    "LinearStrategy",
    "STRATEGY_TYPES",
    "supported_modes",
    "create_strategy",
]
