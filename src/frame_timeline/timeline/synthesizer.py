"""Entry point turning a frame sequence into a timeline bundle."""

import logging

from ..config import TimelineConfig
from ..frames import FrameSequence
from .bindings import find_root
from .strategies import create_strategy
from .strategies.base_strategy import SynthesisContext
from .timeline import TimelineBundle
from .validation import validate_sequence

logger = logging.getLogger(__name__)


def generate_timelines(
    sequence: FrameSequence,
    config: TimelineConfig | None = None,
) -> TimelineBundle:
    """
    Generate the timelines for a frame sequence.

    The call is atomic: every timeline is built before the bundle is
    returned, and any error leaves nothing behind.

    Args:
        sequence: Frames and naming metadata
        config: Step budget and frame rate (defaults when omitted)

    Returns:
        Bundle holding the mode, the timelines and skipped-endpoint warnings

    Raises:
        ValidationError: If no frame is usable, no name can be derived or
            no root exists above the sequence
    """
    config = config or TimelineConfig()
    validated = validate_sequence(sequence, config.total_steps)
    root = find_root(sequence)

    context = SynthesisContext(
        name=validated.name,
        frames=validated.frames,
        root=root,
        config=config,
    )
    strategy = create_strategy(validated.mode)
    logger.info(
        "Generating %s timelines for %r from %d frames",
        validated.mode.value,
        validated.name,
        len(validated.frames),
    )
    timelines = strategy.generate(context)

    return TimelineBundle(
        mode=validated.mode,
        timelines=timelines,
        output_location=sequence.output_location,
        warnings=tuple(strategy.warnings),
    )
