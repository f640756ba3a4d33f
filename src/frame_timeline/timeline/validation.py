"""Frame filtering, name derivation and generation mode selection."""

import logging
from dataclasses import dataclass

from ..errors import ValidationError
from ..frames import Frame, FrameSequence
from .timeline import GenerationMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatedSequence:
    """Frames that survived filtering, with the derived name and mode."""
    frames: tuple[Frame, ...]
    name: str
    mode: GenerationMode


def filter_frames(sequence: FrameSequence) -> tuple[Frame, ...]:
    """Drop empty slots and frames without a single usable entry."""
    present = [frame for frame in sequence.frames if frame is not None]
    valid = tuple(frame for frame in present if frame.has_valid_entry())
    dropped = len(sequence.frames) - len(valid)
    if dropped:
        logger.debug("Dropped %d of %d frames with no usable entries", dropped, len(sequence.frames))
    return valid


def derive_name(sequence: FrameSequence) -> str:
    """
    Name timelines after the sequence, falling back to its owner node.

    Raises:
        ValidationError: If neither provides a non-blank name
    """
    for candidate in (sequence.name, sequence.owner.name if sequence.owner else ""):
        if candidate and candidate.strip():
            return candidate.strip()
    raise ValidationError("EmptyName", "An animation name is required")


def select_mode(frame_count: int) -> GenerationMode:
    """
    Map a frame count onto a generation mode.

    Raises:
        ValueError: If frame_count is below 1
    """
    if frame_count < 1:
        raise ValueError(f"No generation mode for {frame_count} frames")
    if frame_count == 1:
        return GenerationMode.ON_OFF
    if frame_count == 2:
        return GenerationMode.AB
    return GenerationMode.LINEAR


def validate_sequence(sequence: FrameSequence, total_steps: int) -> ValidatedSequence:
    """
    Validate a raw sequence and pick how to generate it.

    Args:
        sequence: Caller-supplied frames and metadata
        total_steps: Step budget the frames must fit into

    Raises:
        ValidationError: NoValidFrames, TooManyFrames or EmptyName
    """
    frames = filter_frames(sequence)
    if not frames:
        raise ValidationError(
            "NoValidFrames",
            "Each frame needs at least one object, material or blend weight entry",
        )
    mode = select_mode(len(frames))
    # On/off and A/B key everything at t=0; only linear playback needs a step per frame
    if mode is GenerationMode.LINEAR and len(frames) > total_steps:
        raise ValidationError(
            "TooManyFrames",
            f"{len(frames)} frames do not fit into {total_steps} steps",
        )
    name = derive_name(sequence)
    return ValidatedSequence(frames=frames, name=name, mode=mode)
