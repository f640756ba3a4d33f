"""Shared generate-then-export orchestration used by the CLI."""

from dataclasses import replace
from pathlib import Path

from .config import TimelineConfig
from .constants import MATERIALS_SUFFIX
from .output import resolve_output_provider
from .output.base import OutputProvider
from .scene_loader import SceneDocument
from .timeline.material_cycle import generate_material_cycle
from .timeline.synthesizer import generate_timelines
from .timeline.timeline import TimelineBundle


def build_bundles(
    document: SceneDocument,
    config: TimelineConfig,
    *,
    name: str | None = None,
) -> list[TimelineBundle]:
    """
    Generate every bundle a scene document describes.

    Frames produce one bundle; material cycles, when present, produce a
    second one named ``<name>_materials_lin``.
    """
    sequence = document.sequence
    if name:
        sequence = replace(sequence, name=name)

    bundles: list[TimelineBundle] = []
    has_frames = any(frame is not None for frame in sequence.frames)
    if has_frames or not document.material_cycles:
        bundles.append(generate_timelines(sequence, config))
    if document.material_cycles:
        base_name = name or sequence.name or (sequence.owner.name if sequence.owner else "")
        cycle_name = f"{base_name.strip()}{MATERIALS_SUFFIX}" if base_name.strip() else ""
        bundles.append(
            generate_material_cycle(
                cycle_name,
                document.material_cycles,
                config,
                owner=sequence.owner,
                output_location=sequence.output_location,
            )
        )
    return bundles


def export_bundles(
    bundles: list[TimelineBundle],
    output_format: str,
    output_dir: str | None = None,
    provider: OutputProvider | None = None,
) -> list[Path]:
    """Export bundles with the provider for ``output_format``; returns written paths."""
    target_provider = provider or resolve_output_provider(output_format)
    written: list[Path] = []
    for bundle in bundles:
        written.extend(target_provider.export(bundle, output_dir))
    return written
