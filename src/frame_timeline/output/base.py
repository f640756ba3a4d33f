"""Base class for timeline export providers."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from ..constants import DEFAULT_OUTPUT_LOCATION
from ..errors import ExportError
from ..timeline.timeline import Timeline, TimelineBundle

logger = logging.getLogger(__name__)


class OutputProvider(ABC):
    """Abstract base class for timeline export providers."""

    extension: str = ""

    def __init__(self, location: str = ""):
        """
        Initialize the provider with a default output directory.

        Args:
            location: Directory artifacts are written to when a bundle names none
        """
        self.location = location

    @abstractmethod
    def encode(self, timeline: Timeline) -> bytes:
        """
        Encode one timeline into this provider's format.

        Args:
            timeline: Fully generated timeline

        Returns:
            Encoded artifact as bytes
        """
        raise NotImplementedError

    def artifact_path(self, timeline: Timeline, location: str | None = None) -> Path:
        """Path the timeline is written to: ``<location>/<name><extension>``."""
        directory = location or self.location or DEFAULT_OUTPUT_LOCATION
        return Path(directory) / f"{timeline.name}{self.extension}"

    def write(self, path: Path, data: bytes) -> None:
        """
        Write encoded data, replacing any existing artifact at ``path``.

        Raises:
            ExportError: If the directory or file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise ExportError(f"Failed to write '{path}': {e}") from e

    def export(self, bundle: TimelineBundle, location: str | None = None) -> list[Path]:
        """
        Encode every timeline of a bundle, then write them all.

        Nothing is written when any timeline fails to encode.

        Args:
            bundle: Generated timelines
            location: Output directory; defaults to the bundle's location

        Returns:
            Written paths in bundle order
        """
        target = location or bundle.output_location or None
        encoded = [
            (self.artifact_path(timeline, target), self.encode(timeline))
            for timeline in bundle
        ]
        for path, data in encoded:
            self.write(path, data)
            logger.info("Wrote %s", path)
        return [path for path, _ in encoded]
