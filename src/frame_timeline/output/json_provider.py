"""JSON timeline document provider."""

import json
from typing import Any

from ..timeline.curve import CONSTANT_INTERPOLATION
from ..timeline.timeline import Timeline
from .base import OutputProvider


class JsonOutputProvider(OutputProvider):
    """Output provider writing one JSON document per timeline."""

    extension = ".json"

    def encode(self, timeline: Timeline) -> bytes:
        document = timeline_document(timeline)
        return (json.dumps(document, indent=2) + "\n").encode("utf-8")


def timeline_document(timeline: Timeline) -> dict[str, Any]:
    """Plain-data form of a timeline, curves in binding order."""
    return {
        "name": timeline.name,
        "frame_rate": timeline.frame_rate,
        "duration": timeline.duration,
        "interpolation": CONSTANT_INTERPOLATION,
        "curves": [
            {
                "path": binding.path,
                "kind": binding.kind.value,
                "attribute": binding.attribute,
                "keys": [{"time": key.time, "value": key.value} for key in curve],
            }
            for binding, curve in timeline.items()
        ],
    }
