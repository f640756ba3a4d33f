"""Exceptions raised by timeline generation and export."""

from typing import Any


class ValidationError(Exception):
    """Input cannot produce any timeline; generation aborts with no output."""

    def __init__(self, code: str, message: str = ""):
        self.code = code
        self.message = message or code
        super().__init__(f"{code}: {self.message}" if message else code)


class RootNotFound(ValidationError):
    """No node carrying the root marker was found above the sequence."""

    def __init__(self, message: str = "No root node found in the hierarchy"):
        super().__init__("RootNotFound", message)


class EndpointResolutionWarning(UserWarning):
    """A single endpoint could not be bound and was skipped."""

    def __init__(self, endpoint: Any, reason: str, frame_index: int | None = None):
        self.endpoint = endpoint
        self.reason = reason
        self.frame_index = frame_index
        location = f" in frame {frame_index}" if frame_index is not None else ""
        super().__init__(f"Skipped endpoint{location}: {reason}")


class ExportError(Exception):
    """Persisting a timeline artifact failed."""
