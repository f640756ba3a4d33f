"""Output providers for different timeline formats."""

from dataclasses import dataclass

from .base import OutputProvider
from .json_provider import JsonOutputProvider, timeline_document
from .png_provider import DopeSheetStyle, PngOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    media_type: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "json": OutputFormatSpec(
        media_type="application/json",
        provider_class=JsonOutputProvider,
    ),
    "png": OutputFormatSpec(
        media_type="image/png",
        provider_class=PngOutputProvider,
    ),
}

DEFAULT_OUTPUT_FORMAT = "json"


def resolve_output_provider(output_format: str, location: str = "") -> OutputProvider:
    """
    Resolve the output provider for a format name.

    Args:
        output_format: Format name (case-insensitive), e.g. ``json``
        location: Default directory for the provider

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If the format is not supported
    """
    spec = _output_spec_from_format(output_format)
    return spec.provider_class(location)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def media_type_for_output_format(output_format: str) -> str:
    """Resolve media type for a supported output format."""
    return _output_spec_from_format(output_format).media_type


def _output_spec_from_format(output_format: str) -> OutputFormatSpec:
    spec = _OUTPUT_FORMATS.get(output_format.lower().removeprefix("."))
    if spec is not None:
        return spec
    supported = ", ".join(supported_output_formats())
    raise ValueError(f"Unsupported output format: {output_format}. Supported formats: {supported}")


__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "DopeSheetStyle",
    "OutputFormatSpec",
    "OutputProvider",
    "JsonOutputProvider",
    "PngOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
    "media_type_for_output_format",
    "timeline_document",
]
