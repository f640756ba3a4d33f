"""Global constants for the application."""

# Timeline settings
DEFAULT_TOTAL_STEPS = 255  # Discrete step budget of every generated clip
DEFAULT_FRAME_RATE = 60.0  # Playback rate in Hz
KEY_TIME_EPSILON = 1e-6  # Keys closer than this (seconds) are the same key

# Timeline name suffixes per generation mode
ON_SUFFIX = "_on"
OFF_SUFFIX = "_off"
A_SUFFIX = "_A"
B_SUFFIX = "_B"
LINEAR_SUFFIX = "_lin"
MATERIALS_SUFFIX = "_materials"  # Appended before LINEAR_SUFFIX for material cycles

# Blend weight range
BLEND_WEIGHT_MIN = 0.0
BLEND_WEIGHT_MAX = 100.0

# Host property paths
OBJECT_ACTIVE_PROPERTY = "m_IsActive"
MATERIAL_SLOT_PROPERTY = "m_Materials.Array.data[{index}]"
BLEND_WEIGHT_PROPERTY = "blendShape.{name}"

# Default export location for generated timelines
DEFAULT_OUTPUT_LOCATION = "Generated"

# Environment variables read by TimelineConfig.from_env
ENV_TOTAL_STEPS = "FRAME_TIMELINE_TOTAL_STEPS"
ENV_FRAME_RATE = "FRAME_TIMELINE_FRAME_RATE"
