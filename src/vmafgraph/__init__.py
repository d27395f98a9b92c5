"""VMAF ffmpeg filter graph synthesis package."""

from .config import VmafOptions
from .core.errors import (
    InvalidResolutionError,
    InvalidVmafScaleError,
    VmafGraphError,
    VmafScaleParseError,
)
from .core.lavfi import (
    VmafBackend,
    build_filter_graph,
    distorted_input_args,
    reference_input_args,
)
from .core.model import resolve_model
from .core.scale import compute_scale, minimally_scale
from .core.types import (
    PixelFormat,
    ScaleMode,
    ScaleTarget,
    VmafModel,
    VmafScale,
    parse_resolution,
)

__version__ = "0.1.0"

__all__ = [
    "VmafOptions",
    "VmafBackend",
    "VmafGraphError",
    "VmafScaleParseError",
    "InvalidResolutionError",
    "InvalidVmafScaleError",
    "PixelFormat",
    "ScaleMode",
    "ScaleTarget",
    "VmafModel",
    "VmafScale",
    "build_filter_graph",
    "compute_scale",
    "distorted_input_args",
    "minimally_scale",
    "parse_resolution",
    "reference_input_args",
    "resolve_model",
]
