"""Common VMAF filter graph types."""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Optional, Tuple

from .errors import InvalidResolutionError, InvalidVmafScaleError, VmafScaleParseError

# (width, height) of the distorted stream, None when not probed
Resolution = Tuple[int, int]

_WXH = re.compile(r"(\d+)x(\d+)", re.ASCII)


class PixelFormat(Enum):
    """Pixel formats both streams can be converted to before analysis."""
    YUV420P = "yuv420p"
    YUV420P10LE = "yuv420p10le"
    YUV422P10LE = "yuv422p10le"
    YUV444P10LE = "yuv444p10le"

    def __str__(self) -> str:
        return self.value


class VmafModel(Enum):
    """VMAF model in use, derived from the vmaf args."""
    VMAF_1K = auto()  # default 1080p model
    VMAF_4K = auto()
    CUSTOM = auto()  # some other user specified model


class ScaleMode(Enum):
    """How streams are scaled before analysis."""
    NONE = "none"
    AUTO = "auto"
    CUSTOM = "custom"


@dataclass(frozen=True)
class VmafScale:
    """Video resolution scale to use in VMAF analysis.
    
    Attributes:
        mode: Scaling mode
        width: Target box width, custom mode only
        height: Target box height, custom mode only
    """
    mode: ScaleMode = ScaleMode.AUTO
    width: Optional[int] = None
    height: Optional[int] = None

    def __post_init__(self):
        """Validate custom dimensions."""
        if self.mode is ScaleMode.CUSTOM:
            if (self.width is None or self.height is None
                    or self.width <= 0 or self.height <= 0):
                raise InvalidVmafScaleError(
                    "Custom vmaf-scale needs positive dimensions",
                    self.width, self.height
                )
        elif self.width is not None or self.height is not None:
            raise InvalidVmafScaleError(
                f"vmaf-scale '{self.mode.value}' takes no dimensions",
                self.width, self.height
            )

    @classmethod
    def none(cls) -> "VmafScale":
        return cls(ScaleMode.NONE)

    @classmethod
    def auto(cls) -> "VmafScale":
        return cls(ScaleMode.AUTO)

    @classmethod
    def custom(cls, width: int, height: int) -> "VmafScale":
        return cls(ScaleMode.CUSTOM, width, height)

    @classmethod
    def parse(cls, value: str) -> "VmafScale":
        """Parse the textual form: 'none', 'auto' or 'WxH'.
        
        Args:
            value: Text to parse
            
        Returns:
            Parsed scale
            
        Raises:
            VmafScaleParseError: If the text is not one of the accepted forms
        """
        if value == "none":
            return cls.none()
        if value == "auto":
            return cls.auto()
        match = _WXH.fullmatch(value)
        if not match:
            raise VmafScaleParseError(value)
        width, height = int(match.group(1)), int(match.group(2))
        if width == 0 or height == 0:
            raise VmafScaleParseError(value)
        return cls.custom(width, height)

    def __str__(self) -> str:
        if self.mode is ScaleMode.CUSTOM:
            return f"{self.width}x{self.height}"
        return self.mode.value


class ScaleTarget(NamedTuple):
    """ffmpeg scale values, -1 derives that dimension from the aspect ratio."""
    width: int
    height: int


def parse_resolution(value: str) -> Resolution:
    """Parse a 'WxH' resolution.
    
    Raises:
        InvalidResolutionError: If the text is malformed or a dimension is 0
    """
    match = _WXH.fullmatch(value.strip())
    if not match:
        raise InvalidResolutionError(value)
    width, height = int(match.group(1)), int(match.group(2))
    if width == 0 or height == 0:
        raise InvalidResolutionError(value)
    return width, height
