"""VMAF filter graph error types."""

from typing import Optional


class VmafGraphError(Exception):
    """Base class for vmafgraph errors."""
    
    def __init__(self, message: str, details: Optional[str] = None):
        """Initialize error.
        
        Args:
            message: Error message
            details: Optional technical details
        """
        self.message = message
        self.details = details
        super().__init__(message)


class VmafScaleParseError(VmafGraphError, ValueError):
    """Error parsing a vmaf-scale value."""
    
    MESSAGE = "vmaf-scale must be 'none', 'auto' or WxH format e.g. '1920x1080'"
    
    def __init__(self, value: str):
        """Initialize error.
        
        Args:
            value: The rejected vmaf-scale text
        """
        super().__init__(self.MESSAGE, f"Got: {value!r}")
        self.value = value


class InvalidResolutionError(VmafGraphError, ValueError):
    """Error parsing a WxH resolution."""
    
    def __init__(self, value: str):
        """Initialize error.
        
        Args:
            value: The rejected resolution text
        """
        super().__init__(
            "resolution must be WxH with positive integers e.g. '1920x1080'",
            f"Got: {value!r}"
        )
        self.value = value


class InvalidVmafScaleError(VmafGraphError, ValueError):
    """Error constructing a vmaf-scale with invalid dimensions."""
    
    def __init__(self, message: str, width: Optional[int], height: Optional[int]):
        """Initialize error.
        
        Args:
            message: Error message
            width: Rejected width
            height: Rejected height
        """
        super().__init__(message, f"Dimensions: {width}x{height}")
        self.width = width
        self.height = height
