"""Hardware acceleration and CPU support for VMAF analysis.

This module provides the ffmpeg input options for hardware accelerated
analysis and the thread count libvmaf should default to. Currently supports:
- CUDA (libvmaf_cuda with scale_cuda)
"""

import os
from enum import Enum, auto
from typing import List

import psutil
from loguru import logger

from ..config import default_config as defaults


class HardwareAccel(Enum):
    """Supported hardware acceleration types."""
    NONE = auto()
    CUDA = auto()


def get_input_args(accel: HardwareAccel) -> List[str]:
    """Get ffmpeg input options for a hardware acceleration type.
    
    Args:
        accel: Hardware acceleration type
        
    Returns:
        List of ffmpeg command line options, placed before ``-i``
    """
    if accel == HardwareAccel.CUDA:
        return list(defaults.CUDA_INPUT_ARGS)
    return []


def available_parallelism() -> int:
    """Get the number of CPUs this process may run on, at least 1."""
    try:
        count = len(psutil.Process().cpu_affinity())
    except (AttributeError, psutil.Error, OSError) as e:
        # cpu_affinity is not available on macOS
        logger.debug(f"CPU affinity unavailable, using CPU count: {e}")
        count = os.cpu_count() or 1
    return max(count, 1)
