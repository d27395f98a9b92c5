"""Default configuration values."""

import os


# VMAF model versions
VMAF_1K_MODEL = "vmaf_v0.6.1"
VMAF_4K_MODEL = "vmaf_4k_v0.6.1"

# Distorted resolutions above this (both dimensions) default to the 4k model
MODEL_4K_MIN_WIDTH = 2560
MODEL_4K_MIN_HEIGHT = 1440

# Auto scale: upscale when both dimensions are below the limit
AUTO_SCALE_1K_LIMIT = (1728, 972)
AUTO_SCALE_1K_TARGET = (1920, 1080)
AUTO_SCALE_4K_LIMIT = (3456, 1944)
AUTO_SCALE_4K_TARGET = (3840, 2160)

# Filter graph settings
VMAF_FILTER_OPTS = "shortest=true:ts_sync_mode=nearest"
PTS_FIXATION = "settb=AVTB,setpts=N/FRAME_RATE/TB"
INTERP_ALGO = "bicubic"

# Hardware acceleration options
CUDA_PIX_FMT = "yuv420p"  # only format scale_cuda/libvmaf_cuda accept
CUDA_INPUT_ARGS = ("-hwaccel", "cuda", "-hwaccel_output_format", "cuda")

# CLI defaults
PIX_FMT = "yuv420p"
VMAF_SCALE = "auto"
LOG_LEVEL = os.getenv("VMAFGRAPH_LOG_LEVEL", "WARNING")
