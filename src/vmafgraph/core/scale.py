"""Scaling of streams before VMAF analysis."""

from typing import Optional, Tuple

from ..config import default_config as defaults
from .types import Resolution, ScaleMode, ScaleTarget, VmafModel, VmafScale


def minimally_scale(
    source: Resolution, target: Tuple[int, int]
) -> ScaleTarget:
    """Get the smallest scale meeting at least one of the target bounds.
    
    Only the dimension with the larger source/target ratio is fixed, the
    other is left as -1 so ffmpeg keeps the aspect ratio.
    
    Args:
        source: Source (width, height)
        target: Target box (width, height)
        
    Returns:
        Scale target with a single free dimension
    """
    from_w, from_h = source
    target_w, target_h = target
    w_factor = from_w / target_w
    h_factor = from_h / target_h
    if h_factor > w_factor:
        return ScaleTarget(-1, target_h)  # scale vertically
    return ScaleTarget(target_w, -1)  # scale horizontally


def compute_scale(
    vmaf_scale: VmafScale,
    model: Optional[VmafModel],
    distorted_res: Optional[Resolution],
) -> Optional[ScaleTarget]:
    """Decide the scale, if any, to apply to both streams.
    
    Auto behaviour:
    - 1k model (also used when no model is selected): if width and height
      are less than 1728 & 972 upscale to 1080p
    - 4k model: if width and height are less than 3456 & 1944 upscale to 4k
    - custom models are never scaled automatically
    
    Args:
        vmaf_scale: Scale setting
        model: Resolved VMAF model, None treated as the 1k model
        distorted_res: Distorted stream (width, height) if known
        
    Returns:
        Scale target or None for no scaling
    """
    model = model or VmafModel.VMAF_1K
    
    if vmaf_scale.mode is ScaleMode.CUSTOM:
        box = (vmaf_scale.width, vmaf_scale.height)
        if distorted_res is None:
            return ScaleTarget(*box)
        return minimally_scale(distorted_res, box)
    
    if vmaf_scale.mode is not ScaleMode.AUTO or distorted_res is None:
        return None
    
    width, height = distorted_res
    if model is VmafModel.VMAF_1K:
        limit_w, limit_h = defaults.AUTO_SCALE_1K_LIMIT
        if width < limit_w and height < limit_h:
            return minimally_scale(distorted_res, defaults.AUTO_SCALE_1K_TARGET)
    elif model is VmafModel.VMAF_4K:
        limit_w, limit_h = defaults.AUTO_SCALE_4K_LIMIT
        if width < limit_w and height < limit_h:
            return minimally_scale(distorted_res, defaults.AUTO_SCALE_4K_TARGET)
    return None
