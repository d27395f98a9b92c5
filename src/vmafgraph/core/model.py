"""VMAF model selection."""

from typing import Optional, Sequence

from ..config import default_config as defaults
from .types import VmafModel


def resolve_model(vmaf_args: Sequence[str]) -> Optional[VmafModel]:
    """Work out which VMAF model the vmaf args select.
    
    A single ``model`` arg naming one of the default model versions maps to
    that model. Any other single model arg, or more than one, is treated
    as a user specified model.
    
    Args:
        vmaf_args: Ordered libvmaf ``key=value`` args
        
    Returns:
        The selected model, or None if no model arg is present
    """
    model_args = [arg for arg in vmaf_args if "model" in arg]
    
    if not model_args:
        return None
    if len(model_args) > 1:
        return VmafModel.CUSTOM
    
    arg = model_args[0]
    if arg.endswith(f"version={defaults.VMAF_1K_MODEL}"):
        return VmafModel.VMAF_1K
    if arg.endswith(f"version={defaults.VMAF_4K_MODEL}"):
        return VmafModel.VMAF_4K
    return VmafModel.CUSTOM
