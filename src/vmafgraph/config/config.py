"""Configuration module for VMAF analysis settings."""

from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.lavfi import build_filter_graph, distorted_input_args, reference_input_args
from ..core.types import PixelFormat, Resolution, ScaleMode, VmafScale


class VmafOptions(BaseModel):
    """Common VMAF options."""
    
    model_config = ConfigDict(
        frozen=True,
        validate_default=True,
    )
    
    vmaf_args: Tuple[str, ...] = Field(
        default=(),
        description="Additional libvmaf args, e.g. n_threads=8, n_subsample=4"
    )
    vmaf_scale: VmafScale = Field(
        default_factory=VmafScale.auto,
        description="Scale used in analysis: 'auto', 'none' or WxH"
    )
    reference_vfilter: Optional[str] = Field(
        default=None,
        description="FFmpeg filter applied to the reference before analysis"
    )
    cuda: bool = Field(
        default=False,
        description="Use libvmaf_cuda instead of libvmaf"
    )
    
    @field_validator("vmaf_scale", mode="before")
    @classmethod
    def _parse_vmaf_scale(cls, value: Union[str, VmafScale]) -> VmafScale:
        """Accept the textual vmaf-scale form."""
        if isinstance(value, str):
            return VmafScale.parse(value.strip())
        return value
    
    def is_default(self) -> bool:
        """Whether all options are at their defaults."""
        return (
            not self.vmaf_args
            and self.vmaf_scale.mode is ScaleMode.AUTO
            and self.reference_vfilter is None
            and not self.cuda
        )
    
    def ffmpeg_lavfi(
        self,
        distorted_res: Optional[Resolution],
        pix_fmt: PixelFormat,
        ref_vfilter: Optional[str] = None,
    ) -> str:
        """Get the ffmpeg ``filter_complex``/``lavfi`` value for VMAF.
        
        Note ``ref_vfilter`` is ignored if ``reference_vfilter`` is set.
        """
        return build_filter_graph(self, distorted_res, pix_fmt, ref_vfilter)
    
    def reference_input_args(self) -> List[str]:
        return reference_input_args(self)
    
    def distorted_input_args(self) -> List[str]:
        return distorted_input_args(self)
