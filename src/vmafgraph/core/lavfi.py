"""ffmpeg filter graph construction for VMAF analysis."""

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from loguru import logger

from ..config import default_config as defaults
from .hardware import HardwareAccel, available_parallelism, get_input_args
from .model import resolve_model
from .scale import compute_scale
from .types import PixelFormat, Resolution, ScaleTarget, VmafModel

if TYPE_CHECKING:
    from ..config.config import VmafOptions


class VmafBackend(Enum):
    """libvmaf filter variant, selects filter names and step placement."""
    CPU = "libvmaf"
    CUDA = "libvmaf_cuda"

    @classmethod
    def for_options(cls, options: "VmafOptions") -> "VmafBackend":
        return cls.CUDA if options.cuda else cls.CPU

    @property
    def hw_accel(self) -> HardwareAccel:
        return HardwareAccel.CUDA if self is VmafBackend.CUDA else HardwareAccel.NONE

    def pixel_format(self, pix_fmt: PixelFormat) -> PixelFormat:
        """Get the pixel format this backend can convert to."""
        if self is VmafBackend.CUDA and pix_fmt.value != defaults.CUDA_PIX_FMT:
            logger.debug(
                f"libvmaf_cuda only supports {defaults.CUDA_PIX_FMT}, "
                f"ignoring {pix_fmt}"
            )
            return PixelFormat(defaults.CUDA_PIX_FMT)
        return pix_fmt

    def convert_steps(
        self, pix_fmt: PixelFormat, scale: Optional[ScaleTarget]
    ) -> Tuple[str, str]:
        """Get the filters converting a stream to the common format & size.
        
        The reference vfilter goes between the two returned parts, so on
        the CPU it runs before scaling and with CUDA after it.
        
        Returns:
            (head, tail) filter chain parts, each empty or ending in ','
        """
        interp = defaults.INTERP_ALGO
        if self is VmafBackend.CUDA:
            head = f"scale_cuda=format={pix_fmt}"
            if scale:
                head += f":w={scale.width}:h={scale.height}:interp_algo={interp}"
            return f"{head},", ""
        
        tail = f"scale={scale.width}:{scale.height}:flags={interp}," if scale else ""
        return f"format={pix_fmt},", tail


def vmaf_args_with_defaults(options: "VmafOptions") -> List[str]:
    """Get the vmaf args, adding ``n_threads`` for libvmaf if missing."""
    args = list(options.vmaf_args)
    if not options.cuda and not any("n_threads" in arg for arg in args):
        # default n_threads to all cores
        threads = available_parallelism()
        logger.debug(f"Defaulting libvmaf n_threads to {threads}")
        args.append(f"n_threads={threads}")
    return args


def reference_prefilter(
    options: "VmafOptions", ref_vfilter: Optional[str]
) -> str:
    """Get the reference vfilter as a filter chain prefix.
    
    ``options.reference_vfilter`` overrides ``ref_vfilter`` unless it is None.
    
    Returns:
        The filter ending in ',' or an empty string
    """
    vfilter = options.reference_vfilter
    if vfilter is None:
        vfilter = ref_vfilter
    if not vfilter:
        return ""
    if vfilter.endswith(","):
        return vfilter
    return f"{vfilter},"


def build_filter_graph(
    options: "VmafOptions",
    distorted_res: Optional[Resolution],
    pix_fmt: PixelFormat,
    ref_vfilter: Optional[str] = None,
) -> str:
    """Build the ffmpeg ``filter_complex``/``lavfi`` value for VMAF.
    
    Input 0 is the distorted video and input 1 the reference. Both streams
    are converted to a common pixel format, scaled if necessary and have
    their timestamps synced before being passed to libvmaf.
    
    Args:
        options: VMAF options
        distorted_res: Distorted stream (width, height) if known
        pix_fmt: Pixel format to analyse in
        ref_vfilter: Filter to apply to the reference, ignored if
            ``options.reference_vfilter`` is set
            
    Returns:
        Filter graph string
    """
    backend = VmafBackend.for_options(options)
    args = vmaf_args_with_defaults(options)
    lavfi = f"{backend.value}={defaults.VMAF_FILTER_OPTS}:" + ":".join(args)
    
    model = resolve_model(args)
    if model is None and distorted_res is not None:
        width, height = distorted_res
        if width > defaults.MODEL_4K_MIN_WIDTH and height > defaults.MODEL_4K_MIN_HEIGHT:
            # for >2k resolutions use 4k model
            logger.debug(f"Using 4k model for {width}x{height}")
            lavfi += f":model=version={defaults.VMAF_4K_MODEL}"
            model = VmafModel.VMAF_4K
    
    ref_vf = reference_prefilter(options, ref_vfilter)
    pix_fmt = backend.pixel_format(pix_fmt)
    scale = compute_scale(options.vmaf_scale, model, distorted_res)
    if scale:
        logger.debug(f"Scaling VMAF streams to {scale.width}:{scale.height}")
    
    # prefix:
    # * convert both streams to common pixel format
    # * add reference vfilter if any
    # * scale to vmaf size if necessary
    # * sync presentation timestamp
    head, tail = backend.convert_steps(pix_fmt, scale)
    pts = defaults.PTS_FIXATION
    prefix = (
        f"[0:v]{head}{tail}{pts}[dis];"
        f"[1:v]{head}{ref_vf}{tail}{pts}[ref];"
        "[dis][ref]"
    )
    return prefix + lavfi


def reference_input_args(options: "VmafOptions") -> List[str]:
    """Get ffmpeg input options for the reference input."""
    return get_input_args(VmafBackend.for_options(options).hw_accel)


def distorted_input_args(options: "VmafOptions") -> List[str]:
    """Get ffmpeg input options for the distorted input."""
    return get_input_args(VmafBackend.for_options(options).hw_accel)
