"""Command line interface for vmafgraph."""
import json
from typing import Optional, Tuple

import click
from loguru import logger

from .config import VmafOptions, default_config as defaults
from .core.errors import VmafGraphError
from .core.types import PixelFormat, Resolution, VmafScale, parse_resolution
from .utils.logging import setup_logging


def _parse_scale(ctx, param, value: str) -> VmafScale:
    try:
        return VmafScale.parse(value)
    except VmafGraphError as e:
        raise click.BadParameter(e.message, ctx=ctx, param=param)


def _parse_res(ctx, param, value: Optional[str]) -> Optional[Resolution]:
    if value is None:
        return None
    try:
        return parse_resolution(value)
    except VmafGraphError as e:
        raise click.BadParameter(e.message, ctx=ctx, param=param)


@click.command()
@click.option('--vmaf', 'vmaf_args', multiple=True,
              help="Additional vmaf arg(s). E.g. --vmaf n_threads=8 --vmaf n_subsample=4")
@click.option('--vmaf-scale', default=defaults.VMAF_SCALE, show_default=True,
              callback=_parse_scale,
              help="Scale used in analysis: 'auto', 'none' or WxH e.g. 1920x1080")
@click.option('--reference-vfilter',
              help="Filter applied to the reference, overrides --vfilter")
@click.option('--vfilter', help="Filter applied to the reference")
@click.option('--cuda', is_flag=True, help="Use libvmaf_cuda instead of libvmaf")
@click.option('--distorted-res', callback=_parse_res,
              help="Distorted video resolution WxH")
@click.option('--pix-format', default=defaults.PIX_FMT, show_default=True,
              type=click.Choice([f.value for f in PixelFormat]))
@click.option('--json', 'as_json', is_flag=True,
              help="Print the filter graph and input args as JSON")
@click.option('--log-level', default=defaults.LOG_LEVEL, show_default=True,
              help="Log level, defaults to $VMAFGRAPH_LOG_LEVEL or WARNING")
@click.option('--log-file', type=click.Path(dir_okay=False))
def main(
    vmaf_args: Tuple[str, ...],
    vmaf_scale: VmafScale,
    reference_vfilter: Optional[str],
    vfilter: Optional[str],
    cuda: bool,
    distorted_res: Optional[Resolution],
    pix_format: str,
    as_json: bool,
    log_level: str,
    log_file: Optional[str],
) -> None:
    """Print the ffmpeg lavfi value for a VMAF analysis.
    
    Input 0 of the ffmpeg command is the distorted video, input 1 the reference.
    """
    setup_logging(log_level, log_file)
    
    options = VmafOptions(
        vmaf_args=vmaf_args,
        vmaf_scale=vmaf_scale,
        reference_vfilter=reference_vfilter,
        cuda=cuda,
    )
    logger.debug(f"VMAF options: {options}")
    
    lavfi = options.ffmpeg_lavfi(distorted_res, PixelFormat(pix_format), vfilter)
    
    if as_json:
        click.echo(json.dumps({
            "lavfi": lavfi,
            "reference_input_args": options.reference_input_args(),
            "distorted_input_args": options.distorted_input_args(),
        }, indent=2))
    else:
        click.echo(lavfi)


if __name__ == '__main__':
    main()
