"""Configuration module for vmafgraph settings and defaults."""

from .config import VmafOptions
from . import default_config

__all__ = ["VmafOptions", "default_config"]
