"""CLI command modules for filament-plugin."""

from .config_cmd import config
from .make_plugin import make
from .page import page
from .register import register
from .submit import submit

__all__ = ["config", "make", "page", "register", "submit"]
