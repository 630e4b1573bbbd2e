"""
CLI module for the gazette matcher package.
Provides configuration, logging and command infrastructure.

The click entry point lives in ``gazette_matcher.cli.main``.
"""

from .base import BaseCommand
from .config import Config
from .logging import setup_logging, get_logger

__all__ = ['BaseCommand', 'Config', 'setup_logging', 'get_logger']
