"""
Command implementations for the gazette matcher CLI.
Each submodule provides specific command functionality.
"""

from .extract import ExtractCommand
from .match import MatchCommand

__all__ = ['ExtractCommand', 'MatchCommand']
