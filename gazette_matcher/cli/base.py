"""
Base command infrastructure for the gazette matcher CLI.
Provides common functionality and utilities for all commands.
"""

import csv
import functools
import io
import json
import click
import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Config


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)

        # Get debug status from click context
        ctx = click.get_current_context(silent=True)
        self.debug = bool(ctx and ctx.obj and ctx.obj.get('debug'))
        if self.debug:
            self.logger.debug(f"Debug mode enabled for {self.__class__.__name__}")

    @abstractmethod
    def execute(self) -> None:
        """Execute the command. Must be implemented by subclasses."""
        pass

    def validate(self) -> bool:
        """Validate command configuration and requirements.

        Returns:
            bool: True if validation passes, False otherwise
        """
        if self.debug:
            self.logger.debug("Validating command configuration")
        return self.config.validate()

    def write_output(self, content: str, output_file: Optional[Path] = None) -> None:
        """Write rendered output to a file, or to stdout when no file is given."""
        if output_file:
            output_file.write_text(content, encoding='utf-8')
            click.echo(f"\nResults saved to {output_file}", err=True)
        else:
            click.echo(content)


class FileInputCommand(BaseCommand):
    """Base class for commands that process input files."""

    def __init__(self, config: Config, input_files: List[Path], output_file: Optional[Path] = None):
        super().__init__(config)
        self.input_files = input_files
        self.output_file = output_file

    def validate(self) -> bool:
        """Validate input files exist and are readable."""
        if not super().validate():
            return False

        for input_file in self.input_files:
            if not input_file.exists():
                self.logger.error(f"Input file not found: {input_file}")
                return False

            if not input_file.is_file():
                self.logger.error(f"Input path is not a file: {input_file}")
                return False

        return True


def render_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, default=str)


def render_csv(rows: List[Dict[str, Any]]) -> str:
    """Render rows as CSV, using the union of keys in first-seen order."""
    fieldnames = list(dict.fromkeys(key for row in rows for key in row))
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


def command_error_handler(f):
    """Decorator to handle command execution errors consistently."""
    @functools.wraps(f)
    def wrapper(self, *args, **kwargs):
        try:
            if self.debug:
                self.logger.debug(f"Starting command execution: {f.__name__}")
                start = time.time()

            result = f(self, *args, **kwargs)

            if self.debug:
                self.logger.debug(f"Command completed in {time.time() - start:.3f}s")

            return result

        except click.Abort:
            raise
        except Exception as e:
            click.secho(f"Error: {str(e)}", fg='red', err=True)
            if self.debug:
                self.logger.debug(f"Command failed with error: {str(e)}", exc_info=True)
            raise click.Abort()
    return wrapper
