"""Extract command: list the candidate names found in a gazette document."""

import click
from pathlib import Path
from typing import Optional

from ...cli.base import FileInputCommand, command_error_handler, render_json
from ...cli.config import Config
from ...matcher import GazetteMatcher
from ...utils.readers import read_document_text


class ExtractCommand(FileInputCommand):
    """Command to show what names the extractor finds in a document."""

    def __init__(self, config: Config, document: Path, output_file: Optional[Path] = None):
        super().__init__(config, [document], output_file)
        self.document = document

    @command_error_handler
    def execute(self) -> None:
        """Execute the extract command."""
        if not self.validate():
            raise click.Abort()

        text = read_document_text(self.document)
        result = GazetteMatcher(self.config, debug=self.debug).extract(text)

        if self.config.output_format == 'json' or self.output_file:
            self.write_output(render_json(result), self.output_file)
            return

        click.echo(f"\nCandidates found: {len(result['candidates'])}")
        if result['gazetteDate']:
            click.echo(f"Gazette Date: {result['gazetteDate']}")
        for name in result['candidates']:
            click.echo(f"  - {name}")


__all__ = ['ExtractCommand']
