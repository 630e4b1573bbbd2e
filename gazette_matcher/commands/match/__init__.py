"""Match command: reconcile a spreadsheet against a gazette document."""

import click
from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.table import Table

from ...cli.base import FileInputCommand, command_error_handler, render_csv, render_json
from ...cli.config import Config
from ...matcher import GazetteMatcher


class MatchCommand(FileInputCommand):
    """Command to match deceased names in a spreadsheet against a gazette."""

    def __init__(self, config: Config, spreadsheet: Path, document: Path, output_file: Optional[Path] = None):
        super().__init__(config, [spreadsheet, document], output_file)
        self.spreadsheet = spreadsheet
        self.document = document

    @command_error_handler
    def execute(self) -> None:
        """Execute the match command."""
        if not self.validate():
            raise click.Abort()

        self.logger.info(f"Matching {self.spreadsheet} against {self.document}...")
        matcher = GazetteMatcher(self.config, debug=self.debug)
        results = matcher.match_files(self.spreadsheet, self.document)

        if self.config.output_format == 'json':
            self.write_output(render_json(results), self.output_file)
        elif self.config.output_format == 'csv':
            self.write_output(render_csv(results['matched']), self.output_file)
        else:
            self._display_summary(results)
            if self.output_file:
                self.write_output(render_json(results), self.output_file)

    def _display_summary(self, results: Dict[str, Any]) -> None:
        """Display match summary and table to console."""
        summary = results['summary']

        click.echo("\nGazette Match Summary:")
        click.echo(f"Spreadsheet Rows: {summary['records']}")
        click.echo(f"Gazette Names: {summary['candidates']}")
        click.echo(f"Matches (score >= {summary['threshold']}): {summary['matched']}")
        if summary['gazetteDate']:
            click.echo(f"Gazette Date: {summary['gazetteDate']}")

        if not results['matched']:
            click.secho("\nNo matching names found.", fg='yellow')
            return

        table = Table(title="Matches")
        table.add_column("Name")
        table.add_column("Gazette Match")
        table.add_column("Score", justify="right")
        annotate = summary['mode'] == 'annotate'
        if annotate:
            table.add_column("Status")
            table.add_column("Approval Date")

        for row in results['matched']:
            style = "green" if row['score'] >= summary['threshold'] else None
            cells = [row['excelName'], row['gazetteMatch'], str(row['score'])]
            if annotate:
                cells.extend([row['status'], row['approvalDate']])
            table.add_row(*cells, style=style)

        Console().print(table)


__all__ = ['MatchCommand']
