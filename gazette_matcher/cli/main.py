"""
Core CLI implementation for the gazette matcher package.
"""

import click
from dataclasses import replace
from pathlib import Path

from .config import Config, OUTPUT_FORMATS
from .logging import setup_logging, get_logger
from ..commands import ExtractCommand, MatchCommand
from ..processors.reconciler import MODES


def _config_with(ctx, **overrides) -> Config:
    """Copy the context config with any options the user actually passed."""
    config = ctx.obj['config']
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


@click.group()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.option('--env-file', type=click.Path(exists=True, dir_okay=False, path_type=Path), help='Load settings from this .env file')
@click.pass_context
def cli(ctx, debug: bool, env_file: Path | None):
    """Gazette deceased-name matcher"""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug

    try:
        config = Config.from_env(env_file)
    except Exception as e:
        click.secho(f"Error initializing configuration: {str(e)}", fg='red', err=True)
        ctx.exit(1)

    setup_logging(debug=debug, level=config.log_level)
    logger = get_logger('cli')
    if debug:
        logger.debug("Debug mode enabled")

    ctx.obj['config'] = config


@cli.command()
@click.argument('spreadsheet', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.argument('document', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option('--threshold', type=int, help='Minimum score (0-100) for a confirmed match')
@click.option('--mode', type=click.Choice(MODES), help='filter: only matches; annotate: every row with status')
@click.option('--name-column', help='Spreadsheet column holding the deceased name')
@click.option('--approval-date', help='Date stamped on approved rows in annotate mode')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS), help='Output format')
@click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Save results to file')
@click.option('--workers', 'max_workers', type=int, help='Threads used for matching')
@click.option('--timeout', type=float, help='Abort matching after this many seconds')
@click.pass_context
def match(ctx, spreadsheet: Path, document: Path, output: Path | None, **options):
    """Match names in a spreadsheet against a gazette document."""
    config = _config_with(ctx, **options)
    command = MatchCommand(config, spreadsheet, document, output)
    command.execute()


@cli.command()
@click.argument('document', type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path))
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS), help='Output format')
@click.option('--output', type=click.Path(file_okay=True, dir_okay=False, path_type=Path), help='Save candidates to file')
@click.pass_context
def extract(ctx, document: Path, output: Path | None, output_format: str | None):
    """List candidate names extracted from a gazette document."""
    config = _config_with(ctx, output_format=output_format)
    command = ExtractCommand(config, document, output)
    command.execute()


@cli.command()
@click.option('--host', help='Interface to bind')
@click.option('--port', type=int, help='Port to listen on')
@click.pass_context
def serve(ctx, host: str | None, port: int | None):
    """Run the HTTP matching service."""
    import uvicorn
    from ..api import create_app

    config = _config_with(ctx, host=host, port=port)
    try:
        config.validate()
    except Exception as e:
        click.secho(f"Error: {str(e)}", fg='red', err=True)
        raise click.Abort()

    click.echo(f"Server running on http://{config.host}:{config.port}")
    uvicorn.run(create_app(config), host=config.host, port=config.port)


if __name__ == '__main__':
    cli()
