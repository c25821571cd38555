"""Command line entry point for checking and normalizing analysis settings."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from esanalysis import __version__
from esanalysis.codec import dump_analysis_file, encode_analysis, load_analysis_file
from esanalysis.config import load_config
from esanalysis.exceptions import AnalysisDecodeError
from esanalysis.languages import Language

logger = logging.getLogger(__name__)


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


def resolve_log_level(
    verbose: bool = False,
    quiet: bool = False,
    debug: bool = False,
    level_name: str | None = None,
) -> int:
    """Pick the root log level; flags win over the configured level name."""
    if quiet:
        return logging.WARNING
    if verbose or debug:
        return logging.DEBUG
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if isinstance(level, int):
            return level
        logger.warning(f"Unknown log level {level_name!r}, using INFO")
    return logging.INFO


def setup_logging(level: int, debug: bool = False) -> None:
    """Send log records to stderr so normalized output stays clean."""
    fmt = "%(levelname)s: %(message)s"
    if debug:
        fmt = "%(asctime)s %(name)s " + fmt
    logging.basicConfig(level=level, format=fmt, datefmt="%H:%M:%S")


def create_console(no_color: bool = False) -> Console:
    """Create the console used for validation reports and status lines."""
    if no_color:
        return Console(width=120, no_color=True, color_system=None, highlight=False)
    return Console(width=120)


class AnalysisGroup(click.Group):
    """Group that reports decode and configuration errors without tracebacks."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except (AnalysisDecodeError, OSError, ValueError) as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(
                    f"[red]Error:[/red] {escape(str(e))}",
                    highlight=False,
                    soft_wrap=True,
                )
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=AnalysisGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__,
    prog_name="esanalysis",
    message="esanalysis version %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """Search index analysis settings tool.

    Validate and normalize the analyzers, tokenizers, and token filters of
    an index's analysis settings.
    """
    try:
        config_data = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    setup_logging(
        resolve_log_level(
            verbose=verbose,
            quiet=quiet,
            debug=debug,
            level_name=config_data.get("log_level"),
        ),
        debug=debug,
    )

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        config=config_data,
        debug=debug,
    )


@cli.command()
@click.argument(
    "files", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.pass_obj
def validate(obj: Context, files: tuple[Path, ...]) -> None:
    """Check that FILES contain analysis settings this tool understands."""
    table = Table(title="Analysis settings")
    table.add_column("File")
    table.add_column("Analyzers", justify="right")
    table.add_column("Tokenizers", justify="right")
    table.add_column("Filters", justify="right")

    failures = 0
    for path in files:
        try:
            analysis = load_analysis_file(path)
        except AnalysisDecodeError as e:
            failures += 1
            logger.debug(f"Failed to decode {path}: {e!r}")
            obj.console.print(
                f"[red]✗[/red] {escape(str(path))}: {escape(str(e))}",
                highlight=False,
                soft_wrap=True,
            )
            continue

        table.add_row(
            str(path),
            str(len(analysis.analyzer)),
            str(len(analysis.tokenizer)),
            str(len(analysis.token_filter)),
        )

    if table.row_count:
        obj.console.print(table)

    if failures:
        obj.console.print(f"[red]{failures} of {len(files)} file(s) failed[/red]")
        raise Exit(1)

    obj.console.print(f"[green]✓[/green] {len(files)} file(s) valid")


@cli.command()
@click.argument("file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write to this file instead of standard output",
)
@click.option("--indent", type=int, default=None, help="JSON indentation")
@click.pass_obj
def normalize(
    obj: Context, file: Path, output: Path | None, indent: int | None
) -> None:
    """Rewrite FILE in canonical settings JSON.

    Lenient values such as numeric strings are normalized and every default
    shingle setting is written out.
    """
    if indent is None:
        indent = obj.config.get("indent", 2)

    analysis = load_analysis_file(file)

    if output:
        dump_analysis_file(analysis, output, indent=indent)
        obj.console.print(f"[green]✓[/green] Wrote {output}")
    else:
        click.echo(encode_analysis(analysis, indent=indent).decode())


@cli.command()
def languages() -> None:
    """List the language tags accepted by language-aware filters."""
    for language in Language:
        click.echo(language.value)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
