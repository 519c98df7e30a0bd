"""Main CLI entrypoint for slugger.

Provides commands for generating slugs, inspecting the replacement table and
benchmarking the pipeline.
"""

from __future__ import annotations

import logging
import sys

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from slugger import __version__
from slugger.config import Config, ConfigError, get_config

console = Console()
log_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def load_config_or_exit() -> Config:
    """Return the global config, exiting with status 1 if it cannot be loaded."""
    try:
        return get_config()
    except (ConfigError, ValidationError) as e:
        console.print(f"[red]Error loading configuration:[/] {escape(str(e))}")
        sys.exit(1)


def setup_logging() -> None:
    """Configure logging with rich output."""
    config = load_config_or_exit()

    handlers: list[logging.Handler] = [RichHandler(console=log_console, rich_tracebacks=True)]
    if config.logging.file:
        handlers.append(logging.FileHandler(config.logging.file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
        handlers=handlers,
    )


def parse_replacement(raw: str) -> tuple[str, str]:
    """Parse a ``KEY=VALUE`` replacement option (VALUE may be empty)."""
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise click.UsageError(f"Invalid replacement '{raw}'. Use KEY=VALUE, e.g. -r '&=and'.")
    return key, value


@click.group()
@click.version_option(version=__version__, prog_name="slugger")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """slugger – URL-safe slugs from titles, names and file names."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        load_config_or_exit().logging.level = "DEBUG"

    setup_logging()


@cli.command()
@click.argument("texts", nargs=-1, type=str)
@click.option("--separator", "-s", default=None, help="Separator (default: from config)")
@click.option("--keep-case", is_flag=True, help="Do not lowercase the result")
@click.option("--no-trim", is_flag=True, help="Keep leading/trailing separators")
@click.option("--no-strict", is_flag=True, help="Keep repeated separators")
@click.option(
    "--max-length",
    "-m",
    type=int,
    default=None,
    help="Maximum slug length (0 gives an empty slug, negative disables)",
)
@click.option(
    "--replace",
    "-r",
    "replace",
    multiple=True,
    help="Extra replacement KEY=VALUE, may be repeated.",
)
def slug(
    texts: tuple[str, ...],
    separator: str | None,
    keep_case: bool,
    no_trim: bool,
    no_strict: bool,
    max_length: int | None,
    replace: tuple[str, ...],
) -> None:
    """Print the slug of each TEXT, or of each stdin line when none is given."""
    from slugger.pipeline import slugify

    config = load_config_or_exit()
    replacements = dict(config.slug.replacements)
    replacements.update(parse_replacement(raw) for raw in replace)

    options = config.slug.to_options().merge(
        separator=separator,
        lowercase=False if keep_case else None,
        trim=False if no_trim else None,
        strict=False if no_strict else None,
        max_length=max_length,
        replacements=replacements,
    )
    logger.debug("Slug options: %s", options.model_dump())

    if texts:
        inputs = list(texts)
    else:
        inputs = [line.rstrip("\r\n") for line in click.get_text_stream("stdin")]

    for text in inputs:
        click.echo(slugify(text, options))


@cli.command()
@click.option("--group", "-g", default=None, help="Only show one group (e.g. currency, latin)")
def table(group: str | None) -> None:
    """Show the default replacement table."""
    from rich.table import Table

    from slugger.replacements import REPLACEMENT_GROUPS

    if group is not None and group not in REPLACEMENT_GROUPS:
        available = ", ".join(REPLACEMENT_GROUPS)
        raise click.UsageError(f"Unknown group '{group}'. Available: {available}")

    groups = {group: REPLACEMENT_GROUPS[group]} if group else REPLACEMENT_GROUPS

    output = Table(title="Replacement table")
    output.add_column("Group", style="green")
    output.add_column("Character", style="cyan")
    output.add_column("Code point", style="dim")
    output.add_column("Replacement")

    for name, entries in groups.items():
        for char, replacement in entries.items():
            code = " ".join(f"U+{ord(c):04X}" for c in char)
            output.add_row(name, char, code, replacement or "''")

    console.print(output)


@cli.command()
@click.option("--iterations", "-n", type=int, default=None, help="Timed iterations (default: from config)")
@click.option("--warmup", type=int, default=None, help="Warmup iterations (default: from config)")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def bench(iterations: int | None, warmup: int | None, as_json: bool) -> None:
    """Benchmark slugify against a plain regex baseline."""
    import json

    from rich.table import Table

    from slugger.benchmark import DEFAULT_CASES, run_default_suite

    config = load_config_or_exit()
    iterations = iterations if iterations is not None else config.benchmark.iterations
    warmup = warmup if warmup is not None else config.benchmark.warmup
    if iterations <= 0:
        raise click.UsageError("Iterations must be greater than zero.")
    if warmup < 0:
        raise click.UsageError("Warmup must not be negative.")

    if not as_json:
        console.print(
            f"[bold blue]Benchmarking {len(DEFAULT_CASES)} cases x {iterations:,} iterations...[/]"
        )
    results = run_default_suite(iterations=iterations, warmup=warmup)

    if as_json:
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    output = Table(title="Benchmark results")
    output.add_column("Name", style="cyan")
    output.add_column("Operations", justify="right")
    output.add_column("Total (ms)", justify="right")
    output.add_column("Avg (ms)", justify="right")
    output.add_column("Ops/sec", justify="right", style="green")

    for result in results:
        output.add_row(
            result.name,
            f"{result.operations:,}",
            f"{result.total_ms:.2f}",
            f"{result.avg_ms:.4f}",
            f"{result.ops_per_second:,.0f}",
        )

    console.print(output)


if __name__ == "__main__":
    cli()
