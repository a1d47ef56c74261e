"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from TagFinder.cli.runner import CommandRunner
from TagFinder.config import DEFAULT_CONFIG_PATH, load_config


@click.group(help="TagFinder: search tagged images with boolean tag queries.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config,
    so that ``$VAR`` references in configured paths resolve.
    """
    load_dotenv()

    ctx.obj = CommandRunner(load_config(config_path))


@cli.command("search")
@click.argument("queries", nargs=-1)
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True, help="Result page to show.")
@click.option("--max-results", type=click.IntRange(min=1), default=None, help="Override search.max_results.")
@click.pass_context
def search_cmd(ctx: click.Context, queries: tuple[str, ...], page: int, max_results: int | None) -> None:
    """Search images matching tag QUERIES.

    Each query is a comma-separated list of tags, e.g.
    "1girl, [cat ears, dog ears], -hat, smile:0.8". Without QUERIES the
    queries from the config file are run.
    """
    ctx.obj.run_search(ctx.command.name, queries, page=page, max_results=max_results)


@cli.command("tags")
@click.argument("keyword")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum number of tags to list.")
@click.pass_context
def tags_cmd(ctx: click.Context, keyword: str, limit: int | None) -> None:
    """List known tags containing KEYWORD."""
    ctx.obj.run_tags(ctx.command.name, keyword, limit=limit)


@cli.command("validate")
@click.argument("query")
@click.pass_context
def validate_cmd(ctx: click.Context, query: str) -> None:
    """Check that every tag in QUERY is a known tag."""
    ctx.obj.run_validate(ctx.command.name, query)


@cli.command("info")
@click.argument("image_id")
@click.pass_context
def info_cmd(ctx: click.Context, image_id: str) -> None:
    """Show tags, scores and source title of IMAGE_ID."""
    ctx.obj.run_info(ctx.command.name, image_id)
