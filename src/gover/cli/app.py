"""Typer application for the gover command line."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from gover import __version__
from gover.cli.commands import (
    run_change,
    run_changelog,
    run_commit,
    run_commits,
    run_latest,
    run_next,
    run_tag,
    run_verify,
)
from gover.config.models import DEFAULT_CONFIG_FILE
from gover.logging import configure_logging

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="gover",
    help="Semantic versioning driven by templated commit messages.",
    add_completion=False,
    no_args_is_help=True,
)

PathArgument = typer.Argument(None, help="Path to the git repository (default: current directory)")
PreReleaseOption = typer.Option(
    None, "--pre", help="Pre-release label, e.g. alpha, beta or rc"
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: str = typer.Option(
        f"./{DEFAULT_CONFIG_FILE}", "--cfg", help="Configuration file (.yaml, .yml or .json)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Compute versions, verify commit messages and tag releases."""
    configure_logging(verbose, err_console)
    ctx.obj = {"config": config}


@app.command()
def version() -> None:
    """Print the gover version."""
    console.print(f"gover {__version__}", highlight=False)


@app.command("next")
def next_(
    ctx: typer.Context,
    path: Optional[str] = PathArgument,
    pre: Optional[str] = PreReleaseOption,
) -> None:
    """Print the next version based on commits since the latest tag."""
    run_next(path, ctx.obj["config"], pre, console, err_console)


@app.command()
def latest(ctx: typer.Context, path: Optional[str] = PathArgument) -> None:
    """Print the latest version tag."""
    run_latest(path, ctx.obj["config"], console, err_console)


@app.command()
def change(ctx: typer.Context, path: Optional[str] = PathArgument) -> None:
    """Print the most significant change type since the latest tag."""
    run_change(path, ctx.obj["config"], console, err_console)


@app.command()
def commits(ctx: typer.Context, path: Optional[str] = PathArgument) -> None:
    """List commit messages since the latest tag."""
    run_commits(path, ctx.obj["config"], console, err_console)


@app.command()
def verify(ctx: typer.Context, path: Optional[str] = PathArgument) -> None:
    """Verify commit messages since the latest tag match the template."""
    run_verify(path, ctx.obj["config"], console, err_console)


@app.command()
def changelog(
    ctx: typer.Context,
    path: Optional[str] = PathArgument,
    pre: Optional[str] = PreReleaseOption,
) -> None:
    """Print the changelog of commits since the latest tag."""
    run_changelog(path, ctx.obj["config"], pre, console, err_console)


@app.command()
def commit(
    ctx: typer.Context,
    path: Optional[str] = PathArgument,
    msg_file: Optional[str] = typer.Option(
        None, "--msg-file", help="Write the commit message to this file"
    ),
) -> None:
    """Prompt for template values and generate a commit message."""
    run_commit(path, ctx.obj["config"], msg_file, console, err_console)


@app.command()
def tag(
    ctx: typer.Context,
    path: Optional[str] = PathArgument,
    pre: Optional[str] = PreReleaseOption,
) -> None:
    """Tag the latest commit with the next version."""
    run_tag(path, ctx.obj["config"], pre, console, err_console)


def main() -> None:
    """Entry point for the gover console script."""
    app()
