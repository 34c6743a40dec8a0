from __future__ import annotations

import typer

from strsim.engine import run
from strsim.reporting import render_aliases
from strsim.types import ComparisonRequest, Mode

from .app import app
from .common import get_app_config


@app.command("list")
def list_command(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Also show category, polarity, native range and description.",
    ),
) -> None:
    """List all available algorithms and their aliases."""

    config = get_app_config(ctx)
    rows = run(ComparisonRequest("", "", mode=Mode.LIST))
    typer.echo(render_aliases(rows, config.output, verbose=verbose))
