from __future__ import annotations

from typing import Optional

import typer

from strsim.batch import rank
from strsim.errors import UnknownAlgorithmError
from strsim.engine import run
from strsim.reporting import format_value, render_results
from strsim.types import ComparisonRequest, Mode

from .app import app, logger
from .common import WorkersOption, get_app_config


@app.command("compare")
def compare_command(
    ctx: typer.Context,
    first: str = typer.Argument(..., help="String to compare."),
    second: str = typer.Argument(..., help="String to compare with."),
    algorithm: Optional[str] = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Algorithm name or alias. Omit to run every algorithm.",
    ),
    normalize: bool = typer.Option(
        False,
        "--normalize",
        "-n",
        help="Normalize the results between 0 and 1.",
    ),
    sort: Optional[bool] = typer.Option(
        None,
        "--sort/--no-sort",
        help="Order the table from most to least similar (normalized results only).",
    ),
    workers: Optional[int] = WorkersOption,
) -> None:
    """Compare two strings with one algorithm or with all of them."""

    config = get_app_config(ctx)
    output = config.output

    if algorithm is not None:
        request = ComparisonRequest.single(first, second, algorithm, normalize=normalize)
        try:
            (row,) = run(request)
        except UnknownAlgorithmError as exc:
            logger.error("%s", exc)
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(format_value(row.value, output.precision))
        return

    request = ComparisonRequest(first, second, mode=Mode.ALL, normalize=normalize)
    pool_size = workers if workers is not None else config.parallelism.workers
    rows = run(request, workers=pool_size)

    sort_rows = output.sort if sort is None else sort
    if sort_rows:
        if normalize:
            rows = rank(rows)
        else:
            logger.warning("Ignoring --sort: raw scores mix distances and similarities")

    typer.echo(render_results(rows, output))
