from __future__ import annotations

import typer

from strsim.config import AppConfig

WorkersOption = typer.Option(
    None,
    "--workers",
    min=1,
    help="Threads used to run all algorithms. Defaults to the config setting.",
)


def get_app_config(ctx: typer.Context) -> AppConfig:
    obj = ctx.find_root().obj
    return obj if isinstance(obj, AppConfig) else AppConfig()


__all__ = ["AppConfig", "WorkersOption", "get_app_config"]
