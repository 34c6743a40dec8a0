from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from strsim.config import AppConfig, load_config
from strsim.utils import configure_logging, resolve_log_level


LOGGER_NAME = "strsim.cli"


def create_app() -> typer.Typer:
    app = typer.Typer(help="Compare two strings with a catalog of similarity algorithms")

    @app.callback()
    def _configure_cli(
        ctx: typer.Context,
        log_level: Optional[str] = typer.Option(None, help="Python logging level"),
        config: Optional[Path] = typer.Option(
            None,
            "--config",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
            help="Optional TOML configuration file.",
        ),
    ) -> None:
        """Load configuration and set up logging before running any command."""

        try:
            app_config = load_config(config) if config is not None else AppConfig()
        except (TypeError, ValueError) as exc:
            raise typer.BadParameter(str(exc), param_hint="--config") from exc
        try:
            configure_logging(level=resolve_log_level(log_level or app_config.log_level))
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
        if config is not None:
            logger.debug("Loaded configuration from %s", config)
        ctx.obj = app_config

    return app


logger = logging.getLogger(LOGGER_NAME)

app = create_app()

__all__ = ["app", "logger"]
