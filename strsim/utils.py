from __future__ import annotations

import logging
import os
from typing import Optional


def resolve_log_level(log_level: Optional[str]) -> int | str:
    """Prefer an explicit level, then ``LOG_LEVEL`` from the environment."""

    if log_level:
        return log_level
    env_level = os.getenv("LOG_LEVEL")
    return env_level if env_level else logging.INFO


def configure_logging(level: int | str = logging.INFO) -> None:
    """Initialize application logging if it has not already been configured."""

    if isinstance(level, str):
        resolved_level = logging.getLevelName(level.upper())
        if isinstance(resolved_level, int):
            level = resolved_level
        else:
            raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
