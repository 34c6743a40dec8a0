from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional, Type, TypeVar

import tomllib


@dataclass
class OutputConfig:
    """Presentation of scores and tables."""

    precision: int = 2
    tablefmt: str = "rounded_grid"
    sort: bool = False

    def __post_init__(self) -> None:
        if int(self.precision) < 0:
            raise ValueError("output.precision must be non-negative")
        self.precision = int(self.precision)


@dataclass
class ParallelismConfig:
    """Thread pool used when running every algorithm."""

    workers: int = 1

    def __post_init__(self) -> None:
        if int(self.workers) < 1:
            raise ValueError("parallelism.workers must be at least 1")
        self.workers = int(self.workers)


@dataclass
class AppConfig:
    """Full application configuration tree."""

    log_level: Optional[str] = None
    output: OutputConfig = field(default_factory=OutputConfig)
    parallelism: ParallelismConfig = field(default_factory=ParallelismConfig)


def _coerce_section(section: Mapping[str, Any] | None, cls: type[Any]) -> Any:
    if section is None:
        return cls()
    if not isinstance(section, Mapping):
        raise TypeError(f"Expected a mapping for {cls.__name__}, got {type(section)!r}")
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise TypeError(f"Unknown {cls.__name__} option(s): {', '.join(unknown)}")
    kwargs: MutableMapping[str, Any] = dict(section)
    return cls(**kwargs)


def load_config(path: str | Path) -> AppConfig:
    """Load configuration from a TOML file."""

    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("rb") as fh:
        raw: Mapping[str, Any] = tomllib.load(fh)

    global_section = raw.get("global")
    if global_section is None:
        global_section = {}
    elif not isinstance(global_section, Mapping):
        raise TypeError("Config 'global' section must be a mapping if provided.")

    log_level = global_section.get("log_level")
    if log_level is not None and not isinstance(log_level, str):
        raise TypeError("Config 'log_level' must be a string.")

    return AppConfig(
        log_level=log_level,
        output=_coerce_section(raw.get("output"), OutputConfig),
        parallelism=_coerce_section(raw.get("parallelism"), ParallelismConfig),
    )


T = TypeVar("T")


def coerce_config(config: Any, cls: Type[T], label: str) -> T:
    """Normalise arbitrary configuration inputs into dataclass instances."""

    if config is None:
        return cls()
    if isinstance(config, cls):
        return config
    if isinstance(config, Mapping):
        return cls(**config)
    raise TypeError(
        f"{label} must be a {cls.__name__} or a mapping of keyword arguments"
    )


__all__ = [
    "AppConfig",
    "OutputConfig",
    "ParallelismConfig",
    "coerce_config",
    "load_config",
]
