"""Config loading from ``dial_config.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .dial import INITIAL_POSITION, N_POSITION

CONFIG_FILE: str = "dial_config.toml"
INPUT_FILE: str = "day1_input.txt"

VALID_PARTS = (1, 2)
VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


@dataclass
class DialConfig:
    initial_position: int = INITIAL_POSITION
    input_file: str = INPUT_FILE
    part: int = 1
    log_level: str = "WARNING"
    log_file: str | None = None


def load_config(path: str | Path | None = None) -> DialConfig:
    """Load config from ``path``.

    With no path, ``dial_config.toml`` in the working directory is used if it
    exists, otherwise the built-in defaults. An explicit path must exist.
    """
    if path is None:
        default = Path(CONFIG_FILE)
        if not default.is_file():
            return DialConfig()
        path = default

    path = Path(path)
    try:
        with open(path, "rb") as f:
            cfg = tomllib.load(f)
    except FileNotFoundError:
        raise ConfigError(f"Config file '{path}' not found") from None
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in '{path}': {e}") from e

    d = cfg.get("dial", {})
    r = cfg.get("run", {})
    o = cfg.get("output", {})

    config = DialConfig(
        initial_position=d.get("initial_position", INITIAL_POSITION),
        input_file=str(r.get("input_file", INPUT_FILE)),
        part=r.get("part", 1),
        log_level=str(o.get("log_level", "WARNING")).upper(),
        log_file=o.get("log_file") or None,
    )
    validate(config)
    return config


def _is_int(value: object) -> bool:
    # TOML booleans load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def validate(config: DialConfig) -> None:
    if not _is_int(config.initial_position) or not (
        0 <= config.initial_position < N_POSITION
    ):
        raise ConfigError(
            f"dial.initial_position must be an integer in [0, {N_POSITION - 1}], "
            f"got {config.initial_position!r}"
        )
    if not _is_int(config.part) or config.part not in VALID_PARTS:
        raise ConfigError(f"run.part must be 1 or 2, got {config.part!r}")
    if config.log_level not in VALID_LOG_LEVELS:
        raise ConfigError(f"output.log_level is not a loguru level: {config.log_level!r}")
