"""
letcalc.toml configuration.

Example letcalc.toml:

    [repl]
    prompt = "> "
    result_prefix = "="

    [logging]
    level = "WARNING"

    # Bindings seeded into every new session
    [variables]
    pi = 3.141592653589793

Environment overrides:
    LETCALC_CONFIG     path of the config file (default: ./letcalc.toml)
    LETCALC_LOG_LEVEL  log level, takes precedence over [logging].level
"""

from __future__ import annotations

import logging
import math
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from letcalc.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "letcalc.toml"
CONFIG_ENV_VAR = "LETCALC_CONFIG"
LOG_LEVEL_ENV_VAR = "LETCALC_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass
class ReplConfig:
    """Interactive shell presentation."""

    prompt: str = "> "
    result_prefix: str = "="


@dataclass
class LoggingConfig:
    """Logging configuration for the CLI process."""

    level: str = "WARNING"


@dataclass
class CalcManifest:
    """Top-level letcalc configuration."""

    repl: ReplConfig = field(default_factory=ReplConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    variables: dict[str, float] = field(default_factory=dict)
    path: Path | None = None


def _require_table(data: dict[str, object], section: str) -> dict[str, object]:
    value = data.get(section, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{section}] must be a table")
    return value


def _require_str(section: str, key: str, value: object) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"[{section}].{key} must be a string, got {type(value).__name__}")
    return value


def _normalize_level(level: str, source: str) -> str:
    normalized = level.strip().upper()
    if normalized not in LOG_LEVELS:
        raise ConfigError(
            f"Unknown log level {level!r} in {source}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return normalized


def _parse_variables(data: dict[str, object]) -> dict[str, float]:
    variables: dict[str, float] = {}
    for name, value in data.items():
        if not _NAME_RE.fullmatch(name) or name == "let":
            raise ConfigError(f"[variables] key {name!r} is not a valid variable name")
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"[variables].{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ConfigError(f"[variables].{name} must be a finite number, got {value!r}")
        variables[name] = float(value)
    return variables


def parse_manifest(data: dict[str, object], path: Path | None = None) -> CalcManifest:
    """Build a CalcManifest from already-decoded TOML data."""
    repl_data = _require_table(data, "repl")
    logging_data = _require_table(data, "logging")
    variables_data = _require_table(data, "variables")

    repl_config = ReplConfig(
        prompt=_require_str("repl", "prompt", repl_data.get("prompt", "> ")),
        result_prefix=_require_str(
            "repl", "result_prefix", repl_data.get("result_prefix", "=")
        ),
    )

    level = _require_str("logging", "level", logging_data.get("level", "WARNING"))
    logging_config = LoggingConfig(level=_normalize_level(level, "[logging].level"))

    return CalcManifest(
        repl=repl_config,
        logging=logging_config,
        variables=_parse_variables(variables_data),
        path=path,
    )


def load_manifest(path: Path) -> CalcManifest:
    """Read and parse a letcalc.toml file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    manifest = parse_manifest(data, path)
    logger.debug("Loaded config from %s", path)
    return manifest


def resolve_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file: explicit path, then LETCALC_CONFIG, then ./letcalc.toml.

    An explicit or environment-provided path must exist; the default one is
    optional.
    """
    if explicit is not None:
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path)
        if not candidate.exists():
            raise ConfigError(f"Config file not found: {candidate} (from {CONFIG_ENV_VAR})")
        return candidate

    default = Path.cwd() / CONFIG_FILENAME
    if default.exists():
        return default
    return None


def get_manifest(explicit: Path | None = None) -> CalcManifest:
    """Load the effective configuration, applying environment overrides."""
    path = resolve_config_path(explicit)
    manifest = load_manifest(path) if path is not None else CalcManifest()

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        manifest.logging.level = _normalize_level(env_level, LOG_LEVEL_ENV_VAR)

    return manifest
