"""Load match config from YAML/JSON files or environment variables."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from .schema import MatchConfig

ENV_FIELDS = {
    "NUMBER_OF_PICKS": "number_of_picks",
    "MIN_MATCHES": "min_matches",
    "MIN_LOTTERY_PICK": "min_pick",
    "MAX_LOTTERY_PICK": "max_pick",
    "PLAYER_NUMBERS_FILE_PATH": "picks_path",
    "MATCH_WORKERS": "workers",
    "PICK_REPRESENTATION": "representation",
    "MATCH_EXECUTOR": "executor",
}


class ConfigLoadError(ValueError):
    """Raised when config cannot be loaded or parsed."""


def load_config(path: str | Path) -> MatchConfig:
    """Load config file from YAML/JSON and validate with Pydantic."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        data = _load_yaml(config_path)
    elif suffix == ".json":
        data = _load_json(config_path)
    else:
        raise ConfigLoadError(
            f"Unsupported config format '{suffix}'. Use .yaml/.yml or .json."
        )

    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a JSON/YAML object.")

    return MatchConfig.model_validate(data)


def load_env_config(environ: Mapping[str, str] | None = None) -> MatchConfig:
    """Build config from environment variables.

    Unset or invalid values fall back to their defaults with a warning, so this
    never raises. If the remaining values still conflict with each other the
    full default config is returned.
    """
    source = os.environ if environ is None else environ
    env_names = {field: name for name, field in ENV_FIELDS.items()}

    values: dict[str, Any] = {}
    for name, field in ENV_FIELDS.items():
        raw = source.get(name)
        if raw is not None and raw.strip():
            values[field] = raw.strip()

    while True:
        try:
            return MatchConfig.model_validate(values)
        except ValidationError as exc:
            invalid = {
                error["loc"][0]
                for error in exc.errors()
                if error["loc"] and error["loc"][0] in values
            }
            if not invalid:
                logger.warning("Inconsistent lottery settings ({}); using defaults", _first_message(exc))
                return MatchConfig()
            for field in sorted(invalid):
                logger.warning(
                    "Ignoring invalid {}={!r}; using default",
                    env_names[field],
                    values.pop(field),
                )


def _first_message(exc: ValidationError) -> str:
    errors = exc.errors()
    return str(errors[0]["msg"]) if errors else str(exc)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as file:
        parsed = yaml.safe_load(file)

    return parsed or {}


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as file:
        parsed = json.load(file)

    return parsed or {}
