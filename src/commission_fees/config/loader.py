from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from commission_fees.config.models import AppConfig
from commission_fees.domain.errors import ConfigurationError

_ALLOWED_TOP_LEVEL = {"version", "scenario", "pipeline", "currencies", "fees", "logging", "output"}


def default_config_path() -> Path:
    # Reference constants ship with the package.
    return Path(__file__).resolve().parent.parent / "baseline_config.yml"


def load_config(path: Path) -> AppConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config {path}: {exc.strerror or exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config {path} is not valid YAML: {exc}") from exc

    return parse_config(raw)


def parse_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ConfigurationError("Config root must be a mapping")

    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_TOP_LEVEL
    if unknown:
        raise ConfigurationError(f"Unknown top-level keys: {sorted(unknown)}")

    missing = [key for key in ("version", "currencies", "fees") if key not in raw]
    if missing:
        raise ConfigurationError(f"Missing required top-level keys: {', '.join(missing)}")
