"""Scan configuration loading and validation.

Settings come from three layers: environment defaults (see
``lint_extraction.config``), an optional YAML file, and command-line
overrides. File problems raise in strict mode and fall back to defaults
otherwise.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Optional

import yaml

from lint_extraction.config import DEFAULT_SOURCE_DIR, SOURCE_EXTENSION

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "output"

_KNOWN_KEYS = {"source_dir", "extension", "output_dir", "max_workers"}


class ConfigValidationError(RuntimeError):
    """Raised when strict configuration validation fails."""


@dataclass(frozen=True)
class ScanConfig:
    """Resolved settings for one scan."""

    source_dir: str = DEFAULT_SOURCE_DIR
    extension: str = SOURCE_EXTENSION
    output_dir: str = DEFAULT_OUTPUT_DIR
    max_workers: int = 1

    def with_overrides(self, **overrides: Any) -> "ScanConfig":
        """Return a copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "extension" in values:
            values["extension"] = normalize_extension(values["extension"])
        return replace(self, **values)


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def resolve_strict_config_validation(default: bool = False) -> bool:
    """Resolve strict validation mode from ``STRICT_CONFIG_VALIDATION`` env."""
    return _env_flag("STRICT_CONFIG_VALIDATION", default=default)


def normalize_extension(extension: str) -> str:
    """Ensure the extension carries its leading dot (``rs`` -> ``.rs``)."""
    extension = extension.strip()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def _fail_or_warn(msg: str, strict: bool) -> None:
    if strict:
        raise ConfigValidationError(msg)
    logger.warning("%s; using defaults", msg)


def _validate_field(key: str, value: Any, strict: bool) -> Optional[Any]:
    if key == "max_workers":
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            _fail_or_warn(f"'max_workers' must be a positive integer, got {value!r}", strict)
            return None
        return value
    if not isinstance(value, str) or not value.strip():
        _fail_or_warn(f"'{key}' must be a non-empty string, got {value!r}", strict)
        return None
    if key == "extension":
        return normalize_extension(value)
    return value


def load_scan_config(config_path: Optional[str], strict: bool = False) -> ScanConfig:
    """Load scan settings from a YAML file.

    A ``None`` path returns the environment defaults. In non-strict mode a
    missing, unparsable, or malformed file yields defaults for whatever
    could not be read; in strict mode it raises ``ConfigValidationError``.
    """
    defaults = ScanConfig()
    if config_path is None:
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except FileNotFoundError as exc:
        msg = f"Scan config file not found: {config_path}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return defaults
    except yaml.YAMLError as exc:
        msg = f"Failed to parse scan config YAML at {config_path}: {exc}"
        if strict:
            raise ConfigValidationError(msg) from exc
        logger.warning("%s; continuing with defaults", msg)
        return defaults

    if payload is None:
        return defaults

    if not isinstance(payload, dict):
        _fail_or_warn(
            f"Unexpected scan config payload type: {type(payload).__name__}", strict
        )
        return defaults

    unknown = sorted(set(payload) - _KNOWN_KEYS)
    if unknown:
        logger.warning("Ignoring unknown scan config keys: %s", ", ".join(map(str, unknown)))

    values: dict[str, Any] = {}
    for key in sorted(_KNOWN_KEYS & set(payload)):
        value = _validate_field(key, payload[key], strict)
        if value is not None:
            values[key] = value

    return replace(defaults, **values)
