"""Core shared utilities: logging context, configuration, run artifacts."""

from core.structured_logging import (
    configure_structured_logging,
    get_phase,
    get_run_id,
    phase_scope,
    set_run_id,
)
from core.scan_config import (
    ConfigValidationError,
    ScanConfig,
    load_scan_config,
    normalize_extension,
    resolve_strict_config_validation,
)
from core.run_artifacts import write_json_document, write_run_report

__all__ = [
    "configure_structured_logging",
    "get_phase",
    "get_run_id",
    "phase_scope",
    "set_run_id",
    "ConfigValidationError",
    "ScanConfig",
    "load_scan_config",
    "normalize_extension",
    "resolve_strict_config_validation",
    "write_json_document",
    "write_run_report",
]
