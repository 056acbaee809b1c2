"""JSON artifact writers for scan output and run reports."""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Any

DEFAULT_REPORT_DIR = "output/run_reports"


def write_json_document(payload: Any, path: str) -> str:
    """Write ``payload`` as indented UTF-8 JSON, creating parent directories."""
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path


def write_run_report(
    report: dict[str, Any],
    run_id: str,
    output_dir: str = DEFAULT_REPORT_DIR,
) -> str:
    """Write a run report named after the run and return its path.

    ``run_id`` and a UTC timestamp are added unless the report already
    carries them.
    """
    payload = dict(report)
    payload.setdefault("run_id", run_id)
    payload.setdefault("timestamp_utc", datetime.now(timezone.utc).isoformat())
    return write_json_document(payload, os.path.join(output_dir, f"{run_id}.json"))
