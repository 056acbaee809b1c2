#!/usr/bin/env python3
"""
Top-level driver for lint declaration extraction.

Scans a source tree for lint declarations, writes the extracted lints as a
JSON document, and records a run report with scan statistics.

Usage:
    python run_lint_scan.py
    python run_lint_scan.py --source-dir ../clippy_lints/src --output-file out/lints.json
    python run_lint_scan.py --config lint_scan.yml --include-unusable
"""

import argparse
import logging
import os
import sys
import time
from collections import Counter
from typing import Any, Dict, List, Optional

from core.run_artifacts import write_json_document, write_run_report
from core.scan_config import (
    ConfigValidationError,
    ScanConfig,
    load_scan_config,
    resolve_strict_config_validation,
)
from core.structured_logging import configure_structured_logging, phase_scope, set_run_id
from lint_extraction.config import DOCS_LINK
from lint_extraction.extractor import ScanStats, extract_directory
from lint_extraction.repository import LintRepository

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argument namespace.
    """
    parser = argparse.ArgumentParser(
        description="Lint declaration extraction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python run_lint_scan.py --source-dir ../clippy_lints/src\n"
            "  python run_lint_scan.py --config lint_scan.yml --include-unusable\n"
        ),
    )

    parser.add_argument(
        "--source-dir",
        default=None,
        help="Root of the source tree to scan. Default: LINT_SOURCE_DIR or ../clippy_lints/src",
    )
    parser.add_argument(
        "--extension",
        default=None,
        help="Source file extension to scan. Default: .rs",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional YAML file with scan settings.",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the lint document and run reports. Default: output",
    )
    parser.add_argument(
        "--output-file",
        default=None,
        help="Path for the lint JSON document. Default: <output_dir>/lints.json",
    )
    parser.add_argument(
        "--include-unusable",
        action="store_true",
        default=False,
        help="Also list deprecated and internal lints in the output.",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Threads used to read and parse files. Default: 1",
    )
    parser.add_argument(
        "--run-id",
        default=None,
        help="Correlation ID for logs and the run report. Generated if omitted.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging.",
    )

    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> ScanConfig:
    """Merge the config file (if any) with command-line overrides."""
    strict = resolve_strict_config_validation()
    config = load_scan_config(args.config, strict=strict)
    return config.with_overrides(
        source_dir=args.source_dir,
        extension=args.extension,
        output_dir=args.output_dir,
        max_workers=args.max_workers,
    )


def build_lint_document(
    repository: LintRepository,
    include_unusable: bool = False,
) -> Dict[str, Any]:
    """Summarize a scan as a JSON-ready document."""
    usable = repository.usable()
    listed = list(repository) if include_unusable else usable
    return {
        "total_lints": len(repository),
        "usable_lints": len(usable),
        "deprecated_lints": len(repository.deprecated()),
        "groups": dict(sorted(Counter(r.group for r in repository).items())),
        "docs_link": DOCS_LINK,
        "lints": [
            dict(record.to_dict(), docs_url=record.docs_url) for record in listed
        ],
    }


def phase_scan(config: ScanConfig) -> tuple[LintRepository, ScanStats]:
    """Scan the source tree.

    Raises:
        FileNotFoundError: If the source directory does not exist.
        OSError: If the source directory cannot be listed.
    """
    logger.info("=" * 80)
    logger.info(" PHASE 1: Lint Declaration Scan")
    logger.info("=" * 80)
    logger.info("Source directory : %s", os.path.abspath(config.source_dir))
    logger.info("Extension        : %s", config.extension)
    logger.info("Workers          : %d", config.max_workers)

    t0 = time.time()
    records, stats = extract_directory(
        config.source_dir,
        extension=config.extension,
        max_workers=config.max_workers,
    )
    logger.info("Scan completed in %.2fs: %s", time.time() - t0, stats)
    return LintRepository(records), stats


def phase_report(
    repository: LintRepository,
    output_file: str,
    include_unusable: bool,
) -> Dict[str, Any]:
    """Write the lint document and return it."""
    logger.info("=" * 80)
    logger.info(" PHASE 2: Lint Report")
    logger.info("=" * 80)

    document = build_lint_document(repository, include_unusable=include_unusable)
    write_json_document(document, output_file)
    logger.info("Wrote %d lints to %s", len(document["lints"]), output_file)
    return document


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = parse_args(argv)
    configure_structured_logging(logging.DEBUG if args.verbose else logging.INFO)
    run_id = set_run_id(args.run_id)

    try:
        config = resolve_config(args)
        output_file = args.output_file or os.path.join(config.output_dir, "lints.json")

        with phase_scope("scan"):
            repository, stats = phase_scan(config)

        with phase_scope("report"):
            document = phase_report(repository, output_file, args.include_unusable)
            report_path = write_run_report(
                {
                    "status": "success",
                    "source_dir": os.path.abspath(config.source_dir),
                    "extension": config.extension,
                    "output_file": os.path.abspath(output_file),
                    "stats": stats.to_dict(),
                    "groups": document["groups"],
                },
                run_id=run_id,
                output_dir=os.path.join(config.output_dir, "run_reports"),
            )
            logger.info("Run report: %s", report_path)

    except OSError as e:
        logger.error("File error: %s", e)
        return 1
    except ConfigValidationError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except Exception as e:
        logger.error("Scan failed: %s", e, exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
