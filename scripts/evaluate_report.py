#!/usr/bin/env python
"""Evaluate an assembled AI readiness report from a JSON file.

Prints the evaluated report (scores, labels, recommendations and quick
wins) as JSON.

Usage:
    python scripts/evaluate_report.py report.json
    python scripts/evaluate_report.py report.json --origin https://example.com --indent 2
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from api.logging import setup_logging  # noqa: E402
from readiness.exceptions import ReadinessError  # noqa: E402
from readiness.reports.assembler import ReportEvaluator  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate an AI readiness report")
    parser.add_argument("report", type=Path, help="Path to the report JSON file")
    parser.add_argument("--origin", type=str, help="Site origin used in example payloads")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        data = json.loads(args.report.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Could not read {args.report}: {e}", file=sys.stderr)
        return 1

    try:
        evaluated = ReportEvaluator().evaluate_mapping(data, args.origin)
    except ReadinessError as e:
        print(f"Invalid report: {e.message}", file=sys.stderr)
        return 1

    print(json.dumps(evaluated.to_dict(), indent=args.indent or None))
    return 0


if __name__ == "__main__":
    # Keep stdout for the JSON result
    setup_logging(stream=sys.stderr)
    sys.exit(main())
