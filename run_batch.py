"""
Run a rental batch from a JSON file and write the report as JSON.

Usage: python run_batch.py [data.json] [output.json] [--style STYLE]
"""
import argparse
import json
import logging
import sys
import os

# Add the project directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from fleet_ledger.core.config import settings
from fleet_ledger.core.errors import LedgerError
from fleet_ledger.core.utils import serialize_date
from fleet_ledger.services.catalog_service import process_batch

logger = logging.getLogger("run_batch")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Price, settle and report a batch of rentals.")
    parser.add_argument("input", nargs="?", default=settings.DEFAULT_INPUT_FILE)
    parser.add_argument("output", nargs="?", default=settings.DEFAULT_OUTPUT_FILE)
    parser.add_argument("--style", default=settings.DEFAULT_REPORT_STYLE,
                        help="Report style (price, commission, options, actions, modifications or level1-level6)")
    return parser.parse_args(argv)


def run(input_path: str, output_path: str, style: str) -> int:
    """Process one batch file. Returns the number of rejected records."""
    with open(input_path, encoding="utf-8") as f:
        payload = json.load(f)

    report, errors = process_batch(payload, style)
    for error in errors:
        logger.warning(f"Rejected record: {error}")

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, default=serialize_date)
        f.write("\n")
    logger.info(f"Wrote {output_path}")
    return len(errors)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    try:
        run(args.input, args.output, args.style)
    except (OSError, json.JSONDecodeError, LedgerError) as e:
        logger.error(f"Batch failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
