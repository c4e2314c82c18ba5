#!/usr/bin/env python3
"""Generate sample payment descriptors.

Defaults come from the environment (see ``GeneratorConfig.from_env``);
command-line flags override them. Each payment is printed as its SPAYD
string, and ``--output`` additionally writes the records and
descriptors to a JSON file.
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from spayd.config import GeneratorConfig
from spayd.descriptor import spayd_string, spayd_string_unchecked
from spayd.generators import PaymentGenerator
from spayd.logging import log_fields, setup_logging
from spayd.serialization import to_dict

logger = logging.getLogger(__name__)


def save_json(records: list[dict], output_path: Path) -> None:
    """Save records to a JSON file."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)
    logger.info("Saved %d records to %s", len(records), output_path)


def build_parser(config: GeneratorConfig) -> argparse.ArgumentParser:
    """Command-line flags, defaulting to the environment config."""
    parser = argparse.ArgumentParser(description="Generate sample SPAYD descriptors")
    parser.add_argument("--count", type=int, default=config.count, help="Number of payments")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument(
        "--full",
        action=argparse.BooleanOptionalAction,
        default=config.full,
        help="Fill every optional field",
    )
    parser.add_argument("--unchecked", action="store_true", help="Skip validation before serializing")
    parser.add_argument("--output", type=Path, default=None, help="Optional JSON output file")
    return parser


def main() -> None:
    """Generate and print sample descriptors."""
    config = GeneratorConfig.from_env()
    args = build_parser(config).parse_args()

    config = replace(config, count=args.count, seed=args.seed, full=args.full)
    setup_logging(config.log_level, config.log_format)

    generator = PaymentGenerator(seed=config.seed, locale=config.locale)
    render = spayd_string_unchecked if args.unchecked else spayd_string

    records = []
    for payment in generator.generate_batch(config.count, full=config.full):
        descriptor = render(payment)
        print(descriptor)
        records.append({"payment": to_dict(payment), "descriptor": descriptor})

    logger.info(
        "Generated %d descriptors",
        len(records),
        extra=log_fields(count=len(records), seed=config.seed, unchecked=args.unchecked),
    )
    if args.output is not None:
        save_json(records, args.output)


if __name__ == "__main__":
    main()
