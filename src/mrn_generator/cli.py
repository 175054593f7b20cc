#!/usr/bin/env python3
"""
MRN Generator CLI - Command Line Interface
==========================================

Generate syntactically valid, checksum-correct Movement Reference Numbers.

Usage:
    mrn-generator -c DK                      One MRN for Denmark
    mrn-generator -c DK -n 20                Twenty MRNs
    mrn-generator -c DK -p B1 -C A           Procedure B1 combined with A
    mrn-generator -c DK -o 004700 --json     Fixed declaration office, JSON output
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import AppConfig, set_config, setup_logging
from .core import CHECK_SCHEMES, ConfigurationError, GenerationRequest, InvalidFieldError
from .generator import MRNGenerator

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mrn-generator',
        description='Command line utility to generate valid MRNs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mrn-generator -c DK
  mrn-generator -c DK -n 20
  mrn-generator -c DK -p B1 -C A
  mrn-generator -c DK -o 004700 --json
        """
    )
    parser.add_argument('-c', '--country-code', required=True,
                        help='Country code of MRN (2 letters)')
    parser.add_argument('-n', '--number-of-mrns', type=_positive_int, default=None,
                        help='Number of MRNs to generate (default: 1)')
    parser.add_argument('-p', '--procedure-category',
                        help='Procedure category (letter + letter/digit, e.g. B1)')
    parser.add_argument('-C', '--combined',
                        help='Combined procedure category (single letter, requires -p)')
    parser.add_argument('-o', '--declaration-office',
                        help='Customs office of declaration (6 digits)')
    parser.add_argument('--scheme', choices=sorted(CHECK_SCHEMES), default=None,
                        help='Check character scheme (default: mod37)')
    parser.add_argument('--seed', type=_non_negative_int, default=None,
                        help='Seed the random source for reproducible output')
    parser.add_argument('--json', action='store_true',
                        help='Output as JSON')
    parser.add_argument('--config', metavar='PATH',
                        help='YAML or JSON configuration file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Verbose output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    # Flags override file and environment settings before anything is checked
    try:
        config = AppConfig.load(args.config, validate=False) if args.config else AppConfig()
        if args.number_of_mrns is not None:
            config.generator.default_count = args.number_of_mrns
        if args.seed is not None:
            config.generator.seed = args.seed
        if args.scheme is not None:
            config.generator.check_scheme = args.scheme
        config.validate()
    except (ConfigurationError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    set_config(config)
    setup_logging(config.logging, verbose=args.verbose)

    count = config.generator.default_count
    seed = config.generator.seed
    scheme = config.generator.check_scheme

    request = GenerationRequest(
        country_code=args.country_code,
        declaration_office=args.declaration_office,
        procedure_category=args.procedure_category,
        combined_category=args.combined,
    )

    logger.debug(f"Generating {count} MRN(s) with scheme={scheme}")
    generator = MRNGenerator(seed=seed, check_scheme=scheme)
    try:
        mrns = generator.generate_many(request, count)
    except InvalidFieldError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([mrn.to_dict() for mrn in mrns], indent=2))
    else:
        for mrn in mrns:
            print(mrn.value)

    return 0


if __name__ == '__main__':
    sys.exit(main())
