"""
CLI interface for the GS1 Digital Link parser.

Usage:
    python -m gs1_dl_parser "<Digital Link URI>" [options]

Options:
    --format FORMAT       Print a single rendering (unbracketed, bracketed, json)
    --fixed-first         Sort predefined fixed-length AIs first (with --format)
    --extra-fnc1          Emit FNC1 after every AI (with --format unbracketed)
    --details             Output the parse result, URI components included, as JSON
    -v, --verbose         Log the parse trace
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .core.dl_parser import DLParseResult, parse_dl_uri
from .formatters.element_string import write_bracketed, write_unbracketed
from .formatters.json_formatter import write_json

EXAMPLE_URI = "https://id.gs1.org/01/09520123456788/10/ABC%2F123/21/12345?17=180426"


def format_renderings(result: DLParseResult) -> str:
    """Format every rendering of a successful parse for display."""
    rows = [
        ("Provided Digital Link URI:", result.raw),
        ("Unbracketed element string:",
         write_unbracketed(result)),
        ("Unbracketed element string (extra FNC1s):",
         write_unbracketed(result, extra_fnc1=True)),
        ("Unbracketed element string (fixed AIs first):",
         write_unbracketed(result, fixed_first=True)),
        ("Unbracketed element string (fixed AIs first; extra FNC1s):",
         write_unbracketed(result, fixed_first=True, extra_fnc1=True)),
        ("Bracketed element string:",
         write_bracketed(result)),
        ("Bracketed element string (fixed AIs first):",
         write_bracketed(result, fixed_first=True)),
        ("JSON:",
         write_json(result)),
        ("JSON (fixed AIs first):",
         write_json(result, fixed_first=True)),
    ]
    width = max(len(label) for label, _ in rows) + 1
    return '\n'.join(f"{label:<{width}}{value}" for label, value in rows)


def format_single(
    result: DLParseResult,
    output_format: str,
    fixed_first: bool = False,
    extra_fnc1: bool = False
) -> str:
    """Format one rendering of a successful parse."""
    if output_format == 'bracketed':
        return write_bracketed(result, fixed_first=fixed_first)
    if output_format == 'json':
        return write_json(result, fixed_first=fixed_first)
    return write_unbracketed(result, fixed_first=fixed_first, extra_fnc1=extra_fnc1)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1_dl_parser',
        description='Extract GS1 AI element data from a Digital Link URI',
        epilog=f"Example: python -m gs1_dl_parser '{EXAMPLE_URI}'"
    )

    parser.add_argument(
        'uri',
        help='Digital Link URI to parse'
    )

    parser.add_argument(
        '--format',
        choices=('unbracketed', 'bracketed', 'json'),
        default=None,
        help='Print only this rendering'
    )

    parser.add_argument(
        '--fixed-first',
        action='store_true',
        help='Sort predefined fixed-length AIs ahead of the others (with --format)'
    )

    parser.add_argument(
        '--extra-fnc1',
        action='store_true',
        help='Emit an FNC1 after every AI (with --format unbracketed)'
    )

    parser.add_argument(
        '--details',
        action='store_true',
        help='Output the full parse result as JSON'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log the parse trace to stderr'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(name)s: %(message)s',
            stream=sys.stderr,
        )

    result = parse_dl_uri(args.uri)

    if args.details:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    elif result.error is not None:
        print(f"Error: {result.error.message}")
    elif args.format:
        print(format_single(
            result,
            args.format,
            fixed_first=args.fixed_first,
            extra_fnc1=args.extra_fnc1,
        ))
    else:
        print(format_renderings(result))

    return 0 if result.success else 1


if __name__ == '__main__':
    sys.exit(main())
