"""
CLI interface for the GS1 decoder.

Usage:
    python -m gs1_decoder "<barcode text>" [options]

Options:
    --json                Output as JSON
    --terminator CHAR     Field terminator (default: ASCII 29; "<GS>" and
                          "\\x1d" escapes accepted)
    --lot-max-length N    Maximum length of an unterminated lot/serial number
    --verbose             Log each decoded element
"""

import argparse
import codecs
import json
import logging
import sys
from typing import Optional

from .core.config import ParserConfig, GROUP_SEPARATOR
from .core.decoder import DecodeResult, decode_gs1
from .core.errors import BarcodeError
from .formatters.json_formatter import format_decode_result, format_value


def parse_terminator(value: str) -> str:
    """Accept a literal character, "<GS>" or a backslash escape."""
    if value.upper() == '<GS>':
        return GROUP_SEPARATOR
    if '\\' in value:
        value = codecs.decode(value, 'unicode_escape')
    if len(value) != 1:
        raise argparse.ArgumentTypeError(
            f"terminator must be a single character, got {value!r}"
        )
    return value


def format_result(result: DecodeResult) -> str:
    """Format decode result for display."""
    lines = [
        "=" * 60,
        "GS1 Decode Result",
        "=" * 60,
        f"Symbology: {result.code_name or '(none)'}",
        f"Denormalized: {result.denormalized}",
        "",
        "Elements:",
        "-" * 40,
    ]

    for element in result.elements:
        lines.append(f"  AI({element.ai}): {element.title}")
        lines.append(f"    Value: {format_value(element.value, '%Y-%m-%d')}")
        lines.append(f"    Raw: {element.raw!r}")
        if element.unit:
            lines.append(f"    Unit: {element.unit}")
        lines.append("")

    return '\n'.join(lines)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='gs1-decode',
        description='Decode GS1 element strings from barcodes'
    )

    parser.add_argument(
        'barcode',
        help='Barcode data to decode'
    )

    parser.add_argument(
        '--json',
        action='store_true',
        help='Output result as JSON'
    )

    parser.add_argument(
        '--terminator',
        type=parse_terminator,
        default=GROUP_SEPARATOR,
        help='Character ending variable-length fields (default: ASCII 29)'
    )

    parser.add_argument(
        '--lot-max-length',
        type=int,
        default=None,
        help='Maximum length of an unterminated batch/lot or serial number'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(levelname)s %(name)s: %(message)s',
        )

    try:
        config = ParserConfig(
            terminator=args.terminator,
            lot_max_length=args.lot_max_length,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        result = decode_gs1(args.barcode, config=config)
    except BarcodeError as exc:
        if args.json:
            print(json.dumps({"error": exc.to_dict()}, indent=2, ensure_ascii=False))
        else:
            print(f"Error [{exc.code.value}]: {exc.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(format_decode_result(result), indent=2, ensure_ascii=False))
    else:
        print(format_result(result))

    return 0


if __name__ == '__main__':
    sys.exit(main())
