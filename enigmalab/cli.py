"""Command-line entry point: run text through a configured machine.

Usage:
    enigmalab -c "B;I-A-A,II-A-A,III-A-A;A-B" -i "HELLO, HOW ARE YOU"
    echo "LZFAD AMT" | enigmalab -c "A;III-A-A,II-A-A,I-A-A;A-B"
    enigmalab --preset naval-m3 --show-config

Encryption and decryption are the same operation. Without ``--input``
every line from stdin is translated; the rotor state carries over from
one line to the next.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from enigmalab.config import load_settings
from enigmalab.machine.builder import build_machine
from enigmalab.machine.errors import ConfigurationError, ConfigStringError
from enigmalab.machine.spec import MachineSpec, get_template, list_presets

logger = logging.getLogger(__name__)


def _build_parser(default_config: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="enigmalab",
        description="Rotor machine encoding and decoding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Configuration string:\n"
            "  <reflector>;<rotor>-<pos>-<ring>,...;<a>-<b>,...\n"
            "  rotors are listed as seen from the front, leftmost first\n"
            "  e.g. \"B;I-A-A,II-A-A,III-A-A;A-B,C-D\"\n"
        ),
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-c", "--config", default=None,
        help=f"Machine configuration string (default: {default_config!r})",
    )
    source.add_argument(
        "--preset", choices=list_presets(), default=None,
        help="Use a named machine configuration instead of --config",
    )
    parser.add_argument(
        "-i", "--input", default=None,
        help="Text to encode / decode (default: read lines from stdin)",
    )
    parser.add_argument(
        "--show-config", action="store_true",
        help="Print the canonical configuration string and exit",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable verbose logging (one line per key press)",
    )
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    settings = load_settings()
    parser = _build_parser(settings.default_config)
    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        if args.preset:
            spec = get_template(args.preset)
        else:
            spec = MachineSpec.parse(args.config or settings.default_config)
        machine = build_machine(spec)
    except (ConfigStringError, ConfigurationError) as e:
        print(f"Invalid enigma config provided: {e}", file=sys.stderr)
        return 2

    if args.show_config:
        print(spec.to_config_string())
        return 0

    logger.info("Machine ready: %r", machine)

    if args.input is not None:
        print(machine.translate_text(args.input))
        return 0

    for line in stdin or sys.stdin:
        print(machine.translate_text(line.rstrip("\r\n")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
