# config_helper/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .controllers.config_reader import DEFAULT_ENCODING, read_file
from .controllers.config_writer import write_file, write_text
from .data_model.entities import ConfigContent, ConfigWarning
from .exceptions import ConfigFormatError
from .utilities.config_logging import configure_logging

log = logging.getLogger(__name__)


def _load(path: Path, encoding: str, warnings: List[ConfigWarning]) -> ConfigContent:
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")
    if not path.is_file():
        raise SystemExit(f"Input path is not a file: {path}")
    try:
        return read_file(path, warnings, encoding=encoding)
    except ConfigFormatError as e:
        raise SystemExit(f"{path}: {e}") from e


def _check(args: argparse.Namespace) -> int:
    warnings: List[ConfigWarning] = []
    content = _load(args.input, args.encoding, warnings)
    for warning in warnings:
        print(warning)
    log.info("%s: %d section(s), %d warning(s)", args.input, len(content), len(warnings))
    return 1 if warnings else 0


def _format(args: argparse.Namespace) -> int:
    warnings: List[ConfigWarning] = []
    content = _load(args.input, args.encoding, warnings)
    for warning in warnings:
        log.warning("%s:%s", args.input, warning)
    if args.output is None:
        sys.stdout.write(write_text(content))
        return 0
    args.output.parent.mkdir(parents=True, exist_ok=True)
    try:
        write_file(content, args.output, overwrite=args.overwrite)
    except FileExistsError as e:
        raise SystemExit(f"Output exists (use --overwrite): {args.output}") from e
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="config-helper",
        description="Check or reformat INI-like configuration files.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = ap.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Report misplaced comments and values")
    check.add_argument("input", type=Path, help="Path to the configuration file")
    check.add_argument("--encoding", default=DEFAULT_ENCODING,
                       help=f"Text encoding of the input (default: {DEFAULT_ENCODING})")
    check.set_defaults(handler=_check)

    fmt = sub.add_parser("format", help="Rewrite a file in canonical form")
    fmt.add_argument("input", type=Path, help="Path to the configuration file")
    fmt.add_argument("-o", "--output", type=Path, help="Output file (default: stdout)")
    fmt.add_argument("--overwrite", action="store_true", help="Replace an existing output file")
    fmt.add_argument("--encoding", default=DEFAULT_ENCODING,
                     help=f"Text encoding of the input (default: {DEFAULT_ENCODING})")
    fmt.set_defaults(handler=_format)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
