"""Command-line interface for layout conversion."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .config import MAX_JSON_INDENT, OutputConfig, load_output_config
from .errors import ConversionError, LayoutDecodeError
from .formats import dump_keymeow, to_genkey, to_keymeow, to_oxeylyzer
from .layout import dump_layout, load_layout
from .log import configure_logging
from .matrix import build_matrix, matrix_shape
from .models import Layout

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_CONVERSION_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="layout-convert",
        description="Convert keyboard layouts between analyzer formats",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with an 'output' section (json_indent, ensure_ascii, ...)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Log as JSON lines instead of console output",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- genkey subcommand ---
    genkey_parser = subparsers.add_parser(
        "genkey",
        help="Convert to genkey text (3 rows, no thumbkeys)",
    )
    _add_io_arguments(genkey_parser)

    # --- oxeylyzer subcommand ---
    oxeylyzer_parser = subparsers.add_parser(
        "oxeylyzer",
        help="Convert to an oxeylyzer 3x10 character grid",
    )
    _add_io_arguments(oxeylyzer_parser)

    # --- keymeow subcommand ---
    keymeow_parser = subparsers.add_parser(
        "keymeow",
        help="Convert to keymeow JSON (keys grouped by finger)",
    )
    _add_io_arguments(keymeow_parser)
    keymeow_parser.add_argument(
        "--indent",
        type=indent_width,
        default=None,
        help=f"JSON indent width, 0-{MAX_JSON_INDENT} (default: from config, 2)",
    )

    # --- show subcommand ---
    show_parser = subparsers.add_parser(
        "show",
        help="Print a layout summary and its canonical JSON",
    )
    show_parser.add_argument(
        "layout",
        type=Path,
        help="Layout file (.json, or .yaml/.yml)",
    )

    return parser


def indent_width(value: str) -> int:
    """Parse an --indent value, bounded like OutputConfig.json_indent."""
    try:
        indent = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid indent: {value!r}") from None
    if not 0 <= indent <= MAX_JSON_INDENT:
        raise argparse.ArgumentTypeError(f"indent must be between 0 and {MAX_JSON_INDENT}, got {indent}")
    return indent


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "layout",
        type=Path,
        help="Layout file (.json, or .yaml/.yml)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output file (default: stdout)",
    )


def _load(path: Path) -> Layout | None:
    """Load a layout, reporting decode errors to stderr."""
    try:
        return load_layout(path)
    except LayoutDecodeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _write(text: str, output: Path | None) -> None:
    if output is None:
        sys.stdout.write(text)
        return
    output.write_text(text, encoding="utf-8")
    print(f"Wrote {output}")


def _finish_json(text: str, config: OutputConfig) -> str:
    return text + "\n" if config.trailing_newline else text


def cmd_genkey(args: argparse.Namespace, config: OutputConfig) -> int:
    """Execute genkey subcommand."""
    layout = _load(args.layout)
    if layout is None:
        return EXIT_DECODE_ERROR

    try:
        text = to_genkey(layout)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    _write(text, args.output)
    return EXIT_OK


def cmd_oxeylyzer(args: argparse.Namespace, config: OutputConfig) -> int:
    """Execute oxeylyzer subcommand."""
    layout = _load(args.layout)
    if layout is None:
        return EXIT_DECODE_ERROR

    try:
        text = to_oxeylyzer(layout)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    _write(text, args.output)
    return EXIT_OK


def cmd_keymeow(args: argparse.Namespace, config: OutputConfig) -> int:
    """Execute keymeow subcommand."""
    layout = _load(args.layout)
    if layout is None:
        return EXIT_DECODE_ERROR

    indent = args.indent if args.indent is not None else config.json_indent
    text = dump_keymeow(to_keymeow(layout), indent=indent, ensure_ascii=config.ensure_ascii)
    _write(_finish_json(text, config), args.output)
    return EXIT_OK


def cmd_show(args: argparse.Namespace, config: OutputConfig) -> int:
    """Execute show subcommand."""
    layout = _load(args.layout)
    if layout is None:
        return EXIT_DECODE_ERROR

    shape = matrix_shape(build_matrix(layout))
    print(f"Name:     {layout.name}")
    print(f"Author:   {layout.author or '-'}")
    print(f"Link:     {layout.link or '-'}")
    print(f"Boards:   {', '.join(layout.boards) or '-'}")
    print(f"Created:  {layout.created.isoformat() if layout.created else '-'}")
    print(f"Modified: {layout.modified.isoformat() if layout.modified else '-'}")
    print(f"Keys:     {len(layout.keys)}")
    print(f"Rows:     {len(shape)} ({' '.join(str(n) for n in shape)})")
    print()
    text = dump_layout(layout, indent=config.json_indent, ensure_ascii=config.ensure_ascii)
    sys.stdout.write(_finish_json(text, config))
    return EXIT_OK


COMMANDS = {
    "genkey": cmd_genkey,
    "oxeylyzer": cmd_oxeylyzer,
    "keymeow": cmd_keymeow,
    "show": cmd_show,
}


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, log_json=args.log_json)

    config = OutputConfig()
    if args.config:
        try:
            config = load_output_config(args.config)
        except (OSError, yaml.YAMLError, ValueError) as exc:
            print(f"Error: invalid config {args.config}: {exc}", file=sys.stderr)
            sys.exit(EXIT_DECODE_ERROR)

    logger.debug("Running %s on %s", args.command, args.layout)
    sys.exit(COMMANDS[args.command](args, config))


if __name__ == "__main__":
    main()
