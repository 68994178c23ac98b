"""`shellcss build`: render the helper and grid classes to a stylesheet."""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

from shellcss import grid, helpers
from shellcss.config import DEFAULT_SETTINGS, Settings, load_settings
from shellcss.css.parser import Stylesheet
from shellcss.errors import ShellError

logger = logging.getLogger("shellcss")

def parse_breakpoints(value: str | None) -> list[str | int] | str | None:
    """`all`, `none` or a comma separated list such as `lap,desk,900`."""
    if value is None or value == "none":
        return None
    if value == "all":
        return value
    breakpoints: list[str | int] = []
    for item in value.split(","):
        item = item.strip()
        if item:
            breakpoints.append(int(item) if item.isdigit() else item)
    return breakpoints

def build_stylesheet(settings: Settings = DEFAULT_SETTINGS, breakpoints=None) -> Stylesheet:
    stylesheet = Stylesheet()
    stylesheet.extend(helpers.build(breakpoints, settings))
    stylesheet.extend(grid.build(breakpoints, settings))
    return stylesheet

def handle_build(args: argparse.Namespace) -> None:
    settings = load_settings(args.config) if args.config else DEFAULT_SETTINGS
    stylesheet = build_stylesheet(settings, parse_breakpoints(args.breakpoints))
    css = str(stylesheet)

    if args.output:
        Path(args.output).write_text(css, encoding="utf-8")
        logger.info("Wrote %d rules to %s", len(stylesheet), args.output)
    else:
        sys.stdout.write(css)

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="shellcss", description="Shell design system CSS generator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generated rule")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Render helper and grid classes")
    build_parser.add_argument("--config", help="Path to a YAML settings file")
    build_parser.add_argument("-o", "--output", help="File to write, defaults to stdout")
    build_parser.add_argument(
        "--breakpoints",
        default="all",
        help="Breakpoint variants to generate: all, none, or a list like lap,desk,900",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.command == "build":
            handle_build(args)
    except (ShellError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0
