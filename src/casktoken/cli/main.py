"""CLI entrypoint for casktoken."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from casktoken import __version__
from casktoken.config import load_config
from casktoken.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from casktoken.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from casktoken.exceptions import CaskTokenError, ConfigError
from casktoken.generator import propose_token
from casktoken.reporting import render_json, render_text, render_warnings
from casktoken.repo import resolve_project_root

EXIT_OK = 0
EXIT_WARNINGS = 1
EXIT_CONFIG_ERROR = 2


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad usage with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_WARNINGS, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = _ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Also show the simplified app name and log every normalization step",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Cask repository root (default: nearest directory above cwd containing Casks/)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format: text (default) or json",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable colored warnings")
    parser.add_argument("app", help="Application name or path to an application bundle")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    root = args.root.resolve() if args.root is not None else resolve_project_root(Path.cwd())

    try:
        config = load_config(root, args.config)
        proposal = propose_token(args.app, root=root, config=config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except CaskTokenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_WARNINGS

    if args.output_format == "json":
        print(render_json(proposal))
    else:
        print(render_text(proposal, debug=args.debug))

    if not proposal.has_warnings:
        return EXIT_OK

    if args.output_format != "json":
        use_color = not args.no_color and sys.stderr.isatty()
        print(f"\n{render_warnings(proposal, color=use_color)}\n", file=sys.stderr)
    return EXIT_WARNINGS


if __name__ == "__main__":
    sys.exit(main())
