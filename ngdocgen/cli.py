"""CLI entrypoints for ngdocgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import ConfigError
from .logging import configure_logging, get_logger
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ngdocgen",
        description="Generate documentation for Angular projects using AI.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser(
        "run",
        help="Generate a Markdown document for every classified declaration.",
    )
    _add_verbose_option(run_parser, suppress_default=True)
    run_parser.add_argument(
        "-p",
        "--project",
        default="tsconfig.json",
        help="Path to tsconfig.json file (defaults to ./tsconfig.json).",
    )
    run_parser.add_argument(
        "-d",
        "--output",
        default="./docs",
        help="Output directory (defaults to ./docs).",
    )
    run_parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also append log output to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for ngdocgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=getattr(args, "log_file", None),
    )

    if args.command == "run":
        orchestrator = Orchestrator()
        project_path = Path(args.project).expanduser().resolve()
        output_path = Path(args.output).expanduser().resolve()
        try:
            orchestrator.run(project_path, output_path)
        except ConfigError as exc:
            parser.exit(1, f"{exc}\n")
        except Exception as exc:
            get_logger("cli").debug("Documentation run aborted", exc_info=True)
            parser.exit(1, f"ngdocgen run failed: {exc}\nRun with --verbose for more details.\n")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
