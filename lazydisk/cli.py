"""Command-line front door for lazydisk.

Parses CLI options, merges them over the persisted config, configures
logging, then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .logs import LOG_LEVEL_ENV, configure_logging, resolve_log_level
from .runtime import run_app
from .runtime.config import Settings, load_settings
from .ui_theme import available_theme_names

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse disk usage as an interactive treemap and delete what you don't need."
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--trash",
        action="store_true",
        default=None,
        help="Move deleted entries to the system trash instead of removing them.",
    )
    parser.add_argument(
        "--apparent-size",
        action="store_true",
        default=None,
        help="Size files by byte length instead of allocated disk blocks.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level for the log file (default: ${LOG_LEVEL_ENV} or WARNING).",
    )
    return parser


def merge_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Overlay explicitly passed CLI flags on top of config-file settings."""
    return Settings(
        theme=args.theme if args.theme is not None else settings.theme,
        use_trash=args.trash if args.trash is not None else settings.use_trash,
        apparent_size=args.apparent_size if args.apparent_size is not None else settings.apparent_size,
        min_tile_area=settings.min_tile_area,
    )


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazydisk on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    log_path = configure_logging(resolve_log_level(args.log_level))
    settings = merge_settings(args, load_settings())
    logger.info("starting lazydisk on %s (log file: %s)", path, log_path)
    run_app(
        path,
        settings.theme,
        no_color=args.no_color,
        use_trash=settings.use_trash,
        apparent_size=settings.apparent_size,
        min_tile_area=settings.min_tile_area,
    )


if __name__ == "__main__":
    main()
