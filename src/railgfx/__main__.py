"""railgfx entry point.

Usage:
    railgfx                          # Language picker, then the editor
    railgfx --lang ko                # Skip the picker
    railgfx --store directory        # Use the directory store (non-Windows)
    railgfx --print                  # Print the stored record and exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import AppConfig, load_config
from .errors import ConfigError, StoreUnavailableError
from .settings.storage import BACKENDS, SettingsStore, create_backend

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 3

logger = logging.getLogger("railgfx")


def configure_logging(show_logs: bool, log_file: Path | None = None) -> None:
    """Configure logging based on flags.

    The editor owns the terminal, so logs only reach stderr when asked for
    explicitly and no log file is given.

    Args:
        show_logs: If True, log at DEBUG level.
        log_file: Optional log file path.
    """
    level = logging.DEBUG if show_logs else logging.WARNING
    handlers: list[logging.Handler] = []

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    elif show_logs:
        handlers.append(logging.StreamHandler(sys.stderr))
    else:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Suppress noisy libraries
    for name in ["asyncio", "prompt_toolkit"]:
        logging.getLogger(name).setLevel(logging.WARNING)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="railgfx",
        description="Edit Honkai: Star Rail graphics settings stored in the registry.",
    )

    parser.add_argument(
        "--lang",
        choices=["en", "ko", "ja"],
        default=None,
        help="UI language (default: ask).",
    )

    parser.add_argument(
        "--store",
        choices=list(BACKENDS),
        default=None,
        help="Store backend (default: auto = registry on Windows, directory elsewhere).",
    )

    parser.add_argument(
        "--store-dir",
        type=Path,
        default=None,
        help="Root directory for the directory store (default: ~/.railgfx/store).",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file path (default: config/railgfx.yaml).",
    )

    parser.add_argument(
        "--show-logs",
        action="store_true",
        help="Log at debug level.",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to this file.",
    )

    parser.add_argument(
        "--print",
        dest="print_record",
        action="store_true",
        help="Print the stored record as JSON and exit.",
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = _build_parser()
    return parser.parse_args(argv)


def build_store(args: argparse.Namespace, config: AppConfig) -> SettingsStore:
    """Create the settings store from CLI flags, falling back to config.

    Raises:
        StoreUnavailableError: If the chosen backend cannot run here.
    """
    kind = args.store or config.store.backend
    directory = args.store_dir or config.store.directory
    return SettingsStore(create_backend(kind, directory))


def print_record(store: SettingsStore) -> int:
    """Print the stored record (or defaults) as indented JSON."""
    record, existed = store.load()
    print(record.pretty())
    if not existed:
        print(f"[defaults] nothing valid stored at {store.location}", file=sys.stderr)
    return EXIT_SUCCESS


def run_interactive(store: SettingsStore, language: str | None) -> int:
    """Run the language picker (unless preset) and the editor."""
    from .i18n import Language
    from .session import SettingsSession
    from .ui import pick_language, run_editor

    chosen = Language(language) if language else pick_language()
    if chosen is None:
        return EXIT_SUCCESS

    session = SettingsSession(store, chosen)
    run_editor(session)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"[error] {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    configure_logging(
        args.show_logs or config.logging.show_logs,
        args.log_file or config.logging.file,
    )

    try:
        store = build_store(args, config)
    except StoreUnavailableError as e:
        print(f"[error] {e}", file=sys.stderr)
        return EXIT_ERROR

    logger.debug("Using store %s", store.location)

    if args.print_record:
        return print_record(store)

    return run_interactive(store, args.lang or config.ui.language)


if __name__ == "__main__":
    sys.exit(main())
