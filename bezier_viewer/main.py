"""Entry point for the Bézier viewer."""

import argparse
import logging
import os
from pathlib import Path
import sys

from bezier_viewer.config import config_path, load_settings
from bezier_viewer.ui.app import BezierViewerApp, bootstrap_window

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bézier curve and hodograph viewer")
    parser.add_argument(
        "--log-level",
        default=os.getenv("BEZIER_VIEWER_LOG_LEVEL", "INFO"),
        help=(
            "Logging level (e.g. DEBUG, INFO). Defaults to BEZIER_VIEWER_LOG_LEVEL "
            "environment variable or INFO."
        ),
    )
    parser.add_argument(
        "--log-file",
        default=os.getenv("BEZIER_VIEWER_LOG_PATH"),
        help=(
            "Optional log file path. Defaults to bezier_viewer_log.txt next to the "
            "executable."
        ),
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Shortcut for --log-level DEBUG",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file. Defaults to bezier_viewer.ini next to the executable.",
    )
    return parser.parse_args(argv)


def configure_logging(log_level_name: str, log_path: str | None) -> str:
    resolved_level_name = log_level_name.upper()
    log_level = getattr(logging, resolved_level_name, logging.INFO)

    if not log_path:
        base_dir = os.path.dirname(sys.argv[0])
        log_path = os.path.join(base_dir, "bezier_viewer_log.txt")

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="a", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )

    return log_path


def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)
    log_level_name = "DEBUG" if args.debug else args.log_level
    log_path = configure_logging(log_level_name, args.log_file)
    logger.info("Starting Bézier Viewer (log level %s, log file %s)", log_level_name.upper(), log_path)

    settings_path = args.config or config_path(None)
    settings = load_settings(settings_path)
    logger.info("Loaded settings from %s", settings_path)

    app = BezierViewerApp([sys.argv[0], *argv])
    window = bootstrap_window(settings)
    app.window = window
    window.show()

    def cleanup() -> None:
        try:
            if window:
                window.close()
        except Exception:  # pragma: no cover - best effort
            logger.exception("Unexpected error while closing window")

    app.aboutToQuit.connect(cleanup)
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
