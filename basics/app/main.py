"""Basics Codelab - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

import flet as ft
from basics.app.state import Store, greeting_names
from basics.app.ui import strings
from basics.app.ui.layouts.shell import build_shell
from basics.app.ui.theme import apply_theme
from basics.shared.core.configuration import SystemConfig, get_config
from basics.shared.core.event_bus import EventBus

PROJECT_ROOT = Path(__file__).parent.parent.parent.resolve()
LOGS_DIR = PROJECT_ROOT / "data" / "logs"

# Load environment variables from .env file in project root
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

logger = logging.getLogger(__name__)

log_level_map = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(logs_dir: Optional[Path] = None) -> Path:
    """Configure root logging for the app.

    File handler: everything at LOG_LEVEL (default DEBUG) to <logs_dir>/basics.log
    Console handler: only WARNING and ERROR to the terminal

    Returns:
        Path of the log file
    """
    logs_dir = logs_dir or LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = logs_dir / "basics.log"

    file_log_level = log_level_map.get(os.getenv("LOG_LEVEL", "DEBUG").upper(), logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)

    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")
    return log_file_path


def init_store(config: SystemConfig) -> Store:
    """Start a new session: fresh bus, onboarding shown, every row collapsed."""
    store = Store.initialize(EventBus(), greeting_names(config.greetings.row_count))
    logger.info(f"Session started with {len(store.view.row_ids)} greeting rows")
    return store


def open_session(config: SystemConfig) -> Store:
    """Return the store a new page renders.

    Desktop runs one page against the global store; web mode gives every
    page its own session.
    """
    if not config.ui.flet_web_mode:
        return Store.get()

    store = Store.create_session(EventBus(), greeting_names(config.greetings.row_count))
    logger.info(f"Page session started with {len(store.view.row_ids)} greeting rows")
    return store


def main(page: ft.Page) -> None:
    """Main Flet application entry point."""
    logger.info("Building codelab view...")
    config = get_config()
    page.title = strings.APP_TITLE
    apply_theme(page, config.ui)

    page.views.append(build_shell(page, open_session(config)))
    page.update()


def run() -> None:
    configure_logging()
    config = get_config()
    if not config.ui.flet_web_mode:
        init_store(config)

    if config.ui.flet_web_mode:
        port = config.ui.flet_port
        logger.info(f"Starting Flet app in WEB mode on port {port}")
        renderer = (
            ft.WebRenderer.AUTO if config.ui.flet_web_renderer.lower() == "auto"
            else ft.WebRenderer.CANVAS_KIT
        )
        ft.run(main, view=ft.AppView.WEB_BROWSER, port=port, web_renderer=renderer)
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
