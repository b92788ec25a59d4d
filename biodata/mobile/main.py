"""Biodata form - Flet application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
import uuid
from pathlib import Path
from typing import Optional

import flet as ft
from dotenv import load_dotenv

from biodata.mobile.controllers.form_controller import FormScreenController
from biodata.mobile.state import Store
from biodata.mobile.ui.layouts.form_screen import apply_form_theme
from biodata.shared.core.configuration import (
    LoggingConfig,
    SystemConfig,
    ValidationLevel,
    get_config,
)
from biodata.shared.core.event_bus import EventBus

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Load environment variables from .env file in project root
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")

logger = logging.getLogger(__name__)

NOISY_LOGGERS = ("flet", "flet_controls", "flet_transport", "asyncio")


def configure_logging(settings: LoggingConfig, root: Optional[Path] = None) -> Path:
    """Install file and console handlers on the root logger.

    File handler logs at the configured level into ``<log_dir>/biodata.log``;
    the console only shows warnings and errors.

    Returns:
        Path of the log file
    """
    log_dir = Path(settings.log_dir)
    if not log_dir.is_absolute():
        log_dir = (root or PROJECT_ROOT) / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / "biodata.log"

    file_level = logging.getLevelName(settings.level.upper())
    if not isinstance(file_level, int):
        file_level = logging.DEBUG
    console_level = logging.getLevelName(settings.console_level.upper())
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(file_level)
    # Remove existing handlers to avoid duplicates on hot reload
    root_logger.handlers.clear()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=settings.max_bytes,
        backupCount=settings.backup_count,
        encoding='utf-8',
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)  # Observer noise on shutdown

    return log_file_path


def build_app(config: SystemConfig):
    """Return the Flet ``main`` coroutine bound to ``config``."""

    async def main(page: ft.Page) -> None:
        logger.info("Initializing form session...")
        page.title = "Biodata"
        apply_form_theme(page, config.ui.primary_color, config.ui.theme_mode)

        # One bus and one form state per connected page
        session_id = uuid.uuid4().hex
        event_bus = EventBus()
        store = Store.initialize(event_bus, config, session_id=session_id)
        await store.form.initialize()

        def _end_session(e=None) -> None:
            logger.info(f"Form session {session_id} ended")
            event_bus.clear()
            Store.reset(session_id)

        page.on_disconnect = _end_session

        controller = FormScreenController(store.form, page)
        page.add(controller.build_view(padding=config.ui.page_padding))
        logger.info(f"Form session {session_id} ready")

    return main


def run() -> None:
    config = get_config(ValidationLevel.LENIENT)
    log_file_path = configure_logging(config.logging)
    logger.info(f"Logging configured: file={log_file_path}, console={config.logging.console_level}+")

    app = build_app(config)
    if config.ui.flet_web_mode:
        logger.info(f"Starting Flet app in WEB mode on port {config.ui.flet_port}")
        renderer = (
            ft.WebRenderer.AUTO
            if config.ui.flet_web_renderer.lower() == "auto"
            else ft.WebRenderer.CANVAS_KIT
        )
        view_mode = ft.AppView.WEB_BROWSER if os.getenv("FLET_FORCE_WEB_BROWSER") == "true" else ft.AppView.FLET_APP_WEB
        ft.run(app, view=view_mode, port=config.ui.flet_port, host="127.0.0.1", web_renderer=renderer)
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(app, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
