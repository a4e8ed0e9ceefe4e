"""Application entry point for the form builder."""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from formbuilder import config
from formbuilder.ui.main_window import MainWindow


def setup_logging(verbose_console: bool = False, log_file: str | None = None) -> logging.Logger:
    logger = logging.getLogger("formbuilder")
    logger.setLevel(logging.DEBUG)  # handlers filter

    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose_console else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def main() -> int:
    logger = setup_logging(verbose_console=config.VERBOSE_CONSOLE, log_file=config.LOG_FILE)
    logger.info("Starting form builder (store: %s)", config.STORE_DIR)

    app = QApplication(sys.argv)
    app.setApplicationName("Form Builder")
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
