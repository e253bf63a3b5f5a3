"""
Logging configuration for the Streamlit page and command-line scripts.

Handlers installed here are named so a later call (a Streamlit rerun, a
level change) can find, close and replace them without touching handlers
other code attached to the root logger.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

HANDLER_PREFIX = "movie_explorer."

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def remove_installed_handlers(root_logger: Optional[logging.Logger] = None) -> None:
    """Detach and close the handlers a previous setup_logging() call added."""
    root_logger = root_logger or logging.getLogger()
    for handler in list(root_logger.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root_logger.removeHandler(handler)
            handler.close()


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5
) -> None:
    """
    Configure root logging; safe to call repeatedly.

    Args:
        log_file: Name of log file (default: None, logs to console only)
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_dir: Directory for log files (default: 'logs')
        max_bytes: Maximum size of log file before rotation (default: 10MB)
        backup_count: Number of backup files to keep (default: 5)
    """
    numeric_level = getattr(logging, level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    remove_installed_handlers(root_logger)
    root_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # urllib3 logs every connection requests opens
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('watchdog').setLevel(logging.WARNING)


def configure_ui_logging(level: str = "INFO", log_dir: str = "logs"):
    """Console plus logs/ui.log, for the Streamlit page."""
    setup_logging(log_file="ui.log", level=level, log_dir=log_dir)


def configure_script_logging(debug: bool = False):
    """Console-only logging for command-line scripts."""
    setup_logging(level="DEBUG" if debug else "INFO")
