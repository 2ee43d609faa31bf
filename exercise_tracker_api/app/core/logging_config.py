"""
Logging configuration for the application.

``setup_logging`` configures the root logger from ``Settings``: a
console handler always, plus a file handler when ``LOG_FILE`` is set.
Form parsing (python-multipart) logs every parsed field at DEBUG,
which would put request bodies in the log, so it is capped at INFO.
"""

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("multipart", "python_multipart")


def setup_logging(app_settings: Settings) -> None:
    """Configure the root logger once per process.

    Unknown level names fall back to ``INFO``.  If the root logger
    already has handlers (pytest, a repeated ``create_app``) it is left
    untouched.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    numeric_level = getattr(logging, app_settings.log_level.upper(), logging.INFO)
    logger.setLevel(numeric_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = app_settings.resolve_log_file()
    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
