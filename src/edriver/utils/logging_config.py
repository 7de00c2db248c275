# edriver/utils/logging_config.py
"""edriver.utils.logging_config
==============================

Logging configuration for the edriver page objects.
It defines the global logger objects and a single setup function, `setup_logging`,
which configures handlers and log levels from the ``["logging"]`` section of the
configuration dictionary.

Features:
    - Rotating file logging for navigation, clipboard and page-object events.
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Optional key trace (keytrace.log) of every key sequence sent to the browser,
      enabled via the EDRIVER_KEYTRACE environment variable.
    - Safe reconfiguration: clears existing handlers to avoid duplicate logs when
      called multiple times (e.g. once per test session).
    - Never raises exceptions; all errors are reported to stderr and logging
      continues with best-effort.

Usage:
    >>> from edriver.utils import logging_config
    >>> logging_config.setup_logging({"logging": {"console_level": "INFO"}})

Globals:
    logger: Main logger ("edriver").
    KEY_LOGGER: Logger for key sequences sent to the editor ("edriver.keyevents").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global loggers ========================
# Created at import-time, unconfigured until ``setup_logging()`` attaches handlers.
logger = logging.getLogger("edriver")
KEY_LOGGER = logging.getLogger("edriver.keyevents")

KEYTRACE_ENV = "EDRIVER_KEYTRACE"


def _rotating_handler(
    filename: str, max_bytes: int, backups: int, formatter: logging.Formatter, level: int
) -> logging.Handler:
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir)
    handler = logging.handlers.RotatingFileHandler(
        filename, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures logging handlers and log levels for edriver.

    Up to four independent handlers are installed:

    1. File handler – rotating ``log_file`` (default edriver.log) capturing
       everything from ``file_level`` (default DEBUG) upward.
    2. Console handler – optional ``stderr`` output whose threshold is
       ``console_level`` (default WARNING).
    3. Error-file handler – optional rotating error.log that stores
       only ERROR and CRITICAL events.
    4. Key-event handler – rotating keytrace.log enabled when
       ``EDRIVER_KEYTRACE`` is ``1/true/yes``; attached to ``edriver.keyevents``.

    Args:
        config (dict | None): Configuration blob. Only the ``["logging"]``
            sub-section is consulted; recognised keys are ``file_level``,
            ``console_level``, ``log_to_console``, ``separate_error_log`` and
            ``log_file``.

    Notes:
        The function never raises. If the log directory cannot be created the
        main log falls back to the system temp directory.
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})
    log_filename = logging_config.get("log_file", "edriver.log")
    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-17s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    try:
        file_handler = _rotating_handler(
            log_filename, 2 * 1024 * 1024, 5, file_formatter, log_file_level
        )
    except OSError as e_fh:
        print(f"Error setting up file logger for '{log_filename}': {e_fh}", file=sys.stderr)
        log_filename = os.path.join(tempfile.gettempdir(), "edriver.log")
        print(f"Logging to temporary file: '{log_filename}'", file=sys.stderr)
        try:
            file_handler = _rotating_handler(
                log_filename, 2 * 1024 * 1024, 5, file_formatter, log_file_level
            )
        except OSError as e_tmp:
            print(f"File logging disabled: {e_tmp}", file=sys.stderr)

    # Console Handler
    console_handler = None
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s")
        )
        console_handler.setLevel(getattr(logging, console_level_str, logging.WARNING))

    # Optional Separate Error Log File
    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        try:
            error_file_handler = _rotating_handler(
                "error.log", 1 * 1024 * 1024, 3, file_formatter, logging.ERROR
            )
        except OSError as e_efh:
            print(f"Error setting up separate error log 'error.log': {e_efh}.", file=sys.stderr)

    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing root handlers to avoid duplicates
    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)
    root_logger.setLevel(log_file_level)

    # Key Event Logger
    KEY_LOGGER.propagate = False
    KEY_LOGGER.setLevel(logging.DEBUG)
    KEY_LOGGER.handlers = []

    if os.environ.get(KEYTRACE_ENV, "").lower() in {"1", "true", "yes"}:
        try:
            KEY_LOGGER.addHandler(
                _rotating_handler(
                    "keytrace.log", 1 * 1024 * 1024, 3,
                    logging.Formatter("%(asctime)s - %(message)s"), logging.DEBUG,
                )
            )
            KEY_LOGGER.disabled = False
            logging.info("Key event tracing enabled, logging to 'keytrace.log'.")
        except OSError as e_keytrace:
            logging.error(f"Failed to set up key trace logging: {e_keytrace}", exc_info=True)
            KEY_LOGGER.disabled = True
    else:
        KEY_LOGGER.addHandler(logging.NullHandler())
        KEY_LOGGER.disabled = True
        logging.debug("Key event tracing is disabled.")

    logging.info(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logging.info(
            f"File logging to '{log_filename}' at level: {logging.getLevelName(file_handler.level)}."
        )
