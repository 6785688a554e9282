import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", app_name: str = "swimtimes") -> None:
    """Configure application logging

    Console output always goes to stderr so it never mixes with the table on
    stdout. If LOG_DIR is set, rotating log files are written there as well.

    Args:
        level: Root log level name
        app_name: Name to use for log files

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # already configured in this process
    if root_logger.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir = os.getenv("LOG_DIR")
    if not log_dir:
        return

    log_path = Path(log_dir)
    os.makedirs(log_path, exist_ok=True)

    # File handler with rotation
    file_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # Errors only
    error_handler = logging.handlers.RotatingFileHandler(
        filename=log_path / f"{app_name}-error.log",
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)
    root_logger.addHandler(error_handler)
