# fedora-postinstall/fedora_postinstall/logger_utils.py
import logging
import sys
from pathlib import Path
from typing import Optional

# Logs go to the invoking user's config directory so repeated runs share one file.
LOG_DIR = Path.home() / ".config" / "fedora-postinstall"
LOG_FILENAME = "fedora_postinstall.log"

def setup_logger(
    logger_name: str = "FedoraPostInstall",
    log_level: int = logging.INFO, # Overall minimum level for the logger and file handler
    log_to_file: bool = True,
    log_file_path: Optional[Path] = None # Allow overriding the default log file path
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        logger_name (str): The name for the logger instance.
        log_level (int): The base logging level for the logger itself and the file handler.
        log_to_file (bool): Whether to enable logging to a file.
        log_file_path (Optional[Path]): Absolute path to the log file.
                                        If None and log_to_file is True, defaults to
                                        LOG_DIR / LOG_FILENAME.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # Calling setup_logger twice for the same name must not duplicate handlers.
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(module)s:%(lineno)d] - %(message)s"
    )

    if log_to_file:
        effective_log_file_path = log_file_path if log_file_path is not None else LOG_DIR / LOG_FILENAME

        try:
            effective_log_file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            # console_output is not used here so that it can import the logger freely.
            sys.stderr.write(f"ERROR [logger_utils]: Could not create log directory {effective_log_file_path.parent}. File logging disabled. Error: {e}\n")
            log_to_file = False

        if log_to_file:
            file_handler = logging.FileHandler(effective_log_file_path, mode='a', encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            if logger.isEnabledFor(logging.INFO):
                logger.info(f"File logging initialized to: {effective_log_file_path}")

    # Without any handler, logging would print "No handlers could be found" noise.
    if not logger.hasHandlers():
        logger.addHandler(logging.NullHandler())

    return logger

# Default application logger, imported by every other module.
app_logger = setup_logger()
