# Contains logging setup for the package
import logging
import os

LOG_FILE_NAME = "json_to_insert.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Handlers added here are tagged so a second call can replace them
_HANDLER_TAG = "_json_to_insert_handler"


def configure_logging(config=None, level=None):
    """
    Configure the JsonToInsert package logger from the user settings.

    Args:
        config: Settings dict (see config.DEFAULT_CONFIG); defaults apply when None
        level: Log level name or number overriding the log_level setting

    Returns:
        logging.Logger: The package logger
    """
    config = config or {}
    package_logger = logging.getLogger("JsonToInsert")

    if level is None:
        level = config.get("log_level") or "INFO"
    if isinstance(level, str):
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            package_logger.warning(f"Unknown log level {level!r}, using INFO")
            level = "INFO"
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    setattr(console, _HANDLER_TAG, True)
    package_logger.addHandler(console)

    if config.get("enable_logging"):
        log_dir = config.get("log_directory") or config.get("output_directory") or os.getcwd()
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE_NAME), encoding="utf-8")
        except OSError as e:
            package_logger.warning(f"Unable to open log file in {log_dir}: {e}")
        else:
            file_handler.setFormatter(formatter)
            setattr(file_handler, _HANDLER_TAG, True)
            package_logger.addHandler(file_handler)

    # Records are handled here; do not repeat them through the root logger
    package_logger.propagate = False
    return package_logger
