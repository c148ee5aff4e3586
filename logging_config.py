import logging
import os
from logging.handlers import RotatingFileHandler

LOGS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs")
LOG_FORMAT = ("%(asctime)s %(levelname)-8s "
              "[%(filename)s:%(lineno)d %(funcName)s()] "
              "%(message)s")


def _log_path(log_file: str) -> str:
    """Absolute paths are kept; anything else is flattened into ./logs/."""
    if os.path.isabs(log_file):
        return log_file
    os.makedirs(LOGS_DIR, exist_ok=True)
    return os.path.join(LOGS_DIR, os.path.basename(log_file))


def get_configured_level() -> str:
    """Log level from the [env] section of settings.toml."""
    from settings_service import _load_settings

    return _load_settings()["env"]["log_level"].upper()


def setup_logging(name="psoid", log_file="psoid.log", level=None, max_bytes=1024*1024, backup_count=3):
    """Attach a rotating file handler and a stream handler to a named logger.

    Calling it again for the same name replaces the handlers rather than
    adding duplicates.

    Args:
        name: The name of the logger, usually the calling module's __name__.
        log_file: File name inside ./logs/, or an absolute path.
        level: An int or a level name ("DEBUG"). Defaults to the
            log_level in settings.toml.
        max_bytes: Size at which the log file rotates.
        backup_count: Number of rotated files kept.

    Returns:
        logger: The configured logger.

    Example usage:
    from logging_config import setup_logging
    logger = setup_logging(__name__, log_file="section_id.log")
    """
    logger = logging.getLogger(name)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        RotatingFileHandler(_log_path(log_file), maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if level is None:
        level = get_configured_level()
    elif isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    return logger
