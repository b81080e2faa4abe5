import logging
from pathlib import Path

from stacks_events.config import load_settings


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Get a named logger with the package's standard formatting.

    Example:
        logger = get_logger(__name__)
        logger.info("published %s", event.event_code)

    The level defaults to ``STACKS_EVENTS_LOG_LEVEL``. A file handler is added
    under ``STACKS_EVENTS_LOG_DIR`` unless that variable is set to an empty
    string.

    Returns:
        logging.Logger: Configured logger instance.
    """
    settings = load_settings()
    if level is None:
        level = settings.log_level_value
    logger = logging.getLogger(name)

    # avoid adding duplicate handlers if called repeatedly (common in tests)
    if logger.handlers:
        logger.setLevel(level)
        return logger

    logs_dir = Path(settings.log_dir) if settings.log_dir else None
    if logs_dir is not None:
        try:
            logs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            # unwritable location, stream only
            logs_dir = None

    formatter = logging.Formatter(
        "%(asctime)s     || %(name)s \n%(levelname)s   || %(message)s \n",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    if logs_dir is not None:
        filehandler = logging.FileHandler(str(logs_dir / f"{name}.log"), encoding="utf-8")
        filehandler.setFormatter(formatter)
        logger.addHandler(filehandler)

    logger.setLevel(level)
    # stop passing records to the root logger (avoid duplicated messages)
    logger.propagate = False

    logger.debug("'%s' initialized with level %s", name, logging.getLevelName(level))
    return logger
