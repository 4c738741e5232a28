"""Logger setup for the ``ribbon`` package and its command line."""
import logging
import sys

LOGGER_NAME = "ribbon"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _replace_handlers(logger, handlers):
    # Close what a previous call attached so log files are not left open
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    for handler in handlers:
        logger.addHandler(handler)


def setup_logging(level=logging.INFO, log_file=None):
    """
    Send ``ribbon.*`` records to stdout and, optionally, to ``log_file``.

    ``level`` may be a number or a name such as ``"DEBUG"``. Calling this
    again replaces the handlers instead of stacking them.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _replace_handlers(logger, handlers)

    logger.debug("Logging to stdout%s at %s", f" and {log_file}" if log_file else "",
                 logging.getLevelName(level))
    return logger
