import logging


def _logger(log_level: int) -> logging.Logger:
    logging.basicConfig(level=log_level, format="%(asctime)s - %(filename)s - %(lineno)d - %(levelname)s - %(message)s")
    return logging.getLogger("check_tasks")


def set_level(log_level: int | str, *, logger: logging.Logger) -> None:
    """Set level of the logger"""
    logger.setLevel(log_level)


# basicConfig logs to stderr, so stdout only ever carries the report
logger = _logger(log_level=logging.WARNING)
