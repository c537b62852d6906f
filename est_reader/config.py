import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Send ``est-reader`` log records to stderr.

    Meant for the ``python -m est_reader.scraper`` harness; applications
    embedding the client configure logging themselves. Unknown level names
    fall back to INFO. Calling it again replaces the previous handler.
    """

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("est-reader")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
