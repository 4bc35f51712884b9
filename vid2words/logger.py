"""Logging setup shared by the library modules and the CLI."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level=logging.INFO) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    logging.basicConfig(format=LOG_FORMAT, level=level)
    return logger
