"""
CLI Logging System

Routes the ``convertx`` logger hierarchy to standard error through
click, keeping standard output reserved for conversion results.
"""

import logging
from typing import Optional

import click

ROOT_LOGGER_NAME = 'convertx'
LOG_FORMAT = '%(levelname)s [%(name)s] %(message)s'


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes records with click.echo on stderr"""

    def emit(self, record):
        try:
            message = self.format(record)
            click.echo(message, err=True)
        except Exception:
            self.handleError(record)


_handler: Optional[ClickEchoHandler] = None


def setup_logging(level: str = 'WARNING', verbose: bool = False) -> logging.Logger:
    """
    Setup convertx logging

    Args:
        level: Log level name used when not verbose
        verbose: Enable DEBUG output

    Returns:
        The package root logger
    """
    global _handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    if _handler is None:
        _handler = ClickEchoHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(_handler)
        root_logger.propagate = False

    root_logger.setLevel(logging.DEBUG if verbose else getattr(logging, level.upper()))
    return root_logger


def get_logger(name: str = None) -> logging.Logger:
    """Get a logger inside the convertx hierarchy"""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
