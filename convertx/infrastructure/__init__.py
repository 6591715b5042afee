"""
Infrastructure Module for convertx

Logging services shared by the CLI and the conversion engine.
"""

from .logging.cli_logger import ClickEchoHandler, setup_logging, get_logger

__all__ = [
    'ClickEchoHandler',
    'setup_logging',
    'get_logger'
]
