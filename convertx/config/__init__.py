"""Runtime configuration for convertx"""

from .cli_config import CLIConfiguration

__all__ = ['CLIConfiguration']
