"""
CLI Configuration for convertx

Runtime settings come from command-line flags and environment
variables only; there is no configuration file.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..core.exceptions import ConfigurationError

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

ENV_LOG_LEVEL = 'CONVERTX_LOG_LEVEL'
ENV_VERBOSE = 'CONVERTX_VERBOSE'

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class CLIConfiguration:
    """Settings shared by every convertx subcommand"""
    verbose: bool = False  # Force DEBUG logging
    log_level: str = 'WARNING'  # Level used when not verbose

    def validate(self) -> bool:
        """
        Validate configuration

        Returns:
            True if valid

        Raises:
            ConfigurationError: If a setting is invalid
        """
        level = str(self.log_level).strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}, got '{self.log_level}'",
                parameter='log_level', value=self.log_level
            )
        self.log_level = level
        return True

    @property
    def effective_log_level(self) -> str:
        return 'DEBUG' if self.verbose else self.log_level

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'verbose': self.verbose,
            'log_level': self.log_level,
        }

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> 'CLIConfiguration':
        """Create configuration from CONVERTX_* environment variables"""
        environ = os.environ if environ is None else environ

        config = cls()
        if environ.get(ENV_LOG_LEVEL):
            config.log_level = environ[ENV_LOG_LEVEL]
        if environ.get(ENV_VERBOSE):
            config.verbose = environ[ENV_VERBOSE].strip().lower() in _TRUE_VALUES
        return config
