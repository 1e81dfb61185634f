"""
Configuration management for the cdk-manifest command-line tool.

The manifest protocol itself is not configurable: the supported schema
version and the grammars are bundled with the package. Only presentation
settings of the command-line tool are read from the environment.
"""

import logging
import os

from .constants import DEFAULT_LOG_LEVEL

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CliConfig:
    """
    Command-line tool configuration.

    Example:
        # Using environment variables
        config = CliConfig()

        # Or using direct parameters
        config = CliConfig(log_level="DEBUG", max_error_lines=20)
    """

    def __init__(
        self,
        log_level: str | None = None,
        max_error_lines: int | None = None,
    ):
        """
        Initialize configuration.

        Args:
            log_level: Log level name (defaults to CDK_MANIFEST_LOG_LEVEL or WARNING)
            max_error_lines: Maximum schema violations printed, 0 for all
                (defaults to CDK_MANIFEST_MAX_ERROR_LINES or 0)
        """
        self.log_level = (
            log_level or os.getenv("CDK_MANIFEST_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        ).upper()
        if max_error_lines is None:
            max_error_lines = int(os.getenv("CDK_MANIFEST_MAX_ERROR_LINES", "0"))
        self.max_error_lines = max_error_lines

    @property
    def log_level_number(self) -> int:
        """Numeric value of log_level."""
        return logging.getLevelName(self.log_level)

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If a configuration value is invalid
        """
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level}"
            )

        if self.max_error_lines < 0:
            raise ValueError(f"max_error_lines must be >= 0, got {self.max_error_lines}")
