"""
Scanner Configuration
=====================

Options shared by the scanner and the loxscan CLI. Values come from:
- Default values (defined here)
- Environment variables (ScannerOptions.from_env)
- Command-line flags (applied by the CLI on top of from_env)
"""

from dataclasses import dataclass
import logging
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ScannerOptions:
    """
    Configuration for a scan.

    Attributes:
        filename: Name used in diagnostics (default: "<stdin>")
        first_line: Line number of the first line of input (default: 1)
        max_errors: Stop reporting diagnostics after this many (default: 100)
        log_level: Logging level name for the CLI (default: "WARNING")
    """

    filename: str = "<stdin>"
    first_line: int = 1
    max_errors: int = 100
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Environment variables (all optional):
            LOXKIT_MAX_ERRORS: Diagnostic limit (integer, at least 1)
            LOXKIT_LOG_LEVEL: Logging level name (e.g. "DEBUG")

        Returns:
            ScannerOptions with values from environment variables
        """
        options = cls()

        if max_errors := os.environ.get("LOXKIT_MAX_ERRORS"):
            try:
                if int(max_errors) >= 1:
                    options.max_errors = int(max_errors)
            except ValueError:
                pass  # Ignore invalid values

        if log_level := os.environ.get("LOXKIT_LOG_LEVEL"):
            if log_level.upper() in LOG_LEVELS:
                options.log_level = log_level.upper()

        return options

    @property
    def logging_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return getattr(logging, self.log_level)
