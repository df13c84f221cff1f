"""
CLI logger adapter - implements LoggerProtocol for command-line usage.

Everything goes to stderr: stdout is reserved for the gist URL so the output
can be piped.
"""

from __future__ import annotations

import typer


class CLILogger:
    """
    Logger implementation for CLI (implements LoggerProtocol from protocols).

    Outputs messages to stderr with optional verbose mode.
    """

    def __init__(self, verbose: bool = False) -> None:
        """
        Initialize CLI logger.

        Args:
            verbose: If True, show debug/info messages. If False, only warnings/errors.
        """
        self.verbose = verbose

    def debug(self, message: str) -> None:
        """Log debug message (only if verbose)."""
        if self.verbose:
            typer.echo(f'[DEBUG] {message}', err=True)

    def info(self, message: str) -> None:
        """Log info message (only if verbose)."""
        if self.verbose:
            typer.echo(f'[INFO] {message}', err=True)

    def warning(self, message: str) -> None:
        """Log warning message."""
        typer.secho(f'[WARNING] {message}', fg=typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        """Log error message."""
        typer.secho(f'[ERROR] {message}', fg=typer.colors.RED, err=True)
