"""
Shared exceptions for gister.

Every stage of the upload pipeline raises one of these; the CLI is the only
place they are caught.

Exception Hierarchy:
    GisterError (base)
    ├── UsageError (no input files given)
    ├── InputReadError (file or stdin could not be read)
    ├── ConfigError (token missing or malformed)
    ├── NetworkError (request could not be sent)
    ├── ProtocolError (response body is not the expected JSON)
    └── GistAPIError (API answered with a failure message)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gister.schemas.response import FieldError


class GisterError(Exception):
    """Base exception for all gister errors."""

    exit_code = 1


class UsageError(GisterError):
    """Raised when no input file(s) or standard input were specified."""

    exit_code = 2

    def __init__(self, message: str = 'No input file(s), or standard input specified.') -> None:
        super().__init__(message)


class InputReadError(GisterError):
    """Raised when an input file or standard input cannot be read."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        label = 'standard input' if source == '-' else source
        super().__init__(f'Cannot read {label}: {reason}')


class ConfigError(GisterError):
    """Raised when the credential cannot be loaded or parsed."""


class NetworkError(GisterError):
    """Raised when the HTTP request cannot be sent."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f'Request to {url} failed: {reason}')


class ProtocolError(GisterError):
    """Raised when the response body is not a JSON object we understand."""


class GistAPIError(GisterError):
    """Raised when the API reports a failure (no html_url in the response)."""

    def __init__(self, message: str, url: str, field_errors: Sequence[FieldError] = ()) -> None:
        self.message = message
        self.url = url
        self.field_errors = list(field_errors)
        super().__init__(f'{message or "Gist upload failed"} (url: {url})')
