"""
Pydantic models for gist requests, credentials and API responses.
"""

from __future__ import annotations

from gister.schemas.gist import Credential, GistEntry, GistRequest
from gister.schemas.response import FieldError, GistCreated, GistFailure, GistResponse, classify_response

__all__ = [
    # Request
    'Credential',
    'GistEntry',
    'GistRequest',
    # Response
    'FieldError',
    'GistCreated',
    'GistFailure',
    'GistResponse',
    'classify_response',
]
