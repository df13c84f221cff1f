"""Pipeline stages for uploading a gist."""

from gister.services.collector import InputCollectorService
from gister.services.credentials import CredentialResolver
from gister.services.payload import build_request, default_description
from gister.services.upload import GistUploadService, UploadOptions

__all__ = [
    'CredentialResolver',
    'GistUploadService',
    'InputCollectorService',
    'UploadOptions',
    'build_request',
    'default_description',
]
