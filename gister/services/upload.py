"""
Upload service - runs the whole pipeline for one invocation.

    collect files -> resolve credential -> build request -> send -> classify
"""

from __future__ import annotations

from typing import BinaryIO

import attrs
import httpx

from gister.config.base import GisterSettings
from gister.exceptions import GistAPIError
from gister.protocols import LoggerProtocol, NullLogger
from gister.schemas.response import GistCreated, GistFailure
from gister.services.collector import InputCollectorService
from gister.services.credentials import CredentialResolver
from gister.services.payload import build_request
from gister.storage.gist import GistClient


@attrs.define(frozen=True)
class UploadOptions:
    """Parsed command-line options, passed explicitly into each stage."""

    paths: tuple[str, ...] = attrs.field(converter=tuple)
    update_id: str | None = None
    public: bool = False
    anonymous: bool = False
    description: str = ''


class GistUploadService:
    """Uploads files to a new or existing gist."""

    def __init__(
        self,
        settings: GisterSettings,
        logger: LoggerProtocol | None = None,
        stdin: BinaryIO | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger or NullLogger()
        self.collector = InputCollectorService(stdin=stdin, logger=self.logger)
        self.resolver = CredentialResolver(settings, logger=self.logger)
        self.transport = transport

    def upload(self, options: UploadOptions) -> GistCreated:
        """
        Upload the files named in options.

        Returns:
            GistCreated with the gist's URL

        Raises:
            UsageError: If no paths were given
            InputReadError: If an input can't be read
            ConfigError: If the credential can't be resolved
            NetworkError: If the request can't be sent
            ProtocolError: If the response isn't understood
            GistAPIError: If the API rejected the upload
        """
        files = self.collector.collect(options.paths)
        credential = self.resolver.resolve(anonymous=options.anonymous)
        request = build_request(files, options.paths, description=options.description, public=options.public)

        client = GistClient(
            base_url=self.settings.GISTER_API_URL,
            user_agent=self.settings.user_agent,
            credential=credential,
            transport=self.transport,
            logger=self.logger,
        )
        result = client.upload(request, gist_id=options.update_id)

        if isinstance(result, GistFailure):
            raise GistAPIError(result.message, client.endpoint(options.update_id), result.field_errors)
        return result
