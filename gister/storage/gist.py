"""
GitHub Gist API client.

Sends one create or update request and classifies the response.
"""

from __future__ import annotations

import httpx

from gister.exceptions import NetworkError, ProtocolError
from gister.protocols import LoggerProtocol, NullLogger
from gister.schemas.gist import Credential, GistRequest
from gister.schemas.response import GistResponse, classify_response


class GistClient:
    """
    GitHub Gist API client.

    Creates new gists or updates existing ones. Both go out as a POST with a
    JSON body; updates target /gists/{gist_id}.
    """

    def __init__(
        self,
        base_url: str,
        user_agent: str,
        credential: Credential | None = None,
        transport: httpx.BaseTransport | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """
        Initialize Gist client.

        Args:
            base_url: API root without trailing slash (e.g., https://api.github.com)
            user_agent: User-Agent header value (required by GitHub)
            credential: Basic-auth pair, or None to send the request anonymously
            transport: Optional httpx transport (tests pass httpx.MockTransport)
            logger: Logger for request diagnostics
        """
        self.base_url = base_url.rstrip('/')
        self.user_agent = user_agent
        self.credential = credential
        self.transport = transport
        self.logger = logger or NullLogger()

    def endpoint(self, gist_id: str | None = None) -> str:
        """URL to POST to: /gists to create, /gists/{gist_id} to update."""
        if gist_id:
            return f'{self.base_url}/gists/{gist_id}'
        return f'{self.base_url}/gists'

    @property
    def headers(self) -> dict[str, str]:
        return {
            'Content-Type': 'application/json',
            'Accept': 'application/json',
            'User-Agent': self.user_agent,
        }

    def upload(self, request: GistRequest, gist_id: str | None = None) -> GistResponse:
        """
        Create or update a gist.

        Args:
            request: Request body
            gist_id: Existing gist to update (None creates a new gist)

        Returns:
            GistCreated or GistFailure

        Raises:
            NetworkError: If the request can't be sent
            ProtocolError: If the response isn't a JSON object
        """
        url = self.endpoint(gist_id)
        auth = httpx.BasicAuth(self.credential.username, self.credential.secret) if self.credential else None

        self.logger.debug(f'Uploading {len(request.files)} file(s) to {url}')
        with httpx.Client(transport=self.transport, headers=self.headers, auth=auth) as client:
            try:
                response = client.post(url, content=request.to_json())
            except httpx.RequestError as e:
                raise NetworkError(url, str(e) or type(e).__name__) from e

            self.logger.debug(f'HTTP {response.status_code} from {url}')
            try:
                body = response.json()
            except ValueError as e:  # JSONDecodeError and UnicodeDecodeError
                raise ProtocolError(f'Response from {url} is not valid JSON (HTTP {response.status_code})') from e

        return classify_response(body)
