"""
Credential resolution.

The token is a 'username:token' string taken from GISTER_GITHUB_TOKEN, or
failing that from the token file (~/.gist by default).
"""

from __future__ import annotations

from gister.config.base import GisterSettings
from gister.exceptions import ConfigError
from gister.protocols import LoggerProtocol, NullLogger
from gister.schemas.gist import Credential


class CredentialResolver:
    """Finds the basic-auth credential for the API."""

    def __init__(self, settings: GisterSettings, logger: LoggerProtocol | None = None) -> None:
        self.settings = settings
        self.logger = logger or NullLogger()

    def resolve(self, anonymous: bool = False) -> Credential | None:
        """
        Resolve the credential, or None in anonymous mode.

        Raises:
            ConfigError: If the token file can't be read or the token is malformed
        """
        if anonymous:
            self.logger.debug('Anonymous mode: no credentials sent')
            return None
        return Credential.parse(self.load_token())

    def load_token(self) -> str:
        """Raw 'username:token' string from the environment or the token file."""
        if self.settings.GISTER_GITHUB_TOKEN:
            self.logger.debug('Using token from GISTER_GITHUB_TOKEN')
            return self.settings.GISTER_GITHUB_TOKEN

        token_file = self.settings.GISTER_TOKEN_FILE
        self.logger.debug(f'Reading token from {token_file}')
        try:
            return token_file.read_text(encoding='utf-8').strip()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(
                f'Cannot read token file {token_file}: {e}. '
                "Set GISTER_GITHUB_TOKEN or write 'username:token' to that file, or use -a for anonymous."
            ) from e
