"""
Configuration for gister.

Settings come from environment variables, optionally seeded from a .env file
named by LOAD_ENV_FILE.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import pydantic
import pydantic_settings

T = TypeVar('T', bound='GisterSettings')


def _default_token_file() -> pathlib.Path:
    return pathlib.Path.home() / '.gist'


class GisterSettings(pydantic_settings.BaseSettings):
    """Settings for the gister CLI."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_file=None,  # Only loaded when LOAD_ENV_FILE is set (see get_settings)
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='ignore',  # Unrelated variables in a shared .env are fine
    )

    # Application metadata
    APP_NAME: str = 'gister'
    VERSION: str = '0.4.0'

    # GitHub API
    GISTER_API_URL: str = 'https://api.github.com'

    # Credential sources, both in 'username:token' form
    GISTER_GITHUB_TOKEN: str = ''
    GISTER_TOKEN_FILE: pathlib.Path = pydantic.Field(default_factory=_default_token_file)

    @pydantic.field_validator('GISTER_API_URL')
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError('GISTER_API_URL must start with http:// or https://')
        return v.rstrip('/')

    @property
    def user_agent(self) -> str:
        """User-Agent header value; GitHub rejects requests without one."""
        return f'{self.APP_NAME}/v{self.VERSION}'


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When unset, loads from environment variables only.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()  # No .env file, load from environment only

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)
