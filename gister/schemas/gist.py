"""
Gist request models.

GistRequest mirrors the JSON body of POST /gists and POST /gists/{id}:

    {"description": "...", "public": false, "files": {"name": {"content": "..."}}}
"""

from __future__ import annotations

from collections.abc import Mapping

import pydantic

from gister.exceptions import ConfigError
from gister.schemas.types import StrictModel

# GitHub rejects gist file names containing either separator
PATH_SEPARATORS = ('/', '\\')


class GistEntry(StrictModel):
    """A single file within a gist."""

    content: str


class GistRequest(StrictModel):
    """Body of a create or update request. Built once, serialized once."""

    description: str = ''
    public: bool = False
    files: dict[str, GistEntry]

    @pydantic.field_validator('files')
    @classmethod
    def validate_entry_names(cls, v: dict[str, GistEntry]) -> dict[str, GistEntry]:
        if not v:
            raise ValueError('a gist needs at least one file')
        for name in v:
            if not name:
                raise ValueError('gist file names must not be empty')
            if any(sep in name for sep in PATH_SEPARATORS):
                raise ValueError(f'gist file name {name!r} must not contain a path separator')
        return v

    @classmethod
    def from_contents(cls, contents: Mapping[str, str], description: str = '', public: bool = False) -> GistRequest:
        """Build a request from a plain name -> content mapping."""
        return cls(
            description=description,
            public=public,
            files={name: GistEntry(content=content) for name, content in contents.items()},
        )

    def to_json(self) -> bytes:
        """Serialize for the wire, leaving out an empty description."""
        exclude = None if self.description else {'description'}
        return self.model_dump_json(exclude=exclude).encode('utf-8')


class Credential(StrictModel):
    """Basic-auth pair parsed from a 'username:token' string."""

    username: str
    secret: str = pydantic.Field(repr=False)

    @classmethod
    def parse(cls, raw: str) -> Credential:
        """
        Parse a 'username:token' string.

        Raises:
            ConfigError: If the string does not contain exactly one ':'
        """
        words = raw.split(':')
        if len(words) != 2:
            raise ConfigError("token must be in form 'username:token'")
        return cls(username=words[0], secret=words[1])
