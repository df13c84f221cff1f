"""Payload building."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from gister.schemas.gist import GistRequest


def default_description(paths: Sequence[str]) -> str:
    """Description used when none is given: the arguments, comma separated."""
    return ', '.join(paths)


def build_request(
    files: Mapping[str, str],
    paths: Sequence[str],
    description: str = '',
    public: bool = False,
) -> GistRequest:
    """
    Assemble the request body.

    A non-empty description overrides the default built from paths.
    """
    return GistRequest.from_contents(
        files,
        description=description or default_description(paths),
        public=public,
    )
