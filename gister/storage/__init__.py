"""GitHub Gist API backend."""

from gister.storage.gist import GistClient

__all__ = ['GistClient']
