"""Configuration for gister."""

from gister.config.base import GisterSettings, get_settings

__all__ = ['GisterSettings', 'get_settings']
