"""Application configuration module.

Settings are environment based (``MOTOTRACK_`` prefix, optional ``.env`` file)
and loaded through pydantic-settings. Use ``get_settings()`` everywhere so the
instance is built once per process.
"""
from mototrack.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
