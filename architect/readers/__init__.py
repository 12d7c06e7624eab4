"""Readers for the composer manifest and the .env file."""

from .environment import EnvironmentReader, parse_env
from .manifest import ManifestReader, parse_manifest

__all__ = ["EnvironmentReader", "ManifestReader", "parse_env", "parse_manifest"]
