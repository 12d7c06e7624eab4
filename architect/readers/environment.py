"""Parsing of the project's .env declarations."""

from __future__ import annotations

import io
from pathlib import Path
from typing import List

from dotenv.parser import Binding, parse_stream

from ..errors import EnvReadFailure
from ..filesystem import LocalFileSystem
from ..logging import get_logger
from ..models import REDACTED, SENSITIVE_ENV_KEYS, AnalysisOptions, EnvironmentMap

ENV_FILENAME = ".env"


class EnvironmentReader:
    """Builds an :class:`EnvironmentMap`; parse failures degrade to an empty map."""

    def __init__(self, filesystem: LocalFileSystem | None = None) -> None:
        self.filesystem = filesystem or LocalFileSystem()
        self.logger = get_logger("environment")
        self.warnings: List[str] = []

    def read(self, root: Path, options: AnalysisOptions | None = None) -> EnvironmentMap:
        self.warnings = []
        if options is not None and options.skip_env:
            self.logger.debug("Skipping .env analysis by request")
            return EnvironmentMap()

        try:
            payload = self.filesystem.read_bytes(root / ENV_FILENAME)
        except OSError as exc:
            return self._degrade(EnvReadFailure(str(exc)))
        if payload is None:
            return EnvironmentMap()

        try:
            return parse_env(payload)
        except EnvReadFailure as exc:
            return self._degrade(exc)

    def _degrade(self, exc: EnvReadFailure) -> EnvironmentMap:
        message = f"Could not parse {ENV_FILENAME} file: {exc}"
        self.warnings.append(message)
        self.logger.debug(message)
        return EnvironmentMap()


def parse_env(payload: bytes) -> EnvironmentMap:
    """Parse ``KEY=VALUE`` lines; quotes are stripped and later keys win."""
    try:
        text = payload.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise EnvReadFailure(f"file is not valid UTF-8 ({exc.reason})") from exc

    env = EnvironmentMap()
    for binding in parse_stream(io.StringIO(text)):
        if binding.error or (binding.key is not None and binding.value is None):
            raise EnvReadFailure(_describe_failure(binding))
        if binding.key is not None:
            env[binding.key] = binding.value or ""
    return env


def _describe_failure(binding: Binding) -> str:
    # The raw statement may hold a secret, so only the line and key are reported.
    message = f"unexpected statement at line {binding.original.line}"
    if binding.key is not None:
        key = REDACTED if binding.key in SENSITIVE_ENV_KEYS else binding.key
        message += f" (key {key})"
    return message


__all__ = ["ENV_FILENAME", "EnvironmentReader", "parse_env"]
