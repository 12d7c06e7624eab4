"""Tests for .env parsing and redaction."""

from __future__ import annotations

import pytest

from architect.errors import EnvReadFailure
from architect.models import REDACTED, AnalysisOptions, EnvironmentMap
from architect.readers.environment import EnvironmentReader, parse_env


def test_parse_env_strips_quotes_and_skips_comments() -> None:
    env = parse_env(
        b"# application\n"
        b"APP_NAME=\"Acme Shop\"\n"
        b"\n"
        b"APP_ENV='production'\n"
        b"APP_DEBUG=false\n"
        b"REDIS_HOST=\n"
    )

    assert env == {
        "APP_NAME": "Acme Shop",
        "APP_ENV": "production",
        "APP_DEBUG": "false",
        "REDIS_HOST": "",
    }


def test_parse_env_later_duplicates_win() -> None:
    env = parse_env(b"QUEUE_CONNECTION=sync\nQUEUE_CONNECTION=redis\n")

    assert env["QUEUE_CONNECTION"] == "redis"


def test_parse_env_handles_crlf_line_endings() -> None:
    env = parse_env(b"APP_ENV=local\r\nDB_CONNECTION=pgsql\r\n")

    assert env == {"APP_ENV": "local", "DB_CONNECTION": "pgsql"}


def test_parse_env_rejects_statements_without_assignment() -> None:
    with pytest.raises(EnvReadFailure):
        parse_env(b"APP_ENV=local\nthis is not valid\n")


def test_reader_returns_empty_map_when_file_missing(project_builder) -> None:
    reader = EnvironmentReader()

    env = reader.read(project_builder.path())

    assert env == {}
    assert reader.warnings == []


def test_reader_skip_env_does_not_touch_file(project_builder) -> None:
    project_builder.write({".env": "APP_NAME=Acme\n"})

    class _ExplodingFileSystem:
        def read_bytes(self, path):  # type: ignore[no-untyped-def]
            raise AssertionError("skip_env must not read the file")

    reader = EnvironmentReader(_ExplodingFileSystem())  # type: ignore[arg-type]
    env = reader.read(project_builder.path(), AnalysisOptions(skip_env=True))

    assert env == {}


def test_reader_degrades_malformed_file_to_warning(project_builder) -> None:
    project_builder.write_bytes(".env", b"APP_NAME=Acme\n\"unterminated\n")
    reader = EnvironmentReader()

    env = reader.read(project_builder.path())

    assert env == {}
    assert len(reader.warnings) == 1
    assert reader.warnings[0].startswith("Could not parse .env file")


def test_environment_map_never_displays_sensitive_values() -> None:
    env = EnvironmentMap({"DB_PASSWORD": "hunter2", "APP_NAME": "Acme"})

    assert env.display("DB_PASSWORD", "none") == REDACTED
    assert env.display("APP_KEY", "none") == "none"
    assert env.display("APP_NAME", "Unknown") == "Acme"
    assert "hunter2" not in repr(env)


def test_malformed_file_warning_omits_statement_text(project_builder) -> None:
    project_builder.write_bytes(".env", b'APP_NAME=Acme\nDB_PASSWORD "hunter2"\n')
    reader = EnvironmentReader()

    env = reader.read(project_builder.path())

    assert env == {}
    assert len(reader.warnings) == 1
    assert "line 2" in reader.warnings[0]
    assert "hunter2" not in reader.warnings[0]
