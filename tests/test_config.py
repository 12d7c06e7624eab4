"""Tests for architect.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from architect.config import ArchitectConfig, ConfigError, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ArchitectConfig)
    assert config.root == tmp_path.resolve()
    assert config.exclude_paths == ["vendor", "node_modules"]
    assert config.source_extension == ".php"
    assert config.skip_hidden is True
    assert config.recent_files_limit == 5
    assert config.activity_window_days == 7
    assert config.vcs_timeout == 5.0


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    (tmp_path / ".architect.yml").write_text(
        """
exclude_paths:
  - storage/
  - vendor
source_extension: inc
skip_hidden: false
recent_files_limit: 3
activity:
  window_days: 14
vcs:
  timeout: 2.5
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.exclude_paths == ["vendor", "node_modules", "storage"]
    assert config.source_extension == ".inc"
    assert config.skip_hidden is False
    assert config.recent_files_limit == 3
    assert config.activity_window_days == 14
    assert config.vcs_timeout == 2.5


def test_load_config_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text("recent_files_limit: 1\n", encoding="utf-8")

    config = load_config(config_file)

    assert config.recent_files_limit == 1
    assert config.root == tmp_path.resolve()


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".architect.yml").write_text("\n# nothing here\n", encoding="utf-8")

    assert load_config(tmp_path).recent_files_limit == 5


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "vcs: [unclosed\n",
        "vcs:\n  timeout: -1\n",
        "activity:\n  window_days: 0\n",
    ],
)
def test_load_config_rejects_invalid_files(tmp_path: Path, content: str) -> None:
    (tmp_path / ".architect.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
