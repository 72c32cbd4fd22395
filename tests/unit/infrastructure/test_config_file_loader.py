"""Tests for ConfigFileLoader (pyproject.toml discovery)."""

from pathlib import Path

import pytest

from max_params_linter.domain.exceptions import InvalidOptionsError
from max_params_linter.infrastructure.config_file_loader import ConfigFileLoader


def test_reads_table_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.max-params]\nmaximum = 4\ncountVoidThis = true\n", encoding="utf-8"
    )
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == {"maximum": 4, "countVoidThis": True}


def test_reads_bare_integer(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool]\nmax-params = 2\n", encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) == 2


def test_searches_parent_directories(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.max-params]\nmax = 1\n", encoding="utf-8")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)
    assert ConfigFileLoader.find_pyproject(nested) == (tmp_path / "pyproject.toml").resolve()
    assert ConfigFileLoader.load_config_from_fs(nested) == {"max": 1}


def test_missing_section_is_none(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) is None


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.max-params\n", encoding="utf-8")
    with pytest.raises(InvalidOptionsError, match="invalid TOML"):
        ConfigFileLoader.load_config_from_fs(tmp_path)


def test_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool]\nmax-params = 6\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert ConfigFileLoader.load_config_from_fs() == 6


def test_non_table_tool_value_is_none(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("tool = 3\n", encoding="utf-8")
    assert ConfigFileLoader.load_config_from_fs(tmp_path) is None
