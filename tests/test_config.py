"""Tests for the configuration module."""

from pathlib import Path

import pytest

from sealdag._cli.config import (
    ConfigError,
    SealdagConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")
        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults_without_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == SealdagConfig(project_root=tmp_path)
        assert config.separator == "->"
        assert config.reverse is False

    def test_reads_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.sealdag]
separator = ":"
reverse = true
""",
        )

        config = load_config(pyproject)

        assert config.separator == ":"
        assert config.reverse is True
        assert config.project_root == tmp_path

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.sealdag\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_empty_separator(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.sealdag]\nseparator = ""\n')

        with pytest.raises(ConfigError, match="separator"):
            load_config(pyproject)

    def test_non_boolean_reverse(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.sealdag]\nreverse = "yes"\n')

        with pytest.raises(ConfigError, match="reverse"):
            load_config(pyproject)

    def test_non_table_tool_key(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("tool = 1\n")

        with pytest.raises(ConfigError, match=r"\[tool\]"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for get_config function."""

    def test_uses_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.sealdag]\nreverse = true\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().reverse is True
