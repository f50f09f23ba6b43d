"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_SEPARATOR = "->"


class ConfigError(Exception):
    """Error in sealdag configuration."""


@dataclass(slots=True, frozen=True)
class SealdagConfig:
    """Configuration loaded from the ``[tool.sealdag]`` table of pyproject.toml.

    Attributes:
        separator: Token separating the two endpoints of an edge argument.
        reverse: Traverse from the sinks by default.
        project_root: Directory containing the pyproject.toml, if one was found.

    """

    separator: str = DEFAULT_SEPARATOR
    reverse: bool = False
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(pyproject_path: Path) -> SealdagConfig:
    """Load and validate [tool.sealdag] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed SealdagConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    tool_section = data.get("tool", {})
    if not isinstance(tool_section, dict):
        msg = "Invalid [tool]: expected a table"
        raise ConfigError(msg)

    section = tool_section.get("sealdag", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.sealdag]: expected a table"
        raise ConfigError(msg)

    separator = section.get("separator", DEFAULT_SEPARATOR)
    if not isinstance(separator, str) or not separator:
        msg = "Invalid [tool.sealdag].separator: expected a non-empty string"
        raise ConfigError(msg)

    reverse = section.get("reverse", False)
    if not isinstance(reverse, bool):
        msg = "Invalid [tool.sealdag].reverse: expected a boolean"
        raise ConfigError(msg)

    return SealdagConfig(separator=separator, reverse=reverse, project_root=project_root)


def get_config() -> SealdagConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        SealdagConfig (defaults if no pyproject.toml or no [tool.sealdag] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return SealdagConfig()
    return load_config(pyproject_path)
