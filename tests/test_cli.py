"""Tests for the sealdag command-line interface."""

from pathlib import Path

import pytest
import typer
from typer.testing import CliRunner

from sealdag._cli.graph_input import build_graph, parse_token
from sealdag._cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from a directory with its own pyproject.toml."""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text("[project]\nname = 'test'\n")
    monkeypatch.chdir(tmp_path)
    return pyproject


class TestParseToken:
    def test_edge(self) -> None:
        assert parse_token("a->b", "->") == ("a", "b")

    def test_edge_with_spaces(self) -> None:
        assert parse_token(" a -> b ", "->") == ("a", "b")

    def test_vertex(self) -> None:
        assert parse_token("a", "->") == ("a", None)

    def test_custom_separator(self) -> None:
        assert parse_token("a:b", ":") == ("a", "b")

    @pytest.mark.parametrize("token", ["->b", "a->", "", "  "])
    def test_missing_endpoint(self, token: str) -> None:
        with pytest.raises(typer.BadParameter):
            parse_token(token, "->")

    def test_build_graph(self) -> None:
        graph = build_graph(["a->b", "c", "a->b"], "->")
        assert graph.vertex_set() == frozenset({"a", "b", "c"})
        assert list(graph.edges()) == [("a", "b")]


class TestCommands:
    def test_check_acyclic(self) -> None:
        result = runner.invoke(app, ["check", "a->b", "b->c"])
        assert result.exit_code == 0
        assert "acyclic" in result.output

    def test_check_cyclic(self) -> None:
        result = runner.invoke(app, ["check", "a->b", "b->a"])
        assert result.exit_code == 1
        assert "cyclic graph" in result.output

    def test_order(self) -> None:
        result = runner.invoke(app, ["order", "a->b", "b->c"])
        assert result.exit_code == 0
        assert result.output.split() == ["a", "b", "c"]

    def test_order_reverse(self) -> None:
        result = runner.invoke(app, ["order", "--reverse", "a->b", "b->c"])
        assert result.exit_code == 0
        assert result.output.split() == ["c", "b", "a"]

    def test_order_reverse_from_config(self, isolated_config: Path) -> None:
        isolated_config.write_text("[tool.sealdag]\nreverse = true\n")
        result = runner.invoke(app, ["order", "a->b"])
        assert result.exit_code == 0
        assert result.output.split() == ["b", "a"]

        result = runner.invoke(app, ["order", "--forward", "a->b"])
        assert result.output.split() == ["a", "b"]

    def test_separator_option(self) -> None:
        result = runner.invoke(app, ["order", "-s", ":", "a:b"])
        assert result.exit_code == 0
        assert result.output.split() == ["a", "b"]

    def test_separator_from_config(self, isolated_config: Path) -> None:
        isolated_config.write_text('[tool.sealdag]\nseparator = "=>"\n')
        result = runner.invoke(app, ["order", "a=>b"])
        assert result.exit_code == 0
        assert result.output.split() == ["a", "b"]

    def test_levels(self) -> None:
        result = runner.invoke(app, ["levels", "a->b", "a->c", "b->d", "c->d"])
        assert result.exit_code == 0
        assert "b, c" in result.output
        assert "Total: 4 vertices" in result.output

    def test_levels_empty(self) -> None:
        result = runner.invoke(app, ["levels"])
        assert result.exit_code == 0
        assert "Graph is empty" in result.output

    def test_info(self) -> None:
        result = runner.invoke(app, ["info", "a->b", "c"])
        assert result.exit_code == 0
        assert "Vertices: 3" in result.output
        assert "Edges:    1" in result.output
        assert "Sources:  a, c" in result.output
        assert "Sinks:    b, c" in result.output

    def test_invalid_token(self) -> None:
        result = runner.invoke(app, ["order", "a->"])
        assert result.exit_code != 0

    def test_invalid_config(self, isolated_config: Path) -> None:
        isolated_config.write_text("[tool.sealdag]\nreverse = 1\n")
        result = runner.invoke(app, ["order", "a->b"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output
