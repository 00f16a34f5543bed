"""
Unit tests for the SyntaxTreeParser facade.
"""

import pytest
from typing import Dict, List, Optional

import plugins.manager
from plugins import GrammarPlugin, PluginManager
from simpletree.config import DEFAULT_LEAF_RULE_NAMES, DEFAULT_LEAF_SYMBOLIC_NAMES, Settings
from simpletree.models import LeafClassification, ParsedSource
from simpletree.services.syntax_tree_parser import SyntaxTreeParser

from .conftest import CSTBuilder, RULE_NAMES, SYMBOLIC_NAMES


class StubPlugin(GrammarPlugin):
    """Plugin that ignores its input and returns `x + y;`."""

    def __init__(self, config: Optional[Dict] = None):
        self.config = config
        self.parsed_paths = []

    @property
    def language_name(self) -> str:
        return "stub"

    @property
    def file_extensions(self) -> List[str]:
        return [".stub"]

    def parse_source(self, content: str, file_path: Optional[str] = None) -> ParsedSource:
        self.parsed_paths.append(file_path)
        b = CSTBuilder()
        tree = b.rule(
            "program",
            b.rule(
                "singleExpression",
                b.terminal("x", "Identifier", "singleExpression", after=" "),
                b.terminal("+", "Plus", "singleExpression", after=" "),
                b.terminal("Y", "Identifier", "singleExpression"),
            ),
            b.terminal(";", "SemiColon", "program"),
            b.eof(),
        )
        return ParsedSource(
            tree=tree,
            rule_names=RULE_NAMES,
            symbolic_names=SYMBOLIC_NAMES,
            token_stream=b.stream(),
        )

    def leaf_classification(self) -> LeafClassification:
        return LeafClassification(
            rule_names=frozenset(DEFAULT_LEAF_RULE_NAMES),
            symbolic_names=frozenset(DEFAULT_LEAF_SYMBOLIC_NAMES),
        )


@pytest.fixture
def stub_plugin():
    return StubPlugin()


def test_generate_tree(stub_plugin):
    parser = SyntaxTreeParser("x + Y;", plugin=stub_plugin)

    tree = parser.generate_tree()

    assert tree.label == "#;"
    assert tree.children[0].label == "#+#"
    x, y = tree.children[0].children
    assert x.trailing == " "
    assert y.leading == " "
    assert y.is_capitalized is True


def test_tree_leaf_nodes(stub_plugin):
    parser = SyntaxTreeParser("x + Y;", plugin=stub_plugin)

    assert parser.tree_leaf_nodes() == ["x", "+", "Y", ";", "<EOF>"]


def test_plugin_selected_by_file_path(stub_plugin):
    manager = PluginManager()
    manager.register_plugin(stub_plugin)

    parser = SyntaxTreeParser("x + Y;", plugin_manager=manager, file_path="src/a.stub")

    assert parser.plugin is stub_plugin
    assert stub_plugin.parsed_paths == ["src/a.stub"]


def test_default_manager_builds_configured_plugins(tmp_path, monkeypatch):
    stub_dir = tmp_path / "stub"
    stub_dir.mkdir()
    (stub_dir / "config.yaml").write_text(
        "name: stub\n"
        "version: 1.0.0\n"
        "plugin_class: tests.unit.test_syntax_tree_parser:StubPlugin\n"
        "file_extensions: [.stub]\n"
    )
    monkeypatch.setattr(plugins.manager, "settings", Settings(plugins_dir=tmp_path))

    parser = SyntaxTreeParser("x + Y;", file_path="src/b.stub")

    assert isinstance(parser.plugin, StubPlugin)
    assert parser.plugin.config["name"] == "stub"
    assert parser.plugin.parsed_paths == ["src/b.stub"]
    assert parser.generate_tree().label == "#;"


def test_no_matching_plugin_raises():
    with pytest.raises(ValueError):
        SyntaxTreeParser("x;", plugin_manager=PluginManager(), file_path="a.unknown")

    with pytest.raises(ValueError):
        SyntaxTreeParser("x;")


def test_print_string_tree():
    assert SyntaxTreeParser.print_string_tree("(A(B)(C))") == "0 A\n├──1 B\n└──2 C"
