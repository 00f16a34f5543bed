"""
Syntax tree parser facade.

Parses source text with a grammar plugin and exposes the simple parse tree,
the raw leaf tokens and the bracket-notation pretty-printer.
"""

from typing import List, Optional

from plugins.base import GrammarPlugin
from plugins.manager import PluginManager
from simpletree.analyzers.tree_simplifier import TreeSimplifier, collect_leaf_tokens
from simpletree.models import ParsedSource, SimpleParseTree
from simpletree.utils.bracket_notation import print_string_tree
from simpletree.utils.logging import get_logger, log_phase_transition


class SyntaxTreeParser:
    """Parses one source text and derives simple parse trees from it."""

    def __init__(
        self,
        content: str,
        plugin: Optional[GrammarPlugin] = None,
        plugin_manager: Optional[PluginManager] = None,
        file_path: Optional[str] = None,
    ):
        """
        Parse source text.

        Args:
            content: Source text
            plugin: Grammar plugin to parse with
            plugin_manager: Used to pick a plugin by file_path when plugin is
                None. Defaults to a manager holding the bundled plugins.
            file_path: Path the source came from

        Raises:
            ValueError: If no plugin is given and none matches file_path
            ParseError: If the plugin cannot parse the source
        """
        if plugin is None and file_path is not None:
            if plugin_manager is None:
                plugin_manager = PluginManager()
                plugin_manager.initialize_plugins()
            plugin = plugin_manager.get_plugin_for_file(file_path)
        if plugin is None:
            raise ValueError(f"No grammar plugin available for {file_path or '<string>'}")

        self.plugin = plugin
        self.file_path = file_path
        self._logger = get_logger(__name__, language=plugin.language_name, file_path=file_path)

        log_phase_transition(self._logger, "parse", "started")
        self.parsed: ParsedSource = plugin.parse_source(content, file_path)
        log_phase_transition(self._logger, "parse", "completed")

    def generate_tree(self) -> Optional[SimpleParseTree]:
        """Simplify the parsed CST with the plugin's leaf classification."""
        simplifier = TreeSimplifier(classification=self.plugin.leaf_classification())
        log_phase_transition(self._logger, "simplify", "started")
        tree = simplifier.simplify(
            self.parsed.tree,
            self.parsed.rule_names,
            self.parsed.symbolic_names,
            self.parsed.token_stream,
        )
        log_phase_transition(self._logger, "simplify", "completed")
        return tree

    def tree_leaf_nodes(self) -> List[str]:
        """Return the text of every terminal of the parsed CST."""
        return collect_leaf_tokens(self.parsed.tree)

    @staticmethod
    def print_string_tree(text: str) -> str:
        """Pretty-print a tree given in bracket notation."""
        return print_string_tree(text)
