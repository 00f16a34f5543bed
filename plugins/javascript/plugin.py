"""
JavaScript Grammar Plugin.

This plugin parses JavaScript using tree-sitter-javascript and converts the
result into the concrete syntax tree consumed by the tree simplifier:
- tree-sitter nodes with children become rule nodes
- childless nodes (and configured token node types) become terminals
- comments and the whitespace between tokens go to the hidden channel
"""

from pathlib import Path
from typing import Dict, List, Optional, Set

import tree_sitter
import tree_sitter_javascript

from plugins.base import GrammarPlugin, ParseError
from plugins.manager import PluginManager
from simpletree.models import (
    DEFAULT_CHANNEL,
    EOF_TOKEN_TYPE,
    HIDDEN_CHANNEL,
    LeafClassification,
    ParsedSource,
    RuleNode,
    TerminalNode,
    Token,
)
from simpletree.services.token_stream import BufferedTokenStream
from simpletree.utils.logging import get_logger, log_error_with_context

logger = get_logger(__name__, language="javascript")

EOF_TEXT = "<EOF>"
WHITESPACE_TOKEN_TYPE = -2


class _TreeConverter:
    """Single-use converter from a tree-sitter tree to a CST and token list."""

    def __init__(self, source: bytes, token_node_types: Set[str]):
        self._source = source
        self._token_node_types = token_node_types
        self._offset = 0
        self.tokens: List[Token] = []

    def convert(self, ts_root: tree_sitter.Node) -> RuleNode:
        root = self._convert_rule(ts_root)
        self._add_gap(len(self._source))

        eof = Token(text=EOF_TEXT, type=EOF_TOKEN_TYPE, token_index=len(self.tokens))
        self.tokens.append(eof)
        root.children.append(TerminalNode(text=EOF_TEXT, symbol=eof, rule_index=root.rule_index))
        return root

    def _convert_rule(self, ts_node: tree_sitter.Node) -> RuleNode:
        rule = RuleNode(rule_index=ts_node.kind_id)
        for child in ts_node.children:
            if child.is_extra:
                self._add_token(child, HIDDEN_CHANNEL)
            elif child.child_count == 0 or child.type in self._token_node_types:
                token = self._add_token(child, DEFAULT_CHANNEL)
                rule.children.append(
                    TerminalNode(text=token.text, symbol=token, rule_index=rule.rule_index)
                )
            else:
                rule.children.append(self._convert_rule(child))
        return rule

    def _add_token(self, ts_node: tree_sitter.Node, channel: int) -> Token:
        self._add_gap(ts_node.start_byte)
        token = Token(
            text=self._text(ts_node.start_byte, ts_node.end_byte),
            type=ts_node.kind_id,
            token_index=len(self.tokens),
            channel=channel,
        )
        self.tokens.append(token)
        self._offset = max(self._offset, ts_node.end_byte)
        return token

    def _add_gap(self, start_byte: int) -> None:
        """Emit the whitespace between the previous token and start_byte."""
        if start_byte <= self._offset:
            return
        self.tokens.append(Token(
            text=self._text(self._offset, start_byte),
            type=WHITESPACE_TOKEN_TYPE,
            token_index=len(self.tokens),
            channel=HIDDEN_CHANNEL,
        ))
        self._offset = start_byte

    def _text(self, start_byte: int, end_byte: int) -> str:
        return self._source[start_byte:end_byte].decode("utf8", errors="replace")


class JavaScriptPlugin(GrammarPlugin):
    """JavaScript grammar plugin using tree-sitter."""

    def __init__(self, config: Optional[Dict] = None):
        """
        Initialize the JavaScript plugin.

        Args:
            config: Parsed config.yaml. If None, the bundled one is loaded.
        """
        if config is None:
            config = PluginManager().load_plugin_config(Path(__file__).parent)
        self._config = config

        self._language = tree_sitter.Language(tree_sitter_javascript.language())
        self._parser = tree_sitter.Parser(self._language)
        self._names = [
            self._language.node_kind_for_id(i) or ""
            for i in range(self._language.node_kind_count)
        ]

        logger.info("JavaScript plugin initialized successfully")

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "javascript"

    @property
    def file_extensions(self) -> List[str]:
        """Return supported file extensions."""
        return self._config.get('file_extensions', ['.js'])

    def leaf_classification(self) -> LeafClassification:
        """Return the atomic node types of the tree-sitter JavaScript grammar."""
        return LeafClassification(
            rule_names=frozenset(self._config.get('leaf_rule_names', [])),
            symbolic_names=frozenset(self._config.get('leaf_symbolic_names', [])),
            identifier_symbolic_name=self._config.get('identifier_symbolic_name', 'identifier'),
        )

    def parse_source(self, content: str, file_path: Optional[str] = None) -> ParsedSource:
        """
        Parse JavaScript source using tree-sitter-javascript.

        Args:
            content: Source text
            file_path: Path the source came from, used for logging only

        Returns:
            ParsedSource with the CST, node-kind name tables and token stream

        Raises:
            ParseError: If the source cannot be parsed
        """
        source = bytes(content, "utf8")
        try:
            tree = self._parser.parse(source)
        except Exception as e:
            log_error_with_context(
                logger,
                f"Error parsing JavaScript file {file_path or '<string>'}",
                e,
                file_path=file_path,
            )
            raise ParseError(f"Failed to parse JavaScript source: {e}") from e

        if tree.root_node is None:
            raise ParseError(f"Failed to parse JavaScript file: {file_path or '<string>'}")

        if tree.root_node.has_error:
            logger.warning(f"JavaScript source {file_path or '<string>'} contains syntax errors")

        converter = _TreeConverter(source, set(self._config.get('token_node_types', [])))
        cst = converter.convert(tree.root_node)

        logger.debug(
            f"Successfully parsed JavaScript file: {file_path or '<string>'} "
            f"({len(converter.tokens)} tokens)"
        )
        return ParsedSource(
            tree=cst,
            rule_names=self._names,
            symbolic_names=self._names,
            token_stream=BufferedTokenStream(converter.tokens),
        )
