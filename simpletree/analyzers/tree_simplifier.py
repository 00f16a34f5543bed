"""
Tree Simplifier for concrete syntax trees.

This module collapses a full CST into a simple parse tree. Every internal node
of the result carries a label: the grammar shape of its subtree with
punctuation and keywords kept verbatim and atomic leaves (identifiers,
literals) replaced by '#'. Single-child grammar chains are spliced away so
they add to the label without adding wrapper nodes.
"""

import logging
from typing import List, Optional, Sequence

from simpletree.config import settings
from simpletree.models import (
    CSTNode,
    LeafClassification,
    RuleNode,
    SimpleParseTree,
    SimpleParseTreeLeaf,
    TerminalNode,
    Token,
    TokenStream,
)

logger = logging.getLogger(__name__)

LEAF_PLACEHOLDER = "#"


class MissingTokenError(ValueError):
    """Raised when the external parser hands over a terminal without a token."""
    pass


def _lookup(names: Sequence[Optional[str]], index: Optional[int]) -> Optional[str]:
    """Resolve a rule or token-type id; ids outside the table have no name."""
    if index is None or index < 0 or index >= len(names):
        return None
    return names[index]


def is_capitalized(text: str) -> bool:
    """True when the first character is an upper-case letter."""
    if not text:
        return False
    first = text[0]
    return first.upper() == first and first.lower() != first


class TreeSimplifier:
    """Builds simple parse trees from CSTs."""

    def __init__(
        self,
        classification: Optional[LeafClassification] = None,
        eof_text: Optional[str] = None,
        hidden_channel: Optional[int] = None,
    ):
        """
        Initialize the simplifier.

        Args:
            classification: Atomic rule/token names. Defaults to the configured ones.
            eof_text: Text of the end-of-input terminal, never emitted
            hidden_channel: Token channel holding whitespace and comments
        """
        if classification is None:
            classification = settings.leaf_classification()
        if eof_text is None:
            eof_text = settings.eof_text
        if hidden_channel is None:
            hidden_channel = settings.hidden_channel

        self.classification = classification
        self.eof_text = eof_text
        self.hidden_channel = hidden_channel

    def simplify(
        self,
        cst: RuleNode,
        rule_names: Sequence[str],
        symbolic_names: Sequence[Optional[str]],
        token_stream: TokenStream,
    ) -> Optional[SimpleParseTree]:
        """
        Simplify a CST.

        Args:
            cst: Root of the concrete syntax tree
            rule_names: Rule index -> rule name
            symbolic_names: Token type -> symbolic name
            token_stream: Stream used to recover hidden-channel trivia

        Returns:
            The simple parse tree, or None when the CST has no children

        Raises:
            MissingTokenError: If a terminal carries no token
        """
        tree = self._traverse(cst, rule_names, symbolic_names, token_stream)
        if tree is not None:
            logger.debug(
                f"Simplified CST into tree with {tree.leaf_count()} leaves",
                extra={"phase": "simplify", "label_length": len(tree.label)},
            )
        return tree

    def _traverse(
        self,
        node: RuleNode,
        rule_names: Sequence[str],
        symbolic_names: Sequence[Optional[str]],
        token_stream: TokenStream,
    ) -> Optional[SimpleParseTree]:
        if not node.children:
            return None

        simple_tree = SimpleParseTree()
        label = ""
        for child in node.children:
            if isinstance(child, TerminalNode):
                if child.text == self.eof_text:
                    continue
                if child.symbol is None:
                    raise MissingTokenError(f"Terminal node {child.text!r} has no token")

                symbolic_name = _lookup(symbolic_names, child.symbol.type)
                if self._is_leaf(_lookup(rule_names, child.rule_index), symbolic_name):
                    label += LEAF_PLACEHOLDER
                    simple_tree.children.append(self._make_leaf(child, symbolic_name, token_stream))
                else:
                    # Punctuation and keywords only shape the label
                    label += child.text
            else:
                subtree = self._traverse(child, rule_names, symbolic_names, token_stream)
                if subtree is None or not subtree.label:
                    continue
                if len(subtree.children) == 1:
                    simple_tree.children.append(subtree.children[0])
                    label += subtree.label
                else:
                    simple_tree.children.append(subtree)
                    label += LEAF_PLACEHOLDER

        simple_tree.label = label
        return simple_tree

    def _is_leaf(self, rule_name: Optional[str], symbolic_name: Optional[str]) -> bool:
        return (
            rule_name in self.classification.rule_names
            or symbolic_name in self.classification.symbolic_names
        )

    def _make_leaf(
        self,
        terminal: TerminalNode,
        symbolic_name: Optional[str],
        token_stream: TokenStream,
    ) -> SimpleParseTreeLeaf:
        is_variable = symbolic_name == self.classification.identifier_symbolic_name
        return SimpleParseTreeLeaf(
            token=terminal.text,
            is_variable=True if is_variable else None,
            is_capitalized=True if is_variable and is_capitalized(terminal.text) else None,
            leading=self._trivia(terminal.symbol, token_stream, leading=True),
            trailing=self._trivia(terminal.symbol, token_stream, leading=False),
        )

    def _trivia(self, token: Token, token_stream: TokenStream, leading: bool) -> Optional[str]:
        """Concatenate the hidden tokens on one side of a token, None if there are none."""
        if leading:
            hidden = token_stream.get_hidden_tokens_to_left(token.token_index, self.hidden_channel)
        else:
            hidden = token_stream.get_hidden_tokens_to_right(token.token_index, self.hidden_channel)
        if not hidden:
            return None
        return "".join(t.text for t in hidden) or None


def simplify(
    cst: RuleNode,
    rule_names: Sequence[str],
    symbolic_names: Sequence[Optional[str]],
    token_stream: TokenStream,
) -> Optional[SimpleParseTree]:
    """Simplify a CST with the configured leaf classification."""
    return TreeSimplifier().simplify(cst, rule_names, symbolic_names, token_stream)


def collect_leaf_tokens(tree: CSTNode, result: Optional[List[str]] = None) -> List[str]:
    """
    Return the text of every terminal in document order.

    Nothing is filtered, end-of-input included.

    Args:
        tree: CST node to linearize
        result: List to append to

    Returns:
        The result list
    """
    if result is None:
        result = []
    if isinstance(tree, TerminalNode):
        result.append(tree.text)
        return result
    for child in tree.children:
        collect_leaf_tokens(child, result)
    return result
