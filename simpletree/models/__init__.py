"""Data models for simpletree."""

from .bracket_node import BracketNode
from .cst import (
    DEFAULT_CHANNEL,
    EOF_TOKEN_TYPE,
    HIDDEN_CHANNEL,
    CSTNode,
    ParsedSource,
    RuleNode,
    TerminalNode,
    Token,
    TokenStream,
)
from .simple_tree import LeafClassification, SimpleParseTree, SimpleParseTreeLeaf

__all__ = [
    # CST models
    "Token",
    "TerminalNode",
    "RuleNode",
    "CSTNode",
    "ParsedSource",
    "TokenStream",
    "DEFAULT_CHANNEL",
    "HIDDEN_CHANNEL",
    "EOF_TOKEN_TYPE",
    # Simple parse tree models
    "LeafClassification",
    "SimpleParseTree",
    "SimpleParseTreeLeaf",
    # Bracket notation models
    "BracketNode",
]
