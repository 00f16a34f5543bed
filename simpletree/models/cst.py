"""Concrete syntax tree data models.

The tree handed over by a grammar plugin. Rule and terminal nodes form a
closed variant discriminated on ``kind``.
"""

from abc import ABC, abstractmethod
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_CHANNEL = 0
HIDDEN_CHANNEL = 1

EOF_TOKEN_TYPE = -1


class Token(BaseModel):
    """A lexer token, located in its token stream by ``token_index``."""

    text: str
    type: int
    token_index: int
    channel: int = DEFAULT_CHANNEL


class TerminalNode(BaseModel):
    """Leaf of the CST carrying a single token."""

    kind: Literal["terminal"] = "terminal"
    text: str
    symbol: Optional[Token] = None
    # Rule index of the enclosing rule node
    rule_index: Optional[int] = None


class RuleNode(BaseModel):
    """Internal CST node produced by a grammar rule invocation."""

    kind: Literal["rule"] = "rule"
    rule_index: Optional[int] = None
    children: List[Annotated[Union["RuleNode", TerminalNode], Field(discriminator="kind")]] = []

    @property
    def child_count(self) -> int:
        return len(self.children)

    def terminal_count(self) -> int:
        """Number of terminal nodes in this subtree."""
        count = 0
        for child in self.children:
            if isinstance(child, TerminalNode):
                count += 1
            else:
                count += child.terminal_count()
        return count


RuleNode.model_rebuild()


CSTNode = Union[RuleNode, TerminalNode]


class TokenStream(ABC):
    """Read-only view over the tokens produced by a lexer."""

    @abstractmethod
    def get_hidden_tokens_to_left(self, token_index: int, channel: int = HIDDEN_CHANNEL) -> List[Token]:
        """
        Return the run of off-channel tokens immediately before a token.

        Args:
            token_index: Index of the token in the stream
            channel: Only tokens on this channel are returned

        Returns:
            Tokens in stream order; empty when there are none
        """
        pass

    @abstractmethod
    def get_hidden_tokens_to_right(self, token_index: int, channel: int = HIDDEN_CHANNEL) -> List[Token]:
        """
        Return the run of off-channel tokens immediately after a token.

        Args:
            token_index: Index of the token in the stream
            channel: Only tokens on this channel are returned

        Returns:
            Tokens in stream order; empty when there are none
        """
        pass


class ParsedSource(BaseModel):
    """Everything the tree simplifier needs from a grammar plugin."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    tree: RuleNode
    rule_names: List[str]
    symbolic_names: List[Optional[str]]
    token_stream: TokenStream
