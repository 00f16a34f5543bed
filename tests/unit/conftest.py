"""Shared fixtures: a small hand-built grammar vocabulary and CST builder."""

from typing import List, Optional

import pytest

from simpletree.models import (
    EOF_TOKEN_TYPE,
    HIDDEN_CHANNEL,
    RuleNode,
    TerminalNode,
    Token,
)
from simpletree.services.token_stream import BufferedTokenStream


RULE_NAMES = [
    "program",
    "statement",
    "expressionStatement",
    "singleExpression",
    "arguments",
    "identifier",
    "literal",
    "arrayLiteral",
]

SYMBOLIC_NAMES = [
    None,
    "Identifier",
    "StringLiteral",
    "DecimalLiteral",
    "OpenParen",
    "CloseParen",
    "OpenBracket",
    "CloseBracket",
    "SemiColon",
    "Plus",
    "Var",
    "WhiteSpaces",
    "MultiLineComment",
]


class CSTBuilder:
    """Builds CSTs whose tokens are recorded, in call order, in a token stream."""

    def __init__(self):
        self.tokens: List[Token] = []

    def hidden(self, text: str, channel: int = HIDDEN_CHANNEL) -> None:
        self.tokens.append(Token(
            text=text,
            type=SYMBOLIC_NAMES.index("WhiteSpaces"),
            token_index=len(self.tokens),
            channel=channel,
        ))

    def terminal(
        self,
        text: str,
        symbol: str,
        rule: str,
        before: Optional[str] = None,
        after: Optional[str] = None,
    ) -> TerminalNode:
        if before is not None:
            self.hidden(before)
        token = Token(text=text, type=SYMBOLIC_NAMES.index(symbol), token_index=len(self.tokens))
        self.tokens.append(token)
        if after is not None:
            self.hidden(after)
        return TerminalNode(text=text, symbol=token, rule_index=RULE_NAMES.index(rule))

    def eof(self, rule: str = "program") -> TerminalNode:
        token = Token(text="<EOF>", type=EOF_TOKEN_TYPE, token_index=len(self.tokens))
        self.tokens.append(token)
        return TerminalNode(text="<EOF>", symbol=token, rule_index=RULE_NAMES.index(rule))

    def rule(self, name: str, *children) -> RuleNode:
        return RuleNode(rule_index=RULE_NAMES.index(name), children=list(children))

    def stream(self) -> BufferedTokenStream:
        return BufferedTokenStream(self.tokens)


@pytest.fixture
def builder():
    """Create a fresh CST builder."""
    return CSTBuilder()


@pytest.fixture
def call_program(builder):
    """CST for `/* c */ foo( 1 );` followed by a newline."""
    b = builder
    tree = b.rule(
        "program",
        b.rule(
            "statement",
            b.rule(
                "expressionStatement",
                b.rule(
                    "singleExpression",
                    b.rule(
                        "singleExpression",
                        b.rule("identifier", b.terminal("foo", "Identifier", "identifier", before="/* c */")),
                    ),
                    b.rule(
                        "arguments",
                        b.terminal("(", "OpenParen", "arguments", after=" "),
                        b.rule(
                            "singleExpression",
                            b.rule("literal", b.terminal("1", "DecimalLiteral", "literal", after=" ")),
                        ),
                        b.terminal(")", "CloseParen", "arguments"),
                    ),
                ),
                b.terminal(";", "SemiColon", "expressionStatement", after="\n"),
            ),
        ),
        b.eof(),
    )
    return tree
