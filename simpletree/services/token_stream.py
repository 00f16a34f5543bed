"""
Token stream access for hidden-channel trivia.

Grammar plugins hand the simplifier a TokenStream so whitespace and comments
sitting next to a token can be recovered by token index.
"""

from typing import List, Sequence

from simpletree.models.cst import DEFAULT_CHANNEL, HIDDEN_CHANNEL, Token, TokenStream

__all__ = ["TokenStream", "BufferedTokenStream"]


class BufferedTokenStream(TokenStream):
    """TokenStream over a fully materialized list of tokens."""

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = list(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def get(self, token_index: int) -> Token:
        self._check_index(token_index)
        return self._tokens[token_index]

    @property
    def tokens(self) -> List[Token]:
        return list(self._tokens)

    def get_hidden_tokens_to_left(self, token_index: int, channel: int = HIDDEN_CHANNEL) -> List[Token]:
        self._check_index(token_index)
        run = []
        i = token_index - 1
        while i >= 0 and self._tokens[i].channel != DEFAULT_CHANNEL:
            run.append(self._tokens[i])
            i -= 1
        run.reverse()
        return [t for t in run if t.channel == channel]

    def get_hidden_tokens_to_right(self, token_index: int, channel: int = HIDDEN_CHANNEL) -> List[Token]:
        self._check_index(token_index)
        run = []
        i = token_index + 1
        while i < len(self._tokens) and self._tokens[i].channel != DEFAULT_CHANNEL:
            run.append(self._tokens[i])
            i += 1
        return [t for t in run if t.channel == channel]

    def _check_index(self, token_index: int) -> None:
        if token_index < 0 or token_index >= len(self._tokens):
            raise IndexError(f"token index {token_index} out of range 0..{len(self._tokens) - 1}")
