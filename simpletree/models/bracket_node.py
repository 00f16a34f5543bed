"""Bracket-notation tree data models."""

from typing import List

from pydantic import BaseModel, Field


class BracketNode(BaseModel):
    """Node parsed from parenthesized (LISP-style) tree text."""

    id: int = Field(ge=0)
    value: str = ""
    children: List["BracketNode"] = []

    def count(self) -> int:
        """Number of nodes in this subtree, itself included."""
        return 1 + sum(child.count() for child in self.children)


BracketNode.model_rebuild()
