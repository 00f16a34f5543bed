"""Simple parse tree data models."""

from typing import Any, Dict, FrozenSet, Iterator, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class LeafClassification(BaseModel):
    """Names of grammar rules and token types treated as atomic leaves."""

    model_config = ConfigDict(frozen=True)

    rule_names: FrozenSet[str] = frozenset()
    symbolic_names: FrozenSet[str] = frozenset()
    identifier_symbolic_name: str = "Identifier"


class SimpleParseTreeLeaf(BaseModel):
    """Token-bearing leaf of the simple parse tree.

    Optional flags stay ``None`` unless they hold: absence means false/empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    token: str
    is_leaf: Literal[True] = Field(default=True, alias="isLeaf")
    is_variable: Optional[bool] = Field(default=None, alias="isVariable")
    is_capitalized: Optional[bool] = Field(default=None, alias="isCapitalized")
    leading: Optional[str] = None
    trailing: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SimpleParseTree(BaseModel):
    """Internal node of the simple parse tree."""

    label: str = ""
    children: List[Union["SimpleParseTree", SimpleParseTreeLeaf]] = []

    def iter_leaves(self) -> Iterator[SimpleParseTreeLeaf]:
        """Yield leaves in document order."""
        for child in self.children:
            if isinstance(child, SimpleParseTreeLeaf):
                yield child
            else:
                yield from child.iter_leaves()

    def leaf_count(self) -> int:
        return sum(1 for _ in self.iter_leaves())

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with camelCase keys, omitting absent fields."""
        return {
            "label": self.label,
            "children": [child.to_dict() for child in self.children],
        }


SimpleParseTree.model_rebuild()
