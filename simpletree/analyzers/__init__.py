"""Tree analyzers package."""

from simpletree.analyzers.tree_simplifier import (
    MissingTokenError,
    TreeSimplifier,
    collect_leaf_tokens,
    simplify,
)

__all__ = ["TreeSimplifier", "MissingTokenError", "simplify", "collect_leaf_tokens"]
