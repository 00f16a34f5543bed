"""
Bracket (LISP-style) tree notation utilities.

This module provides:
- parse_tree: parenthesized tree text -> BracketNode graph
- render: BracketNode graph -> box-drawing indented tree
- print_string_tree: both in one call
- dump_tree: BracketNode graph -> parenthesized tree text

A '(' or ')' with a single space on both sides is literal text inside a
node's value; every other paren is structural.
"""

from typing import List, Optional

from simpletree.models.bracket_node import BracketNode

BRANCH = "├──"
LAST_BRANCH = "└──"
PIPE_INDENT = "│  "
SPACE_INDENT = "   "


class EmptyTreeError(ValueError):
    """Raised when rendering a tree that has no root."""
    pass


def _is_literal_paren(text: str, i: int) -> bool:
    return 0 < i < len(text) - 1 and text[i - 1] == " " and text[i + 1] == " "


def parse_tree(text: Optional[str]) -> Optional[BracketNode]:
    """
    Parse parenthesized tree text.

    Unbalanced input is not rejected: unclosed nodes keep what was scanned
    and text before the first '(' is dropped. Once the stack is empty the
    last closed node stays current, so trailing text and later nodes attach
    to it and extra ')' are ignored.

    Args:
        text: Tree text, e.g. "(program (statement x ;))"

    Returns:
        The root node, or None when the text opens no node
    """
    if not text:
        return None

    root = None
    stack: List[BracketNode] = []
    next_id = 0
    current = None

    for i, char in enumerate(text):
        if char in "()" and _is_literal_paren(text, i):
            if current is not None:
                current.value += char
            continue

        if char == "(":
            node = BracketNode(id=next_id)
            next_id += 1
            if root is None:
                root = node
            if current is not None:
                current.children.append(node)
            stack.append(node)
            current = node
        elif char == ")":
            if stack:
                stack.pop()
            if stack:
                current = stack[-1]
        elif current is not None:
            current.value += char

    return root


def render(node: Optional[BracketNode]) -> str:
    """
    Pretty-print a node graph as an indented box-drawing tree.

    Args:
        node: Root of the graph

    Returns:
        Lines "{id} {value}" with ├──/└── branches

    Raises:
        EmptyTreeError: If there is no root
    """
    if node is None:
        raise EmptyTreeError("Cannot render a tree without a root")
    return _render(node)


def _render(node: BracketNode) -> str:
    text = f"{node.id} {node.value}"
    if not node.children:
        return text

    lines = []
    last = len(node.children) - 1
    for i, child in enumerate(node.children):
        child_text = _render(child)
        if i < last:
            lines.append(BRANCH + child_text.replace("\n", "\n" + PIPE_INDENT))
        else:
            lines.append(LAST_BRANCH + child_text.replace("\n", "\n" + SPACE_INDENT))
    return text + "\n" + "\n".join(lines)


def print_string_tree(text: Optional[str]) -> str:
    """Parse bracket notation and pretty-print the result."""
    return render(parse_tree(text))


def dump_tree(node: BracketNode) -> str:
    """
    Serialize a node graph back into bracket notation.

    A node's value is written before its children, so parsing the output
    yields the same shape, values and ids.
    """
    return "(" + node.value + "".join(dump_tree(child) for child in node.children) + ")"
