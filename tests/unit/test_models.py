"""
Unit tests for simple parse tree and CST models.
"""

import pytest
from pydantic import ValidationError

from simpletree.models import (
    ParsedSource,
    RuleNode,
    SimpleParseTree,
    SimpleParseTreeLeaf,
    TerminalNode,
    Token,
    TokenStream,
)
from simpletree.services.token_stream import BufferedTokenStream


def test_leaf_to_dict_omits_absent_fields():
    leaf = SimpleParseTreeLeaf(token="1")

    assert leaf.to_dict() == {"token": "1", "isLeaf": True}


def test_leaf_to_dict_uses_camel_case():
    leaf = SimpleParseTreeLeaf(
        token="Foo",
        is_variable=True,
        is_capitalized=True,
        leading=" ",
    )

    assert leaf.to_dict() == {
        "token": "Foo",
        "isLeaf": True,
        "isVariable": True,
        "isCapitalized": True,
        "leading": " ",
    }


def test_leaf_accepts_aliases():
    leaf = SimpleParseTreeLeaf.model_validate({"token": "x", "isVariable": True})

    assert leaf.is_variable is True


def test_tree_to_dict_and_leaf_iteration():
    tree = SimpleParseTree(label="#;", children=[
        SimpleParseTree(label="#+#", children=[
            SimpleParseTreeLeaf(token="a"),
            SimpleParseTreeLeaf(token="b"),
        ]),
    ])

    assert [leaf.token for leaf in tree.iter_leaves()] == ["a", "b"]
    assert tree.leaf_count() == 2
    assert tree.to_dict() == {
        "label": "#;",
        "children": [{
            "label": "#+#",
            "children": [
                {"token": "a", "isLeaf": True},
                {"token": "b", "isLeaf": True},
            ],
        }],
    }


def test_cst_children_discriminated_by_kind():
    tree = RuleNode.model_validate({
        "rule_index": 0,
        "children": [
            {"kind": "terminal", "text": "x", "symbol": {"text": "x", "type": 1, "token_index": 0}},
            {"kind": "rule", "rule_index": 1, "children": []},
        ],
    })

    assert isinstance(tree.children[0], TerminalNode)
    assert isinstance(tree.children[0].symbol, Token)
    assert isinstance(tree.children[1], RuleNode)
    assert tree.child_count == 2
    assert tree.terminal_count() == 1


def test_parsed_source_accepts_token_stream():
    parsed = ParsedSource(
        tree=RuleNode(rule_index=0),
        rule_names=["program"],
        symbolic_names=[None],
        token_stream=BufferedTokenStream([]),
    )

    assert isinstance(parsed.token_stream, TokenStream)


def test_parsed_source_rejects_non_token_stream():
    with pytest.raises(ValidationError):
        ParsedSource(
            tree=RuleNode(rule_index=0),
            rule_names=["program"],
            symbolic_names=[None],
            token_stream=object(),
        )
