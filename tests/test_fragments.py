import pytest
from graphql import FragmentDefinitionNode, FragmentSpreadNode, Visitor, parse, print_ast, visit

from graphql_fixture_validator.errors import FragmentNotFoundError
from graphql_fixture_validator.fragments import (
    fragment_definitions,
    inline_named_fragment_spreads,
)


class _Kinds(Visitor):
    def __init__(self):
        super().__init__()
        self.kinds = set()

    def enter(self, node, *_args):
        self.kinds.add(type(node))


def _node_types(document):
    collector = _Kinds()
    visit(document, collector)
    return collector.kinds


def test_spreads_become_inline_fragments():
    document = parse(
        """
        query Q { data { ...F } }
        fragment F on Data { id }
        """
    )
    expected = parse("query Q { data { ... on Data { id } } }")
    assert print_ast(inline_named_fragment_spreads(document)) == print_ast(expected)


def test_nested_spreads_are_inlined():
    document = parse(
        """
        query Q { data { ...F } }
        fragment F on Data { id ...G }
        fragment G on Data { count }
        """
    )
    inlined = inline_named_fragment_spreads(document)
    expected = parse("query Q { data { ... on Data { id ... on Data { count } } } }")
    assert print_ast(inlined) == print_ast(expected)
    assert FragmentSpreadNode not in _node_types(inlined)
    assert FragmentDefinitionNode not in _node_types(inlined)


def test_spread_directives_are_kept():
    document = parse(
        """
        query Q { data { ...F @include(if: true) } }
        fragment F on Data { id }
        """
    )
    expected = parse("query Q { data { ... on Data @include(if: true) { id } } }")
    assert print_ast(inline_named_fragment_spreads(document)) == print_ast(expected)


def test_document_without_fragments_is_unchanged():
    document = parse("{ data { id ... on Data { count } } }")
    assert print_ast(inline_named_fragment_spreads(document)) == print_ast(document)


def test_original_document_is_not_modified():
    document = parse("query { data { ...F } } fragment F on Data { id }")
    before = print_ast(document)
    inline_named_fragment_spreads(document)
    assert print_ast(document) == before


def test_unknown_fragment():
    with pytest.raises(FragmentNotFoundError) as exc_info:
        inline_named_fragment_spreads(parse("{ data { ...Nope } }"))
    assert exc_info.value.name == "Nope"
    assert str(exc_info.value) == "Fragment definition not found: Nope"


def test_fragment_definitions():
    document = parse("query { data { ...A } } fragment A on Data { id } fragment B on Data { count }")
    assert sorted(fragment_definitions(document)) == ["A", "B"]
