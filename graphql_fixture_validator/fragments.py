"""Replace named fragment spreads with equivalent inline fragments."""

from graphql import (
    REMOVE,
    DocumentNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    Visitor,
    visit,
)

from .errors import FragmentNotFoundError


class _InlineFragmentSpreads(Visitor):
    def __init__(self, fragments: dict[str, FragmentDefinitionNode]):
        super().__init__()
        self.fragments = fragments

    def enter_fragment_spread(self, node: FragmentSpreadNode, *_args):
        fragment = self.fragments.get(node.name.value)
        if fragment is None:
            raise FragmentNotFoundError(node.name.value)
        # The replacement is visited in turn, so spreads nested in the
        # fragment body are inlined as well.
        return InlineFragmentNode(
            type_condition=fragment.type_condition,
            directives=node.directives,
            selection_set=fragment.selection_set,
        )

    def enter_fragment_definition(self, *_args):
        return REMOVE


def fragment_definitions(document: DocumentNode) -> dict[str, FragmentDefinitionNode]:
    """Map fragment names to their definitions."""
    return {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }


def inline_named_fragment_spreads(document: DocumentNode) -> DocumentNode:
    """
    Inline every named fragment spread of a document.

    Args:
        document: Parsed GraphQL document

    Returns:
        A new document without fragment spreads or fragment definitions

    Raises:
        FragmentNotFoundError: If a spread references an undefined fragment
    """
    return visit(document, _InlineFragmentSpreads(fragment_definitions(document)))
