"""Concrete object types a value at some position of a query can have."""

from typing import Optional

from graphql import GraphQLNamedType, GraphQLSchema, is_abstract_type, is_object_type


def possible_types(schema: GraphQLSchema, named_type: GraphQLNamedType) -> frozenset[str]:
    """
    Names of the object types a value of ``named_type`` may have.

    Args:
        schema: GraphQL schema
        named_type: Any named type

    Returns:
        ``{name}`` for object types, the member or implementing object type
        names for unions and interfaces, and an empty set for leaf types
    """
    if is_object_type(named_type):
        return frozenset([named_type.name])
    if is_abstract_type(named_type):
        return frozenset(t.name for t in schema.get_possible_types(named_type))
    return frozenset()


def narrow(
    current: frozenset[str],
    schema: GraphQLSchema,
    type_condition: Optional[GraphQLNamedType],
) -> frozenset[str]:
    """Restrict ``current`` to the types matching a fragment type condition."""
    if type_condition is None:
        return current
    return current & possible_types(schema, type_condition)
