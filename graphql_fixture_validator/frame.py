"""Traversal state for one nesting level of a query."""

from dataclasses import dataclass, replace
from typing import Any, Optional

from graphql import GraphQLNamedType, GraphQLSchema

from . import utils
from .possible_types import narrow, possible_types


@dataclass(frozen=True)
class TraversalFrame:
    """
    Fixture values live at one level together with their type information.

    Attributes:
        values: Fixture objects selected at this level
        named_type: Type owning the selections (the type condition inside fragments)
        possible_types: Object type names a value here can have, narrowed by fragments
        field_possible_types: Possible types of the enclosing field's declared type
        type_condition: Type condition of the innermost enclosing inline fragment
        typename_key: Response key of the ``__typename`` selection in scope
    """

    values: tuple[Any, ...]
    named_type: GraphQLNamedType
    possible_types: frozenset[str]
    field_possible_types: frozenset[str]
    type_condition: Optional[GraphQLNamedType] = None
    typename_key: Optional[str] = None

    @classmethod
    def for_field(
        cls,
        schema: GraphQLSchema,
        values,
        named_type: GraphQLNamedType,
        typename_key: Optional[str] = None,
    ) -> "TraversalFrame":
        types = possible_types(schema, named_type)
        return cls(
            values=tuple(values),
            named_type=named_type,
            possible_types=types,
            field_possible_types=types,
            typename_key=typename_key,
        )

    def enter_fragment(
        self, schema: GraphQLSchema, type_condition: Optional[GraphQLNamedType]
    ) -> "TraversalFrame":
        if type_condition is None:
            return self
        types = narrow(self.possible_types, schema, type_condition)
        # Objects that name their type only reach the branches they match.
        values = tuple(
            value
            for value in self.values
            if utils.fixture_typename(value, self.typename_key) in (None, *types)
        )
        return replace(
            self,
            values=values,
            named_type=type_condition,
            possible_types=types,
            type_condition=type_condition,
        )

    def with_typename_key(self, typename_key: Optional[str]) -> "TraversalFrame":
        if typename_key is None or typename_key == self.typename_key:
            return self
        return replace(self, typename_key=typename_key)

    @property
    def narrowed(self) -> bool:
        return self.possible_types != self.field_possible_types
