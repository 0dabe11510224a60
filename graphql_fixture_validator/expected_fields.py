"""Response keys a query expects on fixture objects, and the extra-field check."""

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

from graphql import GraphQLNamedType

from . import utils


@dataclass
class TypedFields:
    """Fields selected under one type condition."""

    type_condition: str
    fields: set[str]
    possible_types: frozenset[str]


@dataclass
class ExpectedFields:
    """
    Expected response keys for the objects below one field selection.

    ``common`` holds the keys selected without a type condition, ``by_type``
    the keys selected inside inline fragments, keyed by the narrowed set of
    possible types the fragment applies to. Every field selection gets its
    own scope holding only the fixture objects that reached it; an object
    reached through several selections expects the union of their keys.
    """

    key: Optional[str] = None
    common: set[str] = field(default_factory=set)
    by_type: dict[frozenset[str], TypedFields] = field(default_factory=dict)
    typename_key: Optional[str] = None
    children: list["ExpectedFields"] = field(default_factory=list)
    _objects: dict[int, dict[str, Any]] = field(default_factory=dict, repr=False)

    def record(
        self,
        key: str,
        type_condition: Optional[GraphQLNamedType],
        possible_types: frozenset[str],
    ) -> None:
        if type_condition is None:
            self.common.add(key)
            return
        entry = self.by_type.get(possible_types)
        if entry is None:
            entry = self.by_type[possible_types] = TypedFields(
                type_condition.name, set(), possible_types
            )
        entry.fields.add(key)

    def child(self, key: str) -> "ExpectedFields":
        scope = ExpectedFields(key=key)
        self.children.append(scope)
        return scope

    def add_objects(self, values) -> None:
        for value in values:
            if isinstance(value, dict):
                self._objects.setdefault(id(value), value)

    @property
    def objects(self) -> list[dict[str, Any]]:
        return list(self._objects.values())

    def walk(self) -> Iterator["ExpectedFields"]:
        """This scope and its descendants, depth-first in selection order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def applicable(self, obj: dict[str, Any]) -> set[str]:
        """Keys expected on ``obj``, discriminated by its ``__typename`` if known."""
        typename = utils.fixture_typename(obj, self.typename_key)
        expected = set(self.common)
        for entry in self.by_type.values():
            if typename is None or typename in entry.possible_types:
                expected |= entry.fields
        return expected


def extra_field_errors(scope: ExpectedFields) -> list[str]:
    """
    Report fixture keys the query does not select.

    Each object is checked once, against the keys of every scope that
    holds it, in the order objects were first reached.

    Args:
        scope: Root scope filled by the traversal

    Returns:
        One message per unexpected key of every fixture object
    """
    objects: dict[int, dict[str, Any]] = {}
    expected: dict[int, set[str]] = {}
    for current in scope.walk():
        for obj in current.objects:
            objects.setdefault(id(obj), obj)
            expected.setdefault(id(obj), set()).update(current.applicable(obj))

    errors = []
    for object_id, obj in objects.items():
        for key in obj:
            if key not in expected[object_id]:
                errors.append(f'Extra field "{key}" found in fixture data not in query')
    return errors
