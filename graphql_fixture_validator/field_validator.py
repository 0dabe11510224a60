"""Check one fixture value against the declared type of a selected field."""

from dataclasses import dataclass, field
from typing import Any

from graphql import (
    GraphQLList,
    GraphQLOutputType,
    Undefined,
    coerce_input_value,
    get_named_type,
    get_nullable_type,
    is_abstract_type,
    is_composite_type,
    is_input_type,
    is_list_type,
    is_nullable_type,
    is_object_type,
)

from . import utils
from .frame import TraversalFrame
from .utils import FixtureKind


@dataclass
class FieldResult:
    """Outcome of checking one field on one fixture object."""

    children: list[Any] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


def is_value_expected(frame: TraversalFrame, parent: dict[str, Any]) -> bool:
    """
    Decide whether a field absent from ``parent`` should have been present.

    With a ``__typename`` in scope, objects reporting a type outside the
    frame's possible types belong to another fragment branch. Without one,
    an empty object under a narrowed frame is taken to be a union or
    interface member that matched no fragment. Anything else is expected.

    Non-empty objects of another branch cannot be told apart when
    ``__typename`` is not selected, so they are reported as missing data.
    """
    if frame.typename_key:
        typename = utils.fixture_typename(parent, frame.typename_key)
        if typename is not None and typename not in frame.possible_types:
            return False
        return True

    if frame.narrowed and not parent:
        return False
    return True


def flatten_list(value: list, list_type: GraphQLList, path: str) -> FieldResult:
    """
    Flatten nested fixture arrays into the run of items the selections apply to.

    Args:
        value: Fixture array for a list typed field
        list_type: The nullable list type the array must satisfy
        path: Response key, extended with indexes while recursing

    Returns:
        The non-null items and any nullability or nesting errors
    """
    result = FieldResult()
    element_type = list_type.of_type
    expects_object = is_composite_type(get_named_type(element_type))

    for index, element in enumerate(value):
        element_path = f"{path}[{index}]"
        kind = utils.kind_of(element)

        if kind is FixtureKind.NULL:
            if not is_nullable_type(element_type):
                result.errors.append(
                    f"Null value found in non-nullable array at {element_path}"
                )
            continue

        inner_type = get_nullable_type(element_type)
        if is_list_type(inner_type):
            if kind is FixtureKind.ARRAY:
                nested = flatten_list(element, inner_type, element_path)
                result.children.extend(nested.children)
                result.errors.extend(nested.errors)
            else:
                result.errors.append(
                    f"Expected array at {element_path}, but got {kind.value}"
                )
        elif expects_object and kind is not FixtureKind.OBJECT:
            result.errors.append(f"Expected object at {element_path}, but got {kind.value}")
        else:
            result.children.append(element)

    return result


def validate_field_value(
    frame: TraversalFrame,
    key: str,
    field_type: GraphQLOutputType,
    parent: dict[str, Any],
) -> FieldResult:
    """
    Validate the value a fixture object holds for one selected field.

    Args:
        frame: Frame of the selection set containing the field
        key: Response key of the field
        field_type: Declared type of the field
        parent: Fixture object the value is read from

    Returns:
        Values to traverse with the field's sub-selections, and errors
    """
    result = FieldResult()
    value = parent.get(key, Undefined)
    kind = utils.kind_of(value)

    if kind is FixtureKind.UNDEFINED:
        if is_value_expected(frame, parent):
            result.errors.append(f"Missing expected fixture data for {key}")
        return result

    # Output types that are also input types are scalars, enums and lists of
    # them, for which input coercion checks what output serialization would.
    if is_input_type(field_type):

        def on_error(path, _invalid_value, error):
            result.errors.append(f'{error.message} At "{utils.format_path(path)}"')

        coerce_input_value(value, field_type, on_error)
        return result

    if kind is FixtureKind.NULL and is_nullable_type(field_type):
        return result

    nullable_type = get_nullable_type(field_type)
    if is_list_type(nullable_type):
        if kind is FixtureKind.ARRAY:
            flattened = flatten_list(value, nullable_type, key)
            result.children.extend(flattened.children)
            result.errors.extend(flattened.errors)
        else:
            result.errors.append(f"Expected array for {key}, but got {kind.value}")
    elif is_object_type(nullable_type) or is_abstract_type(nullable_type):
        if kind is FixtureKind.OBJECT:
            result.children.append(value)
        else:
            result.errors.append(f"Expected object for {key}, but got {kind.value}")
    else:
        result.errors.append(f"Unexpected type for {key}: {nullable_type}")

    return result
