"""Walk a query and a fixture together and collect every mismatch."""

from dataclasses import dataclass, field
from typing import Any, Optional

from graphql import (
    DocumentNode,
    FieldNode,
    GraphQLSchema,
    InlineFragmentNode,
    OperationDefinitionNode,
    OperationType,
    get_named_type,
    get_operation_ast,
    is_abstract_type,
)

from . import utils
from .errors import UnsupportedOperationError
from .expected_fields import ExpectedFields, extra_field_errors
from .field_validator import validate_field_value
from .fragments import inline_named_fragment_spreads
from .frame import TraversalFrame
from .utils import FixtureKind


@dataclass
class FixtureValidationResult:
    """Errors found in a fixture, in traversal order."""

    errors: list[str] = field(default_factory=list)
    aborted: bool = False

    @property
    def valid(self) -> bool:
        return not self.errors


class TraversalAborted(Exception):
    """The query and schema disagree in a way no fixture can fix."""


class _Walker:
    def __init__(self, schema: GraphQLSchema):
        self.schema = schema
        self.errors: list[str] = []

    def walk_operation(self, operation: OperationDefinitionNode, fixture: Any) -> ExpectedFields:
        root_type = root_type_for(self.schema, operation)
        scope = ExpectedFields()

        kind = utils.kind_of(fixture)
        values = [fixture] if kind is FixtureKind.OBJECT else []
        if kind is not FixtureKind.OBJECT:
            self.errors.append(
                f"Expected object for {operation.operation.value} root, but got {kind.value}"
            )

        scope.add_objects(values)
        frame = TraversalFrame.for_field(self.schema, values, root_type)
        self.walk_selection_set(operation.selection_set, frame, scope)
        return scope

    def walk_selection_set(self, selection_set, frame: TraversalFrame, scope: ExpectedFields) -> None:
        own_typename_key = utils.typename_response_key(selection_set)
        if (
            is_abstract_type(frame.named_type)
            and own_typename_key is None
            and len(utils.inline_fragments(selection_set)) > 1
        ):
            raise TraversalAborted(
                f"Missing __typename field for abstract type {frame.named_type.name}"
            )

        frame = frame.with_typename_key(own_typename_key)
        if scope.typename_key is None:
            scope.typename_key = frame.typename_key

        for selection in selection_set.selections:
            if isinstance(selection, FieldNode):
                self.walk_field(selection, frame, scope)
            elif isinstance(selection, InlineFragmentNode):
                type_condition = None
                if selection.type_condition:
                    name = selection.type_condition.name.value
                    type_condition = self.schema.get_type(name)
                    if type_condition is None:
                        raise TraversalAborted(f"Unknown type {name} in fragment type condition")
                self.walk_selection_set(
                    selection.selection_set, frame.enter_fragment(self.schema, type_condition), scope
                )

    def walk_field(self, node: FieldNode, frame: TraversalFrame, scope: ExpectedFields) -> None:
        key = utils.response_key(node)
        scope.record(key, frame.type_condition, frame.possible_types)

        field_def = utils.get_field_def(self.schema, frame.named_type, node.name.value)
        if field_def is None:
            raise TraversalAborted(f"Cannot validate {key}: missing type information")

        children = []
        for parent in frame.values:
            result = validate_field_value(frame, key, field_def.type, parent)
            self.errors.extend(result.errors)
            children.extend(result.children)

        if node.selection_set:
            child_scope = scope.child(key)
            child_scope.add_objects(children)
            child_frame = TraversalFrame.for_field(
                self.schema, children, get_named_type(field_def.type), frame.typename_key
            )
            self.walk_selection_set(node.selection_set, child_frame, child_scope)


def root_type_for(schema: GraphQLSchema, operation: OperationDefinitionNode):
    """Root object type an operation starts from."""
    if operation.operation == OperationType.SUBSCRIPTION:
        raise UnsupportedOperationError("Subscriptions cannot be validated against fixtures")
    if operation.operation == OperationType.MUTATION:
        root_type = schema.mutation_type
    else:
        root_type = schema.query_type
    if root_type is None:
        raise UnsupportedOperationError(
            f"Schema does not define a {operation.operation.value} root type"
        )
    return root_type


def validate(
    document: DocumentNode,
    schema: GraphQLSchema,
    fixture: Any,
    operation_name: Optional[str] = None,
) -> FixtureValidationResult:
    """
    Validate fixture data against the shape a query gives it.

    The query is expected to be valid for the schema. Mismatches in the
    fixture are collected rather than raised, so one run reports all of them.

    Args:
        document: Parsed query document
        schema: GraphQL schema
        fixture: Decoded JSON data the query would return
        operation_name: Operation to use when the document holds several

    Returns:
        FixtureValidationResult; ``aborted`` is set when the query itself made
        the check impossible, in which case the last error says why

    Raises:
        FragmentNotFoundError: If a fragment spread has no definition
        UnsupportedOperationError: If the operation cannot be determined, is
            a subscription, or has no root type in the schema
    """
    inlined = inline_named_fragment_spreads(document)
    operation = get_operation_ast(inlined, operation_name)
    if operation is None:
        if operation_name:
            raise UnsupportedOperationError(f"Unknown operation named '{operation_name}'")
        raise UnsupportedOperationError(
            "Document must contain exactly one operation, or an operation name must be given"
        )

    walker = _Walker(schema)
    try:
        scope = walker.walk_operation(operation, fixture)
    except TraversalAborted as e:
        walker.errors.append(str(e))
        return FixtureValidationResult(errors=walker.errors, aborted=True)

    walker.errors.extend(extra_field_errors(scope))
    return FixtureValidationResult(errors=walker.errors)
