"""Validate a query and fixture pair in one go."""

from dataclasses import dataclass, field
from typing import Optional

from graphql import DocumentNode, GraphQLSchema

from . import parser
from .loader import FixtureData
from .output import OutputValidationResult, validate_output
from .traversal import FixtureValidationResult, validate


@dataclass
class AssetsReport:
    """Results of every check run on a set of test assets."""

    query_errors: list[str] = field(default_factory=list)
    input: Optional[FixtureValidationResult] = None
    output: Optional[OutputValidationResult] = None

    @property
    def valid(self) -> bool:
        if self.query_errors:
            return False
        if self.input is not None and not self.input.valid:
            return False
        if self.output is not None and not self.output.valid:
            return False
        return True


def validate_test_assets(
    schema: GraphQLSchema,
    fixture: FixtureData,
    document: DocumentNode,
    mutation_name: Optional[str] = None,
    result_parameter_name: str = "result",
    operation_name: Optional[str] = None,
) -> AssetsReport:
    """
    Validate the input query, the fixture input and the fixture output.

    The fixture input is only checked when the query is valid for the
    schema, and the output only when a mutation name is known.

    Args:
        schema: GraphQL schema
        fixture: Loaded fixture
        document: Parsed input query
        mutation_name: Mutation receiving the function output
        result_parameter_name: Mutation argument receiving the output
        operation_name: Operation to use when the query holds several

    Returns:
        AssetsReport
    """
    report = AssetsReport()
    report.query_errors = [e.message for e in parser.validate_query(document, schema)]

    if not report.query_errors:
        report.input = validate(document, schema, fixture.input, operation_name)

    if mutation_name:
        report.output = validate_output(
            schema, fixture.expected_output, mutation_name, result_parameter_name
        )

    return report
