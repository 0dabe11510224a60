"""Output fixture validation against a mutation argument."""

from dataclasses import dataclass, field
from typing import Any, Optional

from graphql import GraphQLSchema, coerce_input_value, is_input_type

from . import utils


@dataclass
class OutputValidationResult:
    """Result of checking an output fixture."""

    mutation_name: str
    errors: list[str] = field(default_factory=list)
    result_parameter_type: Optional[str] = None

    @property
    def valid(self) -> bool:
        return not self.errors


def validate_output(
    schema: GraphQLSchema,
    output_data: Any,
    mutation_name: str,
    result_parameter_name: str = "result",
) -> OutputValidationResult:
    """
    Validate output fixture data as the argument of a mutation.

    A function's output is what its host later passes to a mutation, so the
    output fixture must coerce to that mutation argument's input type.

    Args:
        schema: GraphQL schema with a mutation root
        output_data: Output fixture data
        mutation_name: Mutation field consuming the output
        result_parameter_name: Argument of the mutation receiving the output

    Returns:
        OutputValidationResult; lookup failures are reported as its single error
    """
    result = OutputValidationResult(mutation_name=mutation_name)

    mutation_type = schema.mutation_type
    if mutation_type is None:
        result.errors.append("Schema does not have a mutation type")
        return result

    mutation_field = mutation_type.fields.get(mutation_name)
    if mutation_field is None:
        result.errors.append(f"Mutation '{mutation_name}' not found in schema")
        return result

    argument = mutation_field.args.get(result_parameter_name)
    if argument is None:
        result.errors.append(
            f"Parameter '{result_parameter_name}' not found in mutation '{mutation_name}'"
        )
        return result

    result.result_parameter_type = str(argument.type)

    def on_error(path, _invalid_value, error):
        result.errors.append(f'{error.message} At "{utils.format_path(path)}"')

    if is_input_type(argument.type):
        coerce_input_value(output_data, argument.type, on_error)

    return result
