"""GraphQL parsing, schema building and query validation."""

from graphql import (
    DocumentNode,
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    parse,
    validate,
)
from graphql import build_schema as build_schema_from_sdl


def build_schema(schema_json: dict) -> GraphQLSchema:
    """
    Build GraphQL schema from introspection JSON.

    Args:
        schema_json: Introspection result, either {"__schema": {...}} or {"data": {"__schema": {...}}}

    Returns:
        GraphQLSchema object
    """
    if "__schema" in schema_json:
        data = schema_json
    elif "data" in schema_json and "__schema" in schema_json["data"]:
        data = schema_json["data"]
    else:
        data = schema_json

    return build_client_schema(data)


def build_sdl_schema(source: str) -> GraphQLSchema:
    """Build GraphQL schema from SDL source."""
    return build_schema_from_sdl(source)


def parse_query(source: str) -> DocumentNode:
    """
    Parse GraphQL query string into AST.

    Raises:
        GraphQLError: If query is syntactically invalid
    """
    return parse(source)


def validate_query(doc: DocumentNode, schema: GraphQLSchema) -> list[GraphQLError]:
    """
    Validate query against schema.

    Args:
        doc: Parsed query document
        schema: GraphQL schema

    Returns:
        List of validation errors (empty if valid)
    """
    return validate(schema, doc)
