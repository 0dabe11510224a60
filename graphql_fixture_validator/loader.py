"""Loading of fixture and query files."""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from graphql import DocumentNode

from . import parser, utils
from .errors import FixtureLoadError


@dataclass
class FixtureData:
    """Payload of a fixture file."""

    input: Any
    expected_output: Any = None
    export: Optional[str] = None
    target: Optional[str] = None
    input_query_variables: dict[str, Any] = field(default_factory=dict)


def load_fixture(path: str) -> FixtureData:
    """
    Load a fixture file and extract its payload.

    Args:
        path: Path to a JSON file shaped ``{"payload": {"input": ..., "output": ...}}``

    Returns:
        FixtureData

    Raises:
        FixtureLoadError: If the file is missing, is not JSON, or lacks a payload
    """
    try:
        fixture = utils.read_json(path)
    except FileNotFoundError as e:
        raise FixtureLoadError(f"Fixture file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise FixtureLoadError(f"Invalid JSON in fixture file {path}: {e}") from e

    payload = fixture.get("payload") if isinstance(fixture, dict) else None
    if not isinstance(payload, dict):
        raise FixtureLoadError(f"Fixture file {path} has no payload object")
    if "input" not in payload:
        raise FixtureLoadError(f"Fixture file {path} has no payload.input")

    return FixtureData(
        input=payload["input"],
        expected_output=payload.get("output"),
        export=payload.get("export"),
        target=payload.get("target"),
        input_query_variables=payload.get("inputQueryVariables") or {},
    )


def load_query(path: str) -> DocumentNode:
    """
    Read and parse a GraphQL query file.

    Raises:
        FixtureLoadError: If the file is missing
        GraphQLError: If the query does not parse
    """
    if not utils.exists(path):
        raise FixtureLoadError(f"Query file not found: {path}")
    return parser.parse_query(utils.read_text(path))
