"""Utility functions for fixture validation."""

import hashlib
import json
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlparse

from graphql import (
    FieldNode,
    GraphQLField,
    GraphQLNamedType,
    GraphQLSchema,
    InlineFragmentNode,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    Undefined,
    get_introspection_query,
    is_interface_type,
    is_object_type,
)

# Standard GraphQL introspection query
INTROSPECTION_QUERY = get_introspection_query()

TYPENAME_FIELD = "__typename"


# File system utilities
def ensure_dir(path: str) -> None:
    """Ensure directory exists, creating it if necessary."""
    Path(path).mkdir(parents=True, exist_ok=True)


def exists(path: str) -> bool:
    """Check if file exists."""
    return Path(path).exists()


def dirname(path: str) -> str:
    """Get directory name from path."""
    return str(Path(path).parent)


def join(*parts: str) -> str:
    """Join path components."""
    return str(Path(*parts))


def expand_path(path: str) -> str:
    """Expand ~ in path."""
    return str(Path(path).expanduser())


def suffix(path: str) -> str:
    """Lower-cased file extension, including the dot."""
    return Path(path).suffix.lower()


# File I/O
def read_text(path: str) -> str:
    """Read text file."""
    return Path(path).read_text()


def read_json(path: str) -> Any:
    """Read JSON file."""
    with open(path) as f:
        return json.load(f)


def write_json(path: str, data: Any) -> None:
    """Write JSON file with pretty formatting."""
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def to_json(data: Any) -> str:
    """Convert data to JSON string."""
    return json.dumps(data, indent=2)


# Hashing & timestamps
def now_iso() -> str:
    """Get current timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat()


def sha256(obj: Any) -> str:
    """Calculate SHA-256 hash of object."""
    s = json.dumps(obj, sort_keys=True)
    return hashlib.sha256(s.encode()).hexdigest()[:16]


def sanitize_host(url: str) -> str:
    """Extract sanitized hostname from URL for use in filenames."""
    parsed = urlparse(url)
    host = parsed.netloc or parsed.path
    host = host.split(":")[0]
    return host.replace("/", "_")


# Fixture values
class FixtureKind(str, Enum):
    """Shape of a fixture value, named the way JSON names it."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> FixtureKind:
    """Classify a decoded JSON value."""
    if value is Undefined:
        return FixtureKind.UNDEFINED
    if value is None:
        return FixtureKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return FixtureKind.BOOLEAN
    if isinstance(value, (int, float)):
        return FixtureKind.NUMBER
    if isinstance(value, str):
        return FixtureKind.STRING
    if isinstance(value, (list, tuple)):
        return FixtureKind.ARRAY
    if isinstance(value, dict):
        return FixtureKind.OBJECT
    raise TypeError(f"Unsupported fixture value of type {type(value).__name__}")


# GraphQL type helpers
def get_field_def(
    schema: GraphQLSchema, parent_type: GraphQLNamedType, field_name: str
) -> Optional[GraphQLField]:
    """
    Get field definition from parent type, including introspection meta fields.

    Args:
        schema: GraphQL schema
        parent_type: Object, interface or union type owning the selection
        field_name: Field name (not the alias)

    Returns:
        The field definition or None when the parent type has no such field
    """
    if field_name == TYPENAME_FIELD:
        return TypeNameMetaFieldDef
    if parent_type is schema.query_type:
        if field_name == "__schema":
            return SchemaMetaFieldDef
        if field_name == "__type":
            return TypeMetaFieldDef
    if is_object_type(parent_type) or is_interface_type(parent_type):
        return parent_type.fields.get(field_name)
    return None


# AST traversal helpers
def response_key(field_node: FieldNode) -> str:
    """Alias if present, else the field name."""
    return field_node.alias.value if field_node.alias else field_node.name.value


def typename_response_key(selection_set) -> Optional[str]:
    """Response key of a ``__typename`` field selected directly in the set."""
    for selection in selection_set.selections:
        if isinstance(selection, FieldNode) and selection.name.value == TYPENAME_FIELD:
            return response_key(selection)
    return None


def fixture_typename(obj: dict, typename_key: Optional[str]) -> Optional[str]:
    """The typename a fixture object reports under ``typename_key``, if any."""
    if not typename_key:
        return None
    typename = obj.get(typename_key)
    return typename if isinstance(typename, str) and typename else None


def inline_fragments(selection_set) -> list[InlineFragmentNode]:
    """Inline fragments selected directly in the set."""
    return [s for s in selection_set.selections if isinstance(s, InlineFragmentNode)]


def format_path(path) -> str:
    """Join a coercion path (keys and indexes) with dots."""
    return ".".join(str(part) for part in path)


# HTTP response helpers
def safe_json_response(response, context: str = "API request") -> dict:
    """
    Safely parse JSON from HTTP response with helpful error messages.

    Args:
        response: requests.Response object
        context: Description of what operation failed (e.g., "GraphQL introspection")

    Returns:
        Parsed JSON as dict

    Raises:
        RuntimeError: If response is not valid JSON
    """
    try:
        return response.json()
    except json.JSONDecodeError as e:
        body_preview = response.text[:300]
        if len(response.text) > 300:
            body_preview += "..."

        error_parts = [
            f"{context} failed - server returned non-JSON response",
            "",
            f"  URL: {response.url}",
            f"  Status: {response.status_code}",
            f"  Content-Type: {response.headers.get('Content-Type', 'unknown')}",
            "",
            "  Response preview:",
            f"  {body_preview}",
            "",
            "  Suggestions:",
            "  - Verify the URL points to a GraphQL endpoint",
            "  - Authentication may be required - try adding --token YOUR_TOKEN",
            "",
            f"  Original JSON error: {e}",
        ]
        raise RuntimeError("\n".join(error_parts))
