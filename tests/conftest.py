import json

import pytest
from graphql import build_schema, parse

SCHEMA_SDL = """
type Query {
  data: Data
  items: [Item!]!
  matrix: [[Item]]
  result: Result
  results: [Result!]
  node: Node
  count: Int!
  status: Status
  tags: [String!]
  thing: Thing
}

type Mutation {
  handleResult(result: FunctionResult!): Boolean!
}

input FunctionResult {
  operations: [Operation!]!
}

input Operation {
  message: String!
  level: Int
}

enum Status {
  ACTIVE
  INACTIVE
}

type Data {
  id: ID!
  count: Int
  details: Details!
  metadata: String
}

type Details {
  name: String!
}

type Item {
  id: ID!
  value: Int
}

union Result = Ok | Err

type Ok {
  value: Int
}

type Err {
  message: String
}

interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  name: String
  friend: User
}

type Team implements Node {
  id: ID!
  size: Int
  parent: Team
}

union Thing = Box | Bag

type Box {
  content: Content
}

type Bag {
  content: Content
}

type Content {
  x: Int
  y: Int
}
"""


@pytest.fixture(scope="session")
def schema_sdl():
    return SCHEMA_SDL


@pytest.fixture(scope="session")
def schema():
    return build_schema(SCHEMA_SDL)


@pytest.fixture
def check(schema):
    """Validate a fixture against a query source and return the errors."""
    from graphql_fixture_validator import validate

    def _check(query, fixture):
        return validate(parse(query), schema, fixture).errors

    return _check


@pytest.fixture
def write_json(tmp_path):
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write
