"""Exceptions raised by graphql-fixture-validator.

Mismatches between a fixture and a query are never raised, they are
collected as messages. The exceptions below signal broken inputs: a query
that references unknown fragments, an operation kind that cannot be checked,
or files that cannot be loaded.
"""


class FixtureValidatorError(Exception):
    """Base class for all errors raised by this package."""


class FragmentNotFoundError(FixtureValidatorError):
    """A fragment spread names a fragment the document does not define."""

    def __init__(self, name: str):
        super().__init__(f"Fragment definition not found: {name}")
        self.name = name


class UnsupportedOperationError(FixtureValidatorError):
    """The document contains an operation that fixtures cannot describe."""


class FixtureLoadError(FixtureValidatorError):
    """A fixture file is missing, malformed or lacks a payload."""


class SchemaLoadError(FixtureValidatorError):
    """A schema could not be read, fetched or built."""
