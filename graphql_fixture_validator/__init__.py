"""Check that GraphQL fixtures match the queries and schemas they are written for."""

from .errors import (
    FixtureLoadError,
    FixtureValidatorError,
    FragmentNotFoundError,
    SchemaLoadError,
    UnsupportedOperationError,
)
from .fragments import inline_named_fragment_spreads
from .output import OutputValidationResult, validate_output
from .traversal import FixtureValidationResult, validate

__version__ = "0.1.0"

__all__ = [
    "FixtureLoadError",
    "FixtureValidationResult",
    "FixtureValidatorError",
    "FragmentNotFoundError",
    "OutputValidationResult",
    "SchemaLoadError",
    "UnsupportedOperationError",
    "inline_named_fragment_spreads",
    "validate",
    "validate_output",
]
