"""Configuration management for graphql-fixture-validator."""

from dataclasses import dataclass
from typing import Optional

import yaml

from . import utils

DEFAULT_SCHEMA_CACHE_DIR = "~/.graphql-fixture-validator/schemas"


@dataclass
class Config:
    """Configuration for graphql-fixture-validator."""

    default_schema: Optional[str] = None
    default_url: Optional[str] = None
    mutation_name: Optional[str] = None
    result_parameter_name: str = "result"
    schema_cache_dir: str = DEFAULT_SCHEMA_CACHE_DIR
    output: str = "console"

    def __post_init__(self):
        """Expand paths after initialization."""
        self.schema_cache_dir = utils.expand_path(self.schema_cache_dir)
        if self.default_schema:
            self.default_schema = utils.expand_path(self.default_schema)


def get_default_config_path() -> str:
    """Get default config file path."""
    return utils.expand_path("~/.graphql-fixture-validator/config.yaml")


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Config object with defaults for missing values.
    """
    if config_path is None:
        config_path = get_default_config_path()

    if not utils.exists(config_path):
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return Config(
        default_schema=data.get("default_schema"),
        default_url=data.get("default_url"),
        mutation_name=data.get("mutation_name"),
        result_parameter_name=data.get("result_parameter_name", "result"),
        schema_cache_dir=data.get("schema_cache_dir", DEFAULT_SCHEMA_CACHE_DIR),
        output=data.get("output", "console"),
    )


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = get_default_config_path()

    utils.ensure_dir(utils.dirname(path))

    example = {
        "default_schema": "./schema.graphql",
        "default_url": None,
        "mutation_name": "cartValidationsGenerateRun",
        "result_parameter_name": "result",
        "schema_cache_dir": DEFAULT_SCHEMA_CACHE_DIR,
        "output": "console",
    }

    with open(path, "w") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)

    return path
