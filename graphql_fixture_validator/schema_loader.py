"""Schema loading and caching."""

from dataclasses import asdict, dataclass
from typing import Optional

import requests
from graphql import GraphQLError, GraphQLSchema

from . import parser, utils
from .config import Config
from .errors import SchemaLoadError

SDL_SUFFIXES = {".graphql", ".graphqls", ".gql"}


@dataclass
class SchemaProfile:
    """Schema source with metadata."""

    url: str
    fetched_at: str
    hash: str
    schema_json: Optional[dict] = None
    sdl: Optional[str] = None

    def build(self) -> GraphQLSchema:
        """Build the GraphQLSchema this profile describes."""
        try:
            if self.sdl is not None:
                return parser.build_sdl_schema(self.sdl)
            return parser.build_schema(self.schema_json)
        except (GraphQLError, TypeError) as e:
            raise SchemaLoadError(f"Invalid schema from {self.url}: {e}") from e


def load_schema(
    url: Optional[str] = None,
    schema_file: Optional[str] = None,
    cfg: Optional[Config] = None,
    allow_cache: bool = True,
    refresh: bool = False,
    token: Optional[str] = None,
) -> SchemaProfile:
    """
    Load GraphQL schema from file or via introspection.

    Args:
        url: GraphQL endpoint URL
        schema_file: Path to an SDL file or an introspection JSON file
        cfg: Configuration object
        allow_cache: Whether to use cached schema
        refresh: Force refresh even if cached
        token: Optional bearer token for authentication

    Returns:
        SchemaProfile with loaded schema

    Raises:
        SchemaLoadError: If neither url nor schema_file provided, or loading fails
    """
    cfg = cfg or Config()

    if schema_file:
        if not utils.exists(schema_file):
            raise SchemaLoadError(f"Schema file not found: {schema_file}")
        if utils.suffix(schema_file) in SDL_SUFFIXES:
            sdl = utils.read_text(schema_file)
            return SchemaProfile(
                url=f"file://{schema_file}",
                fetched_at=utils.now_iso(),
                hash=utils.sha256(sdl),
                sdl=sdl,
            )
        js = utils.read_json(schema_file)
        return SchemaProfile(
            url=f"file://{schema_file}",
            fetched_at=utils.now_iso(),
            hash=utils.sha256(js),
            schema_json=js,
        )

    if not url:
        raise SchemaLoadError("No URL or schema file provided")

    cache_path = cache_path_for(url, cfg)

    if allow_cache and utils.exists(cache_path) and not refresh:
        return SchemaProfile(**utils.read_json(cache_path))

    js = introspect(url, token)
    prof = SchemaProfile(
        url=url,
        fetched_at=utils.now_iso(),
        hash=utils.sha256(js),
        schema_json=js,
    )

    utils.ensure_dir(utils.dirname(cache_path))
    utils.write_json(cache_path, asdict(prof))

    return prof


def introspect(graphql_url: str, token: Optional[str] = None) -> dict:
    """
    Introspect GraphQL schema via HTTP.

    Args:
        graphql_url: GraphQL endpoint URL
        token: Optional bearer token for authentication

    Returns:
        Introspection result as dict

    Raises:
        SchemaLoadError: If introspection fails
    """
    headers = {}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    try:
        resp = requests.post(
            graphql_url, json={"query": utils.INTROSPECTION_QUERY}, headers=headers, timeout=30
        )
    except requests.RequestException as e:
        raise SchemaLoadError(f"Introspection request to {graphql_url} failed: {e}") from e

    if resp.status_code != 200:
        raise SchemaLoadError(f"Introspection failed with status {resp.status_code}")

    try:
        payload = utils.safe_json_response(resp, "GraphQL introspection")
    except RuntimeError as e:
        raise SchemaLoadError(str(e)) from e

    if "errors" in payload:
        raise SchemaLoadError(f"Introspection errors: {payload['errors']}")

    return payload["data"]


def cache_path_for(url: str, cfg: Config) -> str:
    """
    Get cache path for a schema URL.

    Args:
        url: GraphQL endpoint URL
        cfg: Configuration object

    Returns:
        Path to cache file
    """
    host = utils.sanitize_host(url)
    return utils.join(cfg.schema_cache_dir, f"{host}.json")
