"""CLI for graphql-fixture-validator."""

from dataclasses import dataclass
from typing import Literal, Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import config, loader, schema_loader, utils
from .assets import validate_test_assets
from .errors import SchemaLoadError
from .report import ValidationSummary, emit, print_kv

app = typer.Typer(help="Validate GraphQL fixtures against the queries that produce them")
schema_app = typer.Typer(help="Schema operations")
config_app = typer.Typer(help="Configuration file operations")
app.add_typer(schema_app, name="schema")
app.add_typer(config_app, name="config")

console = Console()


@dataclass
class ValidateOptions:
    """Options for validate command."""

    query_file: str
    schema_file: Optional[str] = None
    url: Optional[str] = None
    token: Optional[str] = None
    mutation_name: Optional[str] = None
    result_parameter_name: Optional[str] = None
    operation_name: Optional[str] = None
    config_file: Optional[str] = None
    output: Literal["console", "json"] = "console"


@schema_app.command("pull")
def schema_pull(
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint URL"),
    token: Optional[str] = typer.Option(None, help="Bearer token"),
    out: Optional[str] = typer.Option(None, help="Output file path"),
):
    """Fetch and cache a GraphQL schema via introspection."""
    try:
        cfg = config.load()
        full_url = url or cfg.default_url

        if not full_url:
            console.print("[red]Error: No URL provided. Use --url or set default_url in config.[/red]")
            raise typer.Exit(1)

        console.print(f"[cyan]Fetching schema from {full_url}...[/cyan]")
        profile = schema_loader.load_schema(url=full_url, cfg=cfg, allow_cache=True, refresh=True, token=token)

        # If custom output path specified, write just the introspection JSON
        if out:
            if profile.schema_json is None:
                raise SchemaLoadError(f"No introspection JSON to write for {profile.url}")
            utils.write_json(out, profile.schema_json)
            path = out
        else:
            path = schema_loader.cache_path_for(profile.url, cfg)

        print_kv("Schema pulled", {"url": profile.url, "hash": profile.hash, "path": path})
    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@config_app.command("init")
def config_init(
    path: Optional[str] = typer.Option(None, help="Config file path"),
):
    """Write an example configuration file."""
    try:
        written = config.create_example_config(path)
        print_kv("Config written", {"path": written})
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command("validate")
def validate_cmd(
    fixture_file: str = typer.Argument(..., help="Fixture JSON file"),
    query: str = typer.Option(..., "--query", "-q", help="GraphQL input query file"),
    schema: Optional[str] = typer.Option(None, help="Schema file (SDL or introspection JSON)"),
    url: Optional[str] = typer.Option(None, help="GraphQL endpoint to introspect"),
    token: Optional[str] = typer.Option(None, help="Bearer token for introspection"),
    mutation: Optional[str] = typer.Option(None, help="Mutation validating the fixture output"),
    result_param: Optional[str] = typer.Option(None, help="Mutation argument receiving the output"),
    operation: Optional[str] = typer.Option(None, help="Operation name when the query holds several"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Config file path"),
    output: Optional[str] = typer.Option(None, help="Output format (console|json)"),
    fail_on_error: bool = typer.Option(True, help="Exit code 2 if the fixture does not match"),
    debug: bool = typer.Option(False, help="Re-raise unexpected errors"),
):
    """Validate a fixture against a query and schema."""
    try:
        cfg = config.load(config_file)
        opts = ValidateOptions(
            query_file=query,
            schema_file=schema,
            url=url,
            token=token,
            mutation_name=mutation,
            result_parameter_name=result_param,
            operation_name=operation,
            config_file=config_file,
            output=output or cfg.output,
        )

        summary = run_validate(fixture_file, opts, cfg)
        emit(summary, opts.output)

        if fail_on_error and not summary.report.valid:
            raise typer.Exit(2)

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if debug:
            raise
        raise typer.Exit(1)


def run_validate(fixture_path: str, opts: ValidateOptions, cfg: Optional[config.Config] = None) -> ValidationSummary:
    """
    Run every check on a fixture file.

    Args:
        fixture_path: Path to fixture JSON file
        opts: Validation options
        cfg: Configuration; loaded from the default location when omitted

    Returns:
        ValidationSummary with results
    """
    cfg = cfg or config.load(opts.config_file)

    schema_file = opts.schema_file
    url = opts.url
    if not schema_file and not url:
        schema_file = cfg.default_schema
        url = cfg.default_url

    profile = schema_loader.load_schema(
        url=url, schema_file=schema_file, cfg=cfg, allow_cache=True, token=opts.token
    )
    schema = profile.build()

    document = loader.load_query(opts.query_file)
    fixture = loader.load_fixture(fixture_path)

    report = validate_test_assets(
        schema,
        fixture,
        document,
        mutation_name=opts.mutation_name or cfg.mutation_name,
        result_parameter_name=opts.result_parameter_name or cfg.result_parameter_name,
        operation_name=opts.operation_name,
    )

    return ValidationSummary(
        fixture_path=fixture_path,
        query_path=opts.query_file,
        schema_source=profile.url,
        report=report,
        export=fixture.export,
        target=fixture.target,
        input_query_variables=fixture.input_query_variables,
    )


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
