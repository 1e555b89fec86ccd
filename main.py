"""Main CLI interface for testfilter."""

import sys
from typing import Optional

import click
from loguru import logger
from rich.console import Console

from config import Config, LogLevel, get_config, set_config
from reporting import build_property_table, build_supported_properties_table, format_property_value
from testcases import (
    SUPPORTED_PROPERTY_NAMES,
    CatalogError,
    TestCaseCatalog,
    TestMethodFilter,
    load_test_catalog,
)

console = Console()


def _resolve_catalog(catalog: Optional[str]) -> TestCaseCatalog:
    """Load the catalog given on the command line, falling back to the configured one."""
    path = catalog or get_config().catalog_path
    if not path:
        raise click.UsageError("No catalog given. Pass CATALOG or set TESTFILTER_CATALOG_PATH.")
    try:
        return load_test_catalog(path)
    except CatalogError as e:
        logger.error(f"Catalog load failed: {e.message}")
        console.print(f"[bold red]❌ {e.message}[/bold red]")
        sys.exit(1)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel]),
    help="Set the logging level",
)
@click.option("--log-file", type=click.Path(), help="Path to log file")
@click.option("--verbose", is_flag=True, help="Enable verbose debugging output")
@click.pass_context
def cli(ctx, log_level, log_file, verbose):
    """testfilter: inspect test case properties used by run filters."""

    config = Config.from_env()

    # Override with CLI options if provided
    if log_level:
        config.log_level = LogLevel(log_level)
    if log_file:
        config.log_file = log_file
    if verbose:
        config.verbose = verbose

    set_config(config)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["resolver"] = TestMethodFilter()


@cli.command()
def properties():
    """List the properties a test case filter may reference."""
    console.print(build_supported_properties_table())


@cli.command()
@click.argument("catalog", required=False, type=click.Path(dir_okay=False))
@click.option(
    "--property",
    "property_names",
    multiple=True,
    type=click.Choice(SUPPORTED_PROPERTY_NAMES),
    help="Only show these properties (repeatable)",
)
@click.pass_context
def inspect(ctx, catalog, property_names):
    """Show filter property values for every test case in CATALOG."""
    test_catalog = _resolve_catalog(catalog)
    if not test_catalog.count():
        console.print("[yellow]Catalog contains no test cases.[/yellow]")
        return

    console.print(
        build_property_table(test_catalog, ctx.obj["resolver"], property_names or None)
    )
    console.print(f"[dim]{test_catalog.count()} test case(s)[/dim]")


@cli.command()
@click.argument("catalog", type=click.Path(dir_okay=False))
@click.argument("fully_qualified_name")
@click.argument("property_name")
@click.pass_context
def value(ctx, catalog, fully_qualified_name, property_name):
    """Print one property value of a test case; '-' when it has none."""
    test_catalog = _resolve_catalog(catalog)
    test_case = test_catalog.get(fully_qualified_name)
    if test_case is None:
        console.print(f"[bold red]❌ Test case not found: {fully_qualified_name}[/bold red]")
        sys.exit(1)

    resolver = ctx.obj["resolver"]
    if resolver.property_provider(property_name) is None:
        logger.warning(f"Unsupported property requested: {property_name}")

    click.echo(format_property_value(resolver.property_value_provider(test_case, property_name)))


@cli.command()
def version():
    """Show testfilter version information."""
    console.print("[bold blue]testfilter[/bold blue] version [green]0.1.0[/green]")


if __name__ == "__main__":
    cli()
