"""CLI commands for schemadoc."""

import logging
import sys
from pathlib import Path

import click

from schemadoc.config import CONFIG_FILENAME, Config
from schemadoc.core.connection import build_registry
from schemadoc.core.reporter import SchemaReporter
from schemadoc.exceptions import SchemaDocError


@click.group()
@click.version_option(package_name="schemadoc")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Path to config file (default: search for {CONFIG_FILENAME})",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """schemadoc - Export database table structure as Markdown or console text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def load_config(config_path: Path | None) -> Config:
    """Load config from an explicit path or by searching upward."""
    if config_path is not None:
        return Config.from_toml(config_path)
    return Config.find_and_load()


@cli.command()
@click.argument("format", default="console")
@click.argument("database", required=False)
@click.pass_context
def export(ctx: click.Context, format: str, database: str | None) -> None:
    """Export the structure of all tables.

    FORMAT is "md" for Markdown or "console" for human-readable console
    output. DATABASE limits the export to one configured database.
    """
    try:
        config = load_config(ctx.obj.get("config_path"))
    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    reporter = SchemaReporter(build_registry(config))

    try:
        reporter.run(format=format, database=database)
    except SchemaDocError as e:
        click.echo(f"Error: {e}")
        sys.exit(1)


@cli.command()
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path(CONFIG_FILENAME),
    show_default=True,
    help="Where to write the config file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(path: Path, force: bool) -> None:
    """Create a starter config file."""
    if path.exists() and not force:
        click.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    Config().to_toml(path)
    click.echo(f"✓ Created {path}")


if __name__ == "__main__":
    cli()
