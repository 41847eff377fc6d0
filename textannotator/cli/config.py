"""Configuration commands for the textannotator CLI."""

from __future__ import annotations

import json
from pathlib import Path

import click

from textannotator.cli.utils import print_error, print_success
from textannotator.config.profiles import list_profiles
from textannotator.config.serialization import config_to_dict, save_yaml, to_yaml


@click.group()
def config() -> None:
    r"""Manage configuration commands.

    \b
    Examples:
        $ textannotator config show
        $ textannotator config show --format json
        $ textannotator config profiles
        $ textannotator config export --output textannotator.yaml
    """


@config.command()
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["yaml", "json"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.pass_context
def show(ctx: click.Context, format_type: str) -> None:
    r"""Display current configuration.

    Shows the merged configuration from profile, file and environment
    variables.

    \b
    Examples:
        $ textannotator config show
        $ textannotator --profile dev config show --format json
    """
    cfg = ctx.obj["config"]
    if format_type.lower() == "json":
        click.echo(json.dumps(config_to_dict(cfg), indent=2))
    else:
        click.echo(to_yaml(cfg), nl=False)


@config.command()
def profiles() -> None:
    r"""List available configuration profiles.

    \b
    Examples:
        $ textannotator config profiles
    """
    for name in list_profiles():
        click.echo(name)


@config.command(name="export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="File to write the configuration to",
)
@click.pass_context
def export_config(ctx: click.Context, output: Path) -> None:
    r"""Write the current configuration to a YAML file.

    \b
    Examples:
        $ textannotator config export --output textannotator.yaml
    """
    try:
        save_yaml(ctx.obj["config"], output)
    except OSError as e:
        print_error(f"Failed to write configuration: {e}")
        return
    print_success(f"Configuration written to {output}")
