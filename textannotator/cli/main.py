"""Main CLI entry point for the textannotator package."""

from __future__ import annotations

from pathlib import Path

import click

from textannotator import __version__
from textannotator.cli.commands import bio, export, formats, highlight, tokenize_cmd
from textannotator.cli.config import config
from textannotator.cli.utils import load_config_for_cli
from textannotator.config.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="textannotator")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: use profile defaults)",
)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(["default", "dev", "test"], case_sensitive=False),
    default="default",
    help="Configuration profile to use",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress all output except errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    profile: str,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""Export and inspect text annotations.

    Turns named-entity, sentiment and part-of-speech results into JSON,
    JSONL, CSV, XML or BIO files, and previews entity highlights.

    \b
    Examples:
        # Export NER results as BIO
        $ textannotator export story.txt entities.json --type ner --format bio

        # Preview highlighted entities
        $ textannotator highlight story.txt entities.json

        # Show current configuration
        $ textannotator config show
    """
    ctx.ensure_object(dict)
    cfg = load_config_for_cli(
        config_file=str(config_file) if config_file else None,
        profile=profile.lower(),
        verbose=verbose,
    )
    logging_config = cfg.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    elif quiet:
        logging_config = logging_config.model_copy(update={"level": "ERROR"})
    configure_logging(logging_config)

    ctx.obj["config_file"] = config_file
    ctx.obj["profile"] = profile.lower()
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = cfg


cli.add_command(export)
cli.add_command(bio)
cli.add_command(tokenize_cmd)
cli.add_command(highlight)
cli.add_command(formats)
cli.add_command(config)


def main() -> None:
    """Run the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
