"""CLI entry point: alias-it <alias_name> <command>..."""

from __future__ import annotations

import logging
import sys

import click

from alias_it import __version__
from alias_it.config import default_shell, detection_enabled, init_config_if_missing, load_config
from alias_it.errors import HomeDirectoryError
from alias_it.logging_setup import setup_logging
from alias_it.shell_alias import EXIT_FAILURE, AliasCLI

logger = logging.getLogger(__name__)


@click.command(
    context_settings={
        # Everything after the alias name belongs to the aliased command, e.g. `kubectl apply -f .`
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.option("--debug", is_flag=True, default=False, help="Verbose logging to stderr.")
@click.option(
    "--detect/--no-detect",
    default=None,
    help="Pick the rc file from $SHELL (default from config), or always use default_shell.",
)
@click.version_option(__version__, prog_name="alias-it")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx: click.Context, debug: bool, detect: bool | None, args: tuple[str, ...]) -> None:
    """Append `alias ALIAS_NAME="COMMAND..."` to your shell config file."""
    setup_logging(debug=debug)

    try:
        if init_config_if_missing():
            logger.info("Created default config")
    except (OSError, RuntimeError) as exc:
        logger.warning("Could not create default config: %s", exc)

    cfg = load_config()
    if detect is None:
        detect = detection_enabled(cfg)

    alias_cli = AliasCLI(detect=detect, default_shell=default_shell(cfg))
    try:
        status = alias_cli.add(list(args))
    except HomeDirectoryError:
        ctx.exit(EXIT_FAILURE)
    ctx.exit(status)


def main_wrapper():
    """Entry point wrapper that refuses to run on Windows before Click parses."""
    if sys.platform.startswith("win"):
        click.echo("Apologies, you cannot use this app on Windows. Try WSL!")
        sys.exit(1)
    main()
