# ABOUTME: CLI package for bookcatalog, built on Click.
# ABOUTME: Defines the root command group, loads configuration, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookcatalog.cli.commands import (
    add_cmd,
    audit_cmd,
    edit_cmd,
    info_cmd,
    ls_cmd,
    publisher_cmd,
    rm_cmd,
)
from bookcatalog.config import CatalogConfig


def _configure_logging(level: str) -> None:
    """Send bookcatalog log records to stderr through Rich."""
    numeric = logging.getLevelName(level)
    if not isinstance(numeric, int):
        raise click.BadParameter(
            f"Unknown log level {level!r}", param_hint="BOOKCATALOG_LOG_LEVEL"
        )

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("bookcatalog")
    logger.setLevel(numeric)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(handler)


@click.group()
@click.version_option(package_name="bookcatalog")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """bookcatalog - keep a catalog of books with an audited edit history."""
    try:
        config = CatalogConfig.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    _configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config


cli.add_command(ls_cmd.ls)
cli.add_command(info_cmd.info)
cli.add_command(add_cmd.add)
cli.add_command(edit_cmd.edit)
cli.add_command(audit_cmd.audit)
cli.add_command(rm_cmd.rm)
cli.add_command(publisher_cmd.publisher)
