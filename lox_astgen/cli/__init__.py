"""CLI command group for AST generation.

This module exposes the root Click command group `astgen` which aggregates
the subcommands implemented in sibling modules.

Example usage:

        lox-astgen ast
        lox-astgen operation AstPrinter String ast_printer.rs
"""

from __future__ import annotations

import logging

import click

from lox_astgen import __version__

from .ast_module import ast_cmd
from .operation import operation_cmd

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _print_version(
    ctx: click.Context, param: click.Parameter, value: bool
) -> None:  # pragma: no cover - simple utility
    """Callback to print only the raw version and exit early."""
    if not value or ctx.resilient_parsing:
        return
    click.echo(__version__)
    ctx.exit()


@click.group()
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the lox-astgen version and exit.",
)
@click.option(
    "--log-level",
    default="INFO",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging level",
)
def astgen(log_level: str) -> None:
    """Generate AST node types, the visitor trait and operation stubs."""
    logging.basicConfig(format=LOG_FORMAT)
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level))


# Register subcommands
astgen.add_command(ast_cmd)
astgen.add_command(operation_cmd)

__all__ = ["astgen"]
