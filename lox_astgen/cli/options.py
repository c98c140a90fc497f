"""Options and error handling shared by the generation commands."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

import click

from lox_astgen.grammar.model import Grammar, GrammarError
from lox_astgen.grammar_codegen.spec import load_grammar
from lox_astgen.paths import SRC_DIRNAME

grammar_option = click.option(
    "--grammar",
    "grammar_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Grammar YAML file (default: the packaged expression grammar)",
)

src_dir_option = click.option(
    "--src-dir",
    "src_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Directory generated files are written to (default: ./{SRC_DIRNAME})",
)

dry_run_option = click.option(
    "--dry-run",
    is_flag=True,
    help="Print the generated source instead of writing it",
)


def generation_options(func: Callable) -> Callable:
    for option in (dry_run_option, src_dir_option, grammar_option):
        func = option(func)
    return func


def load_or_exit(grammar_path: Path | None) -> Grammar:
    """Load the grammar, turning a malformed grammar into exit status 1."""
    try:
        return load_grammar(grammar_path)
    except GrammarError as exc:
        fail(str(exc))


def fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(1)


def report_write(written: bool, target: Path) -> None:
    if written:
        click.echo(f"Generated {target}")
    else:
        click.echo(f"Could not write {target}; see log for details", err=True)
