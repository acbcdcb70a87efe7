from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from merge_uses.classify import Settings
from merge_uses.exceptions import MergeUsesError
from merge_uses.format import format_uses
from merge_uses.output import run_rustfmt

console = Console(stderr=True)
app = typer.Typer(
    name='merge-uses',
    help='Group, merge and sort the use declarations of a Rust source file',
    add_completion=False,
)


@app.command()
def main(
    rustfmt_args: Annotated[
        list[str] | None,
        typer.Argument(help='Arguments passed through to rustfmt, after --'),
    ] = None,
    skip_rustfmt: Annotated[
        bool,
        typer.Option(
            '--skip-rustfmt', help="Don't pass results through rustfmt",
        ),
    ] = False,
    split_roots: Annotated[
        bool,
        typer.Option(
            '--split-roots',
            help='Write one use declaration per top-level crate or module',
        ),
    ] = False,
    application_crates: Annotated[
        list[str] | None,
        typer.Option(
            '--application-crate',
            help='Crate to group with crate-relative imports (repeatable)',
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Enable debug logging'),
    ] = False,
) -> None:
    """Read Rust source on stdin and write it to stdout with its use
    declarations merged into one block per category.

    Examples:
        merge-uses < src/lib.rs
        merge-uses --skip-rustfmt < src/lib.rs
        merge-uses -- --edition 2021 < src/lib.rs
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    settings = Settings(
        application_crates=frozenset(application_crates or ()),
        split_roots=split_roots,
    )
    contents = sys.stdin.read()

    try:
        ret = format_uses(contents, settings=settings)
        if not skip_rustfmt:
            ret = run_rustfmt(ret, tuple(rustfmt_args or ()))
    except MergeUsesError as e:
        console.print(
            f'[red]Error:[/red] {escape(e.message)}', soft_wrap=True,
        )
        raise typer.Exit(1)

    sys.stdout.write(ret)


if __name__ == '__main__':
    app()
