"""The cmp and empty commands."""

from __future__ import annotations

import click

from .._copy import compare_file, is_file_empty
from ._helpers import main


@main.command()
@click.argument("file1", type=click.Path())
@click.argument("file2", type=click.Path())
@click.pass_context
def cmp(ctx, file1, file2):
    """Compare two files byte by byte.

    \b
    Exit codes:
        0  files are identical
        1  files differ (or cannot be read)

    With -v the ordering is printed on stderr: <, = or >.
    """
    try:
        result = compare_file(file1, file2)
    except OSError as exc:
        raise click.ClickException(str(exc))

    if ctx.obj.get("verbose"):
        symbol = {-1: "<", 0: "=", 1: ">"}[result]
        click.echo(f"{file1} {symbol} {file2}", err=True)

    ctx.exit(0 if result == 0 else 1)


@main.command()
@click.argument("path", type=click.Path())
@click.pass_context
def empty(ctx, path):
    """Exit 0 if PATH is a zero-length file, 1 otherwise.

    A path that does not exist is reported as not empty.
    """
    result = is_file_empty(path)
    if ctx.obj.get("verbose"):
        click.echo(f"{path}: {'empty' if result else 'not empty'}", err=True)
    ctx.exit(0 if result else 1)
