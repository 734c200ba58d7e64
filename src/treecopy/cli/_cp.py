"""The cp and shadow commands."""

from __future__ import annotations

import click

from .._copy import CopyMode, copy, copy_dry_run, shadow_copy
from ._helpers import (
    main,
    _dir_mode_option,
    _dry_run_option,
    _report_actions,
    _status,
)


def _run_copy(ctx, src, dest, mode, dry_run, dir_mode):
    try:
        if dry_run:
            report = copy_dry_run(src, dest, mode=mode)
        elif mode == CopyMode.SHADOW:
            report = shadow_copy(src, dest, dir_mode=dir_mode)
        else:
            report = copy(src, dest, dir_mode=dir_mode)
    except OSError as exc:
        raise click.ClickException(str(exc))
    _report_actions(ctx, report)
    if not dry_run:
        _status(ctx, f"Copied {len(report.files)} file(s), {len(report.dirs)} dir(s) -> {dest}")


@main.command()
@click.argument("src", type=click.Path())
@click.argument("dest", type=click.Path())
@_dry_run_option
@_dir_mode_option
@click.pass_context
def cp(ctx, src, dest, dry_run, dir_mode):
    """Copy a file or directory tree, content included.

    \b
    Examples:
        treecopy cp notes.txt copy.txt     # file -> new file
        treecopy cp notes.txt archive/     # file -> archive/notes.txt
        treecopy cp photos backup          # backup/ becomes the copy
        treecopy cp photos existing_dir    # existing_dir/photos/...
    """
    _run_copy(ctx, src, dest, CopyMode.CONTENT, dry_run, dir_mode)


@main.command()
@click.argument("src", type=click.Path())
@click.argument("dest", type=click.Path())
@_dry_run_option
@_dir_mode_option
@click.pass_context
def shadow(ctx, src, dest, dry_run, dir_mode):
    """Reproduce a tree's layout with zero-length files.

    Destination paths are resolved exactly as for cp; only the file
    contents are left out.
    """
    _run_copy(ctx, src, dest, CopyMode.SHADOW, dry_run, dir_mode)
