"""Shared helpers, option decorators, and the main CLI group."""

from __future__ import annotations

import click

from .._copy import DEFAULT_DIR_MODE, CopyReport, EntryKind


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _status(ctx, msg):
    """Emit a status message to stderr when verbose mode (-v) is on."""
    if ctx.obj.get("verbose"):
        click.echo(msg, err=True)


def _format_action(action) -> str:
    if action.kind == EntryKind.DIR:
        return f"mkdir {action.dest}"
    return f"{action.src} -> {action.dest}"


def _report_actions(ctx, report: CopyReport):
    """Print planned actions (dry run) or, in verbose mode, performed ones."""
    for action in report.actions:
        if report.dry_run:
            click.echo(_format_action(action))
        else:
            _status(ctx, _format_action(action))


def _parse_dir_mode(ctx, param, value):
    """Click callback: parse an octal permission string such as ``755``."""
    if value is None:
        return DEFAULT_DIR_MODE
    if isinstance(value, int):
        return value
    try:
        mode = int(value, 8)
    except ValueError:
        raise click.BadParameter(f"not an octal mode: {value!r}")
    if not 0 <= mode <= 0o7777:
        raise click.BadParameter(f"mode out of range: {value!r}")
    return mode


# ---------------------------------------------------------------------------
# Option decorators
# ---------------------------------------------------------------------------

def _dry_run_option(f):
    """Shared -n/--dry-run flag for copy commands."""
    return click.option(
        "-n", "--dry-run", is_flag=True, default=False,
        help="Show what would be created without writing anything.",
    )(f)


def _dir_mode_option(f):
    """Shared --dir-mode option for copy commands."""
    return click.option(
        "--dir-mode", type=str, default=None, envvar="TREECOPY_DIR_MODE",
        callback=_parse_dir_mode, show_envvar=True,
        help="Octal mode for created directories (default 755, or set TREECOPY_DIR_MODE).",
    )(f)


# ---------------------------------------------------------------------------
# Main group
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output on stderr.")
@click.pass_context
def main(ctx, verbose):
    """treecopy — recursive copy, shadow copy, and file comparison.

    \b
    Quick start:
      treecopy cp photos backup          # copy a tree
      treecopy shadow photos skeleton    # same layout, empty files
      treecopy cmp a.bin b.bin           # exit 0 if identical
      treecopy empty log.txt             # exit 0 if zero bytes

    \b
    A directory copied onto an existing directory is nested inside it
    under its own name; copied onto a missing path it becomes that path.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
