"""Console-script entry point for ``treecopy``.

The library itself has no dependencies; only the commands need click,
which ships with the ``cli`` extra.
"""

import sys


def main():
    try:
        from .cli import main as cli_main
    except ModuleNotFoundError as exc:
        if exc.name != "click":
            raise
        sys.exit(
            "treecopy: the cp/shadow/cmp/empty commands need click.\n"
            "Install them with:  pip install 'treecopy[cli]'"
        )
    cli_main(prog_name="treecopy")
