"""Console entry point that checks the layer contracts declared in ``pyproject.toml``."""

from __future__ import annotations

import sys
from typing import Sequence

import click
from importlinter.cli import lint_imports_command

DEFAULT_CONFIG = "pyproject.toml"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the contracts and return Import Linter's exit code.

    ``--config`` defaults to the project's ``pyproject.toml`` unless the caller
    passes one explicitly.
    """
    args = list(argv) if argv is not None else []
    if not any(arg == "--config" or arg.startswith("--config=") for arg in args):
        args = ["--config", DEFAULT_CONFIG, *args]

    try:
        lint_imports_command.main(
            args=args,
            prog_name="check-layers",
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
