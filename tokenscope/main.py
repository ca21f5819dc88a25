"""
tokenscope — CLI entrypoint.

Usage:
    python -m tokenscope.main --help
    python -m tokenscope.main generate
    python -m tokenscope.main read
"""

from __future__ import annotations

import os

import click

from tokenscope import __version__
from tokenscope.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    ENV_LOG_LEVEL,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="tokenscope")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option("--quiet", "-q", is_flag=True, help="Only log errors.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
def cli(verbose: bool, quiet: bool, debug: bool) -> None:
    """tokenscope — generate random token files and analyze their token types."""
    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


# ── Register commands from tokenscope/ui/cli/ ─────────────────────

from tokenscope.ui.cli.generate import generate  # noqa: E402
from tokenscope.ui.cli.read import read  # noqa: E402

cli.add_command(generate)
cli.add_command(read)


if __name__ == "__main__":
    cli()
