"""
CLI command for the generator pipeline.

Thin wrapper over ``tokenscope.core.use_cases.generate``.
"""

from __future__ import annotations

import sys

import click

from tokenscope.ui.cli.console import ConsoleReporter


@click.command()
def generate() -> None:
    """Generate a ~10 MiB file of random comma-separated tokens in ./data."""
    from tokenscope.core.use_cases.generate import run_generate

    reporter = ConsoleReporter()
    result = run_generate(reporter=reporter)

    if result.error:
        reporter.error(result.error)
        sys.exit(1)

    generation = result.generation
    assert generation is not None  # guaranteed after error check above

    reporter.success("File generated successfully!")
    reporter.success(f"Location: {generation.path}")
    reporter.success(f"Size: {generation.size_mib:.2f} MB")
