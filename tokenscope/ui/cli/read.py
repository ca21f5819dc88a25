"""
CLI command for the reader pipeline.

Thin wrapper over ``tokenscope.core.use_cases.analyze``.
"""

from __future__ import annotations

import sys

import click

from tokenscope.ui.cli.console import ConsoleReporter


@click.command()
def read() -> None:
    """Classify every token of the newest data file into an analysis report."""
    from tokenscope.core.use_cases.analyze import run_analysis

    reporter = ConsoleReporter()
    result = run_analysis(reporter=reporter)

    if result.error:
        reporter.error(result.error)
        sys.exit(1)

    summary = result.summary
    assert summary is not None

    reporter.success(f"Analysis complete. Output saved to: {summary.report_path}")
