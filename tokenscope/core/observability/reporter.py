"""
Reporter — the user-facing output channel of the pipelines.

Core code talks to a ``Reporter`` and never to a terminal.  The CLI
supplies a coloured implementation (``tokenscope.ui.cli.console``);
tests supply one that records what was said.

Levels:
    info     plain progress lines
    success  final "it worked" lines
    error    failures (the CLI renders these in red on stderr)
    echo     raw text, written as-is (used to mirror the report)
"""

from __future__ import annotations

from typing import Protocol


class Reporter(Protocol):
    """Sink for user-facing messages."""

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def echo(self, text: str) -> None: ...


class NullReporter:
    """Reporter that discards everything."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def echo(self, text: str) -> None:
        pass
