"""CLI package for TagFinder command orchestration.

Split into click definitions (ui), resource setup (runner) and command
logic (commands).
"""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from TagFinder.cli.runner import CommandRunner
from TagFinder.cli.ui import cli


def main() -> None:
    """Run TagFinder CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
