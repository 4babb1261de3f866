"""CLI for the arithmetic demo.

Usage:
    python -m arithdemo     # Print the banner and the three results
    arithdemo               # Same, via the console script
"""

from __future__ import annotations

import typer
from rich.console import Console

from arithdemo.runner import run_demo

app = typer.Typer(
    name="arithdemo",
    help="Add, sum and transform a few fixed integers",
    add_completion=False,
)
# Output lines are plain text: no markup, highlighting or wrapping.
console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


@app.command()
def cmd_run() -> None:
    """Print the banner followed by Sum, Total and Result."""
    run_demo(console.print)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
