"""Data models for the arithmetic demo.

DemoInputs holds the fixed literals, StepResult is what each calculation
hands back to the runner for printing.
"""

from __future__ import annotations

from dataclasses import dataclass

BANNER = "Arithmetic Demo"


@dataclass(frozen=True)
class DemoInputs:
    """Fixed inputs for the three calculations."""

    x: int = 10
    y: int = 20
    numbers: tuple[int, ...] = (1, 2, 3, 4, 5)
    value: int = 100


@dataclass(frozen=True)
class StepResult:
    """Outcome of a single calculation."""

    label: str
    value: int

    def render(self) -> str:
        """Format as an output line, e.g. 'Sum: 30'."""
        return f"{self.label}: {self.value}"
