"""Demo runner: compute each step in order, then emit the output lines.

Data flow:
1. add(x, y)            -> "Sum"
2. sum_sequence(numbers) -> "Total"
3. transform(value)      -> "Result"
4. Banner + rendered lines handed to the caller's echo function
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from arithdemo.calculations import add, sum_sequence, transform
from arithdemo.models import BANNER, DemoInputs, StepResult

logger = logging.getLogger(__name__)


def run_steps(inputs: DemoInputs | None = None) -> list[StepResult]:
    """Run the three calculations and return their results in print order."""
    inputs = inputs or DemoInputs()

    total_sum = add(inputs.x, inputs.y)
    logger.debug("add(%d, %d) = %d", inputs.x, inputs.y, total_sum)

    total = sum_sequence(inputs.numbers)
    logger.debug("sum_sequence(%s) = %d", list(inputs.numbers), total)

    result = transform(inputs.value)
    logger.debug("transform(%d) = %d", inputs.value, result)

    return [
        StepResult("Sum", total_sum),
        StepResult("Total", total),
        StepResult("Result", result),
    ]


def render_lines(results: Iterable[StepResult]) -> list[str]:
    """Banner first, then one line per step."""
    return [BANNER] + [r.render() for r in results]


def run_demo(echo: Callable[[str], object] = print) -> list[str]:
    """Compute the demo and pass each output line to echo.

    Returns the emitted lines.
    """
    lines = render_lines(run_steps())
    for line in lines:
        echo(line)
    return lines
