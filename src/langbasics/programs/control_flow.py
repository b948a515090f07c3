"""
Nested-loop factorial accumulator.

An outer counting loop runs from start_count down to zero. Each iteration
runs an inner loop that multiplies num = inner_bound .. 2 into an
accumulator and breaks out with that value once num reaches 1. The outer
loop sums the values into result.

The inner loop can also restart the outer loop (a labeled continue) when
the outer counter is zero. The outer loop's own zero check always fires
first, so accumulate_factorials() never takes that path.

All arithmetic is checked U32: overflow raises ArithmeticOverflowError.
"""

from __future__ import annotations

import logging
from typing import Optional

from langbasics.model import (
    ContinueOuter,
    FactorialRun,
    FactorialStep,
    InnerLoopState,
    InnerOutcome,
    OuterLoopState,
    Transcript,
    Yielded,
)
from langbasics.numeric import U32

logger = logging.getLogger("langbasics")

PROGRAM_NAME = "control_flow"

DEFAULT_START_COUNT = 4
DEFAULT_INNER_BOUND = 10


def inner_factorial(count: U32, inner_bound: U32) -> InnerOutcome:
    """
    Run the inner loop once.

    Args:
        count: Current value of the outer counter
        inner_bound: Starting value of num

    Returns:
        Yielded(factorial) when num reaches 1,
        ContinueOuter() if the outer counter is zero before that.
    """
    num = inner_bound
    factorial = U32(1)
    state = InnerLoopState.MULTIPLYING

    while state is InnerLoopState.MULTIPLYING:
        if num.value == 1:
            state = InnerLoopState.YIELDING
            continue
        if count.value == 0:
            return ContinueOuter()
        factorial = factorial * num
        num = num - 1

    return Yielded(factorial)


def accumulate_factorials(
    start_count: int = DEFAULT_START_COUNT,
    inner_bound: int = DEFAULT_INNER_BOUND,
) -> FactorialRun:
    """Drive the outer loop and collect every step without printing."""
    count = U32(start_count)
    bound = U32(inner_bound)
    run = FactorialRun()
    state = OuterLoopState.COUNTING

    while state is OuterLoopState.COUNTING:
        if count.value == 0:
            state = OuterLoopState.DONE
            continue

        outcome = inner_factorial(count, bound)
        if isinstance(outcome, ContinueOuter):
            logger.debug("inner loop restarted outer loop at count=%s", count)
            continue

        run.result = run.result + outcome.value
        run.steps.append(FactorialStep(count=count, factorial=outcome.value))
        logger.debug("count=%s yielded %s, result=%s", count, outcome.value, run.result)
        count = count - 1

    return run


def main(
    transcript: Optional[Transcript] = None,
    start_count: int = DEFAULT_START_COUNT,
    inner_bound: int = DEFAULT_INNER_BOUND,
) -> Transcript:
    if transcript is None:
        transcript = Transcript(program=PROGRAM_NAME)

    run = accumulate_factorials(start_count=start_count, inner_bound=inner_bound)
    for step in run.steps:
        transcript.println(f"count = {step.count}, factorial : {step.factorial}")
    transcript.println(f"Result = {run.result}")

    return transcript


if __name__ == "__main__":
    main()
