"""
Core Model Objects

Defines the data structures shared by the demo programs:
    - Transcript (the console lines a program wrote)
    - Loop states for the factorial accumulator
    - Inner loop outcomes (yield a value / restart the outer loop)
    - Factorial run records

ARCHITECTURAL RULE:
    These objects:
        - Hold results, not behavior
        - Are serializable (see langbasics.serialization)
        - Know nothing about the CLI
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .numeric import U32


@dataclass
class Transcript:
    """
    Ordered console output of one program run.

    Properties:
        program:
            Registry name of the program (e.g. "control_flow")

        lines:
            Lines in the order they were printed, without newlines

        echo:
            Whether println() also writes to standard output.
            Runtime switch only: excluded from equality and serialization.

    Example:
        transcript = Transcript(program="variables")
        transcript.println("Your Global varialbe hours in a day is 24")
    """

    program: str
    lines: List[str] = field(default_factory=list)
    echo: bool = field(default=True, compare=False)

    def println(self, text: str) -> None:
        self.lines.append(text)
        if self.echo:
            print(text)

    def text(self) -> str:
        """Full output as it appears on the console."""
        return "".join(f"{line}\n" for line in self.lines)


class OuterLoopState(Enum):
    """States of the labeled outer (counting) loop."""

    COUNTING = "counting"
    DONE = "done"


class InnerLoopState(Enum):
    """States of the inner (multiplying) loop."""

    MULTIPLYING = "multiplying"
    YIELDING = "yielding"


class InnerOutcome:
    """
    Base class for the result of one inner loop run.

    The inner loop can leave in two ways:
        Yielded        break out, handing the accumulator to the outer loop
        ContinueOuter  labeled continue, restart the outer loop

    This is structure only.
    """


@dataclass(frozen=True)
class Yielded(InnerOutcome):
    value: U32


@dataclass(frozen=True)
class ContinueOuter(InnerOutcome):
    pass


@dataclass(frozen=True)
class FactorialStep:
    """One completed outer iteration: the count and the factorial it produced."""

    count: U32
    factorial: U32


@dataclass
class FactorialRun:
    """
    Record of a full accumulator run.

    INVARIANT:
        result == sum of step factorials (checked U32 arithmetic)
    """

    steps: List[FactorialStep] = field(default_factory=list)
    result: U32 = field(default_factory=lambda: U32(0))
