"""
Variable semantics demo: immutable and mutable bindings, local constants,
shadowing and a module-level constant.

Immutability is declared with typing.Final. A type checker rejects any
reassignment of a Final name; there is no runtime check.

Shadowing cannot re-declare a name in the same Python scope, so each
shadow gets its own name: x, x_shadowed, x_inner.

NOTE:
    The message strings, including "immutalbe", "mutalbe", "varialbe" and
    the double spaces, are expected output. Do not correct them.
"""

from __future__ import annotations

from typing import Final, Optional, Tuple

from langbasics.model import Transcript
from langbasics.numeric import I32

PROGRAM_NAME = "variables"

HOURS_IN_DAY: Final = I32(24)


def immutable_example(transcript: Transcript) -> None:
    age: Final = I32(25)
    transcript.println(f"Your immutalbe age is  {age}")


def mutable_example(transcript: Transcript) -> None:
    age = I32(25)
    transcript.println(f"Your mutalbe age is  {age}")
    age = I32(26)
    transcript.println(f"Your mutalbe new age is  {age}")


def const_example(transcript: Transcript) -> None:
    AGE: Final = I32(25)
    transcript.println(f"You const varialbe age is {AGE}")


def shadowing_example(transcript: Transcript) -> Tuple[I32, I32]:
    """
    Returns:
        (value seen inside the nested block, value seen after it)
    """
    x = I32(5)
    x_shadowed = x + 1

    # nested block
    x_inner = x_shadowed * 2
    transcript.println(f"The value of x in the inner scope is: {x_inner}")

    transcript.println(f"The value of x is: {x_shadowed}")
    return x_inner, x_shadowed


def global_constant_example(transcript: Transcript) -> None:
    transcript.println(f"Your Global varialbe hours in a day is {HOURS_IN_DAY}")


def main(
    transcript: Optional[Transcript] = None,
    include_shadowing: bool = False,
) -> Transcript:
    if transcript is None:
        transcript = Transcript(program=PROGRAM_NAME)

    immutable_example(transcript)
    mutable_example(transcript)
    const_example(transcript)
    if include_shadowing:
        shadowing_example(transcript)

    global_constant_example(transcript)

    return transcript


if __name__ == "__main__":
    main()
