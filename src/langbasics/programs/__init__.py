"""
Program registry.

Each program module exposes PROGRAM_NAME and a main(transcript=None, ...)
that returns the Transcript it wrote to. Programs share no state.
"""

from typing import Callable, Dict

from langbasics.model import Transcript

from . import control_flow, data_types, variables


class UnknownProgramError(ValueError):
    """No program is registered under the requested name."""


PROGRAMS: Dict[str, Callable[..., Transcript]] = {
    control_flow.PROGRAM_NAME: control_flow.main,
    data_types.PROGRAM_NAME: data_types.main,
    variables.PROGRAM_NAME: variables.main,
}


def get_program(name: str) -> Callable[..., Transcript]:
    try:
        return PROGRAMS[name]
    except KeyError:
        raise UnknownProgramError(
            f"Unknown program '{name}' (available: {', '.join(sorted(PROGRAMS))})"
        ) from None


def run_program(name: str, echo: bool = True, **options) -> Transcript:
    """
    Run a registered program once.

    Args:
        name: Registry name
        echo: Print lines to standard output while running
        **options: Keyword arguments forwarded to the program's main()

    Returns:
        The program's Transcript
    """
    program = get_program(name)
    return program(Transcript(program=name, echo=echo), **options)


__all__ = ["PROGRAMS", "UnknownProgramError", "get_program", "run_program"]
