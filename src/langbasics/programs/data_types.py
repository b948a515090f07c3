"""
Numeric type and coercion demo.

Stores two long decimal literals at single and double precision and prints
them, showing the digits single precision loses. Then performs integer and
float arithmetic where every int-to-float conversion is an explicit
as_f64() call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from langbasics.model import Transcript
from langbasics.numeric import I32, as_f64, f32, f64, format_value

logger = logging.getLogger("langbasics")

PROGRAM_NAME = "data_types"

F32_LITERAL = 21.321654651651651
F64_LITERAL = 21.21354651654165165416


@dataclass(frozen=True)
class NumericResults:
    sum: I32
    difference: np.float64
    multiply: np.float64
    divide: np.float64


def floating_type(transcript: Transcript) -> Tuple[np.float32, np.float64]:
    my_f32 = f32(F32_LITERAL)
    my_f64 = f64(F64_LITERAL)
    logger.debug("narrowed %r to f32 %s", F32_LITERAL, format_value(my_f32))

    transcript.println(f"My F32 : {format_value(my_f32)}")
    transcript.println(f"My F64 : {format_value(my_f64)}")
    return my_f32, my_f64


def numeric_operation(transcript: Transcript) -> NumericResults:
    results = NumericResults(
        sum=I32(5) + 5,
        difference=f64(5.5) - f64(6.23),
        multiply=f64(5.5) * as_f64(20),
        divide=as_f64(5) / f64(5.5),
    )

    transcript.println(
        f"Sum : {format_value(results.sum)}, "
        f"Difference : {format_value(results.difference)}, "
        f"Multiple : {format_value(results.multiply)}, "
        f"Divide : {format_value(results.divide)}"
    )
    return results


def main(transcript: Optional[Transcript] = None) -> Transcript:
    if transcript is None:
        transcript = Transcript(program=PROGRAM_NAME)

    floating_type(transcript)
    numeric_operation(transcript)

    return transcript


if __name__ == "__main__":
    main()
