"""
Tests for the variable semantics demo.

The misspellings and double spaces in the messages are expected output.
"""

from langbasics.model import Transcript
from langbasics.numeric import I32
from langbasics.programs import variables

EXPECTED_OUTPUT = [
    "Your immutalbe age is  25",
    "Your mutalbe age is  25",
    "Your mutalbe new age is  26",
    "You const varialbe age is 25",
    "Your Global varialbe hours in a day is 24",
]


def quiet() -> Transcript:
    return Transcript(program="variables", echo=False)


class TestExamples:
    """Test each example on its own."""

    def test_immutable(self):
        transcript = quiet()
        variables.immutable_example(transcript)
        assert transcript.lines == ["Your immutalbe age is  25"]

    def test_mutable_prints_before_and_after(self):
        transcript = quiet()
        variables.mutable_example(transcript)
        assert transcript.lines == [
            "Your mutalbe age is  25",
            "Your mutalbe new age is  26",
        ]

    def test_const(self):
        transcript = quiet()
        variables.const_example(transcript)
        assert transcript.lines == ["You const varialbe age is 25"]

    def test_global_constant(self):
        assert variables.HOURS_IN_DAY == I32(24)
        transcript = quiet()
        variables.global_constant_example(transcript)
        assert transcript.lines == ["Your Global varialbe hours in a day is 24"]

    def test_shadowing(self):
        """5 -> 6, the nested block sees 12, afterwards 6 again."""
        transcript = quiet()
        inner, outer = variables.shadowing_example(transcript)

        assert inner == I32(12)
        assert outer == I32(6)
        assert transcript.lines == [
            "The value of x in the inner scope is: 12",
            "The value of x is: 6",
        ]


class TestMain:
    """Test the full program."""

    def test_prints_expected_lines(self, capsys):
        transcript = variables.main()

        assert transcript.lines == EXPECTED_OUTPUT
        assert capsys.readouterr().out == "\n".join(EXPECTED_OUTPUT) + "\n"

    def test_include_shadowing(self):
        transcript = variables.main(quiet(), include_shadowing=True)

        assert transcript.lines == EXPECTED_OUTPUT[:4] + [
            "The value of x in the inner scope is: 12",
            "The value of x is: 6",
        ] + EXPECTED_OUTPUT[4:]

    def test_output_is_deterministic(self):
        assert variables.main(quiet()).text() == variables.main(quiet()).text()
