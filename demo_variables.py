"""
Demo: Immutable and mutable bindings, constants and a global constant.

The shadowing example is not part of this run; use
`langbasics run variables --shadowing` to include it.
"""

from langbasics.programs import variables


if __name__ == "__main__":
    variables.main()
