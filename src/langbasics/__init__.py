"""
langbasics: basic language mechanics, one small program each.

Programs:
    control_flow  nested loops with a labeled continue, factorial sums
    data_types    float precision and explicit numeric coercion
    variables     immutable/mutable bindings, constants, shadowing

Every program is independent. Each one prints its lines and exits.
Fixed-width integer arithmetic is checked; see langbasics.numeric.
"""

__version__ = "0.1.0"
