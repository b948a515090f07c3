"""
Demo: Float precision and explicit numeric coercion.
"""

from langbasics.programs import data_types


if __name__ == "__main__":
    data_types.main()
