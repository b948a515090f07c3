"""
Demo: Sum four factorials with nested loops.

Expected output:
    count = 4, factorial : 3628800
    count = 3, factorial : 3628800
    count = 2, factorial : 3628800
    count = 1, factorial : 3628800
    Result = 14515200
"""

from langbasics.programs import control_flow


if __name__ == "__main__":
    control_flow.main()
