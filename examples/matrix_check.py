#!/usr/bin/env python3
"""Sanity-check the matrix engine's inverse and transpose laws.

Checks that the identity is its own inverse, that a matrix times its
inverse is the identity, and that inverting and transposing commute.

Usage:
    python examples/matrix_check.py
"""

from __future__ import annotations

import sys

from raykernel import Matrix

# Products with an inverse pick up rounding error, so compare loosely
ACCEPTABLE_DELTA = 1e-4


def check(m: Matrix) -> list[str]:
    """Return a description of every law m fails."""
    failures = []
    identity = Matrix.identity(m.order)
    if Matrix.identity(m.order).inverse() != identity:
        failures.append("identity is not its own inverse")
    if not (m @ m.inverse()).allclose(identity, epsilon=ACCEPTABLE_DELTA):
        failures.append(f"m * inverse(m) != identity: {m @ m.inverse()!r}")
    if m.transpose().inverse() != m.inverse().transpose():
        failures.append("inverse(transpose(m)) != transpose(inverse(m))")
    return failures


def main() -> int:
    """Main entry point."""
    m = Matrix([8, -5, 9, 2, 7, 5, 6, 1, -6, 0, 9, 6, -3, 0, -9, -4])
    failures = check(m)
    for failure in failures:
        print(f"FAILED: {failure}", file=sys.stderr)
    if failures:
        return 1
    print("All passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
