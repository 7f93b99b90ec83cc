"""Epsilon-tolerant float comparison.

Chained transforms accumulate rounding error, so exact equality is almost
never what a caller wants. Every tolerant comparison in the package goes
through float_eq and the EPSILON constant defined here.
"""

# Absolute tolerance for all float comparisons in the kernel.
EPSILON = 1e-5


def float_eq(a: float, b: float, *, epsilon: float = EPSILON) -> bool:
    """Return True if a and b differ by less than epsilon.

    Args:
        a: First value.
        b: Second value.
        epsilon: Absolute tolerance (default EPSILON).

    Returns:
        Whether |a - b| < epsilon.
    """
    return abs(a - b) < epsilon
