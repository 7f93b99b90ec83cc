"""Exception hierarchy for the ray tracing kernel.

Every error raised by the kernel derives from RayKernelError. The subclasses
also inherit from the closest built-in exception so that callers can catch
them the usual Python way (an out-of-range canvas write is an IndexError,
a point passed where a vector is required is a TypeError, and so on).

Hierarchy:
    RayKernelError
        ContractViolation: programmer error, never silently recovered
            OutOfRange: index outside a canvas or matrix
            WrongKind: a point where a vector is required (or vice versa)
        SingularMatrix: inverse requested for a near-singular matrix
        NumericDegenerate: normalizing a zero-length vector
"""


class RayKernelError(Exception):
    """Base class for all kernel errors."""


class ContractViolation(RayKernelError):
    """A caller broke an operation's precondition.

    These are programming errors. The computation in progress must abort.
    """


class OutOfRange(ContractViolation, IndexError):
    """A coordinate or index lies outside the addressed grid."""


class WrongKind(ContractViolation, TypeError):
    """A tuple of the wrong kind was passed to a kind-specific operation."""


class SingularMatrix(RayKernelError, ValueError):
    """The matrix determinant is too close to zero to invert.

    Attributes:
        determinant: The determinant that failed the tolerance check.
    """

    def __init__(self, determinant: float, message: str | None = None) -> None:
        self.determinant = determinant
        if message is None:
            message = f"Matrix is not invertible (determinant = {determinant!r})"
        super().__init__(message)


class NumericDegenerate(RayKernelError, ZeroDivisionError):
    """A computation would divide by zero or produce a non-finite result."""
