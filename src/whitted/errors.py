"""Exception types raised by the ray tracer.

Every error derives from WhittedError and from the closest built-in
exception, so callers can catch either the package-specific type or the
familiar standard one.
"""


class WhittedError(Exception):
    """Base class for all ray tracer errors."""


class SingularMatrixError(WhittedError, ArithmeticError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


class CanvasBoundsError(WhittedError, IndexError):
    """Raised when a canvas is accessed outside its width or height."""


class InvalidTupleOperationError(WhittedError, TypeError):
    """Raised for arithmetic that has no meaning on homogeneous tuples.

    Examples are adding two points, subtracting a point from a vector, or
    taking the magnitude of a point.
    """
