""" Failures raised by the matrix primitives and the QR pipeline. """

from scipy.linalg import LinAlgError


class NotSquare(ValueError):
    """ A square-only operation got a rectangular matrix. """


class DimensionMismatch(ValueError):
    """ Operand shapes are incompatible (product, embedding, ragged rows). """


class SingularMatrix(LinAlgError):
    """
    The inverse of a singular or numerically near-singular matrix was
    requested. Expected for the larger Hilbert matrices.
    """


class DegenerateReflection(ArithmeticError):
    """
    The Householder vector `u` has zero norm, so no reflection can be built.
    Callers substitute the identity.
    """
