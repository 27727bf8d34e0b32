# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Errors raised by the iterative solvers. Every solver error carries an :class:`ErrorKind`, so
callers can tell mistakes in the call construction apart from failures of the iteration itself
without matching on the exception hierarchy.
"""

from typing import Any
from enum import Enum

class ErrorKind(Enum):
    #: Operator or vector dimensions do not fit together.
    SHAPE = 0
    #: The operator or preconditioner violates a numerical requirement (e.g. positive-definiteness).
    NUMERICAL_PRECONDITION = 1
    #: The iteration limit was reached before convergence.
    RESOURCE_EXHAUSTED = 2

class SolverError(Exception):
    """Base class of all solver errors."""

    #: Category of the failure.
    kind: ErrorKind
    #: Whether repeating the call with relaxed settings can succeed.
    retryable: bool = False

class ShapeError(SolverError, ValueError):
    kind = ErrorKind.SHAPE

class DimensionMismatchError(ShapeError):

    #: Dimension that was provided.
    wrong: int
    #: Dimension that was expected.
    expected: int

    def __init__(self, wrong: int, expected: int) -> None:
        self.wrong = wrong
        self.expected = expected
        super().__init__(f"Dimension mismatch: got {wrong}, expected {expected}")

class NonVectorError(ShapeError):

    #: Number of dimensions of the offending array.
    ndim: int

    def __init__(self, ndim: int) -> None:
        self.ndim = ndim
        super().__init__(f"Expected a vector, got an array with {ndim} dimensions")

class NonSquareOperatorError(ShapeError):

    rows: int
    columns: int

    def __init__(self, rows: int, columns: int) -> None:
        self.rows = rows
        self.columns = columns
        super().__init__(f"Operator is not square ({rows}x{columns})")

class NonPositiveDefiniteOperatorError(SolverError, ArithmeticError):
    kind = ErrorKind.NUMERICAL_PRECONDITION

    #: Operator that failed the check, either the system operator or the preconditioner.
    operator: Any
    #: Vector for which the quadratic form was not positive.
    vector: Any

    def __init__(self, operator: Any = None, vector: Any = None) -> None:
        self.operator = operator
        self.vector = vector
        super().__init__("Operator is not positive definite")

class MaxCountExceededError(SolverError, RuntimeError):
    kind = ErrorKind.RESOURCE_EXHAUSTED
    retryable = True

    #: The exceeded iteration limit.
    max_count: int

    def __init__(self, max_count: int) -> None:
        self.max_count = max_count
        super().__init__(f"Maximal count ({max_count}) exceeded")
