# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol
from .backend import ArrayLike
from .exceptions import NonSquareOperatorError

class LinearOperator[T: ArrayLike](Protocol):
    """
    Protocol for a linear operator, i.e. anything that can be applied to a vector.
    No storage is implied, matrix-free operators satisfy it as well.
    """

    @property
    def row_dimension(self) -> int:
        """Length of the vectors returned by apply."""
        ...

    @property
    def column_dimension(self) -> int:
        """Length of the vectors accepted by apply."""
        ...

    def apply(self, x: T, /) -> T:
        """
        Apply the operator to a vector of length column_dimension and return a new vector of length
        row_dimension. The operand is never modified.
        """
        ...

def check_square(op: LinearOperator) -> None:
    if op.row_dimension != op.column_dimension:
        raise NonSquareOperatorError(op.row_dimension, op.column_dimension)
