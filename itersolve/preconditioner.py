# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional, Protocol

from .backend import ArrayLike
from .linearoperator import LinearOperator

class Preconditioner[T: ArrayLike](LinearOperator[T], Protocol):
    """
    Protocol for a preconditioner M of a square operator A. Besides being an operator itself,
    it approximately solves M z = r, which is cheap compared to solving with A.
    """

    def solve(self, r: T, /) -> T:
        """Approximate solution z of M z = r as a new vector of the same length as r."""
        ...

class InversePreconditioner[T: ArrayLike]:
    """
    Preconditioner given by an operator that directly approximates the inverse of A. Applying
    that operator solves the preconditioning system. The forward operator is optional and only
    needed when the preconditioner itself is applied.
    """

    #: Operator approximating the inverse.
    inverse: LinearOperator[T]
    #: Operator approximating A.
    operator: Optional[LinearOperator[T]]

    @property
    def row_dimension(self) -> int:
        return self.inverse.column_dimension

    @property
    def column_dimension(self) -> int:
        return self.inverse.row_dimension

    def __init__(
            self,
            inverse: LinearOperator[T],
            operator: Optional[LinearOperator[T]] = None) -> None:
        self.inverse = inverse
        self.operator = operator

    def apply(self, x: T, /) -> T:
        if self.operator is None:
            raise NotImplementedError("Preconditioner was created without a forward operator.")
        return self.operator.apply(x)

    def solve(self, r: T, /) -> T:
        return self.inverse.apply(r)
