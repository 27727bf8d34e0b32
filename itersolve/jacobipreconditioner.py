# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
from copy import deepcopy

from .backend import ArrayLike, ArrayNamespace, namespace_of_arrays, size
from .linearoperator import LinearOperator, check_square
from .utils import check_dimension

class JacobiPreconditioner[T: ArrayLike]:
    """
    Diagonal (Jacobi) preconditioner. It keeps the main diagonal D of an operator, applying it
    multiplies with D and solving divides by D.
    """

    #: Diagonal entries, all of them must be non-zero.
    diag: T

    @property
    def row_dimension(self) -> int:
        return size(self.diag)

    @property
    def column_dimension(self) -> int:
        return size(self.diag)

    def __init__(self, diag: T, copy: bool = True) -> None:
        if diag.ndim != 1:
            raise ValueError("Diagonal must be a vector")
        self.diag = deepcopy(diag) if copy else diag

    @classmethod
    def create(
            cls,
            a: LinearOperator[T],
            xp: Optional[ArrayNamespace[T]] = None) -> "JacobiPreconditioner[T]":
        """
        Jacobi preconditioner of a square operator. The diagonal is taken from the operator if it
        exposes one (the preconditioner keeps a copy of it), otherwise the operator is applied to
        the unit vectors, for which the array namespace must be provided.
        """
        check_square(a)
        diagonal = getattr(a, "diagonal", None)
        if callable(diagonal):
            return cls(diagonal())
        if xp is None:
            raise ValueError("Array namespace must be provided for operators without diagonal.")

        n = a.column_dimension
        diag = xp.zeros(n, dtype=xp.float64)
        unit = xp.zeros(n, dtype=xp.float64)
        for i in range(n):
            unit[i] = 1.0
            diag[i] = a.apply(unit)[i]
            unit[i] = 0.0
        return cls(diag, copy=False)

    def apply(self, x: T, /) -> T:
        check_dimension(x, size(self.diag))
        return self.diag * x

    def solve(self, r: T, /) -> T:
        check_dimension(r, size(self.diag))
        return r / self.diag

    def sqrt_root(self) -> "JacobiPreconditioner[T]":
        """Square root of the preconditioner, e.g. for symmetric (split) preconditioning."""
        xp = namespace_of_arrays(self.diag)
        return JacobiPreconditioner(xp.sqrt(self.diag), copy=False)
