# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import opt_einsum as oe

from .backend import ArrayLike, device, namespace_of_arrays, shape
from .utils import check_dimension

class MatrixOperator[T: ArrayLike]:
    """
    Linear operator backed by a dense two dimensional array.
    """

    #: The matrix entries.
    data: T

    @property
    def row_dimension(self) -> int:
        return shape(self.data)[0]

    @property
    def column_dimension(self) -> int:
        return shape(self.data)[1]

    @property
    def is_transposable(self) -> bool:
        return True

    def __init__(self, data: T) -> None:
        if data.ndim != 2:
            raise ValueError(f"Matrix data must be two dimensional, got {data.ndim} dimensions")
        self.data = data

    def apply(self, x: T, /) -> T:
        check_dimension(x, self.column_dimension)
        return oe.contract("ij,j->i", self.data, x)

    def apply_transpose(self, x: T, /) -> T:
        check_dimension(x, self.row_dimension)
        return oe.contract("ji,j->i", self.data, x)

    def diagonal(self) -> T:
        """Main diagonal of the matrix."""
        xp = namespace_of_arrays(self.data)
        n = min(self.row_dimension, self.column_dimension)
        diag = xp.zeros(n, dtype=self.data.dtype, device=device(self.data))
        for i in range(n):
            diag[i] = self.data[i,i]
        return diag
