# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Optional

from .backend import ArrayLike, size
from .exceptions import DimensionMismatchError
from .utils import check_pos, check_dimension

class FunctionOperator[T: ArrayLike]:
    """
    Matrix-free linear operator defined by a function computing the matrix-vector product.
    The transposed product can be provided as well.
    """

    _func: Callable[[T], T]
    _transpose: Optional[Callable[[T], T]]
    _rows: int
    _columns: int

    @property
    def row_dimension(self) -> int:
        return self._rows

    @property
    def column_dimension(self) -> int:
        return self._columns

    @property
    def is_transposable(self) -> bool:
        return self._transpose is not None

    def __init__(
            self,
            func: Callable[[T], T],
            rows: int,
            columns: int,
            transpose: Optional[Callable[[T], T]] = None) -> None:
        check_pos("rows", rows)
        check_pos("columns", columns)
        self._func = func
        self._transpose = transpose
        self._rows = rows
        self._columns = columns

    def apply(self, x: T, /) -> T:
        check_dimension(x, self._columns)
        res = self._func(x)
        if size(res) != self._rows:
            raise DimensionMismatchError(size(res), self._rows)
        return res

    def apply_transpose(self, x: T, /) -> T:
        if self._transpose is None:
            raise NotImplementedError("Operator was created without a transposed product.")
        check_dimension(x, self._rows)
        res = self._transpose(x)
        if size(res) != self._columns:
            raise DimensionMismatchError(size(res), self._columns)
        return res
