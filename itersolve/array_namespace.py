# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Protocol, Self, Sequence

Device = Any
DType = Any

class ArrayLike(Protocol):
    """Minimal view of an array-API array as used by the solvers."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __add__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __rmul__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __iadd__(self, other: Any, /) -> Self: ...
    def __isub__(self, other: Any, /) -> Self: ...
    def __neg__(self) -> Self: ...
    def __float__(self) -> float: ...

class ArrayNamespace[T: ArrayLike](Protocol):
    """Subset of the array-API namespace the package relies on."""

    float64: DType

    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None, copy: bool | None = None) -> T: ...
    def zeros(self, shape: int | Sequence[int], *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros_like(self, x: T, /, *, dtype: DType = None, device: Device = None) -> T: ...
    def sum(self, x: T, /, *, axis: Any = None) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def abs(self, x: T, /) -> T: ...
    def all(self, x: T, /) -> T: ...
    def result_type(self, *arrays_and_dtypes: Any) -> DType: ...
