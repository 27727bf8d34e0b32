# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import sqrt

from .backend import ArrayLike, namespace_of_arrays, size
from .exceptions import DimensionMismatchError, NonVectorError

def check_pos(msg: str, value: int | float):
    if value <= 0:
        raise ValueError(f"{msg} must be above zero, got {value}")

def check_non_neg(msg: str, value: int | float):
    if value < 0:
        raise ValueError(f"{msg} must be a positive, got {value}")

def check_dimension(vec: ArrayLike, expected: int) -> None:
    if vec.ndim != 1:
        raise NonVectorError(vec.ndim)
    if size(vec) != expected:
        raise DimensionMismatchError(size(vec), expected)

def dot[T: ArrayLike](a: T, b: T) -> float:
    xp = namespace_of_arrays(a, b)
    return float(xp.sum(a*b))

def norm(a: ArrayLike) -> float:
    return sqrt(dot(a, a))
