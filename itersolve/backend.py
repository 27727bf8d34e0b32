# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from copy import deepcopy
from typing import Any
import array_api_compat as api
from array_api_compat import to_device, device
from array_api_compat import size as _size

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except Exception as exc:
            raise TypeError("Provided object is not a recognized array or namespace.") from exc
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def shape(array: ArrayLike) -> tuple[int, ...]:
    shp = array.shape
    if any(s is None for s in shp):
        raise ValueError("Array shape contains None dimension(s).")
    return shp  # type: ignore

def read_only[T: ArrayLike](array: T) -> T:
    """
    Read-only access to an array that keeps being updated by a solver. Numpy arrays are
    returned as non-writeable views, other backends receive a snapshot copy.
    """
    if api.is_numpy_array(array):
        view = array.view() # type: ignore
        view.flags.writeable = False
        return view
    return deepcopy(array)
