# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Type, overload
import h5py
import numpy as np

from .backend import ArrayNamespace, ArrayLike, to_device
from .matrixoperator import MatrixOperator
from .jacobipreconditioner import JacobiPreconditioner
from .convergencehistory import ConvergenceHistory

@overload
def write(group: h5py.Group, obj: MatrixOperator) -> None: ...
@overload
def write(group: h5py.Group, obj: JacobiPreconditioner) -> None: ...
@overload
def write(group: h5py.Group, obj: ConvergenceHistory) -> None: ...
#implementation
def write(group: h5py.Group, obj: Any) -> None:
    if isinstance(obj, MatrixOperator):
        group.attrs["type"] = "matrix"
        group.create_dataset("data", data=np.asarray(to_device(obj.data, "cpu")))
    elif isinstance(obj, JacobiPreconditioner):
        group.attrs["type"] = "jacobi"
        group.create_dataset("diag", data=np.asarray(to_device(obj.diag, "cpu")))
    elif isinstance(obj, ConvergenceHistory):
        group.attrs["type"] = "history"
        group.attrs["converged"] = obj.converged
        group.create_dataset("iterations", data=np.asarray(obj.iterations, dtype=np.int64))
        group.create_dataset("norms", data=np.asarray(obj.norms, dtype=np.float64))
    else:
        raise ValueError("Invalid object.")

@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[MatrixOperator[T]], xp: Optional[ArrayNamespace[T]]) -> MatrixOperator[T]: ...
@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[JacobiPreconditioner[T]], xp: Optional[ArrayNamespace[T]]) -> JacobiPreconditioner[T]: ...
@overload
def read(group: h5py.Group, cls: Type[ConvergenceHistory]) -> ConvergenceHistory: ...
#implementation
def read(group: h5py.Group, cls: Any, xp: Optional[ArrayNamespace] = None) -> Any:
    if cls == MatrixOperator:
        check_type(group, "matrix")
        return MatrixOperator(get_array(group, "data", xp))
    elif cls == JacobiPreconditioner:
        check_type(group, "jacobi")
        return JacobiPreconditioner(get_array(group, "diag", xp), copy=False)
    elif cls == ConvergenceHistory:
        check_type(group, "history")
        history = ConvergenceHistory()
        history.iterations = [int(val) for val in get_dataset(group, "iterations")]
        history.norms = [float(val) for val in get_dataset(group, "norms")]
        history.converged = bool(group.attrs["converged"])
        return history

    raise ValueError("Invalid class.")

def check_type(group: h5py.Group, name: str) -> None:
    if group.attrs.get("type") != name:
        raise ValueError(f"Group does not contain an object of type {name}.")

def get_dataset(group: h5py.Group, name: str) -> np.ndarray:
    dataset = group[name]
    assert isinstance(dataset, h5py.Dataset)
    return np.asarray(dataset)

def get_array(group: h5py.Group, name: str, xp: Optional[ArrayNamespace]) -> Any:
    if xp is None:
        raise ValueError("Array namespace must be provided to read arrays.")
    return xp.asarray(get_dataset(group, name))
