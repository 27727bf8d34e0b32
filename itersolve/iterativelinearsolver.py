# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
from abc import ABC, abstractmethod

from .backend import ArrayLike, device, namespace_of_arrays
from .exceptions import DimensionMismatchError
from .iterationmanager import IterationManager
from .linearoperator import LinearOperator, check_square
from .preconditioner import Preconditioner
from .utils import check_dimension

class IterativeLinearSolver(ABC):
    """
    Base class for iterative solvers of linear systems A x = b. The solvers offer three entry
    points which differ in the ownership of the returned vector:

    * ``solve`` starts from zero and returns a new vector,
    * ``solve_with_guess`` starts from a copy of the initial guess, which stays untouched,
    * ``solve_in_place`` updates the initial guess and returns it.
    """

    _manager: IterationManager

    @property
    def iteration_manager(self) -> IterationManager:
        """Manager counting the iterations and dispatching events to the listeners."""
        return self._manager

    def __init__(self, max_iterations: int | IterationManager) -> None:
        if isinstance(max_iterations, IterationManager):
            self._manager = max_iterations
        else:
            self._manager = IterationManager(max_iterations)

    @staticmethod
    def check_parameters[T: ArrayLike](a: LinearOperator[T], b: T, x0: T) -> None:
        """Raise if the operator is not square or if the vectors do not match its dimension."""
        check_square(a)
        check_dimension(b, a.row_dimension)
        check_dimension(x0, a.column_dimension)

    def solve[T: ArrayLike](self, a: LinearOperator[T], b: T) -> T:
        """Solve the system starting from zero and return the solution as new vector."""
        return self.solve_in_place(a, b, _zeros(a, b))

    def solve_with_guess[T: ArrayLike](self, a: LinearOperator[T], b: T, x0: T) -> T:
        """Solve the system starting from x0 and return the solution as new vector."""
        return self.solve_in_place(a, b, _copy(x0, b))

    @abstractmethod
    def solve_in_place[T: ArrayLike](self, a: LinearOperator[T], b: T, x0: T) -> T:
        """Solve the system starting from x0, which is updated and returned."""
        ...

class PreconditionedIterativeLinearSolver(IterativeLinearSolver):
    """
    Base class for iterative solvers accepting a preconditioner M for A.
    """

    @staticmethod
    def check_parameters[T: ArrayLike](
            a: LinearOperator[T],
            b: T,
            x0: T,
            m: Optional[Preconditioner[T]] = None) -> None:
        IterativeLinearSolver.check_parameters(a, b, x0)
        if m is not None:
            check_square(m)
            if m.row_dimension != a.row_dimension:
                raise DimensionMismatchError(m.row_dimension, a.row_dimension)

    def solve[T: ArrayLike](
            self,
            a: LinearOperator[T],
            b: T, *,
            m: Optional[Preconditioner[T]] = None) -> T:
        return self.solve_in_place(a, b, _zeros(a, b), m=m)

    def solve_with_guess[T: ArrayLike](
            self,
            a: LinearOperator[T],
            b: T,
            x0: T, *,
            m: Optional[Preconditioner[T]] = None) -> T:
        return self.solve_in_place(a, b, _copy(x0, b), m=m)

    @abstractmethod
    def solve_in_place[T: ArrayLike](
            self,
            a: LinearOperator[T],
            b: T,
            x0: T, *,
            m: Optional[Preconditioner[T]] = None) -> T:
        ...

# iterates are updated in place, so integer vectors are promoted to floating point
def _zeros[T: ArrayLike](a: LinearOperator[T], b: T) -> T:
    xp = namespace_of_arrays(b)
    dtype = xp.result_type(b, xp.float64)
    return xp.zeros(a.column_dimension, dtype=dtype, device=device(b))

def _copy[T: ArrayLike](x0: T, b: T) -> T:
    xp = namespace_of_arrays(x0, b)
    dtype = xp.result_type(x0, b, xp.float64)
    return xp.asarray(x0, dtype=dtype, copy=True)
