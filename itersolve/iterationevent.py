# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional

from .backend import ArrayLike, read_only

class IterationEvent:
    """
    Event fired by an iterative algorithm.
    """

    #: Object that fired the event.
    source: Any
    #: Number of iterations performed when the event was fired.
    iterations: int

    def __init__(self, source: Any, iterations: int) -> None:
        self.source = source
        self.iterations = iterations

class IterativeLinearSolverEvent[T: ArrayLike](IterationEvent):
    """
    Event fired by an iterative linear solver. The vectors are exposed read-only and are only
    valid during the callback, since the solver keeps updating them in the next iteration.
    Listeners that need the values afterwards have to copy them.
    """

    _solution: T
    _rhs: T
    _residual: Optional[T]
    _rnorm: float

    @property
    def solution(self) -> T:
        """Current estimate of the solution."""
        return read_only(self._solution)

    @property
    def right_hand_side(self) -> T:
        """Right hand side of the linear system."""
        return read_only(self._rhs)

    @property
    def provides_residual(self) -> bool:
        return self._residual is not None

    @property
    def residual(self) -> T:
        """Current residual b - A x, as updated by the solver."""
        if self._residual is None:
            raise NotImplementedError("Solver does not provide the residual vector.")
        return read_only(self._residual)

    @property
    def norm_of_residual(self) -> float:
        """Norm of the current residual."""
        return self._rnorm

    def __init__(
            self,
            source: Any,
            iterations: int,
            solution: T,
            right_hand_side: T,
            norm_of_residual: float,
            residual: Optional[T] = None) -> None:
        super().__init__(source, iterations)
        self._solution = solution
        self._rhs = right_hand_side
        self._residual = residual
        self._rnorm = norm_of_residual
