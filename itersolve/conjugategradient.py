# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional
from copy import deepcopy
import logging

from .backend import ArrayLike
from .exceptions import MaxCountExceededError, NonPositiveDefiniteOperatorError
from .iterationevent import IterativeLinearSolverEvent
from .iterationmanager import IterationManager
from .iterativelinearsolver import PreconditionedIterativeLinearSolver
from .linearoperator import LinearOperator
from .preconditioner import Preconditioner
from .utils import check_non_neg, dot, norm

logger = logging.getLogger(__name__)

class ConjugateGradient(PreconditionedIterativeLinearSolver):
    """
    Preconditioned conjugate gradient solver for symmetric positive definite systems A x = b.

    The iteration stops once the norm of the updated residual satisfies
    ``|r| <= max(delta * |b|, atol)``. Reaching the iteration limit of the manager raises a
    :class:`MaxCountExceededError` instead of returning an unconverged solution.

    The manager is incremented once during initialization, so the events fired during the
    k-th pass of the loop report ``k + 1`` iterations. The termination event is only fired
    when the solver converged.

    With ``check`` enabled, the solver verifies ``r.z > 0`` (M positive definite) and
    ``p.Ap > 0`` (A positive definite) in every iteration and raises a
    :class:`NonPositiveDefiniteOperatorError` otherwise. Only a necessary condition is checked,
    an indefinite operator can go unnoticed.

    The updated residual drifts away from the true residual b - A x over many iterations, due
    to the loss of orthogonality of the search directions.
    """

    #: Relative tolerance on the norm of the residual.
    delta: float
    #: Absolute tolerance on the norm of the residual.
    atol: float
    #: Whether positive-definiteness of A and M is checked.
    check: bool

    def __init__(
            self,
            max_iterations: int | IterationManager,
            delta: float,
            check: bool = False, *,
            atol: float = 0.0) -> None:
        super().__init__(max_iterations)
        self.delta = delta
        self.atol = atol
        self.check = check

    def __setattr__(self, name: str, value: Any) -> None:
        if name in ("delta", "atol"):
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def solve_in_place[T: ArrayLike](
            self,
            a: LinearOperator[T],
            b: T,
            x0: T, *,
            m: Optional[Preconditioner[T]] = None) -> T:
        self.check_parameters(a, b, x0, m)
        manager = self.iteration_manager
        manager.reset_iteration_count()
        rmax = max(self.delta * norm(b), self.atol)
        logger.debug("solving system of dimension %d (preconditioned: %s, rmax: %.3e)",
                     a.row_dimension, m is not None, rmax)

        manager.increment_iteration_count()
        x = x0
        r = b - a.apply(x)
        rnorm = norm(r)
        z = r

        evt = IterativeLinearSolverEvent(self, manager.iterations, x, b, rnorm, r)
        manager.fire_initialization_event(evt)
        if rnorm <= rmax:
            manager.fire_termination_event(evt)
            logger.debug("initial guess satisfies the stopping criterion")
            return x

        p = z
        rho_prev = 0.0
        while True:
            try:
                manager.increment_iteration_count()
            except MaxCountExceededError:
                logger.debug("no convergence after %d iterations: |r| = %.3e",
                             manager.iterations, rnorm)
                raise
            evt = IterativeLinearSolverEvent(self, manager.iterations, x, b, rnorm, r)
            manager.fire_iteration_started_event(evt)

            if m is not None:
                z = m.solve(r)
            rho_next = dot(r, z)
            if self.check and rho_next <= 0.0:
                logger.debug("preconditioner is not positive definite: r.z = %.3e", rho_next)
                raise NonPositiveDefiniteOperatorError(m, deepcopy(r))

            if manager.iterations == 2:
                p = deepcopy(z)
            else:
                p = z + (rho_next / rho_prev) * p

            q = a.apply(p)
            pq = dot(p, q)
            if self.check and pq <= 0.0:
                logger.debug("operator is not positive definite: p.Ap = %.3e", pq)
                raise NonPositiveDefiniteOperatorError(a, deepcopy(p))

            alpha = rho_next / pq
            x += alpha * p
            r -= alpha * q
            rho_prev = rho_next
            rnorm = norm(r)

            evt = IterativeLinearSolverEvent(self, manager.iterations, x, b, rnorm, r)
            manager.fire_iteration_performed_event(evt)
            if rnorm <= rmax:
                manager.fire_termination_event(evt)
                logger.debug("converged after %d iterations: |r| = %.3e",
                             manager.iterations, rnorm)
                return x
