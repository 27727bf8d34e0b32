# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .iterationevent import IterationEvent, IterativeLinearSolverEvent
from .iterationlistener import IterationListener

class ConvergenceHistory(IterationListener):
    """
    Records the norm of the residual of the most recent solve. The history is cleared when a new
    solve is initialized.
    """

    #: Iteration counts at which the norms were recorded.
    iterations: list[int]
    #: Norms of the residual.
    norms: list[float]
    #: True if the last solve reached the termination event.
    converged: bool

    def __init__(self) -> None:
        self.iterations = []
        self.norms = []
        self.converged = False

    def __len__(self) -> int:
        return len(self.norms)

    def initialization_performed(self, event: IterationEvent) -> None:
        self.iterations.clear()
        self.norms.clear()
        self.converged = False
        self._record(event)

    def iteration_performed(self, event: IterationEvent) -> None:
        self._record(event)

    def termination_performed(self, event: IterationEvent) -> None:
        self.converged = True

    def _record(self, event: IterationEvent) -> None:
        if not isinstance(event, IterativeLinearSolverEvent):
            raise TypeError("ConvergenceHistory requires events of an iterative linear solver.")
        self.iterations.append(event.iterations)
        self.norms.append(event.norm_of_residual)
