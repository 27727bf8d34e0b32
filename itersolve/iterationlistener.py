# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol

from .iterationevent import IterationEvent

class IterationListener(Protocol):
    """
    Protocol for observers of an iterative algorithm. All callbacks are invoked synchronously
    on the thread running the algorithm. Raising from a callback aborts the algorithm.
    Subclasses only need to override the callbacks they are interested in.
    """

    def initialization_performed(self, event: IterationEvent) -> None:
        """Called once, after the algorithm has been initialized."""
        pass

    def iteration_started(self, event: IterationEvent) -> None:
        """Called at the start of every iteration."""
        pass

    def iteration_performed(self, event: IterationEvent) -> None:
        """Called at the end of every iteration."""
        pass

    def termination_performed(self, event: IterationEvent) -> None:
        """Called once, after the algorithm has converged."""
        pass
