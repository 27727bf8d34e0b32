# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional
import logging

from .iterationevent import IterationEvent, IterativeLinearSolverEvent
from .iterationlistener import IterationListener
from .utils import check_pos

class LoggingListener(IterationListener):
    """
    Reports the progress of an iterative solver through the logging module.
    """

    #: Logger receiving the messages.
    logger: logging.Logger
    #: Only every n-th iteration is reported.
    every: int
    #: Level of the progress messages.
    level: int

    def __init__(
            self,
            logger: Optional[logging.Logger] = None,
            every: int = 1,
            level: int = logging.INFO) -> None:
        check_pos("every", every)
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.every = every
        self.level = level

    def initialization_performed(self, event: IterationEvent) -> None:
        self.logger.log(self.level, "initialized: |r| = %.6e", _rnorm(event))

    def iteration_performed(self, event: IterationEvent) -> None:
        if event.iterations % self.every == 0:
            self.logger.log(self.level, "iteration %d: |r| = %.6e", event.iterations, _rnorm(event))

    def termination_performed(self, event: IterationEvent) -> None:
        self.logger.log(self.level, "converged after %d iterations: |r| = %.6e",
                        event.iterations, _rnorm(event))

def _rnorm(event: IterationEvent) -> float:
    if isinstance(event, IterativeLinearSolverEvent):
        return event.norm_of_residual
    return float("nan")
