# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Optional

from .exceptions import MaxCountExceededError
from .iterationevent import IterationEvent
from .iterationlistener import IterationListener
from .utils import check_pos

class IterationManager:
    """
    Counts the iterations of an algorithm, enforces the iteration limit and dispatches the
    lifecycle events to the registered listeners. Listeners are called synchronously in
    registration order. Exceptions raised by a listener propagate to the caller of the
    algorithm and skip the remaining listeners.
    """

    _max_iterations: int
    _iterations: int
    _listeners: list[IterationListener]
    _callback: Optional[Callable[[int], None]]

    @property
    def max_iterations(self) -> int:
        """Maximum number of iterations."""
        return self._max_iterations

    @property
    def iterations(self) -> int:
        """Number of iterations since the last reset."""
        return self._iterations

    @property
    def listeners(self) -> tuple[IterationListener, ...]:
        return tuple(self._listeners)

    def __init__(
            self,
            max_iterations: int,
            callback: Optional[Callable[[int], None]] = None) -> None:
        """
        The optional callback is called with the iteration limit before the
        :class:`MaxCountExceededError` is raised, e.g. to raise a more specific error instead.
        """
        check_pos("max_iterations", max_iterations)
        self._max_iterations = max_iterations
        self._iterations = 0
        self._listeners = []
        self._callback = callback

    def add_listener(self, listener: IterationListener) -> None:
        """Register a listener. It only receives events fired after the registration."""
        self._listeners.append(listener)

    def remove_listener(self, listener: IterationListener) -> None:
        """Deregister a listener. Removing an unknown listener does nothing."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def reset_iteration_count(self) -> None:
        self._iterations = 0

    def increment_iteration_count(self) -> None:
        if self._iterations >= self._max_iterations:
            if self._callback is not None:
                self._callback(self._max_iterations)
            raise MaxCountExceededError(self._max_iterations)
        self._iterations += 1

    def fire_initialization_event(self, event: IterationEvent) -> None:
        for listener in self.listeners:
            listener.initialization_performed(event)

    def fire_iteration_started_event(self, event: IterationEvent) -> None:
        for listener in self.listeners:
            listener.iteration_started(event)

    def fire_iteration_performed_event(self, event: IterationEvent) -> None:
        for listener in self.listeners:
            listener.iteration_performed(event)

    def fire_termination_event(self, event: IterationEvent) -> None:
        for listener in self.listeners:
            listener.termination_performed(event)
