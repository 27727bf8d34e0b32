# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Literal, Any, Self, overload
from enum import Enum
import logging
import threading

from .backend import ArrayNamespace
from .utils import check_pos, check_non_neg

class OptionType(Enum):
    SOLVER = 0
    MONITOR = 1

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.key = (namespace, category, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class SolverOptions(Options):
    """
    Context manager for the default settings of iterative solvers.
    """

    #: Maximum number of iterations.
    max_iterations: int
    #: Relative tolerance on the norm of the residual.
    delta: float
    #: Absolute tolerance on the norm of the residual.
    atol: float
    #: Whether positive-definiteness is checked during the iteration.
    check: bool

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            max_iterations: int = 1000,
            delta: float = 1e-10,
            atol: float = 0.0,
            check: bool = True):
        check_pos("max_iterations", max_iterations)
        check_non_neg("delta", delta)
        check_non_neg("atol", atol)
        self.max_iterations = max_iterations
        self.delta = delta
        self.atol = atol
        self.check = check
        super().__init__(namespace, OptionType.SOLVER)

class MonitorOptions(Options):
    """
    Context manager for the default settings of logging listeners.
    """

    #: Only every n-th iteration is reported.
    every: int
    #: Level of the progress messages.
    level: int

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            every: int = 1,
            level: int = logging.INFO):
        check_pos("every", every)
        self.every = every
        self.level = level
        super().__init__(namespace, OptionType.MONITOR)

_opts: dict[Any, Options] = {}

@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.SOLVER]) -> SolverOptions: ...
@overload
def get_options(namespace: ArrayNamespace, otype: Literal[OptionType.MONITOR]) -> MonitorOptions: ...
# implementation
def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    global _opts
    key = (namespace, otype, threading.get_ident())
    if key in _opts:
        return _opts[key]
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: SolverOptions | MonitorOptions) -> None:
    global _opts
    _opts[opts.key] = opts
