# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional, Sequence, Type, overload
import logging
import h5py

from .backend import ArrayNamespace, get_namespace
from .linearoperator import LinearOperator
from .matrixoperator import MatrixOperator
from .functionoperator import FunctionOperator
from .preconditioner import InversePreconditioner
from .jacobipreconditioner import JacobiPreconditioner
from .iterationmanager import IterationManager
from .conjugategradient import ConjugateGradient
from .logginglistener import LoggingListener
from .convergencehistory import ConvergenceHistory
from .options import SolverOptions, MonitorOptions, OptionType, set_options, get_options

from .io import write as _write
from .io import read as _read

class IterSolve[NDArray: Any]:
    """
    Entry point of the package, bound to an array namespace. It creates vectors, operators,
    preconditioners and solvers for that namespace. Solver and monitoring defaults are taken
    from the options active on the current thread.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        self.namespace = get_namespace(namespace)

        set_options(self.solver_options())
        set_options(self.monitor_options())

    #-------------------------------------------------------------------------------------------------
    # vectors and operators

    def vector(self, values: Sequence[float] | NDArray) -> NDArray:
        """
        Vector of double precision values.
        """
        return self.namespace.asarray(values, dtype=self.namespace.float64)

    def zeros(self, n: int) -> NDArray:
        """
        Vector of n zeros.
        """
        return self.namespace.zeros(n, dtype=self.namespace.float64)

    def matrix_operator(self, data: Sequence[Sequence[float]] | NDArray) -> MatrixOperator[NDArray]:
        """
        Linear operator of a dense matrix.
        """
        return MatrixOperator(self.namespace.asarray(data, dtype=self.namespace.float64))

    def function_operator(
            self,
            func: Callable[[NDArray], NDArray],
            rows: int,
            columns: int,
            transpose: Optional[Callable[[NDArray], NDArray]] = None,
            ) -> FunctionOperator[NDArray]:
        """
        Matrix-free linear operator computing the product with func.
        """
        return FunctionOperator(func, rows, columns, transpose)

    #-------------------------------------------------------------------------------------------------
    # preconditioners

    def jacobi_preconditioner(self, a: LinearOperator[NDArray]) -> JacobiPreconditioner[NDArray]:
        """
        Diagonal preconditioner built from the diagonal of a square operator.
        """
        return JacobiPreconditioner.create(a, self.namespace)

    def inverse_preconditioner(
            self,
            inverse: LinearOperator[NDArray],
            operator: Optional[LinearOperator[NDArray]] = None,
            ) -> InversePreconditioner[NDArray]:
        """
        Preconditioner given by an approximation of the inverse operator.
        """
        return InversePreconditioner(inverse, operator)

    #-------------------------------------------------------------------------------------------------
    # solvers

    def iteration_manager(
            self,
            max_iterations: Optional[int] = None,
            callback: Optional[Callable[[int], None]] = None,
            ) -> IterationManager:
        """
        Iteration manager, to be shared by solvers or to register listeners up front.
        """
        if max_iterations is None:
            max_iterations = self._solver_defaults().max_iterations
        return IterationManager(max_iterations, callback)

    def conjugate_gradient(
            self, *,
            max_iterations: Optional[int | IterationManager] = None,
            delta: Optional[float] = None,
            check: Optional[bool] = None,
            atol: Optional[float] = None,
            ) -> ConjugateGradient:
        """
        Preconditioned conjugate gradient solver. Unset arguments are taken from the current
        solver options.
        """
        opts = self._solver_defaults()
        return ConjugateGradient(
                opts.max_iterations if max_iterations is None else max_iterations,
                opts.delta if delta is None else delta,
                opts.check if check is None else check,
                atol=opts.atol if atol is None else atol)

    #-------------------------------------------------------------------------------------------------
    # listeners

    def logging_listener(
            self, *,
            logger: Optional[logging.Logger] = None,
            every: Optional[int] = None,
            level: Optional[int] = None,
            ) -> LoggingListener:
        """
        Listener reporting the solver progress through the logging module.
        """
        opts = self._monitor_defaults()
        return LoggingListener(
                logger,
                opts.every if every is None else every,
                opts.level if level is None else level)

    def convergence_history(self) -> ConvergenceHistory:
        """
        Listener recording the norms of the residual.
        """
        return ConvergenceHistory()

    #-------------------------------------------------------------------------------------------------
    # io

    @overload
    def write(self, group: h5py.Group, obj: MatrixOperator[NDArray]) -> None: ...
    @overload
    def write(self, group: h5py.Group, obj: JacobiPreconditioner[NDArray]) -> None: ...
    @overload
    def write(self, group: h5py.Group, obj: ConvergenceHistory) -> None: ...
    def write(self, group: h5py.Group, obj: Any) -> None:
        """
        Write an operator, preconditioner or convergence history to a h5py group.
        """
        _write(group, obj)

    @overload
    def read(self, group: h5py.Group, cls: Type[MatrixOperator[NDArray]]) -> MatrixOperator[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[JacobiPreconditioner[NDArray]]) -> JacobiPreconditioner[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[ConvergenceHistory]) -> ConvergenceHistory: ...
    def read(self, group: h5py.Group, cls: Any) -> Any:
        """
        Read an object written by write from a h5py group.
        """
        if cls == ConvergenceHistory:
            return _read(group, cls)
        return _read(group, cls, self.namespace)

    #-------------------------------------------------------------------------------------------------
    # options

    def solver_options(
            self, *,
            max_iterations: int = 1000,
            delta: float = 1e-10,
            atol: float = 0.0,
            check: bool = True,
            ) -> SolverOptions:
        """
        Manager for the default solver settings.
        """
        return SolverOptions(namespace=self.namespace, max_iterations=max_iterations,
                             delta=delta, atol=atol, check=check)

    def monitor_options(
            self, *,
            every: int = 1,
            level: int = logging.INFO,
            ) -> MonitorOptions:
        """
        Manager for the default logging listener settings.
        """
        return MonitorOptions(namespace=self.namespace, every=every, level=level)

    def set_options(self, options: SolverOptions | MonitorOptions) -> None:
        """
        Set options globally. The options are stored per thread.
        """
        set_options(options)

    def get_options(self, otype: OptionType) -> SolverOptions | MonitorOptions:
        """
        Get the current options.
        """
        return get_options(self.namespace, otype)

    def _solver_defaults(self) -> SolverOptions:
        try:
            return get_options(self.namespace, OptionType.SOLVER)
        except KeyError:
            return self.solver_options()

    def _monitor_defaults(self) -> MonitorOptions:
        try:
            return get_options(self.namespace, OptionType.MONITOR)
        except KeyError:
            return self.monitor_options()
