# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of itersolve."""

from .linearoperator import LinearOperator
from .matrixoperator import MatrixOperator
from .functionoperator import FunctionOperator
from .preconditioner import Preconditioner, InversePreconditioner
from .jacobipreconditioner import JacobiPreconditioner

from .iterationevent import IterationEvent, IterativeLinearSolverEvent
from .iterationlistener import IterationListener
from .logginglistener import LoggingListener
from .convergencehistory import ConvergenceHistory
from .iterationmanager import IterationManager

from .iterativelinearsolver import IterativeLinearSolver, PreconditionedIterativeLinearSolver
from .conjugategradient import ConjugateGradient

from .options import Options, SolverOptions, MonitorOptions, OptionType

from .itersolve import IterSolve
