from .version import __version__

from .minimization.minimizer import Minimizer
from .minimization.local_min_rc import LocalMinRC, InvalidIntervalError
from .minimization.iteration_controllers import (
    IterationController, IterationLimitController)
from .minimization.local_min import local_min

from .logger import logger
