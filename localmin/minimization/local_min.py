# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

from scipy.optimize import OptimizeResult

from ..logger import logger
from .iteration_controllers import IterationLimitController
from .local_min_rc import LocalMinRC

_messages = {
    0: "Solution found.",
    1: "Maximum number of function evaluations exceeded.",
    2: "Objective function returned a non-finite value."}


def local_min(func, lower_bound, upper_bound, controller=None):
    """Minimizes `func` on an interval by driving a :class:`LocalMinRC`.

    Convenience wrapper for callers that can evaluate the objective
    synchronously. Callers who need to own the evaluation (asynchronous or
    batched back ends, side effects, ...) should use :class:`LocalMinRC`
    directly.

    Parameters
    ----------
    func : callable
        Scalar function of a scalar variable, ``func(float) -> float``.
    lower_bound, upper_bound : float
        The search interval; `lower_bound < upper_bound` is required.
    controller : IterationController, optional
        Adds external stopping criteria. Default:
        ``IterationLimitController(iteration_limit=500)``.

    Returns
    -------
    OptimizeResult
        With fields `x`, `fun`, `nfev`, `nit`, `success`, `status`,
        `message` and `bounds`, the final bracket. `success` is only set if
        the minimizer itself converged; if the controller stopped the
        iteration, `x` and `fun` describe the best point evaluated so far.

    Raises
    ------
    InvalidIntervalError
        If `lower_bound >= upper_bound`.
    """
    minimizer = LocalMinRC(lower_bound, upper_bound)
    if controller is None:
        controller = IterationLimitController(iteration_limit=500)

    nfev, nit = 0, 0
    value = None
    xbest, fbest = None, None
    status = controller.start(minimizer)
    arg = minimizer.step(0.)
    while status == controller.CONTINUE:
        value = func(arg)
        nfev += 1
        if fbest is None or value <= fbest:
            xbest, fbest = arg, value
        status = controller.check(minimizer, arg, value)
        if status != controller.CONTINUE:
            break
        arg = minimizer.step(value)
        nit += 1
        if minimizer.is_ready():
            break

    if minimizer.is_ready():
        flag, x, fun = 0, arg, value
    else:
        flag = 2 if status == controller.ERROR else 1
        x, fun = (arg, None) if xbest is None else (xbest, fbest)

    logger.debug("local_min: {} x={} after {} evaluations".format(
        _messages[flag], x, nfev))
    return OptimizeResult(x=x, fun=fun, nfev=nfev, nit=nit,
                          success=flag == 0, status=flag,
                          message=_messages[flag],
                          bounds=(minimizer.lower_bound,
                                  minimizer.upper_bound))
