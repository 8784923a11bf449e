# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

import numpy as np

from ..logger import logger
from ..utilities import LocalMinMeta


class IterationController(metaclass=LocalMinMeta):
    """The abstract base class for all iteration controllers.

    An iteration controller is an object that monitors the progress of a
    driven minimization and can end it early, e.g. once an evaluation
    budget is used up. Controllers never decide convergence of the
    minimizer itself; they only add external stopping criteria.

    The driver calls :meth:`start` once before the first evaluation and
    :meth:`check` after every evaluation of the objective. Both return one
    of CONVERGED, CONTINUE or ERROR.
    """

    CONVERGED, CONTINUE, ERROR = list(range(3))

    def start(self, minimizer):
        """Starts the iteration.

        Parameters
        ----------
        minimizer : Minimizer
            The freshly constructed minimizer about to be driven.

        Returns
        -------
        status : integer status, can be CONVERGED, CONTINUE or ERROR
        """
        raise NotImplementedError

    def check(self, minimizer, arg, value):
        """Checks the state of the iteration after an evaluation.

        Parameters
        ----------
        minimizer : LocalMinRC
            The minimizer being driven; its current bracket is reported.
        arg : float
            The point which was just evaluated.
        value : float
            The objective value at `arg`.

        Returns
        -------
        status : integer status, can be CONVERGED, CONTINUE or ERROR
        """
        raise NotImplementedError


class IterationLimitController(IterationController):
    """An iteration controller bounding the number of evaluations.

    Parameters
    ----------
    iteration_limit : int, optional
        The maximum number of objective evaluations. Once it is reached the
        iteration is stopped with status CONVERGED, i.e. without an error;
        the minimizer itself has not converged then. Default: None, i.e.
        no limit.
    name : str, optional
        If supplied, this string and some diagnostic information will be
        printed after every evaluation.
    """

    def __init__(self, iteration_limit=None, name=None):
        if iteration_limit is not None and iteration_limit < 0:
            raise ValueError("iteration_limit must be non-negative")
        self._iteration_limit = iteration_limit
        self._name = name
        self._itcount = 0

    @property
    def iteration_count(self):
        """int : number of evaluations seen since the last :meth:`start`."""
        return self._itcount

    def start(self, minimizer):
        self._itcount = 0
        if self._iteration_limit == 0:
            logger.warning("Iteration limit reached")
            return self.CONVERGED
        return self.CONTINUE

    def check(self, minimizer, arg, value):
        self._itcount += 1

        if self._name is not None:
            msg = "{}: Iteration #{} arg={:.6E} value={:.6E}".format(
                self._name, self._itcount, arg, value)
            msg += " interval=[{:.6E}, {:.6E}]".format(
                minimizer.lower_bound, minimizer.upper_bound)
            logger.info(msg)

        if not np.isfinite(value):
            logger.warning("{}: non-finite value {} at arg={}".format(
                self._name or "LocalMin", value, arg))
            return self.ERROR

        if self._iteration_limit is not None:
            if self._itcount >= self._iteration_limit:
                logger.warning("Iteration limit reached")
                return self.CONVERGED

        return self.CONTINUE
