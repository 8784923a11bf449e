# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

from ..utilities import LocalMinMeta


class Minimizer(metaclass=LocalMinMeta):
    """A base class used by all reverse-communication minimizers.

    A reverse-communication minimizer never evaluates the objective itself.
    Every call to :meth:`step` hands back a point at which the caller has to
    evaluate the objective; the value is passed to the following call.

    Notes
    -----
    A typical driver loop looks like

    >>> value = 0.
    >>> while True:
    ...     arg = minimizer.step(value)
    ...     if minimizer.is_ready():
    ...         break
    ...     value = f(arg)

    after which `arg` holds the estimate of the minimizer.
    """

    def is_ready(self):
        """Reports whether the iteration is idle.

        Returns
        -------
        bool
            True if the minimization has not been started yet or if it has
            just converged. In the latter case the point most recently
            returned by :meth:`step` is the final estimate.
        """
        raise NotImplementedError

    def step(self, value):
        """Advances the minimization by one evaluation.

        Parameters
        ----------
        value : float
            The objective evaluated at the point returned by the previous
            call. Ignored on the startup call.

        Returns
        -------
        float
            The next point to evaluate or, if :meth:`is_ready` reports True
            afterwards, the estimated minimizer.
        """
        raise NotImplementedError

    @property
    def lower_bound(self):
        """float : left end of the current bracket."""
        raise NotImplementedError

    @property
    def upper_bound(self):
        """float : right end of the current bracket."""
        raise NotImplementedError

    def __call__(self, value):
        """Alias for :meth:`step`."""
        return self.step(value)
