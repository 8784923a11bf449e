# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

from math import copysign, sqrt

import numpy as np

from .minimizer import Minimizer

_machine_tol = float(np.finfo(np.float64).eps)
_sqrt_tol = sqrt(_machine_tol)


class InvalidIntervalError(ValueError):
    """Raised when a search interval does not satisfy `lower < upper`."""
    pass


class LocalMinRC(Minimizer):
    """Brent's local minimizer on an interval, using reverse communication.

    Seeks an approximation to the point where a scalar function attains a
    minimum on the open interval (`lower_bound`, `upper_bound`). The method
    combines golden section search with successive parabolic interpolation.
    Convergence is never much slower than that of a Fibonacci search. If the
    function has a continuous second derivative which is positive at the
    minimum (and the minimum is not at one of the endpoints), convergence is
    superlinear, usually of order about 1.324.

    Parameters
    ----------
    lower_bound : float
        Left endpoint of the initial interval.
    upper_bound : float
        Right endpoint of the initial interval. Must be larger than
        `lower_bound`.

    Raises
    ------
    InvalidIntervalError
        If `lower_bound >= upper_bound`.

    Notes
    -----
    A minimizer located at one of the initial endpoints cannot be detected.
    Callers worried about this should either widen the interval or compare
    the returned estimate against the endpoint values.

    The instance is logically finished once :meth:`is_ready` reports True
    after a search. Calling :meth:`step` again starts a fresh search on the
    current (already narrowed) bracket.

    References
    ----------
    Richard Brent, "Algorithms for Minimization Without Derivatives",
    Dover, 2002.

    David Kahaner, Cleve Moler, Steven Nash, "Numerical Methods and
    Software", Prentice Hall, 1989.
    """

    def __init__(self, lower_bound, upper_bound):
        a, b = float(lower_bound), float(upper_bound)
        if not a < b:
            raise InvalidIntervalError(
                "A < B is required, but A = {:f}; B = {:f}".format(a, b))
        self._a, self._b = a, b
        self._iteration = 0
        self._arg = 0.
        # squared inverse of the golden ratio, set on the startup call
        self._c = 0.
        self._d = self._e = 0.
        self._u = self._v = self._w = self._x = 0.
        self._fu = self._fv = self._fw = self._fx = 0.

    def __repr__(self):
        return ("LocalMinRC(lower_bound={}, upper_bound={}, iteration={})"
                .format(self._a, self._b, self._iteration))

    @property
    def lower_bound(self):
        return self._a

    @property
    def upper_bound(self):
        return self._b

    @property
    def iteration(self):
        """int : phase counter.

        0 while idle or converged, 1 while the first function value is
        pending, and the number of requested evaluations afterwards.
        """
        return self._iteration

    @property
    def arg(self):
        """float : the point most recently returned by :meth:`step`."""
        return self._arg

    @property
    def best_point(self):
        """float : the point with the lowest function value seen so far."""
        return self._x

    @property
    def best_value(self):
        """float : the function value at :attr:`best_point`."""
        return self._fx

    def is_ready(self):
        return self._iteration == 0

    def step(self, value):
        if self._iteration == 0:
            return self._start()

        if self._iteration == 1:
            self._fx = self._fv = self._fw = value
        else:
            self._accept(value)

        a, b, x = self._a, self._b, self._x
        midpoint = 0.5*(a + b)
        tol1 = _sqrt_tol*abs(x) + _machine_tol/3.
        tol2 = 2.*tol1

        if abs(x - midpoint) <= tol2 - 0.5*(b - a):
            self._iteration = 0
            return self._arg

        if abs(self._e) <= tol1:
            self._golden_section_step(midpoint)
        else:
            self._parabolic_step(midpoint, tol1, tol2)

        # never evaluate closer than tol1 to x
        if tol1 <= abs(self._d):
            self._u = x + self._d
        else:
            self._u = x + copysign(tol1, self._d)

        self._arg = self._u
        self._iteration += 1
        return self._arg

    def _start(self):
        self._c = 0.5*(3. - sqrt(5.))
        self._x = self._w = self._v = self._a + self._c*(self._b - self._a)
        self._e = 0.
        self._iteration = 1
        self._arg = self._x
        return self._arg

    def _accept(self, fu):
        """Folds the value at the pending point `u` into the bracket and the
        three tracked points."""
        self._fu = fu
        u, x = self._u, self._x
        if fu <= self._fx:
            if x <= u:
                self._a = x
            else:
                self._b = x
            self._v, self._fv = self._w, self._fw
            self._w, self._fw = x, self._fx
            self._x, self._fx = u, fu
            return

        if u < x:
            self._a = u
        else:
            self._b = u
        if fu <= self._fw or self._w == x:
            self._v, self._fv = self._w, self._fw
            self._w, self._fw = u, fu
        elif fu <= self._fv or self._v == x or self._v == self._w:
            self._v, self._fv = u, fu

    def _golden_section_step(self, midpoint):
        if midpoint <= self._x:
            self._e = self._a - self._x
        else:
            self._e = self._b - self._x
        self._d = self._c*self._e

    def _parabolic_step(self, midpoint, tol1, tol2):
        a, b = self._a, self._b
        x, v, w = self._x, self._v, self._w
        fx, fv, fw = self._fx, self._fv, self._fw

        r = (x - w)*(fx - fv)
        q = (x - v)*(fx - fw)
        p = (x - v)*q - (x - w)*r
        q = 2.*(q - r)
        if 0. < q:
            p = -p
        q = abs(q)
        r = self._e
        self._e = self._d

        if (abs(0.5*q*r) <= abs(p) or p <= q*(a - x) or q*(b - x) <= p):
            self._golden_section_step(midpoint)
            return

        self._d = p/q
        u = x + self._d
        # keep away from the bracket ends, moving towards the midpoint
        if u - a < tol2 or b - u < tol2:
            self._d = copysign(tol1, midpoint - x)
