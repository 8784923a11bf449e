# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

import numpy as np
import pytest


def list2fixture(lst):
    @pytest.fixture(params=lst)
    def myfixture(request):
        return request.param

    return myfixture


def drive(minimizer, func, max_calls=200, callback=None):
    """Runs the reverse-communication loop until the minimizer is ready.

    Returns the final point and the number of `step` calls. `callback` is
    invoked with the minimizer after every call.
    """
    value = 0.
    for ncalls in range(1, max_calls + 1):
        arg = minimizer.step(value)
        if callback is not None:
            callback(minimizer)
        if minimizer.is_ready():
            return arg, ncalls
        value = func(arg)
    raise AssertionError("no convergence after {} calls".format(max_calls))


# (objective, lower bound, upper bound, location of the minimum)
objectives = [
    (lambda t: (t - 2.)**2, 0., 5., 2.),
    (np.cos, 0., 6.28, np.pi),
    (lambda t: np.exp(t) - 2.*t, -1., 3., np.log(2.)),
    (lambda t: t**2*(t - 3.), 1., 4., 2.),
]
