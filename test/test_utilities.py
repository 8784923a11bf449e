# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

import sys
import types

import pytest
from numpy.testing import assert_, assert_equal

import localmin as lm


def test_docstring_inheritance():
    assert_equal(lm.LocalMinRC.step.__doc__, lm.Minimizer.step.__doc__)
    assert_equal(lm.LocalMinRC.is_ready.__doc__, lm.Minimizer.is_ready.__doc__)
    assert_equal(lm.IterationLimitController.check.__doc__,
                 lm.IterationController.check.__doc__)
    assert_(lm.LocalMinRC.__doc__ != lm.Minimizer.__doc__)


def test_property_docstring_inheritance():
    for attr in ['lower_bound', 'upper_bound']:
        prop = getattr(lm.LocalMinRC, attr)
        assert_(isinstance(prop, property))
        assert_equal(prop.__doc__, getattr(lm.Minimizer, attr).__doc__)
    mini = lm.LocalMinRC(-1., 2.)
    assert_equal((mini.lower_bound, mini.upper_bound), (-1., 2.))


def test_undocumented_new_method_stays_undocumented():
    class Sub(lm.Minimizer):
        def helper(self):
            pass

    assert_(Sub.helper.__doc__ is None)


def test_abstract_minimizer():
    with pytest.raises(NotImplementedError):
        lm.Minimizer().step(0.)
    with pytest.raises(NotImplementedError):
        lm.Minimizer().is_ready()
    with pytest.raises(NotImplementedError):
        lm.Minimizer().lower_bound


def test_version():
    assert_(isinstance(lm.__version__, str))
    assert_(isinstance(lm.version.gitversion(), str))


def test_gitversion_missing(monkeypatch):
    monkeypatch.setitem(sys.modules, 'localmin.git_version', None)
    assert_equal(lm.version.gitversion(), "unknown")


def test_gitversion_present(monkeypatch):
    mod = types.ModuleType('localmin.git_version')
    mod.gitversion = "v1.0.0-3-gabcdef"
    monkeypatch.setitem(sys.modules, 'localmin.git_version', mod)
    assert_equal(lm.version.gitversion(), "v1.0.0-3-gabcdef")
