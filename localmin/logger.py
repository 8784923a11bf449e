# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society


def _logger_init():
    import logging
    res = logging.getLogger('localmin')
    res.setLevel(logging.DEBUG)
    res.propagate = False
    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG)
    res.addHandler(ch)
    return res


logger = _logger_init()
