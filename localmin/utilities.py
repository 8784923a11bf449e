# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright(C) 2013-2020 Max-Planck-Society

__all__ = ["LocalMinMeta"]


def _inherited_doc(bases, attr):
    for mro_cls in (mro_cls for base in bases for mro_cls in base.mro()):
        doc = getattr(mro_cls, attr).__doc__ if hasattr(mro_cls, attr) \
            else None
        if doc:
            return doc
    return None


class _DocStringInheritor(type):
    """
    A variation on
    http://groups.google.com/group/comp.lang.python/msg/26f7b4fcb4d66c95
    by Paul McGuire
    """
    def __new__(meta, name, bases, clsdict):
        for attr, attribute in clsdict.items():
            if not callable(attribute) and not isinstance(attribute,
                                                          property):
                continue
            if attribute.__doc__:
                continue
            doc = _inherited_doc(bases, attr)
            if doc is None:
                continue
            if isinstance(attribute, property):
                clsdict[attr] = property(attribute.fget, attribute.fset,
                                         attribute.fdel, doc)
            else:
                attribute.__doc__ = doc
        return super(_DocStringInheritor, meta).__new__(meta, name, bases,
                                                        clsdict)


class LocalMinMeta(_DocStringInheritor):
    """Metaclass for all localmin classes.

    Overridden methods and properties without a docstring pick up the
    documentation of the base class member they override.
    """
    pass
