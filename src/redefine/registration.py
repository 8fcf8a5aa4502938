# Copyright (C) The redefine developers

"""
Attach ``override`` and ``override_if`` to classes as classmethods, so a
family of classes can be overridden with ``SomeClass.override(...)``.
"""

from .override import (
    override as _override,
    override_if as _override_if,
)


def _override_classmethod(cls, replacement, settings=None):
    """
    Merge ``replacement`` into this class.  See
    ``redefine.override.override``.

    :returns: this class.
    """
    return _override(cls, replacement, settings)


def _override_if_classmethod(cls, condition, replacement, settings=None):
    """
    Merge ``replacement`` into this class if ``condition`` holds.  See
    ``redefine.override.override_if``.

    :returns: this class.
    """
    return _override_if(cls, condition, replacement, settings)


_METHODS = {
    "override": _override_classmethod,
    "override_if": _override_if_classmethod,
}


class Redefinable(object):
    """
    Mixin giving a class and its subclasses ``override`` and
    ``override_if`` classmethods.
    """
    override = classmethod(_override_classmethod)
    override_if = classmethod(_override_if_classmethod)


def install(*classes):
    """
    Give each of ``classes`` ``override`` and ``override_if`` classmethods.

    A class which already has one of those names in its own namespace
    keeps it.  Subclasses inherit whatever is installed on their bases.

    :returns: ``classes``.
    """
    for cls in classes:
        for name, method in _METHODS.items():
            if name not in cls.__dict__:
                setattr(cls, name, classmethod(method))
    return classes


def redefinable(cls):
    """
    Class decorator form of ``install``.
    """
    install(cls)
    return cls
