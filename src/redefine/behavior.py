# Copyright (C) The redefine developers

"""
Access to the shared behavior map of an override target.

A target's behavior map is the namespace consulted by every one of its
instances: for a Python class that is the class namespace (and, for
lookups, the namespaces of its bases in MRO order); a ``Definition``
provides its own.
"""

import attr
from zope.interface import (
    Attribute,
    Interface,
    implementer,
)

from .error import (
    UnsupportedTarget,
)


class _Absent(object):
    """
    Marker for a behavior name with no value anywhere in a target's chain.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_Absent, cls).__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


class IBehaviorMap(Interface):
    """
    The shared, mutable mapping of member names to values that every
    instance of a definition consults.
    """
    name = Attribute("A human-readable name for the owner of this map.")

    def lookup(key):
        """
        :param str key: a behavior name.

        :returns: the raw value stored for ``key``, searching inherited
            maps as instances would, or ``ABSENT``.
        """

    def keys():
        """
        :returns: the behavior names stored directly in this map (not
            inherited ones).
        """

    def merge(mapping):
        """
        Write every item of ``mapping`` into this map, replacing existing
        values.

        :param dict mapping: str keys to arbitrary values.
        """


@implementer(IBehaviorMap)
@attr.s(frozen=True)
class ClassBehaviorMap(object):
    """
    The behavior map of an ordinary Python class.

    Lookups return the raw namespace value, without invoking the
    descriptor protocol, so a ``staticmethod`` or ``property`` is seen as
    itself rather than as the result of accessing it.
    """
    cls = attr.ib(validator=attr.validators.instance_of(type))

    @property
    def name(self):
        return self.cls.__qualname__

    def lookup(self, key):
        for klass in self.cls.__mro__:
            try:
                return klass.__dict__[key]
            except KeyError:
                pass
        return ABSENT

    def keys(self):
        return list(self.cls.__dict__)

    def merge(self, mapping):
        for key, value in mapping.items():
            setattr(self.cls, key, value)


def behavior_map_for(target):
    """
    :param target: a class, or an object providing ``IBehaviorMap``.

    :raises UnsupportedTarget: if ``target`` is neither.

    :returns IBehaviorMap: the behavior map through which ``target`` is
        read and overridden.
    """
    if IBehaviorMap.providedBy(target):
        return target
    if isinstance(target, type):
        return ClassBehaviorMap(target)
    raise UnsupportedTarget(target)
