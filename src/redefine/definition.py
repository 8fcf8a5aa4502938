# Copyright (C) The redefine developers

"""
Prototype-style definitions.

A ``Definition`` owns a single dict of behaviors which every instance
created from it consults on attribute lookup.  Nothing is copied into the
instances, so overriding a definition changes the behavior of instances
which already exist as well as those created later.
"""

import attr
from attr.validators import instance_of
from zope.interface import implementer

from .behavior import (
    ABSENT,
    IBehaviorMap,
)
from .override import (
    override as _override,
    override_if as _override_if,
)


@implementer(IBehaviorMap)
@attr.s(eq=False, repr=False)
class Definition(object):
    """
    A named template whose ``behaviors`` are shared by all its instances.

    :ivar str name: used in log messages and reprs.

    :ivar dict behaviors: member names to values.  Functions are bound
        to the instance they are looked up on.

    :ivar Definition parent: consulted for names missing from
        ``behaviors``, or ``None``.
    """
    name = attr.ib(validator=instance_of(str))
    behaviors = attr.ib(factory=dict, converter=dict)
    parent = attr.ib(default=None)

    @parent.validator
    def _check_parent(self, attribute, value):
        if value is not None and not isinstance(value, Definition):
            raise TypeError(
                "'parent' must be a Definition or None, not {!r}".format(value)
            )

    def lookup(self, key):
        definition = self
        while definition is not None:
            try:
                return definition.behaviors[key]
            except KeyError:
                definition = definition.parent
        return ABSENT

    def keys(self):
        return list(self.behaviors)

    def merge(self, mapping):
        self.behaviors.update(mapping)

    def extend(self, name, **behaviors):
        """
        :returns Definition: a new definition named ``name`` which falls
            back to this one for anything not in ``behaviors``.
        """
        return Definition(name, behaviors, parent=self)

    def override(self, replacement, settings=None):
        """
        Merge ``replacement`` into this definition.  See
        ``redefine.override.override``.

        :returns: this definition.
        """
        return _override(self, replacement, settings)

    def override_if(self, condition, replacement, settings=None):
        """
        Merge ``replacement`` into this definition if ``condition`` holds.
        See ``redefine.override.override_if``.

        :returns: this definition.
        """
        return _override_if(self, condition, replacement, settings)

    def __call__(self, **state):
        """
        Create an instance whose own attributes are ``state``.

        If an ``initialize`` behavior is available it is called, with no
        arguments, once the state is in place.
        """
        instance = Instance(self, state)
        if self.lookup("initialize") is not ABSENT:
            instance.initialize()
        return instance

    def __repr__(self):
        return "<Definition {}>".format(self.name)


class Instance(object):
    """
    An object created from a ``Definition``.

    Attributes are found in the instance's own state first and then in
    the behavior maps of its definition chain.
    """

    def __init__(self, definition, state):
        self._definition = definition
        self.__dict__.update(state)

    def __getattr__(self, name):
        if name.startswith("__") or name == "_definition":
            raise AttributeError(name)
        value = self._definition.lookup(name)
        if value is ABSENT:
            raise AttributeError(
                "{} instance has no attribute {!r}".format(self._definition.name, name)
            )
        if hasattr(value, "__get__"):
            return value.__get__(self, type(self))
        return value

    def __repr__(self):
        return "<{} instance>".format(self._definition.name)


def definition_of(instance):
    """
    :returns Definition: the definition ``instance`` was created from.
    """
    return instance._definition
