# Copyright (C) The redefine developers

"""
Conditional, in-place replacement of a target's shared behaviors.

``override`` merges a replacement into the behavior map of a class or
``Definition`` unconditionally; ``override_if`` does the same only when a
condition holds.  A replacement is either a mapping of behavior names to
values, or a generator: a one-argument callable that receives an
``Originals`` and returns such a mapping.  Once the generator returns,
the ``Originals`` is filled in with the values about to be replaced, so
functions defined by the generator can call through to them::

    override(View, lambda orig: {
        "render": lambda self: orig.render(self) + "<footer/>",
    })

Originals are only available after the generator has returned.  Reading
them while the generator itself is still running raises
``AttributeError``.
"""

from collections.abc import (
    Mapping,
)

from .behavior import (
    ABSENT,
    behavior_map_for,
)
from .config import (
    settings_or_default,
)
from .error import (
    InvalidReplacementKind,
)
from .util.eliotutil import (
    IGNORED,
    MERGED,
    OVERRIDE,
)


class Originals(object):
    """
    The values a generator replacement is about to overwrite.

    Each behavior name the generator returns is readable as an attribute
    (``orig.render``) or an item (``orig["render"]``), including names
    such as ``__init__`` or ``__repr__``: captured values are found before
    anything defined on ``Originals`` itself.  Names which had no previous
    value are recorded as ``ABSENT``: attribute access to them raises
    ``AttributeError`` and item access returns ``ABSENT``.
    """

    def __init__(self):
        object.__setattr__(self, "_Originals__values", {})

    def __getattribute__(self, name):
        values = object.__getattribute__(self, "_Originals__values")
        if name in values:
            value = values[name]
            if value is ABSENT:
                raise AttributeError(
                    "{!r} had no original value".format(name)
                )
            return value
        return object.__getattribute__(self, name)

    def __getitem__(self, key):
        return _values(self)[key]

    def __contains__(self, key):
        return key in _values(self)

    def __iter__(self):
        return iter(_values(self))

    def __len__(self):
        return len(_values(self))

    def __repr__(self):
        return "<Originals {!r}>".format(_values(self))


def _values(originals):
    return object.__getattribute__(originals, "_Originals__values")


def _capture(originals, key, value):
    _values(originals)[key] = value


def override(target, replacement, settings=None):
    """
    Unconditionally merge ``replacement`` into the behavior map of
    ``target``.

    :param target: a class, or an object providing ``IBehaviorMap``.

    :param replacement: a mapping of behavior names to values, or a
        callable taking an ``Originals`` and returning such a mapping.

    :param OverrideSettings settings: how to treat malformed
        replacements.  Defaults to ``DEFAULT_SETTINGS``.

    :returns: ``target``, so overrides may be chained.
    """
    return _apply(target, True, replacement, settings, conditional=False)


def override_if(target, condition, replacement, settings=None):
    """
    Merge ``replacement`` into the behavior map of ``target`` if
    ``condition`` holds.

    :param condition: any value, tested for truth.  If it is callable it
        is called once, with no arguments, and its result is tested
        instead.  When the condition does not hold ``replacement`` is
        never called and ``target`` is not changed.

    See ``override`` for the other parameters.

    :returns: ``target``.
    """
    return _apply(target, condition, replacement, settings, conditional=True)


def _apply(target, condition, replacement, settings, conditional):
    settings = settings_or_default(settings)
    behaviors = behavior_map_for(target)
    with OVERRIDE(
        target=behaviors.name,
        conditional=conditional,
        strict=settings.strict,
    ) as action:
        applied = _evaluate(condition)
        action.add_success_fields(applied=applied)
        if not applied:
            return target
        resolved, generated = _resolve(behaviors, replacement, settings)
        if resolved:
            behaviors.merge(resolved)
            MERGED(keys=sorted(resolved), generated=generated).write()
    return target


def _evaluate(condition):
    if callable(condition):
        condition = condition()
    return bool(condition)


def _resolve(behaviors, replacement, settings):
    """
    :returns: a two-tuple of the dict to merge and whether it was produced
        by a generator.
    """
    if isinstance(replacement, Mapping):
        return _string_keyed(replacement, settings), False

    if not callable(replacement):
        return _ignore(replacement, "not a mapping or a callable", settings), False

    originals = Originals()
    generated = replacement(originals)
    if not isinstance(generated, Mapping):
        return _ignore(
            generated,
            "generator returned {}, not a mapping".format(type(generated).__name__),
            settings,
        ), True

    resolved = _string_keyed(generated, settings)
    for key in resolved:
        _capture(originals, key, behaviors.lookup(key))
    return resolved, True


def _string_keyed(mapping, settings):
    resolved = {}
    for key, value in mapping.items():
        if isinstance(key, str):
            resolved[key] = value
        else:
            _ignore(mapping, "key {!r} is not a string".format(key), settings)
    return resolved


def _ignore(replacement, reason, settings):
    if settings.strict:
        raise InvalidReplacementKind(replacement, reason)
    IGNORED(reason=reason).write()
    return {}
