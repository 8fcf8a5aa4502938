# Copyright (C) The redefine developers

"""
Settings controlling how overrides treat malformed input.
"""

import attr
from attr.validators import instance_of


@attr.s(frozen=True)
class OverrideSettings(object):
    """
    :ivar bool strict: When ``True``, a replacement which is not a mapping
        (or a generator which does not return one) or a mapping with
        non-string keys raises ``InvalidReplacementKind``.  When ``False``
        such input merges nothing.
    """
    strict = attr.ib(default=False, validator=instance_of(bool))

    def with_strict(self, strict=True):
        """
        :returns: a copy of these settings with ``strict`` replaced.
        """
        return attr.evolve(self, strict=strict)


DEFAULT_SETTINGS = OverrideSettings()

STRICT_SETTINGS = DEFAULT_SETTINGS.with_strict()


def settings_or_default(settings):
    """
    :returns OverrideSettings: ``settings`` or ``DEFAULT_SETTINGS`` if it
        is ``None``.
    """
    if settings is None:
        return DEFAULT_SETTINGS
    return settings
