# Copyright (C) The redefine developers

"""
Eliot field, message and action types used when applying overrides.
"""

from eliot import (
    ActionType,
    Field,
    MessageType,
    ValidationError,
)


def validateListOf(t):
    """
    Return an Eliot validator that requires values to be lists of ``t``.
    """
    def validator(v):
        if not isinstance(v, list) or not all(isinstance(item, t) for item in v):
            raise ValidationError("{!r} is not a list of {}".format(v, t))
    return validator


TARGET = Field.for_types(
    u"target",
    [str],
    u"The name of the class or definition being overridden.",
)

CONDITIONAL = Field.for_types(
    u"conditional",
    [bool],
    u"Whether the override was gated by a condition.",
)

STRICT = Field.for_types(
    u"strict",
    [bool],
    u"Whether malformed replacements are rejected.",
)

APPLIED = Field.for_types(
    u"applied",
    [bool],
    u"Whether the condition held and the replacement was merged.",
)

GENERATED = Field.for_types(
    u"generated",
    [bool],
    u"Whether the replacement was computed by a generator.",
)

REASON = Field.for_types(
    u"reason",
    [str],
    u"Why (part of) a replacement was not merged.",
)

KEYS = Field(
    u"keys",
    list,
    u"The behavior names written into the target.",
    validateListOf(str),
)

OVERRIDE = ActionType(
    u"redefine:override",
    [TARGET, CONDITIONAL, STRICT],
    [APPLIED],
    u"An override is resolved and merged into a target's behavior map.",
)

MERGED = MessageType(
    u"redefine:override:merged",
    [KEYS, GENERATED],
    u"Behaviors were written into the target.",
)

IGNORED = MessageType(
    u"redefine:override:ignored",
    [REASON],
    u"A malformed replacement contributed nothing to the target.",
)
