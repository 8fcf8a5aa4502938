# Copyright (C) The redefine developers

import attr


@attr.s(auto_exc=True)
class InvalidReplacementKind(Exception):
    """
    A replacement was neither a mapping nor a callable producing a mapping.

    Only raised when overrides run with ``OverrideSettings(strict=True)``;
    by default a malformed replacement merges nothing.
    """
    replacement = attr.ib()
    reason = attr.ib(default="expected a mapping or a callable returning one")

    def __str__(self):
        return "Invalid replacement {!r}: {}.".format(self.replacement, self.reason)


@attr.s(auto_exc=True)
class UnsupportedTarget(Exception):
    """
    No behavior map can be derived for the given override target.
    """
    target = attr.ib()

    def __str__(self):
        return "Cannot override {!r}: it is neither a class nor a definition.".format(
            self.target,
        )
