# Copyright (C) The redefine developers

"""
Conditional, in-place overrides of the shared behavior of classes and
prototype-style definitions.
"""

__all__ = [
    "__version__",
    "ABSENT",
    "Definition",
    "InvalidReplacementKind",
    "OverrideSettings",
    "Originals",
    "Redefinable",
    "UnsupportedTarget",
    "install",
    "override",
    "override_if",
    "redefinable",
]

from ._version import (
    __version__,
)
from .behavior import (
    ABSENT,
)
from .config import (
    OverrideSettings,
)
from .definition import (
    Definition,
)
from .error import (
    InvalidReplacementKind,
    UnsupportedTarget,
)
from .override import (
    Originals,
    override,
    override_if,
)
from .registration import (
    Redefinable,
    install,
    redefinable,
)
