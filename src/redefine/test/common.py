# Copyright (C) The redefine developers

__all__ = [
    "SyncTestCase",

    "skip",
    "skipIf",
]

from testtools import (
    TestCase,
    RunTest,
    skip,
    skipIf,
)

from .eliotutil import (
    EliotLoggedRunTest,
)


class SyncTestCase(TestCase):
    """
    A ``TestCase`` whose tests each run inside a unique Eliot action which
    collects (and validates) every Eliot message the test emits.
    """
    run_tests_with = EliotLoggedRunTest.make_factory(
        RunTest,
    )

    # without this method, instantiating a SyncTestCase (or
    # e.g. testtools.TestCase) results in a traceback
    def runTest(self, *a, **kw):
        raise NotImplementedError
