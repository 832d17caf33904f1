#! /usr/bin/env python

import logging
import os
import unittest
from unittest import mock

from quantumutilities import shared


class ErrorHierarchyTestCase(unittest.TestCase):
    """Exception classes."""

    def test_hierarchy(self):
        self.assertTrue(issubclass(shared.ArgumentError, ValueError))
        self.assertTrue(issubclass(shared.DimensionMismatch, shared.ArgumentError))
        self.assertTrue(
            issubclass(shared.DimensionMismatch, shared.QuantumUtilitiesError)
        )


class SetupLoggingTestCase(unittest.TestCase):
    """Logging configuration."""

    def setUp(self):
        self.root = logging.getLogger()
        self.handlers = self.root.handlers[:]
        self.level = self.root.level
        self.root.handlers = []

    def tearDown(self):
        self.root.handlers = self.handlers
        self.root.setLevel(self.level)

    def test_level_from_environment(self):
        with mock.patch.dict(os.environ, {shared.LOG_LEVEL_ENV: "debug"}):
            shared.setup_logging()
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_default_level(self):
        with mock.patch.dict(os.environ, clear=True):
            shared.setup_logging()
        self.assertEqual(self.root.level, logging.WARNING)

    def test_unknown_level(self):
        with mock.patch.dict(os.environ, {shared.LOG_LEVEL_ENV: "chatty"}):
            shared.setup_logging()
        self.assertEqual(self.root.level, logging.WARNING)


if __name__ == "__main__":
    unittest.main()
