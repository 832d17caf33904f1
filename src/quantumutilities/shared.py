#! /usr/bin/env python
"""Shared objects.

Exception hierarchy used by every module of the package and the
optional logging setup.
"""
import logging
import os

LOG_LEVEL_ENV = "QUANTUMUTILITIES_LOG_LEVEL"


class QuantumUtilitiesError(ValueError):
    """Base class of the errors raised on invalid input."""


class ArgumentError(QuantumUtilitiesError):
    """Invalid argument value.

    Raised for subsystem indices out of range or repeated, rate
    specifications not matching the jump operators, integration
    domains not containing the pole, etc.
    """


class DimensionMismatch(ArgumentError):
    """Array shapes are inconsistent with each other or with `dims`."""


def setup_logging() -> None:
    """Configure logging based on an environment variable.

    The level is read from ``QUANTUMUTILITIES_LOG_LEVEL`` (default
    ``WARNING``).  The package itself never installs handlers, call
    this from scripts and examples.

    Examples:
        # Debug mode, shapes of every contraction are logged
        QUANTUMUTILITIES_LOG_LEVEL=DEBUG python script.py
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(name)s - %(levelname)s - %(message)s",
    )
