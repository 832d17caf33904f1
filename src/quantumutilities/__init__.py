"""QuantumUtilities package root."""

from importlib.metadata import PackageNotFoundError, version

from . import plot  # noqa: F401 F403
from . import composite, dynamics, liouville, mathutils, measures, shared
from .composite import partial_trace, partial_trace_keep, partial_transpose, tensor
from .liouville import (
    anticommutator_superop,
    commutator_superop,
    dissipator_superop,
    hamiltonian_evolution_superop,
    left_right_superop,
    left_superop,
    lindbladian_superop,
    operator_to_vector,
    right_superop,
    time_evolution_operator,
    time_evolution_superop,
    vector_to_operator,
)
from .mathutils import cauchy_quad, realifclose, scrap, usinc
from .shared import ArgumentError, DimensionMismatch, QuantumUtilitiesError

# pylint: disable=unused-import wildcard-import

try:
    __version__ = version("quantumutilities")
except PackageNotFoundError:
    # Handle cases where the package is not installed or metadata is missing
    __version__ = "unknown"
