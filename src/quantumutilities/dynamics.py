#! /usr/bin/env python
"""Time evolution of density operators.

Propagates a density operator on a uniform time grid, either in
Liouville space with a generator built by `liouville` (e.g. a
Lindbladian) or in Hilbert space with a Hamiltonian.

    - ``liouville_propagator(generator, dt)``: :math:`e^{\\mathcal{L} dt}`.
    - ``time_evolution(rho0, time, generator)``: Liouville-space trajectory.
    - ``hamiltonian_time_evolution(rho0, time, H)``: Hilbert-space trajectory.
    - ``expectation_values(rhos, observable)``: :math:`\\mathrm{Re\\,Tr}(O\\rho_t)`.
    - ``reduced_time_evolution(rhos, trace, dims)``: Partial trace of a
      trajectory.

Shape conventions:
    - Densities are returned as ``(len(time), d, d)`` arrays.
    - Generators act on column-stacked vectors (``(d**2, d**2)``).
"""

import logging
from typing import Sequence

import numpy as np
import scipy as sp

from . import composite, liouville
from .shared import ArgumentError, DimensionMismatch

logger = logging.getLogger(__name__)


def liouville_propagator(generator: np.ndarray, dt: float) -> np.ndarray:
    r"""Propagator of a Liouvillian over one time step.

    .. math::
        \mathbf{U} = \exp( \hat{\hat{L}} \, dt )
    """
    return sp.linalg.expm(np.asarray(generator) * dt)


def time_evolution(
    rho0: np.ndarray, time: np.ndarray, generator: np.ndarray
) -> np.ndarray:
    """Evolve a density operator with a Liouville-space generator.

    Args:
        rho0 (np.ndarray): Initial density operator ``(d, d)`` or pure
            state of length ``d``.
        time (np.ndarray): Uniform time grid (at least two points),
            usually created with `np.arange` or `np.linspace`.
        generator (np.ndarray): Liouvillian of shape ``(d**2, d**2)``,
            e.g. from `liouville.lindbladian_superop`.

    Returns:
        np.ndarray: Densities of shape ``(len(time), d, d)``; the first
        one is `rho0`.

    Examples:
        >>> H = np.diag([0.5, -0.5])
        >>> time = np.linspace(0, 1, 5)
        >>> L = liouville.lindbladian_superop(H)
        >>> rhos = time_evolution(np.array([1, 0]), time, L)
        >>> rhos.shape
        (5, 2, 2)
    """
    rho0 = _initial_density(rho0)
    dt = _time_step(time)
    dim = len(rho0)
    generator = np.asarray(generator)
    if generator.shape != (dim**2, dim**2):
        raise DimensionMismatch(
            f"Generator of shape {generator.shape} cannot act on a density "
            f"operator of dimension {dim}."
        )
    logger.debug("Liouville time evolution: dim=%d, %d steps", dim, len(time))

    propagator = liouville_propagator(generator, dt)
    rho = liouville.operator_to_vector(rho0)
    rhos = np.zeros([len(time), dim, dim], dtype=complex)
    rhos[0] = rho0
    for t in range(1, len(time)):
        rho = propagator @ rho
        rhos[t] = liouville.vector_to_operator(rho, dim)
    return rhos


def hamiltonian_time_evolution(
    rho0: np.ndarray, time: np.ndarray, H: np.ndarray
) -> np.ndarray:
    """Evolve a density operator unitarily in Hilbert space.

    Each step applies :math:`\\rho \\mapsto U \\rho U^\\dagger` with
    ``U = time_evolution_operator(H, dt)``.

    Args:
        rho0 (np.ndarray): Initial density operator or pure state.
        time (np.ndarray): Uniform time grid (at least two points).
        H (np.ndarray): Hamiltonian of shape ``(d, d)``.

    Returns:
        np.ndarray: Densities of shape ``(len(time), d, d)``.
    """
    rho0 = _initial_density(rho0)
    dt = _time_step(time)
    H = np.asarray(H)
    if H.shape != rho0.shape:
        raise DimensionMismatch(
            f"Hamiltonian of shape {H.shape} does not match density {rho0.shape}."
        )

    Um = liouville.time_evolution_operator(H, dt)
    Up = Um.conj().T
    rhos = np.zeros([len(time), *rho0.shape], dtype=complex)
    rhos[0] = rho0
    for t in range(1, len(time)):
        rhos[t] = Um @ rhos[t - 1] @ Up
    return rhos


def expectation_values(rhos: np.ndarray, observable: np.ndarray) -> np.ndarray:
    """Expectation value of `observable` for every density in `rhos`.

    Args:
        rhos (np.ndarray): Densities of shape ``(..., d, d)``.
        observable (np.ndarray): Operator of shape ``(d, d)``.

    Returns:
        np.ndarray: Real parts of :math:`\\mathrm{Tr}(O \\rho)`, shape ``(...)``.
    """
    return np.real(np.trace(observable @ rhos, axis1=-2, axis2=-1))


def reduced_time_evolution(
    rhos: np.ndarray, trace, dims: Sequence[int]
) -> np.ndarray:
    """Partial trace of every density of a trajectory.

    See `composite.partial_trace` for the meaning of `trace` and `dims`.
    """
    return np.array([composite.partial_trace(rho, trace, dims) for rho in rhos])


def _initial_density(rho0) -> np.ndarray:
    rho0 = np.asarray(rho0)
    if rho0.ndim == 1:
        return np.outer(rho0, rho0.conj())
    if rho0.ndim != 2 or rho0.shape[0] != rho0.shape[1]:
        raise DimensionMismatch(
            f"Initial density must be square; got shape {rho0.shape}."
        )
    return rho0


def _time_step(time) -> float:
    time = np.asarray(time)
    if time.ndim != 1 or len(time) < 2:
        raise ArgumentError("time needs >=2 points")
    dt = time[1] - time[0]
    if not np.allclose(np.diff(time), dt):
        raise ArgumentError("time needs to be a uniform grid")
    return dt
