#! /usr/bin/env python
"""Composite quantum systems.

Tensor products of operators and states, and the reductions that undo
them: partial traces and partial transposes over a subset of the
subsystems of a joint Hilbert space.

Main contents:

    - ``tensor(*ops)``: Kronecker product of operators or state vectors.
    - ``subsystem_indices(dims)``: Per-subsystem indices of every
      composite basis index.
    - ``partial_trace(rho, trace, dims)``: Trace out subsystems of a
      density operator (or of a pure state).
    - ``partial_trace_keep(rho, keep, dims)``: Same, naming the
      subsystems that are kept.
    - ``partial_transpose(rho, transpose, dims)``: Transpose subsystems
      of a density operator.

Conventions:

    - ``dims = (d_1, ..., d_N)`` lists the subsystem dimensions; the
      joint dimension is ``prod(dims)``.
    - The composite index follows ``numpy.kron``: the first subsystem
      varies slowest.  ``subsystem_indices`` and the reshape used by the
      reductions are the only places this ordering is spelled out.
    - Subsystems are numbered from 1.  A single index may be passed
      instead of a sequence of indices.
"""

import logging
import numbers
from functools import reduce
from math import prod
from typing import Iterable, Sequence, Union

import numpy as np

from .shared import ArgumentError, DimensionMismatch

logger = logging.getLogger(__name__)

Subsystems = Union[int, Iterable[int]]

# Memory order of the composite index: first subsystem slowest (np.kron).
INDEX_ORDER = "C"


def tensor(*ops) -> np.ndarray:
    """Tensor (Kronecker) product.

    Args:
        ops (np.ndarray): One or more operators or state vectors.

    Returns:
        np.ndarray: The tensor product, with the first operand varying
        slowest in the composite index.

    Examples:
        >>> A = np.array([[1, 2], [3, 4]])
        >>> B = np.array([[5, 6], [7, 8]])
        >>> tensor(A, B)
        array([[ 5,  6, 10, 12],
               [ 7,  8, 14, 16],
               [15, 18, 20, 24],
               [21, 24, 28, 32]])
        >>> tensor(np.array([1, 0]), np.array([0, 1]))
        array([0, 1, 0, 0])
    """
    if not ops:
        raise ArgumentError("tensor() needs at least one operand.")
    return reduce(np.kron, (np.asarray(op) for op in ops))


def subsystem_indices(dims: Sequence[int]) -> np.ndarray:
    """Decompose every composite index into subsystem indices.

    Args:
        dims (Sequence[int]): Subsystem dimensions.

    Returns:
        np.ndarray: Integer array of shape ``(prod(dims), len(dims))``;
        row ``k`` holds the (0-based) index of each subsystem for the
        composite basis state ``k``.

    Examples:
        >>> subsystem_indices((2, 3))
        array([[0, 0],
               [0, 1],
               [0, 2],
               [1, 0],
               [1, 1],
               [1, 2]])
    """
    dims = _check_dims(dims)
    flat = np.arange(prod(dims))
    return np.stack(np.unravel_index(flat, dims, order=INDEX_ORDER), axis=-1)


def partial_trace(rho: np.ndarray, trace: Subsystems, dims: Sequence[int]):
    """Partial trace over the subsystems `trace`.

    A pure state (1-D array) is first replaced by its projector
    :math:`|\\psi\\rangle\\langle\\psi|`.  The kept subsystems stay in
    their original order, regardless of the order of `trace`.

    Args:
        rho (np.ndarray): Density operator of shape ``(D, D)`` or state
            vector of length ``D`` with ``D = prod(dims)``.
        trace (int or Iterable[int]): Subsystems (1-based) to trace out.
        dims (Sequence[int]): Subsystem dimensions.

    Returns:
        np.ndarray: The reduced operator; its dimension is the product
        of the kept dimensions (``(1, 1)`` if everything is traced out).

    Raises:
        DimensionMismatch: If `rho` is not square or its size is not
            ``prod(dims)``.
        ArgumentError: If an index is not an integer, out of
            ``[1, len(dims)]`` or repeated, or `dims` is not a sequence
            of positive integers.

    Examples:
        >>> A = np.arange(1, 17).reshape(4, 4)
        >>> partial_trace(A, 1, (2, 2))
        array([[12, 14],
               [20, 22]])
        >>> partial_trace(A, [2], (2, 2))
        array([[ 7, 11],
               [23, 27]])
        >>> v, w = np.array([1, 0]), np.array([0, 1])
        >>> partial_trace(tensor(v, w), 1, (2, 2))
        array([[0, 0],
               [0, 1]])
    """
    rho = _as_density_operator(rho)
    dims = _check_dims(dims, len(rho))
    traced = _check_subsystems(trace, len(dims))
    if not traced:
        return rho.copy()

    num = len(dims)
    kept = [i for i in range(num) if i not in traced]
    keep_dim = prod(dims[i] for i in kept)
    trace_dim = prod(dims[i] for i in traced)
    logger.debug(
        "Tracing out subsystems %s of %s (%d -> %d)",
        [i + 1 for i in traced],
        dims,
        len(rho),
        keep_dim,
    )

    # kept axes first, then the traced ones, on both row and column side
    order = kept + traced
    T = _split_subsystems(rho, dims).transpose(*order, *(i + num for i in order))
    T = T.reshape(keep_dim, trace_dim, keep_dim, trace_dim)
    return np.trace(T, axis1=1, axis2=3)


def partial_trace_keep(rho: np.ndarray, keep: Subsystems, dims: Sequence[int]):
    """Partial trace keeping only the subsystems `keep`.

    Thin wrapper around `partial_trace`, which traces out the complement
    of `keep`.

    Examples:
        >>> A = np.arange(1, 17).reshape(4, 4)
        >>> partial_trace_keep(A, 2, (2, 2))
        array([[12, 14],
               [20, 22]])
    """
    dims = tuple(dims)
    kept = _check_subsystems(keep, len(dims))
    trace = [i + 1 for i in range(len(dims)) if i not in kept]
    return partial_trace(rho, trace, dims)


def partial_transpose(
    rho: np.ndarray, transpose: Subsystems, dims: Sequence[int]
) -> np.ndarray:
    """Partial transpose over the subsystems `transpose`.

    Args:
        rho (np.ndarray): Density operator (or state vector) of
            dimension ``prod(dims)``.
        transpose (int or Iterable[int]): Subsystems (1-based) to
            transpose.
        dims (Sequence[int]): Subsystem dimensions.

    Returns:
        np.ndarray: Operator of the same shape as (the projector of) `rho`.

    Examples:
        >>> partial_transpose(np.arange(16).reshape(4, 4), 2, (2, 2))
        array([[ 0,  4,  2,  6],
               [ 1,  5,  3,  7],
               [ 8, 12, 10, 14],
               [ 9, 13, 11, 15]])
    """
    rho = _as_density_operator(rho)
    dims = _check_dims(dims, len(rho))
    subs = _check_subsystems(transpose, len(dims))

    num = len(dims)
    T = _split_subsystems(rho, dims)
    for i in subs:
        T = np.swapaxes(T, i, num + i)
    return T.reshape(rho.shape, order=INDEX_ORDER)


def _split_subsystems(rho: np.ndarray, dims: tuple) -> np.ndarray:
    """View a ``(D, D)`` operator as a ``(*dims, *dims)`` tensor."""
    return rho.reshape(*dims, *dims, order=INDEX_ORDER)


def _as_density_operator(rho) -> np.ndarray:
    rho = np.asarray(rho)
    if rho.ndim == 1:
        return np.outer(rho, rho.conj())
    if rho.ndim != 2 or rho.shape[0] != rho.shape[1]:
        raise DimensionMismatch(f"Operator must be square; got shape {rho.shape}.")
    return rho


def _check_dims(dims, size=None) -> tuple:
    dims = tuple(_as_integers(dims, "Subsystem dimensions"))
    if not dims or min(dims) < 1:
        raise ArgumentError(f"Subsystem dimensions must be positive; got {dims}.")
    if size is not None and prod(dims) != size:
        raise DimensionMismatch(
            f"Operator of dimension {size} incompatible with dims {dims} "
            f"(prod={prod(dims)})."
        )
    return dims


def _check_subsystems(indices: Subsystems, num: int) -> list:
    """Validate 1-based subsystem indices and return them 0-based, sorted."""
    if isinstance(indices, numbers.Real):
        indices = [indices]
    indices = _as_integers(indices, "Subsystem indices")
    if len(set(indices)) != len(indices):
        raise ArgumentError(f"Subsystem indices must be unique; got {indices}.")
    if any(i < 1 or i > num for i in indices):
        raise ArgumentError(
            f"Subsystem indices {indices} out of range for {num} subsystems."
        )
    return sorted(i - 1 for i in indices)


def _as_integers(values, what: str) -> list:
    values = list(values)
    for v in values:
        if not isinstance(v, numbers.Real) or int(v) != v:
            raise ArgumentError(f"{what} must be integers; got {values}.")
    return [int(v) for v in values]
