#! /usr/bin/env python
r"""Liouville-space representation of operator actions.

Operators are vectorised by stacking their columns, so that linear maps
on operators become matrices ("superoperators") acting on vectors:

.. math::
    \operatorname{vec}(A \rho B) = (B^{\mathsf{T}} \otimes A)\,\operatorname{vec}(\rho).

Vectorisation:
    - ``operator_to_vector(A)``, ``vector_to_operator(v, d=None)``.

Superoperator algebra:
    - ``left_superop(A)``: :math:`\rho \mapsto A\rho`.
    - ``right_superop(A)``: :math:`\rho \mapsto \rho A`.
    - ``left_right_superop(A, B)``: :math:`\rho \mapsto A\rho B`.
    - ``commutator_superop(A)``, ``anticommutator_superop(A)``.

Evolution and dissipation:
    - ``time_evolution_operator(H, t)``: :math:`U = e^{-iHt}`.
    - ``time_evolution_superop(H, t)``: :math:`\rho \mapsto U\rho U^\dagger`.
    - ``hamiltonian_evolution_superop(H)``: :math:`-i[H, \cdot]`.
    - ``dissipator_superop(L, M=L)``:
      :math:`L\rho M^\dagger - \tfrac12\{M^\dagger L, \rho\}`.
    - ``lindbladian_superop(H, Ls, rates)``: coherent plus dissipative
      generator with a rate vector or a cross-rate matrix.

Hamiltonians are replaced by their Hermitian part before they enter the
propagator or the commutator generator.
"""

import logging
from typing import Optional, Sequence

import numpy as np
import scipy as sp

from .shared import ArgumentError, DimensionMismatch

logger = logging.getLogger(__name__)


def operator_to_vector(A: np.ndarray) -> np.ndarray:
    """Column-stacking vectorisation of a square operator.

    Examples:
        >>> operator_to_vector(np.array([[1, 2], [3, 4]]))
        array([1, 3, 2, 4])
    """
    A = _check_square(A)
    return A.reshape(-1, order="F")


def vector_to_operator(v: np.ndarray, d: Optional[int] = None) -> np.ndarray:
    """Inverse of `operator_to_vector`.

    Args:
        v (np.ndarray): Vectorised operator, shape ``(d**2,)`` or
            ``(d**2, 1)``.
        d (int): Dimension of the operator, inferred from ``len(v)``
            when omitted.

    Returns:
        np.ndarray: The ``(d, d)`` operator.

    Raises:
        DimensionMismatch: If `v` is not a (column) vector or ``len(v)``
            is not ``d**2``.

    Examples:
        >>> vector_to_operator(np.array([1, 3, 2, 4]))
        array([[1, 2],
               [3, 4]])
    """
    v = np.asarray(v)
    if v.ndim == 2 and v.shape[1] == 1:
        v = v[:, 0]
    if v.ndim != 1:
        raise DimensionMismatch(
            f"Expected a vector of shape (n,) or (n, 1); got shape {v.shape}."
        )
    if d is None:
        d = int(round(np.sqrt(v.size)))
    if d * d != v.size:
        raise DimensionMismatch(
            f"Vector of length {v.size} is not a vectorised {d}x{d} operator."
        )
    return v.reshape((d, d), order="F")


def left_superop(A: np.ndarray, d: Optional[int] = None) -> np.ndarray:
    """Superoperator of left multiplication, :math:`I_d \\otimes A`.

    Args:
        A (np.ndarray): Operator acting from the left.
        d (int): Size of the identity; number of columns of `A` by
            default.

    Examples:
        >>> left_superop(np.array([[1, 2], [3, 4]]))
        array([[1, 2, 0, 0],
               [3, 4, 0, 0],
               [0, 0, 1, 2],
               [0, 0, 3, 4]])
    """
    A = np.asarray(A)
    if d is None:
        d = A.shape[1]
    return np.kron(np.eye(d, dtype=A.dtype), A)


def right_superop(A: np.ndarray, d: Optional[int] = None) -> np.ndarray:
    """Superoperator of right multiplication, :math:`A^{\\mathsf{T}} \\otimes I_d`.

    Args:
        A (np.ndarray): Operator acting from the right.
        d (int): Size of the identity; number of rows of `A` by default.

    Examples:
        >>> right_superop(np.array([[1, 2], [3, 4]]))
        array([[1, 0, 3, 0],
               [0, 1, 0, 3],
               [2, 0, 4, 0],
               [0, 2, 0, 4]])
    """
    A = np.asarray(A)
    if d is None:
        d = A.shape[0]
    return np.kron(A.T, np.eye(d, dtype=A.dtype))


def left_right_superop(A: np.ndarray, B: np.ndarray) -> np.ndarray:
    """Superoperator of :math:`\\rho \\mapsto A \\rho B`, i.e. :math:`B^{\\mathsf{T}} \\otimes A`."""
    return np.kron(np.asarray(B).T, np.asarray(A))


def commutator_superop(A: np.ndarray) -> np.ndarray:
    """Superoperator of :math:`\\rho \\mapsto [A, \\rho]`.

    Examples:
        >>> commutator_superop(np.array([[1, 2], [3, 4]]))
        array([[ 0,  2, -3,  0],
               [ 3,  3,  0, -3],
               [-2,  0, -3,  2],
               [ 0, -2,  3,  0]])
    """
    return left_superop(A) - right_superop(A)


def anticommutator_superop(A: np.ndarray) -> np.ndarray:
    """Superoperator of :math:`\\rho \\mapsto \\{A, \\rho\\}`.

    Examples:
        >>> anticommutator_superop(np.array([[1, 2], [3, 4]]))
        array([[2, 2, 3, 0],
               [3, 5, 0, 3],
               [2, 0, 5, 2],
               [0, 2, 3, 8]])
    """
    return left_superop(A) + right_superop(A)


def hermitian_part(H: np.ndarray) -> np.ndarray:
    """Hermitian part :math:`(H + H^\\dagger)/2` of a square matrix."""
    H = _check_square(H)
    return (H + H.conj().T) / 2


def time_evolution_operator(H: np.ndarray, t: float) -> np.ndarray:
    r"""Unitary propagator.

    .. math::
        U(t) = \exp(-i \hat{H} t)

    Only the Hermitian part of `H` is exponentiated.

    Args:
        H (np.ndarray): Hamiltonian in Hilbert space.
        t (float): Evolution time.

    Returns:
        np.ndarray: The unitary :math:`U(t)`.
    """
    return sp.linalg.expm(-1j * hermitian_part(H) * t)


def time_evolution_superop(H: np.ndarray, t: float) -> np.ndarray:
    r"""Unitary evolution superoperator :math:`\rho \mapsto U \rho U^\dagger`.

    Args:
        H (np.ndarray): Hamiltonian in Hilbert space.
        t (float): Evolution time.

    Returns:
        np.ndarray: Liouville-space propagator of shape ``(d**2, d**2)``.
    """
    U = time_evolution_operator(H, t)
    return left_right_superop(U, U.conj().T)


def hamiltonian_evolution_superop(H: np.ndarray) -> np.ndarray:
    r"""Coherent Liouvillian :math:`-i[H, \cdot]`.

    Its exponential ``expm(L * t)`` equals `time_evolution_superop`.
    """
    return -1j * commutator_superop(hermitian_part(H))


def dissipator_superop(L: np.ndarray, M: Optional[np.ndarray] = None) -> np.ndarray:
    r"""Lindblad dissipator.

    .. math::
        \mathcal{D}[L, M](\rho)
        = L \rho M^\dagger - \tfrac{1}{2}\{M^\dagger L, \rho\}

    Args:
        L (np.ndarray): Jump operator.
        M (np.ndarray): Second jump operator of a cross term; `L` when
            omitted, which gives the usual :math:`\mathcal{D}[L]`.

    Returns:
        np.ndarray: Superoperator of shape ``(d**2, d**2)``.
    """
    L = np.asarray(L)
    M = L if M is None else np.asarray(M)
    Mdag = M.conj().T
    return left_right_superop(L, Mdag) - 0.5 * anticommutator_superop(Mdag @ L)


def lindbladian_superop(
    H: np.ndarray,
    Ls: Sequence[np.ndarray] = (),
    rates: Optional[np.ndarray] = None,
) -> np.ndarray:
    r"""Liouvillian of a Lindblad master equation.

    With a rate vector :math:`\gamma_i`:

    .. math::
        \mathcal{L} = -i[H, \cdot] + \sum_i \gamma_i \mathcal{D}[L_i]

    With a rate matrix :math:`\gamma_{nm}`:

    .. math::
        \mathcal{L} = -i[H, \cdot] + \sum_{n,m} \gamma_{nm} \mathcal{D}[L_n, L_m]

    Args:
        H (np.ndarray): Hamiltonian of shape ``(d, d)``.  A scalar is
            taken as a multiple of the identity, sized by the jump
            operators (``0`` gives a purely dissipative generator).
        Ls (Sequence[np.ndarray]): Jump operators, each ``(d, d)``.
        rates (np.ndarray): 1-D rates (one per jump operator) or a
            square 2-D matrix of cross rates.  Unit rates by default.

    Returns:
        np.ndarray: The generator, shape ``(d**2, d**2)``.

    Raises:
        ArgumentError: If the rates do not match the jump operators or
            a jump operator does not have the shape of `H`, or if `H` is
            a scalar and there are no jump operators to size it.

    Examples:
        >>> L = np.array([[0, 1], [0, 0]])
        >>> bool(np.allclose(lindbladian_superop(0, [L], [1]), dissipator_superop(L)))
        True
    """
    Ls = [np.asarray(L) for L in Ls]
    if np.ndim(H) == 0:
        if not Ls:
            raise ArgumentError(
                "A scalar Hamiltonian needs jump operators to fix its dimension."
            )
        H = H * np.eye(len(Ls[0]))
    H = _check_square(H)
    rates = np.ones(len(Ls)) if rates is None else np.asarray(rates)

    if rates.ndim == 1:
        if len(rates) != len(Ls):
            raise ArgumentError(
                f"Got {len(Ls)} jump operators but {len(rates)} rates."
            )
    elif rates.ndim == 2:
        if rates.shape != (len(Ls), len(Ls)):
            raise ArgumentError(
                f"Rate matrix must be {len(Ls)}x{len(Ls)}; got shape {rates.shape}."
            )
    else:
        raise ArgumentError(f"Rates must be 1-D or 2-D; got {rates.ndim}-D.")
    for L in Ls:
        if L.shape != H.shape:
            raise ArgumentError(
                f"Jump operator shape {L.shape} does not match H {H.shape}."
            )

    logger.debug(
        "Building Lindbladian: dim=%d, %d jump operators, %s rates",
        len(H),
        len(Ls),
        "cross" if rates.ndim == 2 else "diagonal",
    )
    superop = hamiltonian_evolution_superop(H)
    if rates.ndim == 1:
        for gamma, L in zip(rates, Ls):
            superop = superop + gamma * dissipator_superop(L)
    else:
        for n, Ln in enumerate(Ls):
            for m, Lm in enumerate(Ls):
                if rates[n, m] != 0:
                    superop = superop + rates[n, m] * dissipator_superop(Ln, Lm)
    return superop


def _check_square(A) -> np.ndarray:
    A = np.asarray(A)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionMismatch(f"Operator must be square; got shape {A.shape}.")
    return A
