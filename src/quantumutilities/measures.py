#! /usr/bin/env python
"""Quantum state quantifiers.

    - ``purity``: :math:`\\mathrm{Tr}(\\rho^2)`.
    - ``von_neumann_entropy``: :math:`-\\mathrm{Tr}(\\rho\\log\\rho)`.
    - ``entanglement_entropy``: Entropy of a reduced state.
    - ``negativity``: (Logarithmic) negativity from the partial transpose.

Subsystems are numbered from 1 and `dims` follows the tensor-product
ordering of `composite`.
"""

from typing import Optional, Sequence

import numpy as np

from . import composite


def purity(rho: np.ndarray) -> float:
    """
    Calculate the purity of a density matrix.

    The purity is defined as :math:`P(\\rho) = \\operatorname{Tr}(\\rho^2)`.
    Pure states have :math:`P = 1`, while a maximally mixed state in a
    Hilbert space of dimension :math:`d` has :math:`P = 1/d`.

    Args:

            rho (ndarray of shape (N, N)): Density matrix of the quantum state.

    Returns:

            float: Purity of the state, computed as ``real(trace(rho @ rho))``.

    Examples:
        >>> purity(np.eye(4) / 4)
        0.25
    """
    rho = np.asarray(rho)
    return float(np.real(np.trace(rho @ rho)))


def von_neumann_entropy(rho: np.ndarray, base: Optional[float] = None) -> float:
    """
    Compute the von Neumann entropy of a quantum state.

    In the eigenbasis of :math:`\\rho` the entropy reduces to
    :math:`S = -\\sum_i \\lambda_i \\log \\lambda_i`.  Eigenvalues of the
    Hermitian part of `rho` are used; non-positive ones do not contribute.

    Args:

            rho (ndarray of shape (N, N)): Density matrix.

            base (float, optional): Logarithm base; natural logarithm
            (nats) by default, ``2`` gives bits.

    Returns:

            float: The von Neumann entropy :math:`S(\\rho)`.
    """
    rho = np.asarray(rho)
    evals = np.linalg.eigvalsh((rho + rho.conj().T) / 2)
    evals = evals[evals > 0]
    entropy = -float(np.sum(evals * np.log(evals)))
    if base is not None:
        entropy /= np.log(base)
    return entropy


def entanglement_entropy(
    state: np.ndarray, trace, dims: Sequence[int], base: Optional[float] = None
) -> float:
    """Entropy of the state left after tracing out `trace`.

    For a pure `state` this is the entanglement entropy of the
    bipartition (traced subsystems vs. the rest).
    """
    return von_neumann_entropy(composite.partial_trace(state, trace, dims), base)


def negativity(
    rho: np.ndarray, transpose, dims: Sequence[int], logarithmic: bool = False
) -> float:
    """
    Compute the (logarithmic) negativity of a multipartite density matrix.

    The partial transpose is taken over the subsystem(s) `transpose` and
    the negativity is :math:`(\\lVert\\rho^{T_A}\\rVert_1 - 1)/2`, computed
    from the singular values.

    Args:

            rho (ndarray of shape (N, N)): Density matrix (or a pure state),
            with N = prod(dims).

            transpose (int or Sequence[int]): Subsystem(s) (1-based) to
            transpose.

            dims (Sequence[int]): Local Hilbert-space dimensions.

            logarithmic (bool, optional): If True, return the logarithmic
            negativity log2(2*N + 1). Otherwise return N.

    Returns:

            float: Negativity (or logarithmic negativity).
    """
    rho_pt = composite.partial_transpose(rho, transpose, dims)
    svals = np.linalg.svd(rho_pt, compute_uv=False)
    value = max(0.0, 0.5 * (float(np.sum(svals)) - 1.0))
    if logarithmic:
        return float(np.log2(2.0 * value + 1.0))
    return value
