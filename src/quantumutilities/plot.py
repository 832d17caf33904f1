#! /usr/bin/env python
r"""Plotting utilities for density matrices.

Contents:

        - `basis_labels`: LaTeX kets for the computational basis of a
          composite system.

        - `density_matrix`: 3D bar plot of :math:`\lvert\rho\rvert`.

        - `density_matrix_animation`: Animated 3D bar plot of
          :math:`\lvert\rho\rvert` over time (e.g. a reduced trajectory
          from `dynamics.reduced_time_evolution`).

        - `_format_label`: Helper that wraps text in a Dirac ket for LaTeX.

Functions draw with Matplotlib's 3D toolkit.  Pass an existing `Axes3D`
to `density_matrix` to integrate it into a larger figure.
"""

from typing import Optional, Sequence

import matplotlib.cm as cm
import matplotlib.colors as colors
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from .composite import subsystem_indices


def basis_labels(dims: Sequence[int]) -> list:
    """Ket labels of the composite basis.

    Args:
            dims (Sequence[int]): Subsystem dimensions.

    Returns:
            list[str]: One LaTeX label per composite index, e.g.
            ``"$\\vert 0,1 \\rangle$"``, ordered like `composite.tensor`.

    Examples:
        >>> labels = basis_labels((2, 3))
        >>> len(labels)
        6
        >>> print(labels[4])
        $\\vert 1,1 \\rangle$
    """
    return [
        _format_label(",".join(map(str, idx))) for idx in subsystem_indices(dims)
    ]


def density_matrix(
    rho: np.ndarray,
    ax=None,
    bar3d_kwargs: Optional[dict] = None,
    axes_kwargs: Optional[dict] = None,
):
    """Density matrix bar plot.

    Draws :math:`\\lvert\\rho_{ij}\\rvert` as 3D bars coloured by
    magnitude.

    Args:
            rho (np.ndarray): Density matrix of shape (N, N).
            ax (Axes3D, optional): Axes to draw on; a new figure with 3D
                axes is created when omitted.
            bar3d_kwargs (dict): Keyword arguments forwarded to `Axes3D.bar3d`.
            axes_kwargs (dict): Keyword arguments forwarded to `Axes3D.set`.

    Returns:
            Axes3D: The axes that were drawn on.
    """
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(projection="3d")
    _bar3d(ax, rho, bar3d_kwargs or {}, axes_kwargs or {})
    return ax


def density_matrix_animation(rhos, frames, bar3d_kwargs, axes_kwargs):
    """Density matrix bar-plot animation.

    Builds a 3D bar plot over time from a sequence of density matrices,
    coloring bars by magnitude and returning a `FuncAnimation`.

    Args:
            rhos (Sequence[np.ndarray]): Time-ordered density matrices ρ_t
                (each shape: (N, N)).
            frames (int): Number of frames to render in the animation.
            bar3d_kwargs (dict): Keyword arguments forwarded to `Axes3D.bar3d`.
            axes_kwargs (dict): Keyword arguments forwarded to `Axes3D.set`.

    Returns:
            matplotlib.animation.FuncAnimation: The configured animation object.
    """
    fig = plt.figure()
    ax = fig.add_subplot(projection="3d")

    def anim_func(t):
        return _bar3d(ax, rhos[t], bar3d_kwargs, axes_kwargs)

    return FuncAnimation(fig, anim_func, frames=frames)


def _bar3d(ax, rho, bar3d_kwargs, axes_kwargs):
    Z = np.abs(rho)
    X, Y = np.meshgrid(range(len(Z)), range(len(Z)))
    X, Y, Z = X.flatten(), Y.flatten(), Z.flatten()

    fracs = Z.astype(float) / Z.max() if Z.max() > 0 else Z.astype(float)
    norm = colors.Normalize(fracs.min(), fracs.max())
    color_values = cm.jet(norm(fracs))

    ax.cla()
    ax.set(**axes_kwargs)
    return ax.bar3d(
        X,
        Y,
        np.zeros_like(X),
        np.ones_like(X),
        np.ones_like(Y),
        Z,
        color=color_values,
        **bar3d_kwargs,
    )


def _format_label(t):
    """LaTeX ket formatter.

    Args:
            t (str): Bare label text (e.g., ``"0,1"``).

    Returns:
            str: LaTeX string ``"$\\vert {t} \\rangle$"``.
    """
    return f"$\\vert {t} \\rangle$"
