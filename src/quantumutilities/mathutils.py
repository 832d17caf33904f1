#! /usr/bin/env python
"""Numerically careful scalar helpers.

    - ``usinc(x)``: Unnormalised sinc, :math:`\\sin(x)/x`.
    - ``realifclose(x, tol)``: Drop a negligible imaginary part.
    - ``scrap(x, tol)``: Set negligible real/imaginary parts to zero.
    - ``cauchy_quad(g, a, b)``: Cauchy principal value of
      :math:`\\int_a^b g(x)/x\\,dx`.

Tolerances default to the machine epsilon of the floating point type of
the input.  Scalars and NumPy arrays are both accepted; arrays are
processed elementwise (``realifclose`` requires every element to be
close to real).
"""

from typing import Callable, Optional

import numpy as np
import scipy as sp

from .shared import ArgumentError


def usinc(x):
    """Unnormalised sinc function, :math:`\\sin(x)/x` (1 at 0).

    Examples:
        >>> float(usinc(0.0))
        1.0
        >>> round(float(usinc(0.5)), 12)
        0.958851077208
    """
    return np.sinc(np.asarray(x) / np.pi)


def realifclose(x, tol: Optional[float] = None):
    """Real part of `x` if its imaginary part is below `tol`.

    Args:
        x (complex or np.ndarray): Input value(s).  Real and integer
            inputs are returned unchanged.
        tol (float): Tolerance on ``abs(imag(x))``; machine epsilon of
            the float type of `x` by default.

    Returns:
        The real part of `x` if (every element of) its imaginary part
        is smaller than `tol`, otherwise `x` itself.

    Examples:
        >>> realifclose(2 + 0j)
        2.0
        >>> realifclose(1e-21 + 1e-21j)
        1e-21
        >>> realifclose(1e-21 + 1e-21j, tol=1e-22)
        (1e-21+1e-21j)
    """
    if not np.iscomplexobj(x):
        return x
    if tol is None:
        tol = _eps(x)
    if np.all(np.abs(np.imag(x)) < tol):
        return x.real
    return x


def scrap(x, tol: Optional[float] = None):
    """Set components of `x` smaller than `tol` to zero.

    Real and imaginary parts are treated separately.  Integer inputs
    are returned unchanged.

    Examples:
        >>> float(scrap(1.2e-21))
        0.0
        >>> float(scrap(1.2e-21, tol=1e-22))
        1.2e-21
        >>> complex(scrap(1e-10 + 1e-25j))
        (1e-10+0j)
    """
    if not np.issubdtype(np.asarray(x).dtype, np.inexact):
        return x
    if tol is None:
        tol = _eps(x)
    if np.iscomplexobj(x):
        return _scrap_real(np.real(x), tol) + 1j * _scrap_real(np.imag(x), tol)
    return _scrap_real(x, tol)


def cauchy_quad(g: Callable[[float], float], a: float, b: float, **kwargs):
    """Cauchy principal value of :math:`\\int_a^b g(x)/x\\,dx`.

    The pole is removed by integrating
    :math:`(g(x) - g(0))/x + g(0)\\log|b/a|/(b - a)`, which has the
    same principal value and no singularity, with
    `scipy.integrate.quad` (break point at 0).

    Args:
        g (Callable): Integrand numerator, regular at 0.
        a (float): Lower bound, negative.
        b (float): Upper bound, positive.
        kwargs: Forwarded to `scipy.integrate.quad` (e.g. ``epsabs``,
            ``limit``, ``complex_func``).

    Returns:
        tuple: ``(value, abserr)`` as returned by `scipy.integrate.quad`.

    Raises:
        ArgumentError: If ``[a, b]`` does not contain 0 in its interior.

    Examples:
        >>> value, err = cauchy_quad(lambda x: 1 / (x + 1), -0.5, 0.5)
        >>> bool(np.isclose(value, -np.log(3)))
        True
    """
    if not a < 0 < b:
        raise ArgumentError(f"Domain [{a}, {b}] must include 0.")
    g0 = g(0.0)
    g0int = 0.0 if b == -a else g0 * np.log(abs(b / a)) / (b - a)

    def integrand(x):
        return (g(x) - g0) / x + g0int

    return sp.integrate.quad(integrand, a, b, points=[0.0], **kwargs)


def _eps(x) -> float:
    return np.finfo(np.real(np.asarray(x)).dtype).eps


def _scrap_real(x, tol):
    return np.where(np.abs(x) < tol, 0.0, x)[()]
