"""Special functions used by the distribution densities."""

from __future__ import annotations

import numpy as np

from .._numeric import errstate

# Lanczos approximation, g = 7, nine coefficients.
_LANCZOS_G = 7
_LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)
_SQRT_2PI = np.sqrt(2.0 * np.pi)


def gamma(z: float) -> float:
    """Evaluate the Gamma function with the Lanczos approximation.

    Args:
        z (float): Real argument. Integer and half-integer values (as used
            for degrees of freedom in the t, chi-square and F densities) are
            both supported.

    Returns:
        float: ``Γ(z)``, accurate to roughly 15 significant digits on the
        positive real axis. Poles (zero and negative integers) yield a very
        large or infinite value rather than an error.

    Note:
        For ``z < 0.5`` the reflection formula
        ``Γ(z) = π / (sin(πz) · Γ(1 − z))`` is applied.

    References:
        Lanczos, C. (1964). A precision approximation of the gamma function.
    """
    z = float(z)
    with errstate():
        if z < 0.5:
            return float(np.pi / (np.sin(np.pi * z) * gamma(1.0 - z)))

        z -= 1.0
        x = _LANCZOS_COEFFICIENTS[0]
        for i in range(1, _LANCZOS_G + 2):
            x += _LANCZOS_COEFFICIENTS[i] / (z + i)

        t = z + _LANCZOS_G + 0.5
        return float(_SQRT_2PI * np.power(t, z + 0.5) * np.exp(-t) * x)
