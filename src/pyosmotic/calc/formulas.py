"""
Pure formulas for the osmotic coefficient of seawater.

This module contains numpy-based functions that implement the elementwise
pieces of the TEOS-10 osmotic coefficient. These are independent of xarray
and can be used with scalars, numpy arrays, or within xr.apply_ufunc.

Undefined values are NaN and propagate through every formula.

References
----------
IOC, SCOR and IAPSO, 2010: The international thermodynamic equation of
    seawater - 2010: Calculation and use of thermodynamic properties.
    Intergovernmental Oceanographic Commission, Manuals and Guides No. 56,
    UNESCO (English), 196 pp. Available from http://www.TEOS-10.org
"""

import numpy as np
from .constants import R, T0, M_S

__all__ = [
    'molality',
    'ideal_solution_term',
    'osmotic_coefficient_from_potentials',
]


def molality(SA):
    """
    Compute the molality of seawater from Absolute Salinity.

    Parameters
    ----------
    SA : array_like
        Absolute Salinity [g/kg]

    Returns
    -------
    np.ndarray
        Molality [mol/kg]. NaN where ``SA`` is negative or NaN.
    """
    SA = np.asarray(SA, dtype=np.float64)
    out = np.full(SA.shape, np.nan)
    valid = SA >= 0
    with np.errstate(divide='ignore'):
        out[valid] = SA[valid] / (M_S * (1000 - SA[valid]))
    return out


def ideal_solution_term(b, t):
    """
    Compute the ideal-solution reference term b R T.

    Parameters
    ----------
    b : array_like
        Molality [mol/kg]
    t : array_like
        In-situ temperature [deg C]

    Returns
    -------
    array_like
        Ideal-solution term [J/kg]
    """
    return b * R * (T0 + t)


def osmotic_coefficient_from_potentials(g_pure, mu_w, part):
    """
    Combine the pure-water Gibbs function and the chemical potential of
    water into the osmotic coefficient.

    Parameters
    ----------
    g_pure : array_like
        Gibbs function of pure water at (t, p) [J/kg]
    mu_w : array_like
        Chemical potential of water in seawater at (SA, t, p) [J/kg]
    part : array_like
        Ideal-solution term, see :func:`ideal_solution_term` [J/kg]

    Returns
    -------
    array_like
        Osmotic coefficient [unitless]
    """
    return (g_pure - mu_w) / part
