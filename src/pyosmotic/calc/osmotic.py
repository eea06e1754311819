"""
Osmotic coefficient of seawater (TEOS-10).

The osmotic coefficient is computed from the Gibbs function of pure water
and the chemical potential of water in seawater,

    phi = (g(0, t, p) - mu_w(SA, t, p)) / (b R (273.15 + t))

where b is the molality of seawater. Cells with negative or missing
salinity, missing temperature or pressure, or zero salinity give NaN.
"""

from __future__ import annotations

import logging
import numpy as np

from . import formulas as F
from .conform import check_nargs, conform_inputs, restore_orientation
from ..evaluators import Evaluator, get_evaluators

logger = logging.getLogger(__name__)

__all__ = [
    'osmotic_coefficient',
    'osmotic_coefficient_core',
]


def osmotic_coefficient_core(
    SA: np.ndarray,
    t: np.ndarray,
    p: np.ndarray,
    gibbs: Evaluator,
    chem_potential_water: Evaluator,
) -> np.ndarray:
    """
    Elementwise osmotic coefficient on same-shape arrays.

    No shape checking is done here; SA, t and p must already share one
    shape (any number of dimensions). The evaluators are only called on
    the computable cells, and their exceptions propagate unchanged.

    Parameters
    ----------
    SA, t, p : np.ndarray
        Absolute Salinity [g/kg], in-situ temperature [deg C] and sea
        pressure [dbar], all with the same shape.
    gibbs : callable
        ``gibbs(ns, nt, npr, SA, t, p)``, the Gibbs function of seawater.
    chem_potential_water : callable
        ``chem_potential_water(SA, t, p)``.

    Returns
    -------
    np.ndarray
        Osmotic coefficient [unitless], NaN where undefined.
    """
    SA = np.asarray(SA, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    p = np.asarray(p, dtype=np.float64)

    b = F.molality(SA)
    part = F.ideal_solution_term(b, t)

    computable = (
        ~np.isnan(SA) & ~np.isnan(t) & ~np.isnan(p) & ~np.isnan(part) & (part != 0)
    )
    out = np.full(SA.shape, np.nan)

    n_ok = int(np.count_nonzero(computable))
    logger.debug("Osmotic coefficient: %d of %d cells computable", n_ok, SA.size)
    if n_ok == 0:
        return out

    t_ok = t[computable]
    p_ok = p[computable]

    # Pure water reference state
    g_pure = gibbs(0, 0, 0, np.zeros_like(t_ok), t_ok, p_ok)
    mu_w = chem_potential_water(SA[computable], t_ok, p_ok)

    out[computable] = F.osmotic_coefficient_from_potentials(
        np.asarray(g_pure, dtype=np.float64),
        np.asarray(mu_w, dtype=np.float64),
        part[computable],
    )
    return out


def osmotic_coefficient(
    *args,
    gibbs: str | Evaluator | None = None,
    chem_potential_water: str | Evaluator | None = None,
) -> np.ndarray:
    """
    Calculate the osmotic coefficient of seawater.

    Parameters
    ----------
    SA : array_like
        Absolute Salinity [g/kg], shape (M, N).
    t : array_like
        In-situ temperature (ITS-90) [deg C], same shape as SA.
    p : array_like
        Sea pressure [dbar] (absolute pressure - 10.1325 dbar), with shape
        1x1, Mx1, 1xN or MxN. A transposed vector (1xM or Nx1) is also
        accepted.
    gibbs : callable or str, optional
        Gibbs function evaluator. Defaults to the ``gibbs`` option.
    chem_potential_water : callable or str, optional
        Chemical potential of water evaluator. Defaults to the
        ``chem_potential_water`` option.

    Returns
    -------
    np.ndarray
        Osmotic coefficient of seawater [unitless], same shape as SA.
        NaN where SA is negative or NaN, where t or p is NaN, and where
        SA is zero.

    Raises
    ------
    ArgumentCountError
        If not called with exactly three inputs.
    ShapeMismatchError
        If SA and t differ in shape or p cannot be conformed to SA.

    Examples
    --------
    >>> phi = osmotic_coefficient([[35.0]], [[10.0]], [[100.0]])
    >>> phi.shape
    (1, 1)
    """
    check_nargs(args, 'osmotic_coefficient')
    conformed = conform_inputs(*args)
    gibbs, chem_potential_water = get_evaluators(gibbs, chem_potential_water)

    out = osmotic_coefficient_core(
        conformed.SA,
        conformed.t,
        conformed.p,
        gibbs,
        chem_potential_water,
    )
    return restore_orientation(out, conformed)
