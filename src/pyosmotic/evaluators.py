"""
External thermodynamic evaluators.

The osmotic coefficient needs two functions it does not implement: the
Gibbs function of seawater and the chemical potential of water. By default
both come from the TEOS-10 GSW toolbox (the ``gsw`` package), with results
in J/kg. Any callables returning J/kg with the same signatures can be used
instead, see :class:`pyosmotic.config.set_options`.
"""

from __future__ import annotations

import logging
import importlib
from typing import Any, Callable

from .config import OPTIONS
from .errors import EvaluatorError

logger = logging.getLogger(__name__)

__all__ = [
    'resolve_evaluator',
    'get_evaluators',
    'gsw_chem_potential_water',
]

Evaluator = Callable[..., Any]


def resolve_evaluator(target: str | Evaluator) -> Evaluator:
    """
    Turn an evaluator option into a callable.

    Parameters
    ----------
    target : callable or str
        A callable is returned unchanged. A string is a dotted
        ``'module.attribute'`` path, imported on demand.

    Returns
    -------
    callable

    Raises
    ------
    EvaluatorError
        If the module cannot be imported or has no such callable.
    """
    if callable(target):
        return target

    module_name, _, attr = target.rpartition('.')
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise EvaluatorError(
            f"Cannot import module '{module_name}' for evaluator '{target}'"
        ) from e

    func = getattr(module, attr, None)
    if not callable(func):
        version = getattr(module, '__version__', 'unknown')
        raise EvaluatorError(
            f"Module '{module_name}' (version {version}) has no callable '{attr}'"
        )

    logger.debug("Resolved evaluator %s", target)
    return func


def get_evaluators(
    gibbs: str | Evaluator | None = None,
    chem_potential_water: str | Evaluator | None = None,
) -> tuple[Evaluator, Evaluator]:
    """
    Return the ``(gibbs, chem_potential_water)`` pair to use for one call.

    Explicit arguments take precedence over the configured options.
    """
    if gibbs is None:
        gibbs = OPTIONS['gibbs']
    if chem_potential_water is None:
        chem_potential_water = OPTIONS['chem_potential_water']
    return resolve_evaluator(gibbs), resolve_evaluator(chem_potential_water)


def gsw_chem_potential_water(SA, t, p):
    """
    Chemical potential of water in seawater from gsw, in J/kg.

    ``gsw.chem_potential_water_t_exact`` returns J/g while ``gsw.gibbs``
    returns J/kg; the osmotic coefficient needs both in J/kg.

    Parameters
    ----------
    SA : array_like
        Absolute Salinity [g/kg]
    t : array_like
        In-situ temperature [deg C]
    p : array_like
        Sea pressure [dbar]

    Returns
    -------
    array_like
        Chemical potential of water [J/kg]
    """
    import gsw

    return 1e3 * gsw.chem_potential_water_t_exact(SA, t, p)
