"""
Runtime options for pyosmotic.

This module holds the global option registry that selects the external
thermodynamic evaluators. Options can be set globally or temporarily:

>>> import pyosmotic
>>> pyosmotic.set_options(keep_coords=False)
>>> with pyosmotic.set_options(gibbs=my_gibbs):
...     phi = pyosmotic.osmotic_coefficient(SA, t, p)
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Mapping

logger = logging.getLogger(__name__)

__all__ = [
    'OPTIONS',
    'set_options',
    'get_options',
]

OPTIONS: dict[str, Any] = {
    'gibbs': 'gsw.gibbs',
    'chem_potential_water': 'pyosmotic.evaluators.gsw_chem_potential_water',
    'keep_coords': True,
}


def _is_evaluator(value: Any) -> bool:
    if callable(value):
        return True
    return isinstance(value, str) and '.' in value.strip('.')


_VALIDATORS: dict[str, tuple[Callable[[Any], bool], str]] = {
    'gibbs': (_is_evaluator, "a callable or a dotted 'module.attribute' path"),
    'chem_potential_water': (_is_evaluator, "a callable or a dotted 'module.attribute' path"),
    'keep_coords': (lambda v: isinstance(v, bool), 'a boolean'),
}


class set_options:
    """
    Set options for pyosmotic, globally or within a context.

    Parameters
    ----------
    gibbs : callable or str, optional
        Gibbs function of seawater [J/kg], called as
        ``gibbs(ns, nt, npr, SA, t, p)``. Default ``'gsw.gibbs'``.
    chem_potential_water : callable or str, optional
        Chemical potential of water in seawater [J/kg], called as
        ``chem_potential_water(SA, t, p)``. Both evaluators must return
        J/kg. Default ``'pyosmotic.evaluators.gsw_chem_potential_water'``,
        which converts the J/g output of
        ``gsw.chem_potential_water_t_exact``.
    keep_coords : bool, optional
        Whether outputs of the xarray accessor carry the Dataset's non-index
        coords. When False only index coords are kept. Default True.

    Raises
    ------
    ValueError
        On unknown option names or invalid values.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.old: dict[str, Any] = {}
        for key, value in kwargs.items():
            if key not in OPTIONS:
                valid = ', '.join(sorted(OPTIONS))
                raise ValueError(
                    f"Unknown option '{key}'. Available: {valid}"
                )
            check, expected = _VALIDATORS[key]
            if not check(value):
                raise ValueError(
                    f"Invalid value for option '{key}': {value!r}. Expected {expected}."
                )
            self.old[key] = OPTIONS[key]
        self._apply(kwargs)

    def _apply(self, options: Mapping[str, Any]) -> None:
        for key, value in options.items():
            logger.debug("Setting option %s=%r", key, value)
        OPTIONS.update(options)

    def __enter__(self) -> None:
        return None

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self._apply(self.old)


def get_options() -> Mapping[str, Any]:
    """Return a read-only view of a snapshot of the current options."""
    return MappingProxyType(dict(OPTIONS))
