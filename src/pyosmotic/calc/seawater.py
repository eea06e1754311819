"""
Seawater property calculations mixin for TEOS-10 datasets.

This module provides the SeawaterMixin class which adds osmotic
diagnostics to the TEOS accessor.
"""

from __future__ import annotations

import numpy as np
import xarray as xr

from . import formulas as F
from .osmotic import osmotic_coefficient_core
from ..evaluators import get_evaluators

__all__ = [
    'SeawaterMixin',
]


def _molality_block(SA):
    return F.molality(SA)


def _osmotic_block(SA, t, p, gibbs, chem_potential_water):
    # apply_ufunc hands over broadcast-compatible, not broadcast, blocks
    SA, t, p = np.broadcast_arrays(SA, t, p)
    return osmotic_coefficient_core(SA, t, p, gibbs, chem_potential_water)


class SeawaterMixin:
    """
    Mixin class providing seawater property calculations.

    All properties return xr.DataArray with CF-style attributes and work
    lazily on dask-backed datasets.

    Available Properties
    --------------------
    - ``molality`` : Molality of seawater [mol/kg]
    - ``osmotic_coefficient`` : Osmotic coefficient of seawater [1]
    """

    def _apply(self, func, *args: xr.DataArray, **kwargs) -> xr.DataArray:
        out = xr.apply_ufunc(
            func,
            *args,
            kwargs=kwargs,
            dask='parallelized',
            output_dtypes=[np.float64],
        )
        return self._finalize(out)

    @property
    def molality(self) -> xr.DataArray:
        """Molality of seawater [mol/kg]."""
        SA = self.get_input('SA')
        b = self._apply(_molality_block, SA)
        b.attrs.update({
            'long_name': 'molality of seawater',
            'units': 'mol kg-1',
        })
        return b.rename('molality')

    @property
    def osmotic_coefficient(self) -> xr.DataArray:
        """Osmotic coefficient of seawater [1]."""
        self.validate_inputs()
        gibbs, chem_potential_water = get_evaluators()
        phi = self._apply(
            _osmotic_block,
            self.get_input('SA'),
            self.get_input('t'),
            self.get_input('p'),
            gibbs=gibbs,
            chem_potential_water=chem_potential_water,
        )
        phi.attrs.update({
            'long_name': 'osmotic coefficient of seawater',
            'units': '1',
        })
        return phi.rename('osmotic_coefficient')
