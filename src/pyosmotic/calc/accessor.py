"""
xarray accessor for TEOS-10 seawater datasets.

This module provides:
- TEOSAccessor: Extends xarray.Dataset with seawater property calculations

Usage:
    ds.teos.osmotic_coefficient   # Osmotic coefficient of seawater
    ds.teos.molality              # Molality of seawater
    ds.teos.validate_inputs()     # Check that SA, t and p are present
"""

from __future__ import annotations

import warnings
import xarray as xr

from .seawater import SeawaterMixin
from .._utils import assign_compatible_coords
from ..config import OPTIONS

__all__ = [
    'TEOSAccessor',
]


@xr.register_dataset_accessor('teos')
class TEOSAccessor(SeawaterMixin):
    """
    xarray accessor for TEOS-10 seawater datasets.

    Provides:
    - Input lookup by canonical name or common alias
    - Seawater property calculations via SeawaterMixin
    - Input validation for diagnostics

    Examples
    --------
    >>> ds.teos.osmotic_coefficient      # Osmotic coefficient
    >>> ds.teos.get_input('p')           # Sea pressure, e.g. ds['pres']
    """

    # Variable names accepted for each input, first match wins
    VAR_ALIASES: dict[str, tuple[str, ...]] = {
        'SA': ('SA', 'sa', 'absolute_salinity'),
        't': ('t', 'temp', 'temperature', 'in_situ_temperature'),
        'p': ('p', 'pres', 'pressure', 'sea_pressure'),
    }

    def __init__(self, xarray_obj: xr.Dataset) -> None:
        self._ds = xarray_obj

    def _find_input(self, name: str) -> str | None:
        if name not in self.VAR_ALIASES:
            valid = ', '.join(self.VAR_ALIASES)
            raise ValueError(
                f"Unknown input '{name}'. Available: {valid}"
            )
        for alias in self.VAR_ALIASES[name]:
            if alias in self._ds:
                return alias
        return None

    def get_input(self, name: str) -> xr.DataArray:
        """
        Return the variable for input *name* ('SA', 't' or 'p').

        Raises
        ------
        KeyError
            If no variable matches the input or any of its aliases.
        """
        var_name = self._find_input(name)
        if var_name is None:
            aliases = ', '.join(self.VAR_ALIASES[name])
            raise KeyError(
                f"No variable for input '{name}'. Tried: {aliases}"
            )
        return self._ds[var_name]

    def validate_inputs(self, mode: str = 'raise') -> bool:
        """
        Check that SA, t and p are all present in the Dataset.

        Parameters
        ----------
        mode : {'raise', 'warn', 'ignore'}, optional
            - ``'raise'``: raise ValueError on missing inputs (default)
            - ``'warn'``: emit warnings and continue
            - ``'ignore'``: skip the check

        Returns
        -------
        bool
            True when every input was found.
        """
        if mode not in {'raise', 'warn', 'ignore'}:
            raise ValueError(
                f"Invalid mode='{mode}'. Expected one of: 'raise', 'warn', 'ignore'."
            )

        missing = [name for name in self.VAR_ALIASES if self._find_input(name) is None]
        if not missing or mode == 'ignore':
            return not missing

        detail = ', '.join(
            f"{name} (tried {', '.join(self.VAR_ALIASES[name])})" for name in missing
        )
        message = f"Missing inputs for osmotic coefficient: {detail}."

        if mode == 'warn':
            warnings.warn(message, stacklevel=3)
            return False

        raise ValueError(message)

    def _finalize(self, out: xr.DataArray) -> xr.DataArray:
        if OPTIONS['keep_coords']:
            return assign_compatible_coords(out, self._ds)
        return out.reset_coords(drop=True)
