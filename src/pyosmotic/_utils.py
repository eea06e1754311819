"""
Utility functions for xarray operations.
"""

from __future__ import annotations

import xarray as xr


def assign_compatible_coords(
    out: xr.DataArray,
    src: xr.Dataset | xr.DataArray,
) -> xr.DataArray:
    """
    Carry over coords from *src* whose dims are a subset of *out*'s dims.

    Scalar coords (e.g. a station ``lat``/``lon``) and coords spanning only
    output dims, such as a 2-D ``depth(profile, level)``, are attached even
    when none of the input variables carried them.
    """
    out_dims = set(out.dims)
    for name, coord in src.coords.items():
        if name not in out.coords and set(coord.dims) <= out_dims:
            out = out.assign_coords({name: coord})
    return out
