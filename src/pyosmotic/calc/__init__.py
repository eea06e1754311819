"""
Calculation modules for TEOS-10 seawater properties.

This package provides the osmotic coefficient of seawater and its building
blocks. The labelled interface is through the xarray accessor (ds.teos),
which is automatically registered when importing pyosmotic.

Submodules
----------
constants : Physical constants used in calculations
formulas : Pure computational functions (can be used independently)
conform : Shape validation and broadcasting of (SA, t, p) inputs
osmotic : Osmotic coefficient of seawater
"""

from . import constants
from . import formulas
from .osmotic import osmotic_coefficient

__all__ = [
    'constants',
    'formulas',
    'osmotic_coefficient',
]
