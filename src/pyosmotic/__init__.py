"""
pyosmotic - Osmotic coefficient of seawater (TEOS-10)

A package for computing the osmotic coefficient of seawater from Absolute
Salinity, in-situ temperature and sea pressure, on plain arrays or on
xarray Datasets.

Example
-------
>>> import pyosmotic
>>> phi = pyosmotic.osmotic_coefficient(SA, t, p)   # numpy arrays
>>> ds.teos.osmotic_coefficient                     # xarray Dataset
"""

# Register xarray accessor (side-effect import)
from .calc import accessor  # noqa: F401

from .calc.osmotic import osmotic_coefficient
from .config import get_options, set_options
from .errors import (
    ArgumentCountError,
    EvaluatorError,
    OsmoticError,
    ShapeMismatchError,
)

__version__ = '0.1.0'

__all__ = [
    'osmotic_coefficient',
    'set_options',
    'get_options',
    'OsmoticError',
    'ArgumentCountError',
    'ShapeMismatchError',
    'EvaluatorError',
]
