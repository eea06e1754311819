"""
Input conformance for gridded (M x N) seawater functions.

This module validates the argument count and shapes of (SA, t, p) inputs,
broadcasts sea pressure onto the SA/t grid, and normalizes single-row
inputs to column form. Functions computing on the conformed arrays can
assume three float64 arrays of identical 2-D shape.
"""

from __future__ import annotations

import logging
import numpy as np
from typing import NamedTuple, Sequence

from ..errors import ArgumentCountError, ShapeMismatchError

logger = logging.getLogger(__name__)

__all__ = [
    'ConformedInputs',
    'check_nargs',
    'conform_inputs',
    'restore_orientation',
]


class ConformedInputs(NamedTuple):
    """SA, t and p on a common grid, plus what is needed to undo it."""
    SA: np.ndarray
    t: np.ndarray
    p: np.ndarray
    transposed: bool
    shape: tuple[int, ...]


def check_nargs(args: Sequence, func_name: str, expected: int = 3) -> None:
    """Raise ArgumentCountError unless exactly *expected* inputs were given."""
    if len(args) != expected:
        raise ArgumentCountError(
            f"{func_name}: Requires {expected} inputs, got {len(args)}"
        )


def _as_grid(name: str, x) -> np.ndarray:
    """Copy *x* to a float64 array of at least two dimensions."""
    arr = np.array(x, dtype=np.float64)
    if arr.ndim > 2:
        raise ShapeMismatchError(
            f"{name} must have at most 2 dimensions, got ndim={arr.ndim}"
        )
    return np.atleast_2d(arr)


def _broadcast_pressure(p: np.ndarray, shape: tuple[int, int]) -> np.ndarray:
    """
    Conform p to the (M, N) grid of SA.

    Rules are checked in order and the first match wins:

    1. 1x1: replicated to every element.
    2. 1xN: replicated down all M rows.
    3. Mx1: replicated across all N columns.
    4. 1xM: a transposed column, transposed then replicated across N.
    5. Nx1: a transposed row, transposed then replicated down M.
    6. MxN: used as is.
    """
    ms, ns = shape
    mp, np_ = p.shape

    if mp == 1 and np_ == 1:
        rule = 'scalar'
    elif mp == 1 and np_ == ns:
        rule = 'row'
    elif mp == ms and np_ == 1:
        rule = 'column'
    elif mp == 1 and np_ == ms:
        rule = 'transposed column'
        p = p.T
    elif mp == ns and np_ == 1:
        rule = 'transposed row'
        p = p.T
    elif mp == ms and np_ == ns:
        rule = 'grid'
    else:
        raise ShapeMismatchError(
            f"p with shape {p.shape} cannot be conformed to SA with shape {shape}"
        )

    logger.debug("Conformed p %s -> %s (%s rule)", (mp, np_), shape, rule)
    return np.broadcast_to(p, shape).copy()


def conform_inputs(SA, t, p) -> ConformedInputs:
    """
    Validate and conform (SA, t, p) to a common 2-D grid.

    Parameters
    ----------
    SA : array_like
        Absolute Salinity [g/kg], shape (M, N). A scalar is treated as
        1x1 and a 1-D array as a 1xN row.
    t : array_like
        In-situ temperature [deg C], same shape as SA.
    p : array_like
        Sea pressure [dbar], shape 1x1, 1xN, Mx1, 1xM, Nx1 or MxN.

    Returns
    -------
    ConformedInputs
        Copies of SA, t and p with identical shape. When SA is a single
        row all three are transposed to column form and ``transposed``
        is set.

    Raises
    ------
    ShapeMismatchError
        If SA and t differ in shape, if p matches no broadcast rule, or if
        any input has more than two dimensions.
    """
    shape = np.shape(SA)
    SA = _as_grid('SA', SA)
    t = _as_grid('t', t)
    p = _as_grid('p', p)

    if SA.shape != t.shape:
        raise ShapeMismatchError(
            f"SA and t must have same dimensions, got {SA.shape} and {t.shape}"
        )

    p = _broadcast_pressure(p, SA.shape)

    # Single rows are processed as columns
    transposed = SA.shape[0] == 1
    if transposed:
        SA, t, p = SA.T, t.T, p.T
        logger.debug("Transposed single-row inputs to shape %s", SA.shape)

    return ConformedInputs(SA, t, p, transposed, shape)


def restore_orientation(result: np.ndarray, conformed: ConformedInputs) -> np.ndarray:
    """Undo the single-row transposition and restore the original SA shape."""
    if conformed.transposed:
        result = result.T
    return result.reshape(conformed.shape)
