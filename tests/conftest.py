"""
Shared fixtures: analytic stand-ins for the external TEOS-10 evaluators.

The stubs are built so that the osmotic coefficient is exactly PHI at every
computable cell, which makes broadcasting and masking easy to check.
"""

import numpy as np
import pytest

import pyosmotic
from pyosmotic.calc import formulas as F

PHI = 0.9


def _pure_water_gibbs(t, p):
    return -4.0 * t + 0.1 * p - 150.0


def stub_gibbs(ns, nt, npr, SA, t, p):
    assert (ns, nt, npr) == (0, 0, 0)
    # Non-zero SA would shift the result away from PHI
    return _pure_water_gibbs(t, p) + 1000.0 * np.asarray(SA)


def stub_chem_potential_water(SA, t, p):
    part = F.ideal_solution_term(F.molality(SA), t)
    return _pure_water_gibbs(t, p) - PHI * part


class RecordingEvaluator:
    """Wrap an evaluator and keep the arguments of every call."""

    def __init__(self, func):
        self.func = func
        self.calls = []

    def __call__(self, *args):
        self.calls.append(tuple(np.array(a, copy=True) for a in args))
        return self.func(*args)


@pytest.fixture
def stub_evaluators():
    with pyosmotic.set_options(
        gibbs=stub_gibbs,
        chem_potential_water=stub_chem_potential_water,
    ):
        yield stub_gibbs, stub_chem_potential_water


@pytest.fixture
def grid():
    """A 3x4 grid of plausible ocean values."""
    SA = np.array([
        [34.0, 34.5, 35.0, 35.5],
        [33.0, 34.0, 35.0, 36.0],
        [30.0, 32.0, 34.0, 36.5],
    ])
    t = np.array([
        [25.0, 20.0, 15.0, 10.0],
        [ 5.0,  4.0,  3.0,  2.0],
        [ 1.0,  0.5, 12.0, 28.0],
    ])
    p = np.array([
        [0.0, 10.0, 100.0, 500.0],
        [1000.0, 2000.0, 3000.0, 4000.0],
        [50.0, 150.0, 250.0, 350.0],
    ])
    return SA, t, p
