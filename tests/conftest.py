"""Shared market data fixtures for swaptionlib tests."""

import math
from datetime import date

import pytest

from swaptionlib.conventions import ACT_365F
from swaptionlib.curves import FlatForwardCurve, InterpolatedDiscountCurve
from swaptionlib.indexes import Estr, Euribor6M
from swaptionlib.quotes import SimpleQuote

REFERENCE_DATE = date(2024, 3, 15)


@pytest.fixture
def reference_date() -> date:
    return REFERENCE_DATE


@pytest.fixture
def flat_curve() -> FlatForwardCurve:
    """3% continuously compounded, ACT/365F."""
    return FlatForwardCurve(REFERENCE_DATE, 0.03, ACT_365F)


@pytest.fixture
def interpolated_curve() -> InterpolatedDiscountCurve:
    """Upward sloping curve on yearly pillars."""
    times = [1.0, 2.0, 5.0, 10.0, 20.0]
    zeros = [0.025, 0.028, 0.031, 0.033, 0.034]
    dfs = [math.exp(-z * t) for z, t in zip(zeros, times)]
    return InterpolatedDiscountCurve(REFERENCE_DATE, times, dfs, name="EUR")


@pytest.fixture
def euribor6m(flat_curve) -> Euribor6M:
    return Euribor6M(flat_curve)


@pytest.fixture
def estr(flat_curve) -> Estr:
    return Estr(flat_curve)


@pytest.fixture
def vol_quote() -> SimpleQuote:
    return SimpleQuote(0.20)

