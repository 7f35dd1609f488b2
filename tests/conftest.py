"""Pytest configuration and shared fixtures."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random generator for reproducible wobble."""
    return np.random.default_rng(0)


@pytest.fixture
def fig_ax():
    """A fresh figure with one axes, closed after the test."""
    fig, ax = plt.subplots(figsize=(6.4, 4.8), dpi=100)
    yield fig, ax
    plt.close(fig)
