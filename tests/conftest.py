"""Pytest configuration and shared fixtures for KindConf tests."""

import pytest

from kindconf import Form


def make_example_form() -> Form:
    """Build the five-item form used throughout the tests."""
    return (
        Form()
        .item("num_zones", 5000, "Number of grid cells to use")
        .item("tfinal", 0.2, "Time at which to stop the simulation")
        .item("rk_order", 2, "Runge-Kutta time integration order")
        .item("quiet", False, "Suppress the iteration message")
        .item("outdir", "data", "Directory where output files are written")
    )


@pytest.fixture
def form() -> Form:
    """Create the example form with its declared defaults."""
    return make_example_form()
