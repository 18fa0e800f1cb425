"""Test configuration for camcolor."""

import pytest

SAMPLE_HUES = (0.0, 27.0, 60.0, 95.0, 120.0, 142.0, 180.0, 210.0, 250.0, 282.0, 320.0, 350.0)
SAMPLE_CHROMAS = (1.0, 16.0, 48.0, 100.0)
SAMPLE_LSTARS = (2.0, 25.0, 50.0, 75.0, 98.0)


@pytest.fixture(params=SAMPLE_HUES, ids=lambda h: f"h{h:g}")
def hue(request):
    return request.param


@pytest.fixture(scope="session")
def requests_grid():
    """Every (chroma, lstar) pair sampled for the property tests."""
    return [(c, lstar) for c in SAMPLE_CHROMAS for lstar in SAMPLE_LSTARS]
