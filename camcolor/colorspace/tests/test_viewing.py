"""Tests for viewing environment construction."""

import dataclasses
import math

import pytest

from camcolor.colorspace import DEFAULT_ENVIRONMENT, ViewingEnvironment
from camcolor.colorspace.utils import y_from_lstar
from camcolor.errors import ViewingEnvironmentError


class TestDefaultEnvironment:
    """The default environment: average surround, mid-gray background."""

    def test_average_surround(self):
        assert DEFAULT_ENVIRONMENT.c == pytest.approx(0.69)
        assert DEFAULT_ENVIRONMENT.nc == pytest.approx(1.0)

    def test_background_ratio(self):
        n = y_from_lstar(50.0) / 100.0
        assert DEFAULT_ENVIRONMENT.n == pytest.approx(n)
        assert DEFAULT_ENVIRONMENT.z == pytest.approx(1.48 + math.sqrt(n))

    def test_induction_factors_match(self):
        assert DEFAULT_ENVIRONMENT.nbb == DEFAULT_ENVIRONMENT.ncb
        assert DEFAULT_ENVIRONMENT.nbb == pytest.approx(0.725 / DEFAULT_ENVIRONMENT.n ** 0.2)

    def test_fl_root_is_fourth_root(self):
        assert DEFAULT_ENVIRONMENT.fl_root ** 4 == pytest.approx(DEFAULT_ENVIRONMENT.fl)

    def test_same_as_fresh_make(self):
        """Built from the same parameters, environments compare equal."""
        assert ViewingEnvironment.make() == DEFAULT_ENVIRONMENT

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_ENVIRONMENT.fl = 1.0


class TestMake:
    """Test coefficient derivation."""

    def test_discounting_illuminant_changes_rgb_d(self):
        """Full adaptation (d = 1) replaces the partial default discounting."""
        env = ViewingEnvironment.make(discounting_illuminant=True)
        for d in env.rgb_d:
            assert d > 0
        default_d = DEFAULT_ENVIRONMENT.rgb_d
        assert env.rgb_d != default_d

    def test_dark_surround(self):
        env = ViewingEnvironment.make(surround=0.0)
        assert env.c == pytest.approx(0.525)
        assert env.nc == pytest.approx(0.8)

    def test_dim_surround(self):
        env = ViewingEnvironment.make(surround=1.0)
        assert env.c == pytest.approx(0.59)

    def test_brighter_adaptation_raises_fl(self):
        dim = ViewingEnvironment.make(adapting_luminance=10.0)
        bright = ViewingEnvironment.make(adapting_luminance=1000.0)
        assert bright.fl > dim.fl

    @pytest.mark.parametrize("kwargs", [
        {"adapting_luminance": 0.0},
        {"adapting_luminance": -5.0},
        {"background_lstar": 0.0},
        {"background_lstar": 101.0},
        {"surround": 2.5},
        {"surround": -0.1},
        {"white_point": (95.0, 0.0, 108.0)},
    ])
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ViewingEnvironmentError):
            ViewingEnvironment.make(**kwargs)
