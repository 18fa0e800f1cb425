"""Tests for vectorized hue/chroma/tone decoding."""

import numpy as np
import pytest

from camcolor.colorspace import (
    ViewingEnvironment,
    decode_to_hue_chroma_tone,
    from_color_in_environment,
    hue_chroma_tone_from_argb,
    hue_chroma_tone_from_srgb,
)
from camcolor.colorspace.batch import srgb_to_linear

CHROMATIC = [0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF3366CC, 0xFFE0A030, 0xFF12B0A0, 0xFF8822AA]


class TestMatchesScalar:
    """Batch results agree with the scalar transform."""

    def test_argb_array(self):
        hue, chroma, tone = hue_chroma_tone_from_argb(np.array(CHROMATIC, dtype=np.int64))
        for i, argb in enumerate(CHROMATIC):
            expected = decode_to_hue_chroma_tone(argb)
            assert hue[i] == pytest.approx(expected.hue, abs=1e-6)
            assert chroma[i] == pytest.approx(expected.chroma, abs=1e-6)
            assert tone[i] == pytest.approx(expected.tone, abs=1e-6)

    def test_random_colors(self):
        rng = np.random.default_rng(3)
        colors = 0xFF000000 | rng.integers(0, 1 << 24, size=64)
        _, chroma, tone = hue_chroma_tone_from_argb(colors)
        expected = [decode_to_hue_chroma_tone(int(c)) for c in colors]
        np.testing.assert_allclose(chroma, [e.chroma for e in expected], atol=1e-6)
        np.testing.assert_allclose(tone, [e.tone for e in expected], atol=1e-6)

    def test_other_environment(self):
        env = ViewingEnvironment.make(adapting_luminance=40.0, surround=1.0)
        hue, chroma, _ = hue_chroma_tone_from_argb(np.array(CHROMATIC), env)
        for i, argb in enumerate(CHROMATIC):
            cam = from_color_in_environment(argb, env)
            assert hue[i] == pytest.approx(cam.hue, abs=1e-6)
            assert chroma[i] == pytest.approx(cam.chroma, abs=1e-6)

    def test_red_to_magenta_sweep(self):
        """Hues on both sides of the 20.14 degree eccentricity wrap."""
        colors = np.array([0xFFFF0000 | b for b in range(0, 256, 8)], dtype=np.int64)
        hue, chroma, tone = hue_chroma_tone_from_argb(colors)
        assert hue.min() < 20.0 < hue.max()
        expected = [decode_to_hue_chroma_tone(int(c)) for c in colors]
        np.testing.assert_allclose(hue, [e.hue for e in expected], atol=1e-6)
        np.testing.assert_allclose(chroma, [e.chroma for e in expected], atol=1e-6)
        np.testing.assert_allclose(tone, [e.tone for e in expected], atol=1e-6)


class TestShapes:
    """Leading dimensions are preserved."""

    def test_image_shape(self):
        rgb = np.random.default_rng(0).random((8, 5, 3))
        hue, chroma, tone = hue_chroma_tone_from_srgb(rgb)
        assert hue.shape == chroma.shape == tone.shape == (8, 5)
        assert np.all((hue >= 0) & (hue < 360))
        assert np.all((tone >= 0) & (tone <= 100 + 1e-9))

    def test_integer_input_promoted(self):
        hue, chroma, tone = hue_chroma_tone_from_srgb(np.array([[1, 1, 1], [0, 0, 0]]))
        assert tone[0] == pytest.approx(100.0, abs=1e-6)
        assert tone[1] == 0.0

    def test_black(self):
        _, chroma, tone = hue_chroma_tone_from_srgb(np.zeros((1, 3)))
        assert chroma[0] == 0.0
        assert tone[0] == 0.0


class TestGamma:
    """sRGB decoding used by the batch path."""

    def test_threshold(self):
        x = np.array([0.0, 0.04045, 0.5, 1.0])
        lin = srgb_to_linear(x)
        assert lin[0] == 0.0
        assert lin[1] == pytest.approx(0.04045 / 12.92)
        assert lin[3] == pytest.approx(1.0)


class TestTorch:
    """Torch tensors go through the same code path."""

    def test_matches_numpy(self):
        torch = pytest.importorskip("torch")
        rgb = np.random.default_rng(1).random((16, 3))
        h_np, c_np, t_np = hue_chroma_tone_from_srgb(rgb)
        h_t, c_t, t_t = hue_chroma_tone_from_srgb(torch.from_numpy(rgb))
        assert isinstance(c_t, torch.Tensor)
        np.testing.assert_allclose(c_t.numpy(), c_np, atol=1e-6)
        np.testing.assert_allclose(t_t.numpy(), t_np, atol=1e-6)
