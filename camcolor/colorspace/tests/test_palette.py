"""Tests for TonalPalette."""

import pytest

from camcolor.colorspace import (
    TonalPalette,
    argb_from_lstar,
    decode_to_hue_chroma_tone,
    lstar_from_argb,
    to_color,
)
from camcolor.defaults import DEFAULT_TONES


class TestTonalPalette:

    def test_extremes_are_black_and_white(self):
        palette = TonalPalette(hue=220.0, chroma=40.0)
        assert palette.tone(0) == argb_from_lstar(0)
        assert palette.tone(100) == argb_from_lstar(100)

    def test_tone_delegates_to_gamut_mapping(self):
        palette = TonalPalette(hue=220.0, chroma=40.0)
        assert palette.tone(40) == to_color(220.0, 40.0, 40)

    def test_tones_default_keys(self):
        tones = TonalPalette(hue=30.0, chroma=20.0).tones()
        assert list(tones) == list(DEFAULT_TONES)

    def test_tones_are_ordered_by_lightness(self):
        tones = TonalPalette(hue=140.0, chroma=30.0).tones([10, 30, 50, 70, 90])
        lstars = [lstar_from_argb(argb) for argb in tones.values()]
        assert lstars == sorted(lstars)

    def test_cache(self):
        palette = TonalPalette(hue=300.0, chroma=25.0)
        first = palette.tone(60)
        assert palette._cache == {60: first}
        assert palette.tone(60) == first

    def test_cache_not_part_of_equality(self):
        a = TonalPalette(hue=300.0, chroma=25.0)
        b = TonalPalette(hue=300.0, chroma=25.0)
        a.tone(50)
        assert a == b

    def test_from_color(self):
        source = 0xFF3366CC
        palette = TonalPalette.from_color(source)
        hue, chroma, _ = decode_to_hue_chroma_tone(source)
        assert palette.hue == hue
        assert palette.chroma == chroma

    def test_hex_tones(self):
        hexes = TonalPalette(hue=220.0, chroma=40.0).hex_tones([0, 100])
        assert hexes == {0: "#000000", 100: "#ffffff"}

    @pytest.mark.parametrize("tone", [20, 50, 80])
    def test_tone_lightness(self, tone):
        argb = TonalPalette(hue=260.0, chroma=16.0).tone(tone)
        assert abs(lstar_from_argb(argb) - tone) < 0.5
