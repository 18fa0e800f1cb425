"""Tonal palettes: one hue and chroma rendered across L* tones.

A tone difference of 40 guarantees a contrast ratio of at least 3.0, and
50 guarantees 4.5, because tone is L*.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from camcolor.defaults import DEFAULT_TONES
from .cam import decode_to_hue_chroma_tone
from .gamut import to_color
from .utils import hex_from_argb


@dataclass(frozen=True)
class TonalPalette:
    """Colors sharing a CAM16 hue and chroma, indexed by tone (L*)."""
    hue: float
    chroma: float
    _cache: dict[float, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    @classmethod
    def from_color(cls, argb: int) -> TonalPalette:
        """Palette with the hue and chroma of an existing color."""
        hue, chroma, _ = decode_to_hue_chroma_tone(argb)
        return cls(hue, chroma)

    def tone(self, tone: float) -> int:
        """ARGB color at `tone`. Chroma is reduced where it does not fit."""
        argb = self._cache.get(tone)
        if argb is None:
            argb = to_color(self.hue, self.chroma, tone)
            self._cache[tone] = argb
        return argb

    def tones(self, values: Iterable[float] = DEFAULT_TONES) -> dict[float, int]:
        return {t: self.tone(t) for t in values}

    def hex_tones(self, values: Iterable[float] = DEFAULT_TONES) -> dict[float, str]:
        return {t: hex_from_argb(argb) for t, argb in self.tones(values).items()}
