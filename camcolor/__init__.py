"""camcolor: CAM16 hue and chroma with L* tone, gamut mapped to sRGB."""

from camcolor.colorspace import (
    CamColor,
    DEFAULT_ENVIRONMENT,
    TonalPalette,
    ViewingEnvironment,
    decode_to_hue_chroma_tone,
    distance,
    from_color,
    to_color,
)
from camcolor.errors import CamColorError, InvalidColorError, ViewingEnvironmentError

__all__ = [
    'CamColor',
    'DEFAULT_ENVIRONMENT',
    'TonalPalette',
    'ViewingEnvironment',
    'decode_to_hue_chroma_tone',
    'distance',
    'from_color',
    'to_color',
    'CamColorError',
    'InvalidColorError',
    'ViewingEnvironmentError',
]
