"""CAM16 color appearance, gamut mapping to sRGB, and tonal palettes.

This module provides:
- ARGB <-> CAM16 conversions under configurable viewing environments
- Gamut mapping: (hue, chroma, L*) -> the closest sRGB color with that L*
- Vectorized hue/chroma/tone decoding for numpy arrays or torch tensors
- TonalPalette: one hue and chroma across design-system tones

Example:
    from camcolor.colorspace import to_color, from_color, hex_from_argb

    argb = to_color(hue=120, chroma=40, lstar=60)
    hex_from_argb(argb)
    from_color(argb).hue     # ~120
"""

from .utils import (
    argb_from_hex,
    argb_from_lstar,
    argb_from_rgb,
    argb_from_xyz,
    hex_from_argb,
    lstar_from_argb,
    lstar_from_y,
    xyz_from_argb,
    y_from_lstar,
)

from .viewing import ViewingEnvironment, DEFAULT_ENVIRONMENT

from .cam import (
    CamColor,
    HueChromaTone,
    decode_to_hue_chroma_tone,
    distance,
    from_color,
    from_color_in_environment,
    from_jch,
)

from .gamut import find_cam_by_j, max_chroma, to_color

from .batch import hue_chroma_tone_from_argb, hue_chroma_tone_from_srgb

from .palette import TonalPalette

__all__ = [
    # Appearance model
    'CamColor',
    'HueChromaTone',
    'ViewingEnvironment',
    'DEFAULT_ENVIRONMENT',
    'from_color',
    'from_color_in_environment',
    'from_jch',
    'decode_to_hue_chroma_tone',
    'distance',
    # Gamut mapping
    'to_color',
    'find_cam_by_j',
    'max_chroma',
    # Batch decoding
    'hue_chroma_tone_from_srgb',
    'hue_chroma_tone_from_argb',
    # Palettes
    'TonalPalette',
    # sRGB / XYZ / L*
    'argb_from_hex',
    'argb_from_lstar',
    'argb_from_rgb',
    'argb_from_xyz',
    'hex_from_argb',
    'lstar_from_argb',
    'lstar_from_y',
    'xyz_from_argb',
    'y_from_lstar',
]
