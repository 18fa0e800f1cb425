"""Vectorized CAM16 decoding for arrays of colors.

Same math as `cam.from_color_in_environment`, applied element-wise.
All functions accept numpy arrays or torch tensors; torch GPU tensors stay
on their device.

Example:
    import numpy as np
    from camcolor.colorspace import hue_chroma_tone_from_srgb

    pixels = np.random.default_rng(0).random((64, 64, 3))
    hue, chroma, tone = hue_chroma_tone_from_srgb(pixels)
"""

from math import pi

import numpy as np

from . import _backend as B
from ._backend import Array
from .cam import _HUE_PRIME_BOUNDARY
from .utils import _LSTAR_EPSILON, _LSTAR_KAPPA, SRGB_TO_XYZ, XYZ_TO_CAM16RGB
from .viewing import DEFAULT_ENVIRONMENT, ViewingEnvironment


def srgb_to_linear(x: Array) -> Array:
    """sRGB -> Linear RGB gamma decoding (per channel)."""
    threshold = 0.04045
    low = x / 12.92
    high = B.pow((x + 0.055) / 1.055, 2.4)
    return B.where(x <= threshold, low, high)


def _mat3(m, x: Array, y: Array, z: Array) -> tuple[Array, Array, Array]:
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def _adapt(component: Array, fl: float) -> Array:
    af = B.pow(fl * B.abs(component) / 100.0, 0.42)
    return B.sign(component) * 400.0 * af / (af + 27.13)


def lstar_from_linear_y(y: Array) -> Array:
    """Relative luminance Y (0-100) -> L*, element-wise."""
    y = y / 100.0
    return B.where(y <= _LSTAR_EPSILON, _LSTAR_KAPPA * y, 116.0 * B.cbrt(y) - 16.0)


def hue_chroma_tone_from_srgb(
    rgb: Array,
    environment: ViewingEnvironment = DEFAULT_ENVIRONMENT,
) -> tuple[Array, Array, Array]:
    """sRGB -> CAM16 hue and chroma, plus L* tone.

    Args:
        rgb: RGB array with shape (..., 3), values in [0,1]
        environment: Environment the colors are viewed in

    Returns:
        (hue, chroma, tone) arrays with shape (...)
    """
    env = environment
    rgb = B.as_float(rgb)
    r_lin = srgb_to_linear(rgb[..., 0]) * 100.0
    g_lin = srgb_to_linear(rgb[..., 1]) * 100.0
    b_lin = srgb_to_linear(rgb[..., 2]) * 100.0

    x, y, z = _mat3(SRGB_TO_XYZ, r_lin, g_lin, b_lin)
    r_t, g_t, b_t = _mat3(XYZ_TO_CAM16RGB, x, y, z)

    r_a = _adapt(env.rgb_d[0] * r_t, env.fl)
    g_a = _adapt(env.rgb_d[1] * g_t, env.fl)
    b_a = _adapt(env.rgb_d[2] * b_t, env.fl)

    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
    p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

    hue = B.atan2(b, a) * (180.0 / pi)
    hue = B.where(hue < 0, hue + 360.0, hue)
    hue = B.where(hue >= 360, hue - 360.0, hue)

    ac = p2 * env.nbb
    j = 100.0 * B.pow(ac / env.aw, env.c * env.z)

    hue_prime = B.where(hue < _HUE_PRIME_BOUNDARY, hue + 360.0, hue)
    e_hue = 0.25 * (B.cos(hue_prime * (pi / 180.0) + 2.0) + 3.8)
    p1 = 50000.0 / 13.0 * e_hue * env.nc * env.ncb
    t = p1 * B.sqrt(a * a + b * b) / (u + 0.305)
    alpha = (1.64 - 0.29 ** env.n) ** 0.73 * B.pow(t, 0.9)
    chroma = alpha * B.sqrt(j / 100.0)

    return hue, chroma, lstar_from_linear_y(y)


def hue_chroma_tone_from_argb(
    colors: Array,
    environment: ViewingEnvironment = DEFAULT_ENVIRONMENT,
) -> tuple[Array, Array, Array]:
    """Packed ARGB integers (numpy array) -> (hue, chroma, tone) arrays."""
    colors = np.asarray(colors, dtype=np.int64) & 0xFFFFFFFF
    rgb = np.stack(
        [(colors >> 16) & 0xFF, (colors >> 8) & 0xFF, colors & 0xFF],
        axis=-1,
    ) / 255.0
    return hue_chroma_tone_from_srgb(rgb, environment)
