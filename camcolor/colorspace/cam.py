"""CAM16 color appearance model for packed ARGB colors.

Reference: Li et al. (2017), "Comprehensive color solutions: CAM16, CAT16,
and CAM16-UCS".

Decoding goes ARGB -> XYZ -> cone responses -> appearance coordinates.
`CamColor.viewed` reverses the chain, and the final XYZ -> ARGB step clips
to the sRGB gamut.
"""

import math
from dataclasses import dataclass
from typing import NamedTuple

from .utils import (
    CAM16RGB_TO_XYZ,
    XYZ_TO_CAM16RGB,
    argb_from_xyz,
    lstar_from_argb,
    xyz_from_argb,
)
from .viewing import DEFAULT_ENVIRONMENT, ViewingEnvironment

# Below this hue the eccentricity term wraps through 360
_HUE_PRIME_BOUNDARY = 20.14


class HueChromaTone(NamedTuple):
    """CAM16 hue and chroma paired with the color's own L*."""
    hue: float
    chroma: float
    tone: float


@dataclass(frozen=True)
class CamColor:
    """One color in CAM16, plus its CAM16-UCS coordinates.

    Attributes:
        hue: Hue angle in degrees, [0, 360)
        chroma: Colorfulness relative to white, >= 0
        j: Lightness, [0, 100]
        q: Brightness. Absolute: white paper is brighter in sunlight than
            indoors, yet the lightest object in both.
        m: Colorfulness. Absolute: a yellow toy car is more colorful outside
            than inside at the same chroma.
        s: Saturation, colorfulness relative to the color's own brightness
        jstar: CAM16-UCS lightness
        astar: CAM16-UCS a*
        bstar: CAM16-UCS b*
    """
    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: 'CamColor') -> float:
        """Perceptual distance in CAM16-UCS, like delta E in L*a*b*."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_e_prime ** 0.63

    def viewed(self, environment: ViewingEnvironment) -> int:
        """ARGB color that produces this appearance in `environment`.

        Colors outside sRGB are clipped channel by channel.
        """
        env = environment
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = (alpha / (1.64 - 0.29 ** env.n) ** 0.73) ** (1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = env.aw * (self.j / 100.0) ** (1.0 / env.c / env.z)
        p1 = e_hue * (50000.0 / 13.0) * env.nc * env.ncb
        p2 = ac / env.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        denominator = 23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin
        numerator = 23.0 * (p2 + 0.305) * t
        if denominator == 0.0:
            gamma = math.copysign(math.inf, numerator) if numerator else 0.0
        else:
            gamma = numerator / denominator
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_f = _unadapt(r_a, env.fl) / env.rgb_d[0]
        g_f = _unadapt(g_a, env.fl) / env.rgb_d[1]
        b_f = _unadapt(b_a, env.fl) / env.rgb_d[2]

        mtx = CAM16RGB_TO_XYZ
        x = mtx[0][0] * r_f + mtx[0][1] * g_f + mtx[0][2] * b_f
        y = mtx[1][0] * r_f + mtx[1][1] * g_f + mtx[1][2] * b_f
        z = mtx[2][0] * r_f + mtx[2][1] * g_f + mtx[2][2] * b_f
        return argb_from_xyz(x, y, z)

    def viewed_in_default_environment(self) -> int:
        return self.viewed(DEFAULT_ENVIRONMENT)


# === Chromatic adaptation ===

def _adapt(component: float, fl: float) -> float:
    """Post-adaptation cone response, sign preserved."""
    af = (fl * abs(component) / 100.0) ** 0.42
    return math.copysign(400.0 * af / (af + 27.13), component) if component else 0.0


def _unadapt(response: float, fl: float) -> float:
    """Inverse of `_adapt`; responses at or beyond the 400 asymptote saturate."""
    magnitude = abs(response)
    if magnitude == 400.0:
        base = math.inf
    else:
        base = max(0.0, 27.13 * magnitude / (400.0 - magnitude))
    if not response:
        return 0.0
    return math.copysign(100.0 / fl * base ** (1.0 / 0.42), response)


def _ucs(j: float, m: float, hue: float) -> tuple[float, float, float]:
    """CAM16-UCS coordinates from lightness, colorfulness and hue."""
    h_rad = math.radians(hue)
    jstar = (1.0 + 100.0 * 0.007) * j / (1.0 + 0.007 * j)
    mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m)
    return jstar, mstar * math.cos(h_rad), mstar * math.sin(h_rad)


# === Construction ===

def from_color_in_environment(color: int, environment: ViewingEnvironment) -> CamColor:
    """Decode an ARGB color seen in `environment`. Alpha is ignored."""
    env = environment
    x, y, z = xyz_from_argb(color)

    mtx = XYZ_TO_CAM16RGB
    r_t = mtx[0][0] * x + mtx[0][1] * y + mtx[0][2] * z
    g_t = mtx[1][0] * x + mtx[1][1] * y + mtx[1][2] * z
    b_t = mtx[2][0] * x + mtx[2][1] * y + mtx[2][2] * z

    # Discount illuminant, then adapt
    r_a = _adapt(env.rgb_d[0] * r_t, env.fl)
    g_a = _adapt(env.rgb_d[1] * g_t, env.fl)
    b_a = _adapt(env.rgb_d[2] * b_t, env.fl)

    # Opponent dimensions: redness-greenness and yellowness-blueness
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
    p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += 360.0
    elif hue >= 360:
        hue -= 360.0

    ac = p2 * env.nbb
    j = 100.0 * (ac / env.aw) ** (env.c * env.z)
    q = 4.0 / env.c * math.sqrt(j / 100.0) * (env.aw + 4.0) * env.fl_root

    hue_prime = hue + 360 if hue < _HUE_PRIME_BOUNDARY else hue
    e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
    p1 = 50000.0 / 13.0 * e_hue * env.nc * env.ncb
    t = p1 * math.hypot(a, b) / (u + 0.305)
    alpha = (1.64 - 0.29 ** env.n) ** 0.73 * t ** 0.9

    chroma = alpha * math.sqrt(j / 100.0)
    m = chroma * env.fl_root
    s = 50.0 * math.sqrt(alpha * env.c / (env.aw + 4.0))

    jstar, astar, bstar = _ucs(j, m, hue)
    return CamColor(hue, chroma, j, q, m, s, jstar, astar, bstar)


def from_color(color: int) -> CamColor:
    """Decode an ARGB color seen in the default environment."""
    return from_color_in_environment(color, DEFAULT_ENVIRONMENT)


def decode_to_hue_chroma_tone(color: int) -> HueChromaTone:
    """CAM16 hue and chroma of `color`, with tone taken from the color's own L*.

    Tone is computed directly from `color`, not from J.
    """
    cam = from_color(color)
    return HueChromaTone(cam.hue, cam.chroma, lstar_from_argb(color))


def from_jch(
    j: float,
    c: float,
    h: float,
    environment: ViewingEnvironment = DEFAULT_ENVIRONMENT,
) -> CamColor:
    """Build a CamColor from lightness, chroma and hue."""
    env = environment
    q = 4.0 / env.c * math.sqrt(j / 100.0) * (env.aw + 4.0) * env.fl_root
    m = c * env.fl_root
    alpha = c / math.sqrt(j / 100.0) if j else 0.0
    s = 50.0 * math.sqrt(alpha * env.c / (env.aw + 4.0))
    jstar, astar, bstar = _ucs(j, m, h)
    return CamColor(h, c, j, q, m, s, jstar, astar, bstar)


def distance(a: CamColor, b: CamColor) -> float:
    """Perceptual distance between two colors. See `CamColor.distance`."""
    return a.distance(b)
