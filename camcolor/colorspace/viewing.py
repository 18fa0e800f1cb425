"""Viewing environments for the CAM16 appearance model.

A viewing environment captures where a color is observed: the white point,
how bright the surroundings are, and the lightness of the background. The
model only needs the coefficients derived from those, so they are computed
once in `ViewingEnvironment.make` and stored on a frozen dataclass.

Example:
    from camcolor.colorspace import ViewingEnvironment, to_color

    dim = ViewingEnvironment.make(adapting_luminance=16.0, surround=1.0)
    argb = to_color(hue=220, chroma=30, lstar=60, environment=dim)
"""

import math
from dataclasses import dataclass

from camcolor.defaults import (
    DEFAULT_BACKGROUND_LSTAR,
    DEFAULT_DISCOUNTING_ILLUMINANT,
    DEFAULT_SURROUND,
)
from camcolor.errors import ViewingEnvironmentError
from .utils import WHITE_POINT_D65, XYZ_TO_CAM16RGB, lerp, y_from_lstar

# 200 lux in a room with a mid-gray (L* 50) background, in cd/m^2
DEFAULT_ADAPTING_LUMINANCE = 200.0 / math.pi * y_from_lstar(50.0) / 100.0


@dataclass(frozen=True)
class ViewingEnvironment:
    """Derived CAM16 coefficients for one observation context.

    Attributes:
        n: Background luminance relative to the white point
        aw: Achromatic response of the white point
        nbb: Background induction factor
        ncb: Chromatic background induction factor
        c: Impact of the surround
        nc: Chromatic induction factor
        rgb_d: Per-channel discounting of the illuminant
        fl: Luminance-level adaptation factor
        fl_root: Fourth root of fl
        z: Base exponential nonlinearity
    """
    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: tuple[float, float, float] = WHITE_POINT_D65,
        adapting_luminance: float = DEFAULT_ADAPTING_LUMINANCE,
        background_lstar: float = DEFAULT_BACKGROUND_LSTAR,
        surround: float = DEFAULT_SURROUND,
        discounting_illuminant: bool = DEFAULT_DISCOUNTING_ILLUMINANT,
    ) -> 'ViewingEnvironment':
        """Derive coefficients from a physical description of the environment.

        Args:
            white_point: XYZ of the reference white (Y on the 0-100 scale)
            adapting_luminance: Luminance of the adapting field, cd/m^2
            background_lstar: L* of the background, in (0, 100]
            surround: 0 = dark, 1 = dim, 2 = average
            discounting_illuminant: Whether the eye fully adapts to the illuminant

        Raises:
            ViewingEnvironmentError: If any parameter is out of range
        """
        if len(white_point) != 3 or white_point[1] <= 0:
            raise ViewingEnvironmentError(f"Invalid white point: {white_point!r}")
        if not adapting_luminance > 0:
            raise ViewingEnvironmentError(
                f"Adapting luminance must be positive, got {adapting_luminance}"
            )
        if not 0.0 < background_lstar <= 100.0:
            raise ViewingEnvironmentError(
                f"Background L* must be in (0, 100], got {background_lstar}"
            )
        if not 0.0 <= surround <= 2.0:
            raise ViewingEnvironmentError(f"Surround must be in [0, 2], got {surround}")

        m = XYZ_TO_CAM16RGB
        x, y, z_ = white_point
        r_w = m[0][0] * x + m[0][1] * y + m[0][2] * z_
        g_w = m[1][0] * x + m[1][1] * y + m[1][2] * z_
        b_w = m[2][0] * x + m[2][1] * y + m[2][2] * z_

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = min(1.0, max(0.0, d))
        nc = f

        rgb_d = tuple((100.0 / w) * d + 1.0 - d for w in (r_w, g_w, b_w))

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k ** 4
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * (5.0 * adapting_luminance) ** (1 / 3)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n ** 0.2
        ncb = nbb

        # Adapted white point
        factors = [(fl * dc * w / 100.0) ** 0.42 for dc, w in zip(rgb_d, (r_w, g_w, b_w))]
        r_a, g_a, b_a = (400.0 * fct / (fct + 27.13) for fct in factors)
        aw = (2.0 * r_a + g_a + 0.05 * b_a) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=fl ** 0.25,
            z=z,
        )


DEFAULT_ENVIRONMENT = ViewingEnvironment.make()
