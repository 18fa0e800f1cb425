"""Gamut mapping from (hue, chroma, L*) requests to sRGB.

Not every CAM16 hue and chroma exists at every L*. A light red with high
chroma does not exist (it is pink, chroma below 10), and high chroma greens
exist when light but not when dark. Rounding the out-of-range RGB channels
is not an option because it distorts luminance, and luminance is what
contrast requirements are measured in.

Strategy:
- L* must match the request (within DL_MAX)
- chroma is reduced until the color fits, keeping the highest chroma found
- hue may drift only within DE_MAX in CAM16-UCS
"""

import logging
from typing import Optional

from camcolor.defaults import (
    CHROMA_SEARCH_ENDPOINT,
    DE_MAX,
    DL_MAX,
    LIGHTNESS_SEARCH_ENDPOINT,
    MAX_CHROMA_PROBE,
    MIN_CHROMA,
)
from .cam import CamColor, from_color, from_jch
from .search import Probe, bisect
from .utils import argb_from_lstar, lstar_from_argb, round_half_up
from .viewing import DEFAULT_ENVIRONMENT, ViewingEnvironment

logger = logging.getLogger(__name__)


# === Lightness search ===

def find_cam_by_j(hue: float, chroma: float, lstar: float) -> Optional[CamColor]:
    """Find J that renders (hue, chroma) with the requested L*.

    Searches in the default environment. Each candidate J is rendered to
    sRGB (clipping included) and measured again, so the result describes a
    color that actually exists.

    Args:
        hue: CAM16 hue in degrees
        chroma: CAM16 chroma
        lstar: Target L*

    Returns:
        CamColor of the clipped color, or None if no J produced a color
        within DL_MAX of lstar and DE_MAX of hue
    """
    def probe(j: float) -> Probe[CamColor]:
        clipped = from_jch(j, chroma, hue).viewed_in_default_environment()
        clipped_lstar = lstar_from_argb(clipped)
        d_l = abs(lstar - clipped_lstar)

        candidate = None
        d_e = None
        if d_l < DL_MAX:
            # Chroma may be distorted and callers know it; only check that hue held
            cam_clipped = from_color(clipped)
            d_e = cam_clipped.distance(from_jch(cam_clipped.j, cam_clipped.chroma, hue))
            if d_e <= DE_MAX:
                candidate = cam_clipped

        exact = candidate is not None and d_l == 0 and d_e == 0
        return Probe(candidate, go_higher=clipped_lstar < lstar, done=exact)

    return bisect(0.0, 100.0, probe, LIGHTNESS_SEARCH_ENDPOINT, inclusive=True)


# === Chroma search ===

def to_color(
    hue: float,
    chroma: float,
    lstar: float,
    environment: ViewingEnvironment = DEFAULT_ENVIRONMENT,
) -> int:
    """Map a CAM16 hue and chroma at an L* to an opaque ARGB color.

    The returned chroma may, and often will, be lower than requested. L* is
    kept; if no chroma fits, the result is the gray with that L*.

    Args:
        hue: CAM16 hue in degrees, clamped to [0, 360]
        chroma: Requested CAM16 chroma
        lstar: Requested L*, 0-100
        environment: Environment the returned color is viewed in

    Returns:
        ARGB int
    """
    # Yellows are chromatic at L* 100 and blues at 0; every other hue is
    # white or black there. Returning gray at the extremes keeps the system
    # consistent.
    rounded = round_half_up(lstar)
    if chroma < MIN_CHROMA or rounded <= 0 or rounded >= 100:
        return argb_from_lstar(lstar)

    hue = 0.0 if hue < 0 else min(360.0, hue)

    # Most requests fit at full chroma
    answer = find_cam_by_j(hue, chroma, lstar)
    if answer is not None:
        return answer.viewed(environment)

    logger.debug(
        "Chroma %.2f out of gamut at hue %.2f, L* %.2f; searching lower chroma",
        chroma, hue, lstar,
    )

    def probe(mid: float) -> Probe[CamColor]:
        possible = find_cam_by_j(hue, mid, lstar)
        return Probe(possible, go_higher=possible is not None)

    answer = bisect(0.0, chroma, probe, CHROMA_SEARCH_ENDPOINT)
    if answer is None:
        logger.debug("No chroma fits at hue %.2f, L* %.2f; returning gray", hue, lstar)
        return argb_from_lstar(lstar)

    return answer.viewed(environment)


def max_chroma(
    hue: float,
    lstar: float,
    environment: ViewingEnvironment = DEFAULT_ENVIRONMENT,
) -> float:
    """Highest CAM16 chroma renderable at a hue and L*.

    Measured on the color `to_color` delivers for an over-range request.
    """
    argb = to_color(hue, MAX_CHROMA_PROBE, lstar, environment)
    return from_color(argb).chroma
