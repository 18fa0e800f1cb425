"""sRGB, XYZ and L* conversions for packed ARGB colors.

Colors are packed integers laid out as 0xAARRGGBB. Alpha is ignored on
input; every color produced here is opaque. XYZ and Y use the 0-100 scale,
L* is CIE 1976 lightness in [0, 100].
"""

import math
from numbers import Integral

from camcolor.errors import InvalidColorError

# === Matrices ===

# XYZ -> CAM16 cone space
XYZ_TO_CAM16RGB = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

# CAM16 cone space -> XYZ
CAM16RGB_TO_XYZ = (
    (1.86206786, -1.01125463, 0.14918677),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.04996444),
)

# Linear sRGB (0-100) -> XYZ
SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

# XYZ -> linear sRGB (0-100)
XYZ_TO_SRGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)

WHITE_POINT_D65 = (95.047, 100.0, 108.883)

_LSTAR_EPSILON = 216.0 / 24389.0
_LSTAR_KAPPA = 24389.0 / 27.0

OPAQUE_BLACK = 0xFF000000
OPAQUE_WHITE = 0xFFFFFFFF


# === Packing ===

def coerce_argb(color) -> int:
    """Validate a packed ARGB color and return it as an unsigned 32-bit int.

    Signed 32-bit values (e.g. -16777216 for opaque black) are accepted.

    Raises:
        InvalidColorError: If color is not an integer in [-2**31, 2**32)
    """
    if isinstance(color, bool) or not isinstance(color, Integral):
        raise InvalidColorError(f"Color must be an integer, got {type(color).__name__}")
    color = int(color)
    if not -(1 << 31) <= color < (1 << 32):
        raise InvalidColorError(f"Color {color:#x} does not fit in 32 bits")
    return color & 0xFFFFFFFF


def red(argb: int) -> int:
    return (argb >> 16) & 0xFF


def green(argb: int) -> int:
    return (argb >> 8) & 0xFF


def blue(argb: int) -> int:
    return argb & 0xFF


def argb_from_rgb(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into an opaque ARGB int."""
    for channel in (r, g, b):
        if isinstance(channel, bool) or not isinstance(channel, Integral) or not 0 <= channel <= 255:
            raise InvalidColorError(f"Channel must be an integer in [0, 255], got {channel!r}")
    return OPAQUE_BLACK | (int(r) << 16) | (int(g) << 8) | int(b)


def argb_from_hex(hex_color: str) -> int:
    """Parse '#rrggbb' (or 'rrggbb') into an opaque ARGB int.

    Example:
        >>> hex(argb_from_hex("#ff5733"))
        '0xffff5733'
    """
    digits = hex_color.lstrip('#')
    if len(digits) != 6:
        raise InvalidColorError(f"Expected 6 hex digits, got {hex_color!r}")
    try:
        rgb = int(digits, 16)
    except ValueError as e:
        raise InvalidColorError(f"Invalid hex color {hex_color!r}") from e
    return OPAQUE_BLACK | rgb


def hex_from_argb(argb: int) -> str:
    """Format as '#rrggbb', dropping alpha."""
    argb = coerce_argb(argb)
    return f"#{argb & 0xFFFFFF:06x}"


def round_half_up(x: float) -> int:
    """Round to nearest integer, ties toward +inf."""
    return math.floor(x + 0.5)


def lerp(start: float, stop: float, amount: float) -> float:
    return (1.0 - amount) * start + amount * stop


# === Transfer functions ===

def linearized(component: int) -> float:
    """8-bit sRGB channel -> linear value on the 0-100 scale."""
    normalized = component / 255.0
    if normalized <= 0.04045:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(linear: float) -> int:
    """Linear value in [0, 1] -> gamma-encoded 8-bit channel, clamped to [0, 255].

    NaN maps to 0.
    """
    if math.isnan(linear):
        return 0
    if linear > 0.0031308:
        encoded = 1.055 * linear ** (1 / 2.4) - 0.055
    else:
        encoded = 12.92 * linear
    if math.isinf(encoded):
        return 255 if encoded > 0 else 0
    return min(255, max(0, round_half_up(encoded * 255)))


# === XYZ ===

def xyz_from_argb(argb: int) -> tuple[float, float, float]:
    argb = coerce_argb(argb)
    r = linearized(red(argb))
    g = linearized(green(argb))
    b = linearized(blue(argb))
    m = SRGB_TO_XYZ
    x = m[0][0] * r + m[0][1] * g + m[0][2] * b
    y = m[1][0] * r + m[1][1] * g + m[1][2] * b
    z = m[2][0] * r + m[2][1] * g + m[2][2] * b
    return x, y, z


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """XYZ -> opaque ARGB.

    Out-of-gamut values are clipped per channel, so the color returned may
    differ from the one requested in lightness, hue and chroma.
    """
    m = XYZ_TO_SRGB
    r = (m[0][0] * x + m[0][1] * y + m[0][2] * z) / 100
    g = (m[1][0] * x + m[1][1] * y + m[1][2] * z) / 100
    b = (m[2][0] * x + m[2][1] * y + m[2][2] * z) / 100
    return OPAQUE_BLACK | (delinearized(r) << 16) | (delinearized(g) << 8) | delinearized(b)


# === Lightness ===

def y_from_argb(argb: int) -> float:
    argb = coerce_argb(argb)
    m = SRGB_TO_XYZ
    return (
        m[1][0] * linearized(red(argb))
        + m[1][1] * linearized(green(argb))
        + m[1][2] * linearized(blue(argb))
    )


def lstar_from_y(y: float) -> float:
    """Relative luminance Y (0-100) -> L*."""
    y = y / 100.0
    if y <= _LSTAR_EPSILON:
        return _LSTAR_KAPPA * y
    return 116.0 * y ** (1 / 3) - 16.0


def y_from_lstar(lstar: float) -> float:
    """L* -> relative luminance Y (0-100)."""
    if lstar > 8.0:
        return ((lstar + 16.0) / 116.0) ** 3 * 100.0
    return lstar / _LSTAR_KAPPA * 100.0


def lstar_from_argb(argb: int) -> float:
    return lstar_from_y(y_from_argb(argb))


def argb_from_lstar(lstar: float) -> int:
    """Gray with the given L*, under the D65 white point.

    L* below 1 is black and above 99 is white.
    """
    if lstar < 1:
        return OPAQUE_BLACK
    if lstar > 99:
        return OPAQUE_WHITE
    # L*a*b* -> XYZ with a = b = 0
    fy = (lstar + 16.0) / 116.0
    cube = fy * fy * fy
    y_t = cube if lstar > 8.0 else lstar / _LSTAR_KAPPA
    xz_t = cube if cube > _LSTAR_EPSILON else lstar / _LSTAR_KAPPA
    return argb_from_xyz(
        xz_t * WHITE_POINT_D65[0],
        y_t * WHITE_POINT_D65[1],
        xz_t * WHITE_POINT_D65[2],
    )
