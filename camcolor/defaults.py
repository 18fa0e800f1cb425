"""Central place for camcolor default settings."""

# Gamut mapping tolerances
DL_MAX: float = 0.2  # Max difference between requested L* and returned L*
DE_MAX: float = 1.0  # Max CAM16-UCS distance between requested and returned hue
CHROMA_SEARCH_ENDPOINT: float = 0.4  # Chroma bisection stops below this bracket width
LIGHTNESS_SEARCH_ENDPOINT: float = 0.01  # J bisection stops at or below this bracket width

# Requests below this chroma are treated as gray
MIN_CHROMA: float = 1.0
# Above the chroma of any sRGB color; used to probe the gamut boundary
MAX_CHROMA_PROBE: float = 200.0

# Default viewing environment (D65 white point is in colorspace.utils)
DEFAULT_BACKGROUND_LSTAR: float = 50.0
DEFAULT_SURROUND: float = 2.0  # 0 = dark, 1 = dim, 2 = average
DEFAULT_DISCOUNTING_ILLUMINANT: bool = False

# Tonal palette defaults
DEFAULT_TONES: tuple[int, ...] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)
