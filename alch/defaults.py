"""Central place for alch default settings."""

# AdaptiveLchColor factory defaults
DEFAULT_NITS: float = 100.0  # SDR reference white, cd/m^2
DEFAULT_LIGHTNESS: float = 0.5
DEFAULT_CHROMA: float = 0.1
DEFAULT_HUE: float = 0.0
DEFAULT_COLOR_NAME_FORMAT: str = "Color {n}"

# Brightness curves
DEFAULT_MAX_LUMINANCE: float = 100.0
MIN_LUMINANCE: float = 0.01  # PQ floor, keeps the curve away from true black
MAX_LUMINANCE: float = 10000.0  # PQ absolute limit

# SMPTE ST 2084 constants
PQ_M1: float = 0.1593017578125
PQ_M2: float = 78.84375
PQ_C1: float = 0.8359375
PQ_C2: float = 18.8515625
PQ_C3: float = 18.6875

# Adaptive luminosity tuning. gamma = BASE + (lum - PIVOT) / SPAN * SLOPE
ADAPTIVE_GAMMA_BASE: float = 0.205
ADAPTIVE_GAMMA_SLOPE: float = 0.015
ADAPTIVE_GAMMA_PIVOT: float = 30.0
ADAPTIVE_GAMMA_SPAN: float = 70.0
ADAPTIVE_EXPONENT_NUMERATOR: float = 0.125  # 1/8
SIMPLIFIED_PQ_EXPONENT: float = 0.22  # PQ at 100 cd/m^2

# Gamut windows on gamma-encoded channels
SRGB_GAMUT_RANGE: tuple[float, float] = (0.0, 1.0)
WIDE_GAMUT_RANGE: tuple[float, float] = (-0.1, 1.4)  # rough P3 reach

# Hue reported for achromatic colors (chroma below threshold)
ACHROMATIC_HUE: float = 0.0
ACHROMATIC_CHROMA: float = 1e-6

# Color list
COLOR_SYNC_DEBOUNCE: float = 0.05  # seconds, current -> selected color
