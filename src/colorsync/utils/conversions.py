"""Numeric color-space conversions.

Pure functions converting between RGB bytes (0-255), HSV/HSL (hue in
degrees, saturation/value/lightness in 0-1), CMYK (0-1) and ``#AARRGGBB``
hex strings.

Nothing here validates or rejects numeric input: values outside their
nominal range are normalized and every result is clamped into a valid
byte or unit range. Bytes are produced with ``round(clamp01(x) * 255)``,
which rounds half to even.

Hue handling differs from the unit models on purpose: the conversions
*wrap* hue modularly (``hsv_to_rgb(500, 1, 1)`` is treated as 140°), the
models *clamp* it on assignment (500° becomes 360°).

Example:
    ```python
    from colorsync.utils.conversions import rgb_to_hsv, hsv_to_rgb

    h, s, v = rgb_to_hsv(255, 0, 0)   # (0.0, 1.0, 1.0)
    hsv_to_rgb(h, s, v)               # (255, 0, 0)
    ```
"""

import math
import re

# Degenerate-input threshold (delta, saturation, key)
_EPSILON = 1e-12

HEX_PATTERN = re.compile(r"^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp01(value: float) -> float:
    """Clamp value into the 0-1 range."""
    return clamp(value, 0.0, 1.0)


def _to_byte(value: float) -> int:
    return int(round(clamp01(value) * 255.0))


def _wrap_hue(h: float) -> float:
    hh = math.fmod(h, 360.0)
    if hh < 0:
        hh += 360.0
    return hh


def _hue_from_rgb(rd: float, gd: float, bd: float, max_c: float, delta: float) -> float:
    if abs(max_c - rd) < _EPSILON:
        h = 60.0 * math.fmod((gd - bd) / delta, 6.0)
    elif abs(max_c - gd) < _EPSILON:
        h = 60.0 * (((bd - rd) / delta) + 2.0)
    else:
        h = 60.0 * (((rd - gd) / delta) + 4.0)
    if h < 0:
        h += 360.0
    return h


def _chroma_to_rgb(h: float, c: float, m: float) -> tuple[int, int, int]:
    # h is already wrapped into [0, 360]
    h6 = h / 60.0
    x = c * (1.0 - abs((h6 % 2.0) - 1.0))

    sector = int(math.floor(h6)) % 6
    if sector == 0:
        rp, gp, bp = c, x, 0.0
    elif sector == 1:
        rp, gp, bp = x, c, 0.0
    elif sector == 2:
        rp, gp, bp = 0.0, c, x
    elif sector == 3:
        rp, gp, bp = 0.0, x, c
    elif sector == 4:
        rp, gp, bp = x, 0.0, c
    else:
        rp, gp, bp = c, 0.0, x

    return _to_byte(rp + m), _to_byte(gp + m), _to_byte(bp + m)


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert RGB bytes to HSV.

    Args:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)

    Returns:
        (hue in [0, 360), saturation 0-1, value 0-1). Grays have hue 0.
    """
    rd = clamp(r, 0, 255) / 255.0
    gd = clamp(g, 0, 255) / 255.0
    bd = clamp(b, 0, 255) / 255.0

    max_c = max(rd, gd, bd)
    min_c = min(rd, gd, bd)
    delta = max_c - min_c

    if delta <= _EPSILON:
        h = 0.0
    else:
        h = _hue_from_rgb(rd, gd, bd, max_c, delta)

    v = max_c
    s = 0.0 if max_c <= 0.0 else delta / max_c
    return h, s, v


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """
    Convert HSV to RGB bytes.

    Hue is wrapped into [0, 360) before conversion; saturation and value
    are clamped to 0-1.

    Returns:
        (red, green, blue) bytes
    """
    s = clamp01(s)
    v = clamp01(v)

    c = v * s
    m = v - c
    return _chroma_to_rgb(_wrap_hue(h), c, m)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert RGB bytes to HSL.

    Returns:
        (hue in [0, 360), saturation 0-1, lightness 0-1). Grays have hue
        and saturation 0.
    """
    rd = clamp(r, 0, 255) / 255.0
    gd = clamp(g, 0, 255) / 255.0
    bd = clamp(b, 0, 255) / 255.0

    max_c = max(rd, gd, bd)
    min_c = min(rd, gd, bd)
    delta = max_c - min_c

    l = (max_c + min_c) / 2.0

    if delta <= _EPSILON:
        return 0.0, 0.0, l

    s = clamp01(delta / (1.0 - abs(2.0 * l - 1.0)))
    h = _hue_from_rgb(rd, gd, bd, max_c, delta)
    return h, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB bytes.

    Hue is wrapped into [0, 360); a zero saturation produces the gray
    matching the lightness.

    Returns:
        (red, green, blue) bytes
    """
    s = clamp01(s)
    l = clamp01(l)

    if s <= _EPSILON:
        gray = _to_byte(l)
        return gray, gray, gray

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    m = l - c / 2.0
    return _chroma_to_rgb(_wrap_hue(h), c, m)


def rgb_to_cmyk(r: int, g: int, b: int) -> tuple[float, float, float, float]:
    """
    Convert RGB bytes to CMYK.

    Pure black yields (0, 0, 0, 1) instead of dividing by zero.

    Returns:
        (cyan, magenta, yellow, key), each 0-1
    """
    rd = clamp(r, 0, 255) / 255.0
    gd = clamp(g, 0, 255) / 255.0
    bd = clamp(b, 0, 255) / 255.0

    k = 1.0 - max(rd, gd, bd)
    if k >= 1.0 - _EPSILON:
        return 0.0, 0.0, 0.0, 1.0

    c = (1.0 - rd - k) / (1.0 - k)
    m = (1.0 - gd - k) / (1.0 - k)
    y = (1.0 - bd - k) / (1.0 - k)
    return clamp01(c), clamp01(m), clamp01(y), clamp01(k)


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> tuple[int, int, int]:
    """Convert CMYK (0-1 each) to RGB bytes: ``r = round(255 * (1 - c) * (1 - k))``."""
    c, m, y, k = clamp01(c), clamp01(m), clamp01(y), clamp01(k)
    return (
        _to_byte((1.0 - c) * (1.0 - k)),
        _to_byte((1.0 - m) * (1.0 - k)),
        _to_byte((1.0 - y) * (1.0 - k)),
    )


def hsv_to_hsl(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to HSL without going through RGB.

    Hue is passed through unchanged.
    """
    s = clamp01(s)
    v = clamp01(v)

    l = v * (1.0 - s / 2.0)
    if l <= _EPSILON or l >= 1.0 - _EPSILON:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1.0 - l)
    return h, clamp01(s_l), clamp01(l)


def hsl_to_hsv(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to HSV without going through RGB.

    Hue is passed through unchanged.
    """
    s = clamp01(s)
    l = clamp01(l)

    v = l + s * min(l, 1.0 - l)
    s_v = 0.0 if v <= _EPSILON else 2.0 * (1.0 - l / v)
    return h, clamp01(s_v), clamp01(v)


def is_valid_hex(text: object) -> bool:
    """Check whether text is a ``#RRGGBB`` or ``#AARRGGBB`` string."""
    return isinstance(text, str) and HEX_PATTERN.match(text) is not None


def to_hex_argb(r: int, g: int, b: int, alpha: float) -> str:
    """
    Format RGB bytes and a 0-1 alpha as an uppercase ``#AARRGGBB`` string.

    Example:
        >>> to_hex_argb(10, 20, 30, 0.75)
        '#BF0A141E'
    """
    a = _to_byte(alpha)
    r = int(clamp(r, 0, 255))
    g = int(clamp(g, 0, 255))
    b = int(clamp(b, 0, 255))
    return f"#{a:02X}{r:02X}{g:02X}{b:02X}"


def parse_hex_argb(text: str) -> tuple[int, int, int, int]:
    """
    Decode a hex color into (alpha, red, green, blue) bytes.

    A 6-digit ``#RRGGBB`` value is treated as fully opaque.

    Raises:
        ValueError: If text is not ``#RRGGBB`` or ``#AARRGGBB``
    """
    if not is_valid_hex(text):
        raise ValueError(f"Invalid hex color: {text!r}")

    digits = text[1:]
    if len(digits) == 6:
        digits = "FF" + digits

    return (
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
        int(digits[6:8], 16),
    )
