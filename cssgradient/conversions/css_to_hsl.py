from ..utils.num_utils import clamp, round_half_up


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % 360


def hue_to_channel(m1: float, m2: float, h: float) -> int:
    """
    Evaluate one RGB channel for a hue rotated by the caller.

    Piecewise-linear between ``m1`` and ``m2`` across the hue sextants, then
    scaled to [0, 255].

    Args:
        m1: Lower bound derived from lightness and saturation
        m2: Upper bound derived from lightness and saturation
        h: Hue in degrees, any range

    Returns:
        int: channel value in [0, 255]
    """
    h = normalize_hue(h) / 360
    if h * 6 < 1:
        c = m1 + (m2 - m1) * h * 6
    elif h * 2 < 1:
        c = m2
    elif h * 3 < 2:
        c = m1 + (m2 - m1) * (2 / 3 - h) * 6
    else:
        c = m1
    return clamp(round_half_up(c * 255), 0, 255)


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit RGB (CSS Color 3 algorithm).

    Args:
        h: Hue in degrees, normalized modulo 360
        s: Saturation in [0, 1] (clamped)
        l: Lightness in [0, 1] (clamped)

    Returns:
        Tuple[int, int, int]: (r, g, b) in [0, 255]
    """
    s = clamp(s, 0.0, 1.0)
    l = clamp(l, 0.0, 1.0)

    m2 = l * (s + 1) if l <= 0.5 else l + s - l * s
    m1 = l * 2 - m2

    return (
        hue_to_channel(m1, m2, h + 120),
        hue_to_channel(m1, m2, h),
        hue_to_channel(m1, m2, h - 120),
    )
