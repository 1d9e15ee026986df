"""Theme colors and color utilities for the tub view."""


class TubColors:
    """Light theme palette for the bathtub window."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    # Tub shell
    TUB_FILL = "#fafdfe"
    TUB_BORDER = "#90a4ae"

    # Water: deepest slab at the floor, lightest at the surface
    WATER_DEEP = "#0277bd"
    WATER_SURFACE = "#81d4fa"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_MUTED = "#78909c"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def water_shade(index: int, capacity: int) -> str:
    """Color of the water slab at *index* in a tub holding *capacity* levels."""
    if capacity <= 1:
        return TubColors.WATER_DEEP
    return blend_hex(TubColors.WATER_DEEP, TubColors.WATER_SURFACE, index / float(capacity - 1))
