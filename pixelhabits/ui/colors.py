"""Pixel theme palette and color utilities."""

PIXEL_FONT = "Courier New"


class PixelColors:
    """Green pixel palette shared by every screen."""

    BG_TOP = "#E8F5E9"
    BG_BOTTOM = "#C8E6C9"

    PRIMARY = "#4CAF50"
    PRIMARY_DARK = "#2E7D32"
    PRIMARY_DEEP = "#388E3C"
    PRIMARY_SOFT = "#66BB6A"
    PRIMARY_MUTED = "#81C784"
    PRIMARY_PALE = "#C8E6C9"

    AMBER = "#FFC107"
    ORANGE = "#FF9800"
    PURPLE = "#9C27B0"
    GREY = "#757575"
    GREY_LIGHT = "#E0E0E0"
    GREY_CHEVRON = "#B0B0B0"
    ERROR = "#E53935"

    CARD_BG = "#FFFFFF"
    CARD_BORDER = "#E0E0E0"
    OVERLAY_BG = "rgba(0, 0, 0, 0.7)"


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


def with_alpha(color: str, alpha: float) -> str:
    """Turn #RRGGBB into an rgba() string usable in Qt style sheets."""
    color = color.strip()
    if not (color.startswith("#") and len(color) == 7):
        return color
    alpha = max(0.0, min(1.0, float(alpha)))
    r, g, b = int(color[1:3], 16), int(color[3:5], 16), int(color[5:7], 16)
    return f"rgba({r}, {g}, {b}, {alpha:.2f})"
