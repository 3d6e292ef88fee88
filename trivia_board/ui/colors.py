"""Theme colors and color utilities for the UI."""


class BoardColors:
    """Classic game-show palette: deep blue board, gold values."""

    BG_TOP = "#0b1d6b"
    BG_BOTTOM = "#06104a"

    TILE = "#1a3dbf"
    TILE_USED = "#2b3566"
    VALUE = "#ffcc33"
    VALUE_USED = "#5b6491"

    PRIMARY = "#ffcc33"

    HEADER_BG = "rgba(255, 255, 255, 0.10)"
    HEADER_BORDER = "rgba(255, 255, 255, 0.25)"

    TEXT_PRIMARY = "#ffffff"
    TEXT_SECONDARY = "#c9d2ff"
    ANSWER = "#7ff5c4"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b. Malformed input returns *a* unchanged."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = (int(a[i:i + 2], 16) for i in (1, 3, 5))
        br, bg, bb = (int(b[i:i + 2], 16) for i in (1, 3, 5))
    except ValueError:
        return a
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"
