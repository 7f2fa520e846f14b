from __future__ import annotations

from PIL import Image, ImageDraw


def make_icon(enabled: bool, size: int = 64) -> Image.Image:
    # Monochrome AirPlay glyph: screen outline + triangle at the bottom edge
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    d = ImageDraw.Draw(img)

    s = size / 64.0
    alpha = 255 if enabled else 90
    ink = (255, 255, 255, alpha)

    # screen
    d.rounded_rectangle(
        (6 * s, 10 * s, 58 * s, 44 * s),
        radius=int(4 * s),
        outline=ink,
        width=max(1, int(4 * s)),
    )
    # clear a notch so the triangle sits in the bezel
    d.rectangle((22 * s, 40 * s, 42 * s, 48 * s), fill=(0, 0, 0, 0))
    # triangle
    d.polygon([(32 * s, 34 * s), (46 * s, 54 * s), (18 * s, 54 * s)], fill=ink)
    return img
