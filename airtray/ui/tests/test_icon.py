from airtray.ui.icon import make_icon


def test_icon_size_and_mode():
    img = make_icon(True)
    assert img.size == (64, 64)
    assert img.mode == "RGBA"

    assert make_icon(False, size=32).size == (32, 32)


def test_on_and_off_icons_differ():
    on = make_icon(True)
    off = make_icon(False)
    assert on.tobytes() != off.tobytes()

    # off is the same glyph, just dimmer
    max_alpha_on = on.getchannel("A").getextrema()[1]
    max_alpha_off = off.getchannel("A").getextrema()[1]
    assert max_alpha_on == 255
    assert max_alpha_off < max_alpha_on


def test_corners_are_transparent():
    img = make_icon(True)
    assert img.getpixel((0, 0))[3] == 0
    assert img.getpixel((63, 63))[3] == 0
