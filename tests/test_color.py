from puyo.components.color import ACTIVE_COLORS, Color, Pair, Unit


def test_active_colors_equal_themselves():
    for color in ACTIVE_COLORS:
        assert color == color
        assert Unit(color) == Unit(color)


def test_distinct_active_colors_differ():
    assert Color.RED != Color.BLUE
    assert Unit(Color.RED) != Unit(Color.YELLOW)


def test_sentinel_never_equal_even_to_itself():
    assert Color.GREY != Color.GREY
    assert not (Color.GREY == Color.GREY)
    assert Color.GREY != Color.RED
    assert Unit(Color.GREY) != Unit(Color.GREY)


def test_sentinel_still_usable_as_dict_key():
    lookup = {Color.GREY: "grey", Color.RED: "red"}
    assert lookup[Color.GREY] == "grey"
    assert Color.GREY.is_sentinel
    assert not Color.RED.is_sentinel


def test_text_forms():
    pair = Pair.of(Color.RED, Color.YELLOW)
    assert str(Color.PURPLE) == "P"
    assert str(Unit(Color.GREEN)) == "(G)"
    assert str(pair) == "(R)(Y)"
    assert pair.colors == (Color.RED, Color.YELLOW)
