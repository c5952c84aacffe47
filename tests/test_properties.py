import pytest

from fontmatch.properties import Properties, Stretch, Style, Weight


def test_default_properties_are_normal():
    props = Properties()
    assert props.style is Style.NORMAL
    assert props.weight == Weight.NORMAL
    assert props.stretch == Stretch.NORMAL


def test_default_weight_and_stretch_values():
    assert Weight() == Weight(400.0)
    assert Stretch() == Stretch(1.0)


@pytest.mark.parametrize(
    "style,text", [(Style.NORMAL, "Normal"), (Style.ITALIC, "Italic"), (Style.OBLIQUE, "Oblique")]
)
def test_style_str(style, text):
    assert str(style) == text


def test_with_methods_chain_and_leave_original():
    base = Properties()
    changed = base.with_style(Style.ITALIC).with_weight(Weight.BOLD).with_stretch(Stretch.CONDENSED)
    assert changed == Properties(Style.ITALIC, Weight.BOLD, Stretch.CONDENSED)
    assert base == Properties()


@pytest.mark.parametrize(
    "constant,value",
    [
        (Weight.THIN, 100.0),
        (Weight.EXTRA_LIGHT, 200.0),
        (Weight.LIGHT, 300.0),
        (Weight.NORMAL, 400.0),
        (Weight.MEDIUM, 500.0),
        (Weight.SEMIBOLD, 600.0),
        (Weight.BOLD, 700.0),
        (Weight.EXTRA_BOLD, 800.0),
        (Weight.BLACK, 900.0),
    ],
)
def test_weight_constants_match_constructed_values(constant, value):
    assert Weight(value) == constant


def test_weights_compare_by_value():
    assert Weight(100.0) < Weight(400.0) < Weight(900.0)
    assert Weight(700.0) > Weight(450.0)
    assert Properties().with_weight(Weight(700.0)).weight == Weight.BOLD


def test_stretch_mapping_matches_constants():
    constructed = [Stretch(value) for value in Stretch.MAPPING]
    assert constructed == [
        Stretch.ULTRA_CONDENSED,
        Stretch.EXTRA_CONDENSED,
        Stretch.CONDENSED,
        Stretch.SEMI_CONDENSED,
        Stretch.NORMAL,
        Stretch.SEMI_EXPANDED,
        Stretch.EXPANDED,
        Stretch.EXTRA_EXPANDED,
        Stretch.ULTRA_EXPANDED,
    ]
    assert Stretch(0.5) < Stretch(1.0) < Stretch(2.0)


def test_properties_are_immutable():
    props = Properties()
    with pytest.raises(AttributeError):
        props.style = Style.ITALIC  # type: ignore[misc]
    assert props.style is Style.NORMAL
    assert props == Properties()