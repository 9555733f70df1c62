import pytest

from crispsubs.settings import Colour, MatchingColourProfile, UserSettings
from crispsubs.styles import (
    CaptionStyle,
    LetterboxStyle,
    LineStyle,
    get_caption_style,
    get_design_caption_style,
    get_design_label_style,
    get_design_letterbox_style,
    get_design_line_style,
    get_label_style,
    get_letterbox_style,
    get_line_style,
)

RED = Colour(1.0, 0.0, 0.0, 1.0)
BLUE = Colour(0.0, 0.0, 1.0, 1.0)
GREY = Colour(0.5, 0.5, 0.5, 1.0)
GREEN = Colour(0.0, 1.0, 0.0, 1.0)


@pytest.fixture
def settings():
    profile = MatchingColourProfile(
        letterbox_colour=GREY,
        line_back_colour=GREEN,
        caption_back_colour=BLUE,
        speaker_colours={"alice": RED},
    )
    result = UserSettings(
        colour_profile=profile,
        show_subtitle_indicators=True,
        line_class="LineWidget",
    )
    result.recalculate_design_layout((1000, 500))
    return result


def test_none_settings_give_defaults():
    assert get_line_style(None, "alice", True) == LineStyle()
    assert get_label_style(None, "alice") == LineStyle()
    assert get_caption_style(None, "src") == CaptionStyle()
    assert get_letterbox_style(None, "alice", False) == LetterboxStyle()
    assert get_design_letterbox_style(None, "a", False, (10, 10)) == LetterboxStyle()
    assert get_design_caption_style(None, "a", (10, 10)) == CaptionStyle()


def test_default_styles_use_white_on_black():
    style = LineStyle()
    assert style.text_colour == Colour.WHITE
    assert style.back_colour == Colour.BLACK
    assert CaptionStyle().show_indicator is True
    assert LetterboxStyle().show_indicator is True


def test_line_style_direct_speech(settings):
    style = get_line_style(settings, "alice", False)
    assert style.font_info.typeface == "Regular"
    assert style.font_info.size == settings.layout.font_info.size
    assert style.text_colour == RED
    assert style.back_colour == GREEN
    assert style.text_padding == settings.layout.text_padding


def test_line_style_indirect_speech_uses_italic(settings):
    style = get_line_style(settings, "alice", True)
    assert style.font_info.typeface == "Italic"
    assert settings.layout.font_info.typeface == "Regular"


def test_unknown_speaker_uses_profile_default(settings):
    assert get_label_style(settings, "bob").text_colour == Colour.WHITE


def test_label_style_matches_direct_line_style(settings):
    assert get_label_style(settings, "alice") == get_line_style(settings, "alice", False)


def test_letterbox_style(settings):
    style = get_letterbox_style(settings, "alice", True)
    assert style.letterbox_colour == GREY
    assert style.line_class == "LineWidget"
    assert style.box_padding == settings.layout.box_padding
    assert style.line_padding == settings.layout.line_padding
    assert style.show_indicator is True
    assert style.line_style == get_line_style(settings, "alice", True)
    assert style.label_style == LineStyle()


def test_caption_style(settings):
    style = get_caption_style(settings, "alice")
    assert style.font_info.size == settings.layout.caption_text_size
    assert style.font_info.typeface == settings.caption_typeface
    assert style.back_colour == BLUE
    assert style.text_colour == RED
    assert style.show_indicator is True


def test_caption_style_without_profile_is_white():
    plain = UserSettings()
    plain.recalculate_design_layout((800, 600))
    assert get_caption_style(plain, "x").text_colour == Colour.WHITE


def test_design_styles_recalculate_layout():
    plain = UserSettings(colour_profile=MatchingColourProfile(speaker_colours={"alice": RED}))
    style = get_design_line_style(plain, "alice", False, (1000, 500))
    assert plain.layout.base_size == 500
    assert style.font_info.size == plain.layout.font_info.size
    assert style.text_colour == RED


def test_design_letterbox_sets_label_style(settings):
    style = get_design_letterbox_style(settings, "alice", True, (1000, 500))
    assert style.label_style == get_design_label_style(settings, "alice", (1000, 500))
    assert style.line_style.font_info.typeface == "Italic"
    assert style.letterbox_colour == GREY


def test_design_caption_keeps_subtitle_size(settings):
    style = get_design_caption_style(settings, "alice", (1000, 500))
    assert style.font_info.size == settings.layout.font_info.size
    assert style.font_info.typeface == settings.caption_typeface
    assert style.back_colour == BLUE


def test_style_font_info_is_independent(settings):
    style = get_line_style(settings, "alice", False)
    style.font_info.typeface = "Bold"
    assert settings.layout.font_info.typeface == "Regular"