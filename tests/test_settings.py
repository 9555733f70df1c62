import pytest

from crispsubs.settings import (
    Colour,
    ColourProfile,
    Margin,
    MatchingColourProfile,
    ShowSpeaker,
    UserSettings,
)

RED = Colour(1.0, 0.0, 0.0, 1.0)
BLUE = Colour(0.0, 0.0, 1.0, 1.0)


def matching_profile(**kwargs):
    return MatchingColourProfile(speaker_colours={"alice": RED}, **kwargs)


def test_margin_symmetric_mirrors_sides():
    margin = Margin.symmetric(3.0, 7.0)
    assert margin == Margin(3.0, 7.0, 3.0, 7.0)


def test_layout_uses_smaller_dimension():
    wide = UserSettings()
    tall = UserSettings()
    wide.recalculate_layout((1920, 1080))
    tall.recalculate_layout((1080, 1920))
    assert wide.layout.base_size == 1080
    assert wide.layout == tall.layout


def test_layout_font_info_copies_settings():
    settings = UserSettings(
        font="font-object", letter_spacing=4, regular_typeface="Bold", subtitle_text_size=0.5
    )
    settings.recalculate_design_layout((200.0, 100.0))
    info = settings.layout.font_info
    assert info.font == "font-object"
    assert info.letter_spacing == 4
    assert info.typeface == "Bold"
    assert info.size == pytest.approx(50.0)


def test_text_padding_is_half_and_quarter_of_font_size():
    settings = UserSettings()
    settings.recalculate_layout((1280, 720))
    size = settings.layout.font_info.size
    padding = settings.layout.text_padding
    assert padding.left == pytest.approx(size * 0.5)
    assert padding.right == padding.left
    assert padding.top == pytest.approx(size * 0.25)
    assert padding.bottom == padding.top


def test_top_only_paddings():
    settings = UserSettings(line_padding=0.1, subtitle_padding=0.2, caption_padding=0.3)
    settings.recalculate_layout((100, 100))
    for margin in (
        settings.layout.line_padding,
        settings.layout.subtitle_padding,
        settings.layout.caption_padding,
    ):
        assert margin.left == margin.right == margin.bottom == 0
        assert margin.top > 0
    assert settings.layout.line_padding.top < settings.layout.subtitle_padding.top
    assert settings.layout.subtitle_padding.top < settings.layout.caption_padding.top


def test_caption_text_size_is_truncated_and_drives_indicator():
    settings = UserSettings(caption_text_size=0.5, indicator_size=2.0)
    settings.recalculate_design_layout((101.0, 101.0))
    assert settings.layout.caption_text_size == 50
    assert settings.layout.indicator_size == (100.0, 100.0)


def test_same_size_does_not_recalculate():
    settings = UserSettings()
    settings.recalculate_layout((800, 600))
    before = settings.layout.font_info.size
    settings.subtitle_text_size = 0.5
    settings.recalculate_layout((900, 600))
    assert settings.layout.font_info.size == before


def test_non_positive_size_is_ignored():
    settings = UserSettings()
    settings.recalculate_layout((800, 600))
    settings.recalculate_design_layout((0.0, 500.0))
    settings.recalculate_layout((-5, 500))
    assert settings.layout.base_size == 600


def test_missing_viewport_is_ignored():
    settings = UserSettings()
    settings.recalculate_layout(None)
    assert settings.layout.base_size == 0


def test_show_speaker_never_and_always():
    settings = UserSettings(show_speaker=ShowSpeaker.NEVER)
    assert settings.get_show_speaker("alice") is False
    settings.show_speaker = ShowSpeaker.ALWAYS
    assert settings.get_show_speaker("alice") is True


@pytest.mark.parametrize(
    "mode", [ShowSpeaker.COLOUR_CODED_SHOW_ONCE, ShowSpeaker.COLOUR_CODED_SHOW_NEVER]
)
def test_colour_coded_without_matching_profile_shows_speaker(mode):
    settings = UserSettings(show_speaker=mode, colour_profile=ColourProfile())
    assert settings.get_show_speaker("alice") is True


def test_show_once_hides_after_logging():
    settings = UserSettings(
        show_speaker=ShowSpeaker.COLOUR_CODED_SHOW_ONCE, colour_profile=matching_profile()
    )
    assert settings.get_show_speaker("alice") is True
    settings.log_speaker_shown("alice")
    assert settings.get_show_speaker("alice") is False
    assert settings.get_show_speaker("bob") is True


def test_show_never_hides_coloured_speakers():
    settings = UserSettings(
        show_speaker=ShowSpeaker.COLOUR_CODED_SHOW_NEVER, colour_profile=matching_profile()
    )
    assert settings.get_show_speaker("alice") is False
    assert settings.get_show_speaker("bob") is True


def test_log_speaker_shown_records_only_coloured_speakers():
    profile = matching_profile()
    settings = UserSettings(colour_profile=profile)
    settings.log_speaker_shown("alice")
    settings.log_speaker_shown("bob")
    assert profile.matched == {"alice"}


def test_text_colours_default_to_white_without_profile():
    settings = UserSettings()
    assert settings.get_subtitle_text_colour("alice") == Colour.WHITE
    assert settings.get_caption_text_colour("alice") == Colour.WHITE


def test_text_colours_come_from_profile():
    profile = matching_profile(subtitle_colour=BLUE, caption_colour=BLUE)
    settings = UserSettings(colour_profile=profile)
    assert settings.get_subtitle_text_colour("alice") == RED
    assert settings.get_subtitle_text_colour("bob") == BLUE
    assert settings.get_caption_text_colour("alice") == RED
    assert settings.get_caption_text_colour("bob") == BLUE


def test_plain_profile_colours():
    profile = ColourProfile(subtitle_colour=RED, caption_colour=BLUE)
    settings = UserSettings(colour_profile=profile)
    assert settings.get_subtitle_text_colour("anyone") == RED
    assert settings.get_caption_text_colour("anyone") == BLUE