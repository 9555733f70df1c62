"""Styles for subtitle letterboxes, lines and captions, built from user settings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from crispsubs.settings import (
    Colour,
    ColourProfile,
    FontInfo,
    Margin,
    UserSettings,
    Vector2,
)

_WHITE: Colour = Colour.WHITE  # type: ignore[attr-defined]
_BLACK: Colour = Colour.BLACK  # type: ignore[attr-defined]


@dataclass
class LineStyle:
    """The data used to style a subtitle line or label."""

    font_info: FontInfo = field(default_factory=FontInfo)
    text_colour: Colour = _WHITE
    back_colour: Colour = _BLACK
    text_padding: Margin = field(default_factory=Margin)


@dataclass
class LetterboxStyle:
    """The data used to style a subtitle letterbox."""

    line_class: Any = None
    label_style: LineStyle = field(default_factory=LineStyle)
    line_style: LineStyle = field(default_factory=LineStyle)
    letterbox_colour: Colour = _BLACK
    box_padding: Margin = field(default_factory=Margin)
    line_padding: Margin = field(default_factory=Margin)
    show_indicator: bool = True


@dataclass
class CaptionStyle:
    """The data used to style a caption."""

    font_info: FontInfo = field(default_factory=FontInfo)
    text_colour: Colour = _WHITE
    back_colour: Colour = _BLACK
    text_padding: Margin = field(default_factory=Margin)
    show_indicator: bool = True


def _profile(settings: UserSettings) -> ColourProfile:
    return settings.colour_profile if settings.colour_profile is not None else ColourProfile()


def _line_style(settings: UserSettings, speaker: str, indirect_speech: bool) -> LineStyle:
    layout = settings.layout
    font_info = replace(layout.font_info)
    if indirect_speech:
        font_info.typeface = settings.indirect_speech_typeface
    return LineStyle(
        font_info=font_info,
        text_colour=settings.get_subtitle_text_colour(speaker),
        back_colour=_profile(settings).line_back_colour,
        text_padding=layout.text_padding,
    )


def _letterbox_base(settings: UserSettings) -> LetterboxStyle:
    layout = settings.layout
    return LetterboxStyle(
        line_class=settings.line_class,
        letterbox_colour=_profile(settings).letterbox_colour,
        box_padding=layout.box_padding,
        line_padding=layout.line_padding,
        show_indicator=settings.show_subtitle_indicators,
    )


def _caption_style(settings: UserSettings, source: str, sized: bool) -> CaptionStyle:
    layout = settings.layout
    font_info = replace(layout.font_info)
    if sized:
        font_info.size = layout.caption_text_size
    font_info.typeface = settings.caption_typeface
    return CaptionStyle(
        font_info=font_info,
        text_colour=settings.get_caption_text_colour(source),
        back_colour=_profile(settings).caption_back_colour,
        text_padding=layout.text_padding,
    )


def get_letterbox_style(
    settings: Optional[UserSettings], speaker: str, indirect_speech: bool
) -> LetterboxStyle:
    """The letterbox style for a speaker under the given settings.

    The label style is left at its default; only the line style is derived.
    """
    if settings is None:
        return LetterboxStyle()
    style = _letterbox_base(settings)
    style.line_style = get_line_style(settings, speaker, indirect_speech)
    return style


def get_label_style(settings: Optional[UserSettings], speaker: str) -> LineStyle:
    """The style of a subtitle label for a speaker."""
    if settings is None:
        return LineStyle()
    return _line_style(settings, speaker, False)


def get_line_style(
    settings: Optional[UserSettings], speaker: str, indirect_speech: bool
) -> LineStyle:
    """The style of a subtitle line; indirect speech uses its own typeface."""
    if settings is None:
        return LineStyle()
    return _line_style(settings, speaker, indirect_speech)


def get_caption_style(settings: Optional[UserSettings], source: str) -> CaptionStyle:
    """The style of a caption for a sound source."""
    if settings is None:
        return CaptionStyle()
    return _caption_style(settings, source, sized=True)


def get_design_letterbox_style(
    settings: Optional[UserSettings],
    speaker: str,
    indirect_speech: bool,
    screen_size: Vector2,
) -> LetterboxStyle:
    """The letterbox style as previewed on a screen of the given size."""
    if settings is None:
        return LetterboxStyle()
    settings.recalculate_design_layout(screen_size)
    style = _letterbox_base(settings)
    style.label_style = get_design_label_style(settings, speaker, screen_size)
    style.line_style = get_design_line_style(settings, speaker, indirect_speech, screen_size)
    return style


def get_design_label_style(
    settings: Optional[UserSettings], speaker: str, screen_size: Vector2
) -> LineStyle:
    """The label style as previewed on a screen of the given size."""
    if settings is None:
        return LineStyle()
    settings.recalculate_design_layout(screen_size)
    return _line_style(settings, speaker, False)


def get_design_line_style(
    settings: Optional[UserSettings],
    speaker: str,
    indirect_speech: bool,
    screen_size: Vector2,
) -> LineStyle:
    """The line style as previewed on a screen of the given size."""
    if settings is None:
        return LineStyle()
    settings.recalculate_design_layout(screen_size)
    return _line_style(settings, speaker, indirect_speech)


def get_design_caption_style(
    settings: Optional[UserSettings], source: str, screen_size: Vector2
) -> CaptionStyle:
    """The caption style as previewed on a screen of the given size.

    The font keeps the subtitle text size.
    """
    if settings is None:
        return CaptionStyle()
    settings.recalculate_design_layout(screen_size)
    return _caption_style(settings, source, sized=False)