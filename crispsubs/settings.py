"""User-facing subtitle settings and the layout derived from them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

Vector2 = Tuple[float, float]

DEFAULT_DISPLAY_NAME = "Default"
DEFAULT_FULL_LABEL_FORMAT = "{speaker}: [{description}]"
DEFAULT_SPEAKER_ONLY_LABEL_FORMAT = "{speaker}:"
DEFAULT_DESCRIPTION_ONLY_LABEL_FORMAT = "[{description}]"
REGULAR_TYPEFACE = "Regular"
ITALIC_TYPEFACE = "Italic"


class ShowSpeaker(enum.Enum):
    """When a subtitle label shows the speaker's name."""

    ALWAYS = "always"
    COLOUR_CODED_SHOW_ONCE = "colour_coded_show_once"
    COLOUR_CODED_SHOW_NEVER = "colour_coded_show_never"
    NEVER = "never"


class HorizontalAlignment(enum.Enum):
    """Horizontal placement of a widget inside its container."""

    FILL = "fill"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True)
class Colour:
    """A linear RGBA colour."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


Colour.WHITE = Colour(1.0, 1.0, 1.0, 1.0)  # type: ignore[attr-defined]
Colour.BLACK = Colour(0.0, 0.0, 0.0, 1.0)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Margin:
    """Padding on the four sides of a box."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def symmetric(cls, horizontal: float, vertical: float) -> Margin:
        """A margin with equal left/right and equal top/bottom padding."""
        return cls(horizontal, vertical, horizontal, vertical)


@dataclass
class FontInfo:
    """Everything needed to render text in a given font."""

    font: Any = None
    outline: Any = None
    letter_spacing: int = 0
    font_material: Any = None
    size: float = 0.0
    typeface: str = ""


@dataclass
class LayoutCache:
    """Layout values derived from the settings for one screen size."""

    font_info: FontInfo = field(default_factory=FontInfo)
    text_padding: Margin = field(default_factory=Margin)
    line_padding: Margin = field(default_factory=Margin)
    subtitle_padding: Margin = field(default_factory=Margin)
    box_padding: Margin = field(default_factory=Margin)
    caption_padding: Margin = field(default_factory=Margin)
    indicator_size: Vector2 = (0.0, 0.0)
    caption_text_size: int = 0
    base_size: float = 0.0


@dataclass
class ColourProfile:
    """Decides which colours the subtitle and caption UI uses."""

    letterbox_colour: Colour = Colour.BLACK  # type: ignore[attr-defined]
    line_back_colour: Colour = Colour.BLACK  # type: ignore[attr-defined]
    caption_back_colour: Colour = Colour.BLACK  # type: ignore[attr-defined]
    subtitle_colour: Colour = Colour.WHITE  # type: ignore[attr-defined]
    caption_colour: Colour = Colour.WHITE  # type: ignore[attr-defined]

    def get_subtitle_colour(self, speaker: str) -> Colour:
        """The text colour for a speaker's subtitles."""
        return self.subtitle_colour

    def get_caption_colour(self, source: str) -> Colour:
        """The text colour for a source's captions."""
        return self.caption_colour


@dataclass
class MatchingColourProfile(ColourProfile):
    """A colour profile that gives named speakers their own colours.

    It remembers which speakers have been shown with their colour, so a label
    can be left out once the user has learned the colour coding.
    """

    speaker_colours: dict[str, Colour] = field(default_factory=dict)
    matched: set[str] = field(default_factory=set)

    def has_colour(self, speaker: str) -> bool:
        """True when the speaker has a colour of its own."""
        return speaker in self.speaker_colours

    def colour_was_matched(self, speaker: str) -> bool:
        """True when the speaker's name was shown alongside its colour."""
        return speaker in self.matched

    def log_match(self, speaker: str) -> None:
        """Record that the speaker's name was shown with its colour."""
        if self.has_colour(speaker):
            self.matched.add(speaker)

    def get_subtitle_colour(self, speaker: str) -> Colour:
        return self.speaker_colours.get(speaker, self.subtitle_colour)

    def get_caption_colour(self, source: str) -> Colour:
        return self.speaker_colours.get(source, self.caption_colour)


@dataclass
class UserSettings:
    """A set of subtitle and caption preferences a user can choose."""

    # Core
    display_name: str = DEFAULT_DISPLAY_NAME
    letterbox_class: Any = None
    subtitle_spacer: Any = None
    line_class: Any = None
    caption_class: Any = None
    caption_spacer: Any = None
    show_subtitles: bool = True
    show_subtitle_indicators: bool = False
    show_captions: bool = False
    show_caption_indicators: bool = True
    colour_profile: Optional[ColourProfile] = None
    # Label
    full_label_format: str = DEFAULT_FULL_LABEL_FORMAT
    speaker_only_label_format: str = DEFAULT_SPEAKER_ONLY_LABEL_FORMAT
    description_only_label_format: str = DEFAULT_DESCRIPTION_ONLY_LABEL_FORMAT
    show_speaker: ShowSpeaker = ShowSpeaker.NEVER
    speakers_are_upper_case: bool = True
    show_subtitle_descriptions: bool = False
    # Font
    font: Any = None
    regular_typeface: str = REGULAR_TYPEFACE
    indirect_speech_typeface: str = ITALIC_TYPEFACE
    caption_typeface: str = REGULAR_TYPEFACE
    outline: Any = None
    letter_spacing: int = 0
    font_material: Any = None
    subtitle_text_size: float = 0.04
    caption_text_size: float = 0.04
    # Layout
    subtitle_padding: float = 0.015
    line_padding: float = 0.0
    caption_padding: float = 0.01
    caption_alignment: HorizontalAlignment = HorizontalAlignment.RIGHT
    indicator_size: float = 1.0
    # Timing
    reading_speed: float = 1.0
    accumulate_read_time: bool = True
    time_gap: float = 0.16
    minimum_subtitle_time: float = 1.0
    minimum_caption_time: float = 0.85

    _layout: LayoutCache = field(default_factory=LayoutCache, init=False, repr=False)

    @property
    def layout(self) -> LayoutCache:
        """The cached layout for the last screen size seen."""
        return self._layout

    def recalculate_layout(self, viewport_size: Optional[Vector2]) -> None:
        """Recalculate the layout if the smaller viewport dimension changed."""
        if viewport_size is None:
            return
        size = int(min(viewport_size[0], viewport_size[1]))
        self._update_base_size(size)

    def recalculate_design_layout(self, screen_size: Vector2) -> None:
        """Recalculate the layout if the smaller screen dimension changed."""
        self._update_base_size(min(screen_size[0], screen_size[1]))

    def get_show_speaker(self, speaker: str) -> bool:
        """Whether a subtitle should show the speaker's name."""
        profile = self.colour_profile
        if self.show_speaker is ShowSpeaker.COLOUR_CODED_SHOW_ONCE:
            if isinstance(profile, MatchingColourProfile):
                return not profile.colour_was_matched(speaker)
            return True
        if self.show_speaker is ShowSpeaker.COLOUR_CODED_SHOW_NEVER:
            if isinstance(profile, MatchingColourProfile):
                return not profile.has_colour(speaker)
            return True
        return self.show_speaker is not ShowSpeaker.NEVER

    def log_speaker_shown(self, speaker: str) -> None:
        """Record that the speaker's name was shown to the user."""
        if isinstance(self.colour_profile, MatchingColourProfile):
            self.colour_profile.log_match(speaker)

    def get_subtitle_text_colour(self, speaker: str) -> Colour:
        """The subtitle text colour for a speaker."""
        if self.colour_profile is None:
            return Colour.WHITE  # type: ignore[attr-defined]
        return self.colour_profile.get_subtitle_colour(speaker)

    def get_caption_text_colour(self, speaker: str) -> Colour:
        """The caption text colour for a source."""
        if self.colour_profile is None:
            return Colour.WHITE  # type: ignore[attr-defined]
        return self.colour_profile.get_caption_colour(speaker)

    def _update_base_size(self, size: float) -> None:
        if self._layout.base_size == size or size <= 0:
            return
        self._layout.base_size = size
        self._rebuild_layout()

    def _rebuild_layout(self) -> None:
        layout = self._layout
        base = layout.base_size

        info = layout.font_info
        info.font = self.font
        info.outline = self.outline
        info.letter_spacing = self.letter_spacing
        info.font_material = self.font_material
        info.size = base * self.subtitle_text_size
        info.typeface = self.regular_typeface

        layout.caption_text_size = int(base * self.caption_text_size)

        layout.text_padding = Margin.symmetric(info.size * 0.5, info.size * 0.25)
        layout.line_padding = Margin(0, base * self.line_padding, 0, 0)
        layout.subtitle_padding = Margin(0, base * self.subtitle_padding, 0, 0)
        layout.box_padding = Margin.symmetric(base * 0.03, base * 0.01)
        layout.caption_padding = Margin(0, base * self.caption_padding, 0, 0)

        indicator = layout.caption_text_size * self.indicator_size
        layout.indicator_size = (indicator, indicator)