"""Core data structures for sound captions and subtitles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace

EMPTY_SUBTITLE_LINES = (
    "We would like to show you something,",
    "but this subtitle is empty.",
)

DEFAULT_DISPLAY_DURATION = 1.5
ERROR_NAME = "error"


class AngleUnit(enum.Enum):
    """Units an indicator angle can be expressed in."""

    DEGREES = "degrees"
    TURNS = "turns"
    RADIANS = "radians"


@dataclass(frozen=True)
class SoundID:
    """Identifies a sound by its source and the sound's own name."""

    source: str = ""
    sound: str = ""


@dataclass
class SoundCaption:
    """A caption: its text and the delay before it is shown."""

    description: str = ""
    start_delay: float = 0.0


@dataclass
class FullCaption(SoundCaption):
    """A caption together with the sound it belongs to."""

    sound_id: SoundID = field(default_factory=SoundID)
    display_duration: float = DEFAULT_DISPLAY_DURATION


@dataclass
class RawSubtitle(SoundCaption):
    """A subtitle's lines and the time it takes to read them."""

    read_duration: float = DEFAULT_DISPLAY_DURATION
    lines: list[str] = field(default_factory=lambda: list(EMPTY_SUBTITLE_LINES))


@dataclass
class GroupSubtitle(RawSubtitle):
    """A raw subtitle that names its speaker explicitly."""

    speaker_text: str = ERROR_NAME
    speaker: str = ERROR_NAME


@dataclass
class FullSubtitle(GroupSubtitle):
    """All the data required to construct a subtitle."""

    source: str = ERROR_NAME

    @classmethod
    def from_caption(cls, caption: FullCaption, speaker: str) -> FullSubtitle:
        """Build a subtitle that shows a caption's description as its only line."""
        return cls(
            read_duration=caption.display_duration,
            lines=[caption.description],
            speaker_text="",
            speaker=speaker,
            source=caption.sound_id.source,
        )

    def with_start(self, start_delay: float) -> FullSubtitle:
        """Return a copy of this subtitle with a different start delay."""
        return replace(self, start_delay=start_delay, lines=list(self.lines))


@dataclass
class CrispCaption:
    """A caption ready to be displayed."""

    description: str = ""
    sound_id: SoundID = field(default_factory=SoundID)
    id: int = 0

    @classmethod
    def from_full(cls, caption: FullCaption, id: int) -> CrispCaption:
        """Prepare a full caption for display under the given id."""
        return cls(description=caption.description, sound_id=caption.sound_id, id=id)


@dataclass
class CrispSubtitle:
    """A subtitle ready to be displayed."""

    label: str = ""
    lines: list[str] = field(default_factory=list)
    speaker: str = ""
    source: str = ""
    id: int = 0

    def is_indirect_speech(self) -> bool:
        """True when the speaker is not heard directly from the source."""
        return self.source != self.speaker