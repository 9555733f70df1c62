"""Helpers for preparing subtitle text and timing."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from crispsubs.models import GroupSubtitle, RawSubtitle, SoundCaption

DEFAULT_MIN_DURATION = 0.833
DEFAULT_MAX_LINE_LENGTH = 38
DEFAULT_WORD_DELIMITER = " "
DEFAULT_NON_CONTRIBUTING = " -.,;:!?"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class OverlayItem:
    """A timed text overlay, such as one entry of an SRT file (times in seconds)."""

    start_time: float
    end_time: float
    text: str


def _split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter, dropping empty pieces."""
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    return [piece for piece in text.split(delimiter) if piece]


def calculate_display_time(
    unit_count: int,
    word_time: float,
    character_time: float,
    unit_is_words: bool = True,
    min_duration: float = DEFAULT_MIN_DURATION,
) -> float:
    """Estimate how long a subtitle must be shown to be read."""
    unit_time = word_time if unit_is_words else character_time
    return max(min_duration, unit_count * unit_time)


def automatic_line_breaks(
    subtitle: str,
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    word_delimiter: str = DEFAULT_WORD_DELIMITER,
) -> tuple[list[str], int]:
    """Break a subtitle into lines of limited length.

    Returns the lines and the number of words found.
    """
    words = _split(subtitle, word_delimiter)
    lines: list[str] = []
    line = ""
    line_length = 0

    for word in words:
        potential = len(word) + line_length
        if potential == max_line_length:
            lines.append(line + word)
            line = ""
            line_length = 0
        elif potential < max_line_length:
            line += word + word_delimiter
            line_length = potential + 1
        else:
            lines.append(line)
            line = word + word_delimiter
            line_length = len(word) + 1

    if line_length != 0:
        lines.append(line)

    return lines, len(words)


def count_words(
    lines: Iterable[str],
    word_count_delimiters: Sequence[str],
    word_count: int = 0,
    word_delimiter: str = DEFAULT_WORD_DELIMITER,
) -> int:
    """Count words, treating each extra delimiter (e.g. hyphens) as a word break.

    A word count of 0 triggers a full recount of the lines first.
    """
    lines = list(lines)
    if word_count == 0:
        word_count = sum(len(_split(line, word_delimiter)) for line in lines)

    for line in lines:
        for delimiter in word_count_delimiters:
            word_count += len(_split(line, delimiter)) - 1

    return word_count


def count_characters(
    lines: Iterable[str], non_contributing_characters: str = DEFAULT_NON_CONTRIBUTING
) -> int:
    """Count characters, leaving out the given ones."""
    excluded = set(non_contributing_characters)
    return sum(1 for line in lines for character in line if character not in excluded)


def convert_overlays(overlays: Iterable[OverlayItem]) -> list[RawSubtitle]:
    """Turn timed overlays into raw subtitles, one line per text line."""
    return [
        RawSubtitle(
            start_delay=item.start_time,
            read_duration=item.end_time - item.start_time,
            lines=[line for line in _LINE_BREAK.split(item.text) if line],
        )
        for item in overlays
    ]


def sort_captions(captions: Iterable[SoundCaption]) -> list[SoundCaption]:
    """Return the captions sorted by start delay, keeping ties in order."""
    return sorted(captions, key=lambda caption: caption.start_delay)


def sort_raw_subtitles(subtitles: Iterable[RawSubtitle]) -> list[RawSubtitle]:
    """Return a copy of the subtitles.

    Only plain captions are reordered; raw subtitles keep their given order.
    """
    return list(subtitles)


def sort_group_subtitles(subtitles: Iterable[GroupSubtitle]) -> list[GroupSubtitle]:
    """Return a copy of the subtitles.

    Only plain captions are reordered; group subtitles keep their given order.
    """
    return list(subtitles)