# crispsubs

A pure-Python toolkit for subtitles and sound captions. It estimates reading
time, breaks text into lines, counts words and characters, tracks where
sounds are so that direction indicators can point at them, scales layout to
the screen, and builds styles from user settings. It has no dependencies
outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `crispsubs.models`

Plain dataclasses for the data that moves through the toolkit:

- `SoundID` (frozen, hashable): a `source` and a `sound` name.
- `SoundCaption`: `description` and `start_delay`.
- `FullCaption`: a caption with its `sound_id` and `display_duration` (default 1.5).
- `RawSubtitle`: `read_duration` (default 1.5) and `lines`. A default
  instance holds two placeholder lines saying the subtitle is empty.
- `GroupSubtitle`: a raw subtitle with `speaker_text` and `speaker`.
- `FullSubtitle`: a group subtitle with its `source`.
  `FullSubtitle.from_caption(caption, speaker)` turns a caption into a
  one-line subtitle. `with_start(start_delay)` returns a copy with another
  start delay.
- `CrispCaption`: a caption ready for display. Build one with
  `CrispCaption.from_full(caption, id)`.
- `CrispSubtitle`: a subtitle ready for display. `is_indirect_speech()` is
  true when `speaker` differs from `source`.
- `AngleUnit`: an enum with the members `DEGREES`, `TURNS` and `RADIANS`.

### `crispsubs.tools`

- `calculate_display_time(unit_count, word_time, character_time, unit_is_words=True, min_duration=0.833)`
  returns the larger of `min_duration` and the unit count times the time per
  word or per character.
- `automatic_line_breaks(subtitle, max_line_length=38, word_delimiter=" ")`
  returns `(lines, word_count)`. Lines that end short keep their trailing
  delimiter.
- `count_words(lines, word_count_delimiters, word_count=0, word_delimiter=" ")`
  counts each extra delimiter, such as a hyphen, as a word break. When
  `word_count` is 0, the words are recounted first.
- `count_characters(lines, non_contributing_characters=" -.,;:!?")` counts
  characters and leaves out the listed ones.
- `OverlayItem(start_time, end_time, text)` is a timed text entry, with times
  in seconds. `convert_overlays(overlays)` turns these entries into
  `RawSubtitle`s with one line per non-empty text line.
- `sort_captions(captions)` sorts captions by `start_delay` and keeps ties in
  their order. `sort_raw_subtitles` and `sort_group_subtitles` return copies
  in the order they were given. They do not reorder.

An empty delimiter raises `ValueError`.

### `crispsubs.tracking`

- `TrackingData` stores tracked sounds. Sounds that an indicator is showing
  are kept at the front. Removing such a sound is deferred until its
  indicator is unregistered.
- `TrackingManager(player, projector=None)` tracks sounds for one player.
  `projector` is a callable. It takes the player and returns
  `(matrix, width, height)`, where the 4×4 view-projection matrix is applied
  to row vectors, or it returns `None`. `calculate()` projects every active
  sound and fills in its `angle` and `opacity_driver`. The opacity driver is
  negative when the sound is behind the camera. `calculate()` then calls the
  registered update callbacks.
  - `register_indicator(sound_id, owner, on_update, on_swap, on_track)`
    returns the sound's `TrackedSound` data. If the sound is not tracked yet,
    it returns `None` and calls `on_track` once the sound starts being
    tracked.
  - `unregister_indicator(sound_id, owner)` detaches the owner's indicator
    and sends a `SwapArgs` notice when another sound's data moved.
  - Other methods: `track_sound`, `remove_sound`, `remove_source`,
    `get_sound_data`, `dump_sound_data`, `contains`, `copy_from`, `empty`,
    `shrink` and `clear`.
- `TickTrackingManager` is a manager whose `tick(dt)` runs `calculate()`.

### `crispsubs.sources`

`SourcesManager(support_splitscreen=False, calculate_on_tick=False, projector_factory=None)`
registers sound sources. Its methods are `add_source`, `remove_source`,
`is_registered`, `sources`, `set_sources_override`, `clear_sources_override`,
`has_override` and `override`.

It passes tracking calls on to the tracking managers. Without splitscreen
there is a single manager. With splitscreen each player added with
`add_player` gets a manager of its own, and calls made with `player=None`
reach all of them. `track_sound` returns `False` for a sound whose source is
not registered. `unionise_player_sources(receiving, copied)` makes one player
track every sound that another player tracks.

### `crispsubs.settings`

- `UserSettings` is a dataclass of preferences: visibility, label formats,
  `ShowSpeaker` mode, typefaces, text sizes, paddings, alignment and timing.
- `recalculate_layout(viewport_size)` and
  `recalculate_design_layout(screen_size)` rebuild the cached `layout`
  (`LayoutCache`) from the smaller screen dimension when it changes.
- `get_show_speaker(speaker)` and `log_speaker_shown(speaker)` decide when to
  name a speaker. `get_subtitle_text_colour` and `get_caption_text_colour`
  pick colours.
- `ColourProfile` holds fixed colours. `MatchingColourProfile` gives named
  speakers their own colours and remembers which of them have been shown.
- Helper types: `Colour` (with `Colour.WHITE` and `Colour.BLACK`), `Margin`,
  `FontInfo` and `HorizontalAlignment`.

### `crispsubs.styles`

These functions build `LineStyle`, `LetterboxStyle` and `CaptionStyle` from a
`UserSettings`. Each one returns the default style when the settings are
`None`.

- `get_letterbox_style(settings, speaker, indirect_speech)` derives only the
  line style and leaves the label style at its default.
- `get_label_style(settings, speaker)`,
  `get_line_style(settings, speaker, indirect_speech)` and
  `get_caption_style(settings, source)` build the other styles. Indirect
  speech uses the italic typeface.
- The `get_design_*` variants first recalculate the layout for a given
  `screen_size`. `get_design_caption_style` keeps the subtitle text size.

## Example

```python
from crispsubs.tools import automatic_line_breaks, count_characters, calculate_display_time

lines, words = automatic_line_breaks("The quick brown fox jumps over the lazy dog", 20, " ")
chars = count_characters(lines, " -.,;:!?")
seconds = calculate_display_time(words, 0.3, 0.06, True, 0.833)
```

## What it does not do

- It draws nothing. There are no widgets, subtitle containers or screens.
  The styles and layout values are data for a renderer of your own.
- It does not read subtitle files. `convert_overlays` takes `OverlayItem`
  objects that you have already parsed.
- It has no camera or viewport of its own. Projection comes from the
  `projector` callable you supply.
- It does not save or load settings, and it has no command-line program.