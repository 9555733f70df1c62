import pytest

from crispsubs.models import (
    EMPTY_SUBTITLE_LINES,
    CrispCaption,
    CrispSubtitle,
    FullCaption,
    FullSubtitle,
    GroupSubtitle,
    RawSubtitle,
    SoundCaption,
    SoundID,
)


def test_sound_id_equality_and_hash():
    a = SoundID("door", "creak")
    b = SoundID("door", "creak")
    assert a == b
    assert {a: 1}[b] == 1
    assert SoundID("door", "slam") != a


def test_sound_id_is_immutable():
    sound_id = SoundID("door", "creak")
    with pytest.raises(AttributeError):
        sound_id.source = "window"
    assert sound_id.source == "door"
    assert sound_id == SoundID("door", "creak")


def test_sound_caption_defaults():
    caption = SoundCaption()
    assert caption.description == ""
    assert caption.start_delay == 0.0


def test_full_caption_default_duration():
    caption = FullCaption(description="bang")
    assert caption.display_duration == 1.5
    assert caption.sound_id == SoundID()


def test_raw_subtitle_default_lines():
    subtitle = RawSubtitle()
    assert subtitle.read_duration == 1.5
    assert subtitle.lines == [
        "We would like to show you something,",
        "but this subtitle is empty.",
    ]


def test_raw_subtitle_lines_are_independent():
    first = RawSubtitle()
    second = RawSubtitle()
    first.lines.append("extra")
    assert second.lines == list(EMPTY_SUBTITLE_LINES)


def test_group_subtitle_defaults():
    subtitle = GroupSubtitle()
    assert subtitle.speaker == "error"
    assert subtitle.speaker_text == "error"


def test_full_subtitle_default_source():
    assert FullSubtitle().source == "error"


def test_full_subtitle_from_caption():
    caption = FullCaption(
        description="footsteps",
        start_delay=4.0,
        sound_id=SoundID("guard", "steps"),
        display_duration=2.25,
    )
    subtitle = FullSubtitle.from_caption(caption, "narrator")
    assert subtitle.lines == ["footsteps"]
    assert subtitle.read_duration == 2.25
    assert subtitle.speaker == "narrator"
    assert subtitle.speaker_text == ""
    assert subtitle.source == "guard"
    assert subtitle.start_delay == 0.0


def test_full_subtitle_with_start_copies():
    original = FullSubtitle(lines=["hello"], speaker="ann", source="ann")
    moved = original.with_start(7.5)
    assert moved.start_delay == 7.5
    assert original.start_delay == 0.0
    assert moved.lines == original.lines
    moved.lines.append("more")
    assert original.lines == ["hello"]
    assert moved.speaker == original.speaker


def test_crisp_caption_from_full():
    caption = FullCaption(description="thunder", sound_id=SoundID("sky", "thunder"))
    crisp = CrispCaption.from_full(caption, 12)
    assert crisp.description == "thunder"
    assert crisp.sound_id == SoundID("sky", "thunder")
    assert crisp.id == 12


def test_crisp_subtitle_indirect_speech():
    assert CrispSubtitle(speaker="ann", source="radio").is_indirect_speech() is True
    assert CrispSubtitle(speaker="ann", source="ann").is_indirect_speech() is False