"""Tracking of sound positions for on-screen direction indicators."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from crispsubs.models import SoundID

Vector2 = Tuple[float, float]
Vector3 = Tuple[float, float, float]
Matrix = Sequence[Sequence[float]]
# A projector is given the player and returns (view-projection matrix, width, height)
# or None when no projection is available. The matrix is applied to row vectors.
Projector = Callable[[Any], Optional[Tuple[Matrix, float, float]]]


@dataclass
class IndicatorData:
    """UI data needed to calculate and display a direction indicator."""

    offset: Vector2 = (0.0, 0.0)
    angle: float = 0.0
    # Negative when the sound is behind the camera; magnitude is the screen distance.
    opacity_driver: float = 1.0


@dataclass
class TrackedSound(IndicatorData):
    """Indicator data together with the sound's world position."""

    position: Vector3 = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class SwapArgs:
    """Tells an indicator that its sound's data has moved."""

    sound_id: SoundID
    data: TrackedSound


class TrackingData:
    """Tracked sounds, with the ones shown by an indicator kept at the front."""

    def __init__(self) -> None:
        self._ids: list[SoundID] = []
        self._deletion_scheduled: list[SoundID] = []
        self._sounds: list[TrackedSound] = []
        self._active = 0

    def clear(self) -> None:
        """Forget every sound, active or not."""
        self._ids.clear()
        self._deletion_scheduled.clear()
        self._sounds.clear()
        self._active = 0

    def empty(self) -> None:
        """Drop every sound that no indicator is using."""
        del self._ids[self._active:]
        del self._sounds[self._active:]

    def shrink(self) -> None:
        """Release spare storage held by the internal lists."""
        self._ids = list(self._ids)
        self._sounds = list(self._sounds)

    def needs_calc(self, index: int) -> bool:
        """True while the index refers to a sound with an active indicator."""
        return index < self._active

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, sound_id: object) -> bool:
        return sound_id in self._ids

    def item(self, index: int) -> TrackedSound:
        """The tracked data at the given position."""
        return self._sounds[index]

    def id_at(self, index: int) -> SoundID:
        """The sound id at the given position."""
        return self._ids[index]

    def find(self, sound_id: SoundID) -> TrackedSound | None:
        """The tracked data for a sound, or None if it is not tracked."""
        index = self._index(sound_id)
        return None if index < 0 else self._sounds[index]

    def track_sound(self, sound_id: SoundID, position: Vector3) -> bool:
        """Track or move a sound; True when it was not tracked before."""
        index = self._index(sound_id)
        if index >= 0:
            self._sounds[index].position = position
            return False
        self._ids.append(sound_id)
        self._sounds.append(TrackedSound(position=position))
        return True

    def remove_sound(self, sound_id: SoundID) -> None:
        """Remove a sound, or schedule its removal if an indicator uses it."""
        index = self._index(sound_id)
        if index < 0:
            return
        if index < self._active:
            self._schedule_deletion(sound_id)
        else:
            self._remove(index)

    def remove_source(self, source: str) -> None:
        """Remove every sound of a source, scheduling those in active use."""
        for sound_id in self._ids[: self._active]:
            if sound_id.source == source:
                self._schedule_deletion(sound_id)
        for index in range(len(self._ids) - 1, self._active - 1, -1):
            if self._ids[index].source == source:
                self._remove(index)

    def register(self, sound_id: SoundID) -> TrackedSound | None:
        """Mark a tracked sound as shown by an indicator.

        Returns its data, or None when the sound is untracked or already active.
        """
        index = self._index(sound_id)
        if index < self._active:
            return None
        if index != self._active:
            self._swap(index)
        data = self._sounds[self._active]
        self._active += 1
        return data

    def unregister(self, sound_id: SoundID) -> SwapArgs | None:
        """Release a sound from its indicator.

        Returns the swap notice for the sound that took its place, if any.
        """
        index = self._index(sound_id)
        if index < 0 or index >= self._active:
            return None

        self._active -= 1
        args = None
        if index != self._active:
            self._swap(index)
            args = SwapArgs(self._ids[index], self._sounds[index])

        if sound_id in self._deletion_scheduled:
            self._deletion_scheduled = [
                scheduled for scheduled in self._deletion_scheduled if scheduled != sound_id
            ]
            self._remove(self._active)
        return args

    def dump_sound_data(self) -> tuple[list[SoundID], list[Vector3]]:
        """All tracked ids and their positions, in storage order."""
        return list(self._ids), [sound.position for sound in self._sounds]

    def _index(self, sound_id: SoundID) -> int:
        try:
            return self._ids.index(sound_id)
        except ValueError:
            return -1

    def _schedule_deletion(self, sound_id: SoundID) -> None:
        if sound_id not in self._deletion_scheduled:
            self._deletion_scheduled.append(sound_id)

    def _remove(self, index: int) -> None:
        for values in (self._ids, self._sounds):
            values[index] = values[-1]
            values.pop()

    def _swap(self, index: int) -> None:
        active = self._active
        for values in (self._ids, self._sounds):
            values[index], values[active] = values[active], values[index]


@dataclass
class _Handler:
    owner: Any
    callback: Callable[..., None]


@dataclass
class _Event:
    handlers: dict[int, _Handler] = field(default_factory=dict)

    def add(self, handle: int, owner: Any, callback: Callable[..., None]) -> None:
        self.handlers[handle] = _Handler(owner, callback)

    def remove(self, handle: int) -> None:
        self.handlers.pop(handle, None)

    def remove_owner(self, owner: Any) -> None:
        self.handlers = {
            handle: handler
            for handle, handler in self.handlers.items()
            if handler.owner is not owner
        }

    def broadcast(self, *args: Any) -> None:
        for handler in list(self.handlers.values()):
            handler.callback(*args)

    def clear(self) -> None:
        self.handlers.clear()


class TrackingManager:
    """Tracks sounds for one player and computes their indicator data."""

    def __init__(self, player: Any, projector: Projector | None = None) -> None:
        self.player = player
        self.projector = projector
        self._data = TrackingData()
        self._handles = itertools.count()
        self._update_event = _Event()
        self._swap_event = _Event()
        self._new_sound_event = _Event()
        self._pending: dict[SoundID, int] = {}

    def calculate(self) -> None:
        """Project active sounds to the screen and notify indicators."""
        if self.player is None or self.projector is None:
            return
        projection = self.projector(self.player)
        if projection is None:
            return
        matrix, width, height = projection

        index = 0
        while self._data.needs_calc(index):
            sound = self._data.item(index)
            x, y, z = sound.position
            vector = (x, y, z, 1.0)
            px, py, _, pw = (
                sum(vector[row] * matrix[row][column] for row in range(4))
                for column in range(4)
            )
            index += 1
            if pw == 0:
                continue
            mirror = -1.0 if pw < 0 else 1.0
            ndc_x = mirror * (px / pw - sound.offset[0])
            ndc_y = mirror * (-py / pw - sound.offset[1])
            sound.angle = math.atan2(ndc_y * height, ndc_x * width)
            sound.opacity_driver = mirror * math.hypot(ndc_x, ndc_y)

        self._update_event.broadcast()

    def contains(self, sound_id: SoundID) -> bool:
        """True when the sound is tracked."""
        return self._data.find(sound_id) is not None

    def clear(self) -> None:
        """Forget all sounds and indicators."""
        self._update_event.clear()
        self._swap_event.clear()
        self._data.clear()
        self._pending.clear()
        self._new_sound_event.clear()

    def empty(self) -> None:
        """Drop sounds that no indicator is using."""
        self._data.empty()

    def shrink(self) -> None:
        """Release spare storage."""
        self._data.shrink()

    def track_sound(self, sound_id: SoundID, position: Vector3) -> None:
        """Track or move a sound, waking indicators waiting for it."""
        if self._data.track_sound(sound_id, position):
            self._notify_new_sound(sound_id)

    def get_sound_data(self, sound_id: SoundID) -> Vector3 | None:
        """The tracked position of a sound, or None."""
        data = self._data.find(sound_id)
        return None if data is None else data.position

    def dump_sound_data(self) -> tuple[list[SoundID], list[Vector3]]:
        """All tracked ids and positions."""
        return self._data.dump_sound_data()

    def remove_sound(self, sound_id: SoundID) -> None:
        """Stop tracking a sound."""
        self._data.remove_sound(sound_id)

    def remove_source(self, source: str) -> None:
        """Stop tracking every sound of a source."""
        self._data.remove_source(source)

    def register_indicator(
        self,
        sound_id: SoundID,
        owner: Any,
        on_update: Callable[[], None],
        on_swap: Callable[[SwapArgs], None],
        on_track: Callable[[SoundID], None],
    ) -> TrackedSound | None:
        """Attach an indicator to a sound.

        Returns the sound's data when it could be attached now; otherwise the
        indicator waits and ``on_track`` is called once the sound is tracked.
        """
        data = self._data.register(sound_id)
        if data is not None:
            self._update_event.add(next(self._handles), owner, on_update)
            self._swap_event.add(next(self._handles), owner, on_swap)
        else:
            handle = next(self._handles)
            self._new_sound_event.add(handle, owner, on_track)
            self._pending[sound_id] = handle
        return data

    def unregister_indicator(self, sound_id: SoundID, owner: Any) -> None:
        """Detach an owner's indicator from a sound."""
        handle = self._pending.pop(sound_id, None)
        if handle is not None:
            self._new_sound_event.remove(handle)
            return

        self._update_event.remove_owner(owner)
        self._swap_event.remove_owner(owner)
        args = self._data.unregister(sound_id)
        if args is not None:
            self._swap_event.broadcast(args)

    def copy_from(self, other: TrackingManager) -> None:
        """Track every sound that another manager tracks."""
        ids, positions = other.dump_sound_data()
        for sound_id, position in zip(ids, positions):
            self.track_sound(sound_id, position)

    def _notify_new_sound(self, sound_id: SoundID) -> None:
        handle = self._pending.pop(sound_id, None)
        if handle is not None:
            self._new_sound_event.broadcast(sound_id)
            self._new_sound_event.remove(handle)


class TickTrackingManager(TrackingManager):
    """A tracking manager that recalculates on every tick."""

    tickable_when_paused = True
    tickable_in_editor = False

    def tick(self, dt: float) -> None:
        """Advance by ``dt`` seconds, recalculating indicator data."""
        self.calculate()