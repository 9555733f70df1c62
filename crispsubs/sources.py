"""Registry of sound sources and the per-player tracking managers."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional

from crispsubs.models import SoundID
from crispsubs.tracking import (
    Projector,
    SwapArgs,
    TickTrackingManager,
    TrackedSound,
    TrackingManager,
    Vector3,
)

# Given a player, returns the projector its tracking manager should use.
ProjectorFactory = Callable[[Any], Optional[Projector]]


class SourcesManager:
    """Knows which sound sources exist and routes tracking to players' managers.

    Without splitscreen support there is a single tracking manager. With it,
    every player has a manager of its own, and calls made without a player
    reach all of them.
    """

    def __init__(
        self,
        support_splitscreen: bool = False,
        calculate_on_tick: bool = False,
        projector_factory: ProjectorFactory | None = None,
    ) -> None:
        self.support_splitscreen = support_splitscreen
        self.calculate_on_tick = calculate_on_tick
        self.projector_factory = projector_factory
        self._manager: TrackingManager | None = None
        self._splitscreen_managers: list[TrackingManager] = []
        self._sources: set[str] = set()
        self._sources_override: set[str] = set()

    def call_calculate(self, player: Any = None) -> None:
        """Recalculate indicator data for a player, or for everyone."""
        for manager in self._targets(player):
            manager.calculate()

    def clear(self) -> None:
        """Forget all sources and drop every tracking manager."""
        self._sources.clear()
        self._sources_override.clear()

        if self.support_splitscreen:
            for manager in self._splitscreen_managers:
                manager.clear()
            self._splitscreen_managers.clear()
        elif self._manager is not None:
            self._manager.clear()
            self._manager = None

    def empty_sources(self) -> None:
        """Forget all sources and drop sounds that no indicator uses."""
        self._sources.clear()
        self._sources_override.clear()

        if self.support_splitscreen:
            # The first player's manager is left untouched.
            for manager in self._splitscreen_managers[1:]:
                manager.empty()
        elif self._manager is not None:
            self._manager.empty()

    def rebuild_players(self, players: Iterable[Any]) -> None:
        """Recreate the tracking managers for the given players."""
        players = list(players)
        if not players:
            return

        if self.support_splitscreen:
            for manager in self._splitscreen_managers:
                manager.clear()
            self._splitscreen_managers.clear()
            for player in players:
                self.add_player(player)
        else:
            self.add_player(players[0])

    def shrink(self) -> None:
        """Release spare storage held by the managers."""
        if self.support_splitscreen:
            for manager in self._splitscreen_managers:
                manager.shrink()
        elif self._manager is not None:
            self._manager.shrink()

    def sources(self) -> set[str]:
        """The active sources: the override if one is set, else all registered."""
        if self.has_override():
            return set(self._sources_override)
        return set(self._sources)

    def set_sources_override(self, override: Iterable[str]) -> None:
        """Restrict the active sources to those of ``override`` that are registered."""
        self._sources_override = set(override) & self._sources

    def clear_sources_override(self) -> None:
        """Remove the override, making all registered sources active."""
        self._sources_override.clear()

    def has_override(self) -> bool:
        """True when an override restricts the active sources."""
        return bool(self._sources_override)

    def override(self) -> set[str]:
        """The current override (empty when none is set)."""
        return set(self._sources_override)

    def is_registered(self, source: str) -> bool:
        """True when the source is registered."""
        return source in self._sources

    def add_source(self, name: str) -> bool:
        """Register a source; True when it was not registered before."""
        if name in self._sources:
            return False
        self._sources.add(name)
        return True

    def remove_source(self, name: str) -> bool:
        """Unregister a source and stop tracking its sounds.

        Returns False when the source was not registered.
        """
        if name not in self._sources:
            return False
        self._sources.discard(name)

        if self.support_splitscreen:
            for manager in self._splitscreen_managers:
                manager.remove_source(name)
        else:
            manager = self._access_manager()
            if manager is not None:
                manager.remove_source(name)
        return True

    def track_sound(self, sound_id: SoundID, position: Vector3, player: Any = None) -> bool:
        """Track a sound of a registered source.

        Returns False when the sound's source is not registered.
        """
        if not self.is_registered(sound_id.source):
            return False
        for manager in self._targets(player):
            manager.track_sound(sound_id, position)
        return True

    def stop_tracking_sound(self, sound_id: SoundID, player: Any = None) -> None:
        """Stop tracking a sound for a player, or for everyone."""
        for manager in self._targets(player):
            manager.remove_sound(sound_id)

    def stop_tracking_source(self, name: str, player: Any = None) -> None:
        """Stop tracking a source's sounds without unregistering the source."""
        for manager in self._targets(player):
            manager.remove_source(name)

    def is_sound_tracked(self, sound_id: SoundID, player: Any = None) -> bool:
        """True when the sound is tracked for the player (or for anyone)."""
        if self.support_splitscreen and player is None:
            return any(manager.contains(sound_id) for manager in self._splitscreen_managers)
        manager = self._get_manager(player)
        return manager is not None and manager.contains(sound_id)

    def get_sound_data(self, sound_id: SoundID, player: Any = None) -> Vector3 | None:
        """The tracked position of a sound for a player, or None."""
        manager = self._get_manager(player)
        if manager is None:
            return None
        return manager.get_sound_data(sound_id)

    def get_sound_data_dump(self, player: Any = None) -> tuple[list[SoundID], list[Vector3]]:
        """All tracked ids and positions for a player, or for everyone."""
        ids: list[SoundID] = []
        positions: list[Vector3] = []
        if self.support_splitscreen and player is None:
            managers = list(self._splitscreen_managers)
        else:
            manager = self._get_manager(player)
            managers = [] if manager is None else [manager]
        for manager in managers:
            manager_ids, manager_positions = manager.dump_sound_data()
            ids.extend(manager_ids)
            positions.extend(manager_positions)
        return ids, positions

    def register_indicator(
        self,
        sound_id: SoundID,
        owner: Any,
        on_update: Callable[[], None],
        on_swap: Callable[[SwapArgs], None],
        on_track: Callable[[SoundID], None],
        player: Any = None,
    ) -> TrackedSound | None:
        """Attach an indicator to a sound in the player's manager.

        Returns the sound's data when it could be attached at once.
        """
        manager = self._access_manager(player)
        if manager is None:
            return None
        return manager.register_indicator(sound_id, owner, on_update, on_swap, on_track)

    def unregister_indicator(self, sound_id: SoundID, player: Any, owner: Any) -> None:
        """Detach an owner's indicator from a sound in the player's manager."""
        manager = self._access_manager(player)
        if manager is not None:
            manager.unregister_indicator(sound_id, owner)

    def add_player(self, player: Any) -> None:
        """Create a tracking manager for a player."""
        if self.support_splitscreen:
            self._splitscreen_managers.append(self._new_manager(player))
        elif self._manager is None:
            self._manager = self._new_manager(player)

    def remove_player(self, player: Any) -> None:
        """Drop the tracking manager of a player."""
        if self.support_splitscreen:
            managers = self._splitscreen_managers
            for index in range(len(managers) - 1, -1, -1):
                if managers[index].player is player:
                    managers[index].clear()
                    managers[index] = managers[-1]
                    managers.pop()
                    return
        elif self._manager is not None:
            self._manager.clear()
            self._manager = None

    def unionise_player_sources(self, receiving_player: Any, copied_player: Any) -> None:
        """Make one player track every sound another player tracks."""
        if (
            not self.support_splitscreen
            or len(self._splitscreen_managers) < 2
            or receiving_player is None
            or copied_player is None
        ):
            return

        copying = self._get_manager(copied_player)
        receiving = self._access_manager(receiving_player)
        if copying is not None and receiving is not None:
            receiving.copy_from(copying)

    def _new_manager(self, player: Any) -> TrackingManager:
        projector = self.projector_factory(player) if self.projector_factory else None
        manager_class = TickTrackingManager if self.calculate_on_tick else TrackingManager
        return manager_class(player, projector)

    def _targets(self, player: Any) -> list[TrackingManager]:
        if self.support_splitscreen and player is None:
            return list(self._splitscreen_managers)
        manager = self._access_manager(player)
        return [] if manager is None else [manager]

    def _get_manager(self, player: Any = None) -> TrackingManager | None:
        if self.support_splitscreen and player is not None:
            for manager in self._splitscreen_managers:
                if manager.player is player:
                    return manager
        return self._manager

    def _access_manager(self, player: Any = None) -> TrackingManager | None:
        return self._get_manager(player)