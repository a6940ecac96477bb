"""Name-keyed registry of the rooms in a home."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .exceptions import RoomAccessError
from .report import render_home

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .devices import Device
    from .room import SmartRoom

_LOGGER = logging.getLogger(__name__)


class SmartHome:
    """
    A named home owning a mapping of room keys to rooms.

    Mirrors SmartRoom one level up: ``view_room`` and ``access_room``
    return detached copies, ``get_room`` returns the live room.
    """

    def __init__(
        self, name: str, rooms: Mapping[str, SmartRoom] | None = None
    ) -> None:
        self.name = name
        self._rooms: dict[str, SmartRoom] = {}
        for key, room in (rooms or {}).items():
            self.add_room(room, key)

    def __repr__(self) -> str:
        return f"SmartHome(name={self.name!r}, rooms={self._rooms!r})"

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, key: object) -> bool:
        return key in self._rooms

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __str__(self) -> str:
        return self.report()

    def keys(self) -> list[str]:
        """Return the room keys in ascending order."""
        return sorted(self._rooms)

    def view_room(self, key: str) -> SmartRoom | None:
        """Return a read-only copy of the room at ``key``, or None."""
        room = self._rooms.get(key)
        if room is None:
            return None
        return copy.deepcopy(room)

    def get_room(self, key: str) -> SmartRoom | None:
        """Return the live room at ``key`` for mutation, or None."""
        return self._rooms.get(key)

    def access_room(self, key: str) -> SmartRoom:
        """
        Return a read-only copy of the room at ``key``.

        Raises:
            RoomAccessError: No room is stored under ``key``.

        """
        room = self.view_room(key)
        if room is None:
            raise RoomAccessError(key, self.name)
        return room

    def device(self, room_name: str, device_name: str) -> Device:
        """
        Resolve a device through its room.

        Args:
            room_name: Key of the room.
            device_name: Key of the device inside that room.

        Returns:
            A read-only copy of the device.

        Raises:
            RoomAccessError: The room does not exist.
            AccessError: The room exists but holds no such device.

        Both errors derive from DeviceAccessError.

        """
        room = self._rooms.get(room_name)
        if room is None:
            raise RoomAccessError(room_name, self.name)
        return room.access(device_name)

    def add_room(self, room: SmartRoom, key: str | None = None) -> None:
        """Insert ``room``, replacing any existing entry.

        The room is keyed by ``key`` when given, otherwise by its own name.
        """
        if key is None:
            key = room.name
        elif key != room.name:
            _LOGGER.warning(
                "Room '%s' stored under different key '%s' in home '%s'",
                room.name,
                key,
                self.name,
            )
        if key in self._rooms:
            _LOGGER.debug("Replacing room '%s' in home '%s'", key, self.name)
        else:
            _LOGGER.debug("Adding room '%s' to home '%s'", key, self.name)
        self._rooms[key] = room

    def remove_room(self, key: str) -> SmartRoom | None:
        """Remove and return the room at ``key``, or None if absent."""
        room = self._rooms.pop(key, None)
        if room is not None:
            _LOGGER.debug("Removed room '%s' from home '%s'", key, self.name)
        return room

    def total_power_usage(self) -> int:
        """Sum the effective draw of every outlet in the home."""
        return sum(room.power_usage() for room in self._rooms.values())

    def report(self) -> str:
        """Render the home and every room sorted by key."""
        return render_home(self.name, self._rooms)


def create_home(
    name: str,
    entries: Mapping[str, SmartRoom] | Iterable[tuple[str, SmartRoom]] = (),
) -> SmartHome:
    """
    Build a populated home in one call.

    Args:
        name: Home name.
        entries: A mapping of key to room, or an iterable of
            ``(key, room)`` pairs. Later pairs replace earlier ones.

    """
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    home = SmartHome(name)
    for key, room in pairs:
        home.add_room(room, key)
    return home
