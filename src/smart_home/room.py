"""Name-keyed registry of the devices in a single room."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .const import DeviceKind
from .devices import Device
from .exceptions import AccessError
from .report import render_room

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

_LOGGER = logging.getLogger(__name__)


class SmartRoom:
    """
    A named room owning a mapping of device keys to devices.

    Read lookups (``view``, ``access``) hand out detached copies; only
    ``get`` returns the live device, so changes made through it are seen
    by the room and by later reports.
    """

    def __init__(
        self, name: str, devices: Mapping[str, Device] | None = None
    ) -> None:
        self.name = name
        self._devices: dict[str, Device] = {}
        for key, device in (devices or {}).items():
            self.add(key, device)

    def __repr__(self) -> str:
        return f"SmartRoom(name={self.name!r}, devices={self._devices!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmartRoom):
            return NotImplemented
        return self.name == other.name and self._devices == other._devices

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, key: object) -> bool:
        return key in self._devices

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __str__(self) -> str:
        return self.report()

    def keys(self) -> list[str]:
        """Return the device keys in ascending order."""
        return sorted(self._devices)

    def devices(self) -> list[Device]:
        """Return copies of the devices in ascending key order."""
        return [copy.deepcopy(self._devices[key]) for key in self.keys()]

    def view(self, key: str) -> Device | None:
        """Return a read-only copy of the device at ``key``, or None."""
        device = self._devices.get(key)
        if device is None:
            return None
        return copy.deepcopy(device)

    def get(self, key: str) -> Device | None:
        """Return the live device at ``key`` for mutation, or None."""
        return self._devices.get(key)

    def access(self, key: str) -> Device:
        """
        Return a read-only copy of the device at ``key``.

        Raises:
            AccessError: No device is stored under ``key``.

        """
        device = self.view(key)
        if device is None:
            raise AccessError(key, self.name)
        return device

    def device_or_empty(self, key: str) -> Device:
        """Return a copy of the device at ``key`` or the empty placeholder."""
        device = self.view(key)
        if device is None:
            return Device.empty()
        return device

    def add(self, key: str, device: Device) -> None:
        """Insert ``device`` under ``key``, replacing any existing entry.

        The key is not required to equal the device's own name; reports
        show the device name and use the key only for ordering.
        """
        if device.is_empty:
            raise ValueError("The empty placeholder cannot be stored in a room")
        if device.name != key:
            _LOGGER.warning(
                "Device '%s' stored under different key '%s' in room '%s'",
                device.name,
                key,
                self.name,
            )
        if key in self._devices:
            _LOGGER.debug("Replacing device '%s' in room '%s'", key, self.name)
        else:
            _LOGGER.debug("Adding device '%s' to room '%s'", key, self.name)
        self._devices[key] = device

    def remove(self, key: str) -> Device | None:
        """Remove and return the device at ``key``, or None if absent."""
        device = self._devices.pop(key, None)
        if device is not None:
            _LOGGER.debug("Removed device '%s' from room '%s'", key, self.name)
        return device

    def power_usage(self) -> int:
        """Sum the effective draw of the outlets in this room."""
        return sum(
            device.power_usage
            for device in self._devices.values()
            if device.kind is DeviceKind.OUTLET
        )

    def report(self) -> str:
        """Render the room and its devices sorted by key."""
        return render_room(self.name, self._devices)


def create_room(
    name: str,
    entries: Mapping[str, Device] | Iterable[tuple[str, Device]] = (),
) -> SmartRoom:
    """
    Build a populated room in one call.

    Args:
        name: Room name.
        entries: A mapping of key to device, or an iterable of
            ``(key, device)`` pairs. Later pairs replace earlier ones.

    """
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    room = SmartRoom(name)
    for key, device in pairs:
        room.add(key, device)
    return room
