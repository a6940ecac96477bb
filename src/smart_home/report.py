"""Deterministic rendering shared by rooms and homes."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from .const import DEVICE_SEPARATOR, ROOM_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .devices import Device
    from .room import SmartRoom

_T = TypeVar("_T")


def render_entries(
    entries: Mapping[str, _T],
    render: Callable[[int, _T], str],
    separator: str,
) -> str:
    """Render entries in ascending key order and join them.

    The storage order of ``entries`` never affects the output: items are
    re-sorted by key and numbered from 0 in that order.
    """
    return separator.join(
        render(index, value)
        for index, (_key, value) in enumerate(
            sorted(entries.items(), key=lambda item: item[0])
        )
    )


def render_room(name: str, devices: Mapping[str, Device]) -> str:
    """Render a room block listing its devices."""
    body = render_entries(
        devices, lambda i, device: f"[{i}]: {device.info()}", DEVICE_SEPARATOR
    )
    return f"\nSmart Room: {name}:\n Total devices: {len(devices)}\n  {body}"


def render_home(name: str, rooms: Mapping[str, SmartRoom]) -> str:
    """Render a home block aggregating every room report."""
    body = render_entries(
        rooms, lambda i, room: f"Room[{i}]:{room.report()}", ROOM_SEPARATOR
    )
    return f"Smart Home: {name}:\n Total Rooms: {len(rooms)}\n\n{body}"
