"""Build a home from a JSON layout document."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import orjson

from .const import OutletState
from .devices import Device
from .exceptions import LayoutError
from .home import SmartHome, create_home
from .room import SmartRoom, create_room

if TYPE_CHECKING:
    from pathlib import Path

_LOGGER = logging.getLogger(__name__)

_STATE_MAP: dict[str, OutletState] = {
    "on": OutletState.ON,
    "off": OutletState.OFF,
}


def _parse_device(room: str, key: str, entry: Any) -> Device:
    """Turn one device entry into a Device."""
    if not isinstance(entry, dict):
        raise LayoutError(f"Device '{key}' in room '{room}' must be an object")
    name = entry.get("name", key)
    if not isinstance(name, str):
        raise LayoutError(
            f"Device '{key}' in room '{room}' needs a string 'name'"
        )
    kind = entry.get("type")
    try:
        if kind == "outlet":
            state = _STATE_MAP[str(entry.get("state", "off")).lower()]
            power = entry.get("power", 0)
            if not isinstance(power, int) or isinstance(power, bool):
                raise LayoutError(
                    f"Outlet '{key}' in room '{room}' needs an integer power"
                )
            return Device.outlet(name, state, power)
        if kind == "thermometer":
            temperature = entry["temperature"]
            if not isinstance(temperature, (int, float)) or isinstance(
                temperature, bool
            ):
                raise LayoutError(
                    f"Thermometer '{key}' in room '{room}' needs a "
                    "numeric temperature"
                )
            return Device.thermometer(name, float(temperature))
    except KeyError as exc:
        raise LayoutError(
            f"Device '{key}' in room '{room}': invalid or missing {exc}"
        ) from exc
    except ValueError as exc:
        raise LayoutError(f"Device '{key}' in room '{room}': {exc}") from exc
    raise LayoutError(f"Device '{key}' in room '{room}' has unknown type {kind!r}")


def _parse_room(key: str, entry: Any) -> SmartRoom:
    if not isinstance(entry, dict):
        raise LayoutError(f"Room '{key}' must be an object of devices")
    return create_room(
        key,
        [
            (device_key, _parse_device(key, device_key, device_entry))
            for device_key, device_entry in entry.items()
        ],
    )


def parse_layout(data: bytes | str) -> SmartHome:
    """
    Build a home from a JSON layout.

    The document holds the home ``name`` and a ``rooms`` object mapping
    room names to objects of devices. Each device carries a ``type`` of
    ``outlet`` (``state``, ``power``) or ``thermometer`` (``temperature``).

    Raises:
        LayoutError: The document is not valid JSON or not a valid layout.

    """
    try:
        doc = orjson.loads(data)
    except orjson.JSONDecodeError as exc:
        raise LayoutError(f"Invalid JSON: {exc}") from exc
    if not isinstance(doc, dict):
        raise LayoutError("Layout must be a JSON object")
    name = doc.get("name")
    if not isinstance(name, str):
        raise LayoutError("Layout needs a string 'name'")
    rooms = doc.get("rooms", {})
    if not isinstance(rooms, dict):
        raise LayoutError("'rooms' must be an object")
    home = create_home(
        name, [(key, _parse_room(key, entry)) for key, entry in rooms.items()]
    )
    _LOGGER.debug("Loaded layout for '%s' with %d rooms", name, len(home))
    return home


def load_layout(path: Path) -> SmartHome:
    """Read a layout file and build the home it describes."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise LayoutError(f"Cannot read layout {path}: {exc}") from exc
    return parse_layout(data)
