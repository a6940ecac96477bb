"""In-memory registry of rooms and devices in a smart home."""

__version__ = "1.0.0"

from .const import DeviceKind, OutletState
from .devices import Device, Outlet, Thermometer
from .exceptions import (
    AccessError,
    DeviceAccessError,
    LayoutError,
    RoomAccessError,
    SmartHomeError,
    WrongDeviceKindError,
)
from .home import SmartHome, create_home
from .layout import load_layout, parse_layout
from .room import SmartRoom, create_room

__all__ = [
    "AccessError",
    "Device",
    "DeviceAccessError",
    "DeviceKind",
    "LayoutError",
    "Outlet",
    "OutletState",
    "RoomAccessError",
    "SmartHome",
    "SmartHomeError",
    "SmartRoom",
    "Thermometer",
    "WrongDeviceKindError",
    "create_home",
    "create_room",
    "load_layout",
    "parse_layout",
]
