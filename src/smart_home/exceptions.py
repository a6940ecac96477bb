"""Exception classes for smart_home."""

from __future__ import annotations


class SmartHomeError(Exception):
    """Base exception for smart_home."""


class DeviceAccessError(SmartHomeError):
    """A device could not be resolved through the home.

    Subclasses tag which level of the lookup failed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RoomAccessError(DeviceAccessError):
    """A room was not found in the home."""

    def __init__(self, key: str, home: str) -> None:
        super().__init__(
            f"Room with the name '{key}' not found in the house '{home}'"
        )
        self.key = key
        self.home = home


class AccessError(DeviceAccessError):
    """A device was not found in the room."""

    def __init__(self, key: str, room: str) -> None:
        super().__init__(
            f"Device with the name '{key}' not found in the room '{room}'"
        )
        self.key = key
        self.room = room


class WrongDeviceKindError(SmartHomeError):
    """A kind-specific operation was used on another device kind."""


class LayoutError(SmartHomeError):
    """A home layout document could not be parsed."""
