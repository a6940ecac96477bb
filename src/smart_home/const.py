"""Constants and enums for the smart home registry."""

from __future__ import annotations

from enum import IntEnum


class OutletState(IntEnum):
    """Switch position of a power outlet."""

    OFF = 0
    ON = 1

    @property
    def label(self) -> str:
        """Return the display label (``On`` / ``Off``)."""
        return self.name.title()


class DeviceKind(IntEnum):
    """
    Closed set of device variants.

    EMPTY: Placeholder returned from by-value not-found paths.
    OUTLET: Switchable power outlet.
    THERMOMETER: Read-only temperature sensor.
    """

    EMPTY = 0
    OUTLET = 1
    THERMOMETER = 2


NO_DEVICE = "No Device"

DEVICE_SEPARATOR = "\n  --------------------------------------\n  "
ROOM_SEPARATOR = "\n=====================================\n"

TEMPERATURE_PRECISION = 2  # decimal places in thermometer info
