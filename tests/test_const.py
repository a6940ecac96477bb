"""Tests for constants and enums."""

from __future__ import annotations

from smart_home.const import (
    DEVICE_SEPARATOR,
    NO_DEVICE,
    ROOM_SEPARATOR,
    TEMPERATURE_PRECISION,
    DeviceKind,
    OutletState,
)


def test_outlet_state_values() -> None:
    assert OutletState.OFF == 0
    assert OutletState.ON == 1


def test_outlet_state_labels() -> None:
    assert OutletState.ON.label == "On"
    assert OutletState.OFF.label == "Off"


def test_device_kind_values() -> None:
    assert DeviceKind.EMPTY == 0
    assert DeviceKind.OUTLET == 1
    assert DeviceKind.THERMOMETER == 2


def test_report_constants() -> None:
    assert NO_DEVICE == "No Device"
    assert DEVICE_SEPARATOR == "\n  --------------------------------------\n  "
    assert ROOM_SEPARATOR == "\n=====================================\n"
    assert TEMPERATURE_PRECISION == 2
