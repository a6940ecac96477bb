"""Tests for the command-line interface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson
import pytest

from smart_home.cli import build_demo_home, main

if TYPE_CHECKING:
    from pathlib import Path


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code  # type: ignore[return-value]


def test_demo_home() -> None:
    home = build_demo_home()
    assert home.name == "My Smart Home"
    assert home.keys() == ["Bedroom", "Kitchen Room", "Living Room"]
    assert home.total_power_usage() == 700


def test_report_is_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Smart Home: My Smart Home:\n Total Rooms: 3\n")
    assert "Total power usage: 700 Watt" in out


def test_report_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["report"]) == 0
    assert "Room[2]:\nSmart Room: Living Room:" in capsys.readouterr().out


def test_device_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["device", "Kitchen Room", "Teapot Outlet"]) == 0
    assert capsys.readouterr().out == (
        "Outlet: Teapot Outlet\n"
        "Smart Outlet: Teapot Outlet - Current State: Off, Power Usage: 0 Watt\n"
    )


def test_device_command_missing(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["device", "Kitchen Room", "PC"]) == 1
    assert (
        "Error: Device with the name 'PC' not found in the room 'Kitchen Room'\n"
        in capsys.readouterr().err
    )


def test_switch_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["switch", "Kitchen Room", "Teapot Outlet"]) == 0
    out = capsys.readouterr().out
    assert "Before: Smart Outlet: Teapot Outlet - Current State: Off" in out
    assert (
        "After:  Smart Outlet: Teapot Outlet - Current State: On, "
        "Power Usage: 150 Watt" in out
    )


def test_switch_thermometer_fails(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["switch", "Kitchen Room", "Kitchen thermometer"]) == 1
    assert "not an outlet" in capsys.readouterr().err


def test_switch_missing_room(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["switch", "Garage", "Door"]) == 1
    assert "Room with the name 'Garage'" in capsys.readouterr().err


def test_layout_option(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "home.json"
    path.write_bytes(
        orjson.dumps(
            {
                "name": "Cabin",
                "rooms": {
                    "Porch": {"Heater": {"type": "outlet", "state": "on", "power": 900}}
                },
            }
        )
    )
    assert _run(["--layout", str(path), "report"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Smart Home: Cabin:\n Total Rooms: 1\n")
    assert "Total power usage: 900 Watt" in out


def test_bad_layout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "home.json"
    path.write_text("{broken")
    assert _run(["--layout", str(path)]) == 1
    assert "Invalid JSON" in capsys.readouterr().err


def test_switch_missing_device(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["switch", "Kitchen Room", "PC"]) == 1
    assert (
        "Error: Device with the name 'PC' not found in the room 'Kitchen Room'"
        in capsys.readouterr().err
    )


def test_demo_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["demo"]) == 0
    captured = capsys.readouterr()
    out = captured.out
    assert out.startswith(
        "Home information before switch kitchen Teapot Outlet:\n"
        "Smart Home: My Smart Home:\n Total Rooms: 3\n"
    )
    before, after = out.split("Home information after switch kitchen Teapot Outlet:")
    assert "Teapot Outlet - Current State: Off, Power Usage: 0 Watt" in before
    assert "Teapot Outlet - Current State: On, Power Usage: 150 Watt" in after
    assert "Lighter - Current State: Off, Power Usage: 0 Watt" in after
    assert "Found: Smart Outlet: PC - Current State: On" in after
    assert "Removed room: Bedroom" in after
    assert "Added room: New Room (rooms: Kitchen Room, Living Room, New Room)" in after
    assert "Removed room: New Room (rooms: Kitchen Room, Living Room)" in after
    assert (
        "Error: Device with the name 'PC' not found in the room 'Kitchen Room'"
        in captured.err
    )
