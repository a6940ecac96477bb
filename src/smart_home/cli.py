"""Command-line interface for inspecting a smart home."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .const import OutletState
from .devices import Device
from .exceptions import (
    AccessError,
    DeviceAccessError,
    LayoutError,
    RoomAccessError,
    WrongDeviceKindError,
)
from .home import SmartHome, create_home
from .layout import load_layout
from .room import create_room

_LOGGER = logging.getLogger(__name__)


def build_demo_home() -> SmartHome:
    """Return the sample home used when no layout file is given."""
    return create_home(
        "My Smart Home",
        [
            (
                "Bedroom",
                create_room(
                    "Bedroom",
                    [
                        (
                            "Attached Outlet",
                            Device.outlet("Attached Outlet", OutletState.ON, 250),
                        ),
                        (
                            "Light Outlet",
                            Device.outlet("Light Outlet", OutletState.OFF, 150),
                        ),
                        (
                            "Electron thermometer",
                            Device.thermometer("Electron thermometer", 22.5),
                        ),
                    ],
                ),
            ),
            (
                "Living Room",
                create_room(
                    "Living Room",
                    [
                        ("Lighter", Device.outlet("Lighter", OutletState.ON, 100)),
                        ("PC", Device.outlet("PC", OutletState.ON, 250)),
                        (
                            "Electronic thermometer",
                            Device.thermometer("Electronic thermometer", 22.5),
                        ),
                    ],
                ),
            ),
            (
                "Kitchen Room",
                create_room(
                    "Kitchen Room",
                    [
                        (
                            "Refrigerator Outlet",
                            Device.outlet(
                                "Refrigerator Outlet", OutletState.ON, 100
                            ),
                        ),
                        (
                            "Teapot Outlet",
                            Device.outlet("Teapot Outlet", OutletState.OFF, 150),
                        ),
                        (
                            "Kitchen thermometer",
                            Device.thermometer("Kitchen thermometer", 20.0),
                        ),
                    ],
                ),
            ),
        ],
    )


def _print_error(exc: Exception) -> None:
    print(f"Error: {exc}", file=sys.stderr)


def _cmd_report(home: SmartHome, args: argparse.Namespace) -> int:
    """Print the full home report."""
    print(home.report())
    print(f"\nTotal power usage: {home.total_power_usage()} Watt")
    return 0


def _cmd_device(home: SmartHome, args: argparse.Namespace) -> int:
    """Print a single device."""
    try:
        device = home.device(args.room, args.device)
    except DeviceAccessError as exc:
        _print_error(exc)
        return 1
    print(device.describe())
    return 0


def _live_device(home: SmartHome, room_name: str, device_name: str) -> Device:
    """Return the live device for mutation.

    Raises RoomAccessError or AccessError when the lookup fails.
    """
    room = home.get_room(room_name)
    if room is None:
        raise RoomAccessError(room_name, home.name)
    device = room.get(device_name)
    if device is None:
        raise AccessError(device_name, room.name)
    return device


def _cmd_switch(home: SmartHome, args: argparse.Namespace) -> int:
    """Toggle an outlet and print its status before and after."""
    try:
        device = _live_device(home, args.room, args.device)
        print(f"Before: {device.info()}")
        device.switch()
    except (DeviceAccessError, WrongDeviceKindError) as exc:
        _print_error(exc)
        return 1
    print(f"After:  {device.info()}")
    return 0


def _cmd_demo(_home: SmartHome, _args: argparse.Namespace) -> int:
    """Walk through switching, lookups and room changes on the demo home."""
    home = build_demo_home()
    print(
        "Home information before switch kitchen Teapot Outlet:\n"
        f"{home.report()}\n\n\n"
    )

    teapot = _live_device(home, "Kitchen Room", "Teapot Outlet")
    teapot.switch()
    print(f"Switched: {teapot.info()}")
    lighter = _live_device(home, "Living Room", "Lighter")
    lighter.turn_off()
    print(f"Turned off: {lighter.info()}\n")

    print(
        "Home information after switch kitchen Teapot Outlet:\n"
        f"{home.report()}\n"
    )

    for room_name, device_name in (
        ("Living Room", "PC"),
        ("Kitchen Room", "Teapot Outlet"),
        ("Kitchen Room", "PC"),
    ):
        try:
            device = home.device(room_name, device_name)
        except DeviceAccessError as exc:
            _print_error(exc)
        else:
            print(f"Found: {device.info()}")

    removed = home.remove_room("Bedroom")
    print(f"Removed room: {removed.name if removed else None}")
    home.add_room(
        create_room(
            "New Room",
            {"New Outlet": Device.outlet("New Outlet", OutletState.ON, 200)},
        )
    )
    print(f"Added room: New Room (rooms: {', '.join(home.keys())})")
    home.remove_room("New Room")
    print(f"Removed room: New Room (rooms: {', '.join(home.keys())})")
    return 0


_COMMANDS = {
    "report": _cmd_report,
    "device": _cmd_device,
    "switch": _cmd_switch,
    "demo": _cmd_demo,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Smart Home registry inspector"
    )
    parser.add_argument(
        "--layout",
        type=Path,
        help="JSON layout file (default: built-in demo home)",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging"
    )
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("report", help="Print the home report")
    device = sub.add_parser("device", help="Show one device")
    device.add_argument("room", help="Room name")
    device.add_argument("device", help="Device name")
    switch = sub.add_parser("switch", help="Toggle an outlet")
    switch.add_argument("room", help="Room name")
    switch.add_argument("device", help="Device name")
    sub.add_parser(
        "demo", help="Run the switching walkthrough on the built-in home"
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the smart-home CLI."""
    args = _build_parser().parse_args(argv)

    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.layout is not None:
        _LOGGER.debug("Loading layout from %s", args.layout)
        try:
            home = load_layout(args.layout)
        except LayoutError as exc:
            _print_error(exc)
            sys.exit(1)
    else:
        home = build_demo_home()

    command = _COMMANDS[args.command or "report"]
    sys.exit(command(home, args))
