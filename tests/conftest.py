"""Shared fixtures for smart_home tests."""

from __future__ import annotations

import pytest

from smart_home.const import OutletState
from smart_home.devices import Device
from smart_home.home import SmartHome, create_home
from smart_home.room import SmartRoom, create_room


@pytest.fixture
def kitchen() -> SmartRoom:
    """Return a kitchen with a switched-off teapot and a thermometer."""
    return create_room(
        "Kitchen Room",
        {
            "Teapot Outlet": Device.outlet("Teapot Outlet", OutletState.OFF, 150),
            "Kitchen thermometer": Device.thermometer("Kitchen thermometer", 20.0),
        },
    )


@pytest.fixture
def home(kitchen: SmartRoom) -> SmartHome:
    """Return a home with a bedroom and the kitchen fixture."""
    bedroom = create_room(
        "Bedroom",
        {
            "Attached Outlet": Device.outlet(
                "Attached Outlet", OutletState.ON, 250
            ),
        },
    )
    return create_home("My Home", {"Bedroom": bedroom, "Kitchen Room": kitchen})

