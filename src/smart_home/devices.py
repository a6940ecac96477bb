"""Device models: outlets, thermometers and the Device variant wrapping them."""

from __future__ import annotations

from dataclasses import dataclass

from .const import NO_DEVICE, TEMPERATURE_PRECISION, DeviceKind, OutletState
from .exceptions import WrongDeviceKindError


@dataclass
class Outlet:
    """A switchable power outlet with a nominal power rating in watts."""

    name: str
    state: OutletState = OutletState.OFF
    nominal_power: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.nominal_power, bool) or not isinstance(
            self.nominal_power, int
        ):
            raise TypeError(
                f"Outlet '{self.name}' power must be an integer number of "
                f"watts, got {self.nominal_power!r}"
            )
        if self.nominal_power < 0:
            raise ValueError(
                f"Outlet '{self.name}' power must be non-negative, "
                f"got {self.nominal_power}"
            )

    @property
    def power_usage(self) -> int:
        """Effective draw: the nominal power when on, otherwise 0."""
        if self.state is OutletState.ON:
            return self.nominal_power
        return 0

    def turn_on(self) -> None:
        """Switch on; a no-op when already on."""
        self.state = OutletState.ON

    def turn_off(self) -> None:
        """Switch off; a no-op when already off."""
        self.state = OutletState.OFF

    def switch(self) -> None:
        """Toggle between on and off."""
        if self.state is OutletState.ON:
            self.state = OutletState.OFF
        else:
            self.state = OutletState.ON

    def info(self) -> str:
        """Return the status line with the effective power usage."""
        return (
            f"Smart Outlet: {self.name} - Current State: {self.state.label}, "
            f"Power Usage: {self.power_usage} Watt"
        )


@dataclass(frozen=True)
class Thermometer:
    """A temperature reading in degrees Celsius, fixed at construction."""

    name: str
    temperature: float

    @property
    def current_temperature(self) -> float:
        return self.temperature

    def info(self) -> str:
        return (
            f"Thermometer: {self.name} - Current Temperature: "
            f"{self.temperature:.{TEMPERATURE_PRECISION}f}°C"
        )


_KIND_LABELS = {
    DeviceKind.OUTLET: "Outlet",
    DeviceKind.THERMOMETER: "Thermometer",
}


@dataclass
class Device:
    """
    A device stored in a room.

    The kind tag is closed: a Device wraps exactly one Outlet, exactly one
    Thermometer, or nothing at all (the EMPTY placeholder). Shared
    operations dispatch on the kind; outlet and thermometer operations are
    guarded and raise WrongDeviceKindError on the other variants.
    """

    kind: DeviceKind
    value: Outlet | Thermometer | None = None

    def __post_init__(self) -> None:
        expected = {
            DeviceKind.EMPTY: type(None),
            DeviceKind.OUTLET: Outlet,
            DeviceKind.THERMOMETER: Thermometer,
        }[self.kind]
        if type(self.value) is not expected:
            raise ValueError(
                f"{self.kind.name} device cannot wrap "
                f"{type(self.value).__name__}"
            )

    @classmethod
    def outlet(
        cls,
        name: str,
        state: OutletState = OutletState.OFF,
        power: int = 0,
    ) -> Device:
        """Create an outlet device."""
        return cls(DeviceKind.OUTLET, Outlet(name, state, power))

    @classmethod
    def thermometer(cls, name: str, temperature: float) -> Device:
        """Create a thermometer device."""
        return cls(DeviceKind.THERMOMETER, Thermometer(name, temperature))

    @classmethod
    def empty(cls) -> Device:
        """Return the placeholder used when no device was found."""
        return cls(DeviceKind.EMPTY)

    @property
    def is_empty(self) -> bool:
        return self.kind is DeviceKind.EMPTY

    @property
    def name(self) -> str:
        if self.value is None:
            return NO_DEVICE
        return self.value.name

    def info(self) -> str:
        """Return the one-line status of the wrapped device."""
        if self.value is None:
            return NO_DEVICE
        return self.value.info()

    def describe(self) -> str:
        """Return the kind label and name followed by the status line."""
        if self.value is None:
            return NO_DEVICE
        return f"{_KIND_LABELS[self.kind]}: {self.name}\n{self.info()}"

    def __str__(self) -> str:
        return self.info()

    def as_outlet(self) -> Outlet:
        """Return the wrapped outlet or raise WrongDeviceKindError."""
        if not isinstance(self.value, Outlet):
            raise WrongDeviceKindError(
                f"'{self.name}' is a {self.kind.name.lower()} device, "
                "not an outlet"
            )
        return self.value

    def as_thermometer(self) -> Thermometer:
        """Return the wrapped thermometer or raise WrongDeviceKindError."""
        if not isinstance(self.value, Thermometer):
            raise WrongDeviceKindError(
                f"'{self.name}' is a {self.kind.name.lower()} device, "
                "not a thermometer"
            )
        return self.value

    # Outlet forwards

    def turn_on(self) -> None:
        self.as_outlet().turn_on()

    def turn_off(self) -> None:
        self.as_outlet().turn_off()

    def switch(self) -> None:
        self.as_outlet().switch()

    @property
    def state(self) -> OutletState:
        return self.as_outlet().state

    @property
    def power_usage(self) -> int:
        return self.as_outlet().power_usage

    # Thermometer forwards

    @property
    def current_temperature(self) -> float:
        return self.as_thermometer().current_temperature
