"""A multi-floor parking lot that issues tickets and charges by the second."""

from __future__ import annotations

import argparse
import itertools
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from operator import itemgetter
from typing import ClassVar, Iterable


class ParkingSlotType(Enum):
    TWO_WHEELER = auto()
    COMPACT = auto()
    MEDIUM = auto()
    LARGE = auto()


class VehicleCategory(Enum):
    BIKE = auto()
    HATCHBACK = auto()
    SEDAN = auto()
    SUV = auto()
    BUS = auto()


_SLOT_FOR_CATEGORY = {
    VehicleCategory.BIKE: ParkingSlotType.TWO_WHEELER,
    VehicleCategory.HATCHBACK: ParkingSlotType.COMPACT,
    VehicleCategory.SEDAN: ParkingSlotType.COMPACT,
    VehicleCategory.SUV: ParkingSlotType.MEDIUM,
    VehicleCategory.BUS: ParkingSlotType.LARGE,
}

_RATE_PER_SECOND = {
    ParkingSlotType.TWO_WHEELER: 0.5,
    ParkingSlotType.COMPACT: 1.0,
    ParkingSlotType.MEDIUM: 1.5,
    ParkingSlotType.LARGE: 2.0,
}

_ticket_ids = itertools.count(1)


def current_time_millis() -> int:
    return time.time_ns() // 1_000_000


def correct_slot_type(category: VehicleCategory) -> ParkingSlotType:
    """The kind of slot a vehicle of ``category`` parks in."""
    return _SLOT_FOR_CATEGORY.get(category, ParkingSlotType.COMPACT)


@dataclass(frozen=True)
class Vehicle:
    number: str
    category: VehicleCategory


@dataclass(eq=False)
class ParkingSlot:
    """A named slot that holds at most one vehicle."""

    name: str
    type: ParkingSlotType
    vehicle: Vehicle | None = None

    @property
    def is_available(self) -> bool:
        return self.vehicle is None

    def add_vehicle(self, vehicle: Vehicle) -> None:
        self.vehicle = vehicle

    def remove_vehicle(self) -> None:
        self.vehicle = None


@dataclass(eq=False)
class Ticket:
    """Proof of parking, stamped with its start time in milliseconds."""

    vehicle: Vehicle
    slot: ParkingSlot
    start_time: int = field(default_factory=current_time_millis)
    id: int = field(default_factory=lambda: next(_ticket_ids))


class ParkingFloor:
    """Slots of one floor, grouped by type and keyed by name."""

    def __init__(
        self, name: str, slots: dict[ParkingSlotType, dict[str, ParkingSlot]]
    ) -> None:
        self.name = name
        self.slots = slots

    def get_slot_and_park(self, vehicle: Vehicle) -> ParkingSlot | None:
        """Park in the free slot of the right type with the lowest name."""
        by_name = self.slots.get(correct_slot_type(vehicle.category), {})
        for _, slot in sorted(by_name.items(), key=itemgetter(0)):
            if slot.is_available:
                slot.add_vehicle(vehicle)
                return slot
        return None


class ParkingLot:
    """The floors of a lot; :meth:`get_instance` gives the shared one."""

    _instance: ClassVar[ParkingLot | None] = None

    def __init__(self, name: str, address: str, floors: Iterable[ParkingFloor] = ()) -> None:
        self.name = name
        self.address = address
        self.floors = list(floors)

    @classmethod
    def get_instance(
        cls, name: str, address: str, floors: Iterable[ParkingFloor]
    ) -> ParkingLot:
        """Return the shared lot, built from these arguments on the first call only."""
        if cls._instance is None:
            cls._instance = cls(name, address, floors)
        return cls._instance

    def add_floor(self, floor: ParkingFloor) -> None:
        self.floors.append(floor)

    def assign_ticket(self, vehicle: Vehicle) -> Ticket | None:
        """Park ``vehicle`` on the first floor with room; None if the lot is full."""
        for floor in self.floors:
            slot = floor.get_slot_and_park(vehicle)
            if slot is not None:
                return Ticket(vehicle, slot)
        return None

    def scan_and_pay(self, ticket: Ticket) -> float:
        """Free the ticket's slot and return the fee for the whole seconds parked."""
        end_time = current_time_millis()
        ticket.slot.remove_vehicle()
        duration = int((end_time - ticket.start_time) / 1000)
        return duration * _RATE_PER_SECOND[ticket.slot.type]


def _floor(name: str, *slots: ParkingSlot) -> ParkingFloor:
    grouped: dict[ParkingSlotType, dict[str, ParkingSlot]] = {}
    for slot in slots:
        grouped.setdefault(slot.type, {})[slot.name] = slot
    return ParkingFloor(name, grouped)


def main(argv: list[str] | None = None) -> int:
    """Park a few vehicles, wait, then charge each of them."""
    parser = argparse.ArgumentParser(description="Parking lot demonstration.")
    parser.add_argument("--wait", type=float, default=2.0, help="seconds to stay parked")
    args = parser.parse_args(argv)

    ground = _floor(
        "Ground",
        ParkingSlot("C1", ParkingSlotType.COMPACT),
        ParkingSlot("C2", ParkingSlotType.COMPACT),
        ParkingSlot("B1", ParkingSlotType.TWO_WHEELER),
    )
    first = _floor(
        "First",
        ParkingSlot("M1", ParkingSlotType.MEDIUM),
        ParkingSlot("M2", ParkingSlotType.MEDIUM),
        ParkingSlot("L1", ParkingSlotType.LARGE),
    )
    lot = ParkingLot.get_instance("MyLot", "Main Street", [ground, first])

    vehicles = [
        Vehicle("TEST-BIKE-1", VehicleCategory.BIKE),
        Vehicle("TEST-HATCH-1", VehicleCategory.HATCHBACK),
        Vehicle("TEST-SEDAN-1", VehicleCategory.SEDAN),
        Vehicle("TEST-SUV-1", VehicleCategory.SUV),
        Vehicle("TEST-BUS-1", VehicleCategory.BUS),
        Vehicle("TEST-BIKE-2", VehicleCategory.BIKE),
    ]
    tickets = []
    for vehicle in vehicles:
        ticket = lot.assign_ticket(vehicle)
        if ticket is None:
            print(f"❌ No slot available for vehicle {vehicle.number}")
        else:
            print(f"✅ Vehicle {vehicle.number} parked successfully.")
            tickets.append(ticket)

    time.sleep(args.wait)

    for ticket in tickets:
        price = lot.scan_and_pay(ticket)
        print(f"💰 Parking fee for {ticket.vehicle.number}: ₹{price:g}")
    return 0