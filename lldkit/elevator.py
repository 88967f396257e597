"""A bank of elevators that answer floor calls and cabin buttons."""

from __future__ import annotations

import argparse
from enum import Enum


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    NONE = "NONE"


class NoElevatorAvailable(RuntimeError):
    """Raised when no elevator can take a floor call."""


class Elevator:
    """One car with the floors it still has to visit."""

    def __init__(self, elevator_id: int, current_floor: int = 0) -> None:
        self.id = elevator_id
        self.current_floor = current_floor
        self.direction = Direction.NONE
        self.targets: set[int] = set()

    def add_request(self, floor: int) -> None:
        self.targets.add(floor)
        self.update_direction()

    def update_direction(self) -> None:
        """Head towards the lowest target, or stand still when there is none."""
        if not self.targets:
            self.direction = Direction.NONE
        elif min(self.targets) > self.current_floor:
            self.direction = Direction.UP
        else:
            self.direction = Direction.DOWN

    def move(self) -> None:
        """Go one floor in the current direction, stopping if it is a target."""
        if self.direction is Direction.UP:
            self.current_floor += 1
        elif self.direction is Direction.DOWN:
            self.current_floor -= 1
        print(f"Elevator {self.id}is at Floor{self.current_floor}")
        if self.current_floor in self.targets:
            print(f"Elevator {self.id} stopping at Floor {self.current_floor}")
            self.targets.discard(self.current_floor)
        self.update_direction()

    def will_serve(self, floor: int, direction: Direction) -> bool:
        if self.direction is not direction:
            return False
        return (self.current_floor > floor and direction is Direction.UP) or (
            self.current_floor < floor and direction is Direction.DOWN
        )

    def distance_to(self, floor: int) -> int:
        return abs(floor - self.current_floor)

    def is_idle(self) -> bool:
        return self.direction is Direction.NONE


class ElevatorSystem:
    """Dispatches requests to a fixed set of elevators."""

    def __init__(self, count: int) -> None:
        self.elevators = [Elevator(i) for i in range(count)]

    def external_request(self, floor: int, direction: Direction) -> Elevator:
        """Assign a floor call to the nearest willing elevator, else the first idle one."""
        willing = [e for e in self.elevators if e.will_serve(floor, direction)]
        best = min(willing, key=lambda e: e.distance_to(floor), default=None)
        if best is None:
            best = next((e for e in self.elevators if e.is_idle()), None)
        if best is None:
            raise NoElevatorAvailable(f"no elevator can serve floor {floor}")
        best.add_request(floor)
        print(f" Assigned Floor {floor}to elevator {best.id}")
        return best

    def step(self) -> None:
        """Move every elevator that has somewhere to go."""
        for elevator in self.elevators:
            if not elevator.is_idle():
                elevator.move()

    def add_elevator_request(self, elevator_id: int, floor: int) -> None:
        if not 0 <= elevator_id < len(self.elevators):
            raise IndexError(f"no elevator with id {elevator_id}")
        self.elevators[elevator_id].add_request(floor)


class ButtonController:
    """Turns button presses into requests to an :class:`ElevatorSystem`."""

    def __init__(self, system: ElevatorSystem) -> None:
        self.system = system

    def press_floor_button(self, floor: int, direction: Direction) -> Elevator:
        label = "UP" if direction is Direction.UP else "DOWN"
        print(f"[Button] Floor {floor} pressed {label}")
        return self.system.external_request(floor, direction)

    def press_elevator_button(self, elevator_id: int, floor: int) -> None:
        self.system.add_elevator_request(elevator_id, floor)


def main(argv: list[str] | None = None) -> int:
    """Run three elevators through a few calls for ten steps."""
    argparse.ArgumentParser(description="Elevator demonstration.").parse_args(argv)
    system = ElevatorSystem(3)
    controller = ButtonController(system)
    controller.press_floor_button(5, Direction.UP)
    controller.press_floor_button(2, Direction.DOWN)
    controller.press_elevator_button(0, 7)
    controller.press_elevator_button(1, 3)
    for _ in range(10):
        system.step()
    return 0