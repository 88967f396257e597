import pytest

from lldkit.elevator import (
    ButtonController,
    Direction,
    Elevator,
    ElevatorSystem,
    NoElevatorAvailable,
    main,
)


def test_new_elevator_is_idle():
    elevator = Elevator(4)
    assert elevator.is_idle() is True
    assert elevator.direction is Direction.NONE
    assert elevator.current_floor == 0


def test_request_above_goes_up_and_below_goes_down():
    up = Elevator(0)
    up.add_request(3)
    assert up.direction is Direction.UP
    down = Elevator(1)
    down.add_request(-2)
    assert down.direction is Direction.DOWN


def test_move_reaches_target_and_stops(capsys):
    elevator = Elevator(0)
    elevator.add_request(2)
    elevator.move()
    assert elevator.current_floor == 1
    assert elevator.direction is Direction.UP
    elevator.move()
    assert elevator.current_floor == 2
    assert elevator.is_idle() is True
    assert elevator.targets == set()
    assert "Elevator 0 stopping at Floor 2" in capsys.readouterr().out


def test_will_serve_rules():
    elevator = Elevator(0, current_floor=5)
    elevator.add_request(9)
    assert elevator.will_serve(3, Direction.UP) is True
    assert elevator.will_serve(7, Direction.UP) is False
    assert elevator.will_serve(3, Direction.DOWN) is False


def test_distance_to():
    elevator = Elevator(0, current_floor=5)
    assert elevator.distance_to(2) == elevator.distance_to(8) == 3


def test_floor_calls_go_to_idle_elevators_in_order(capsys):
    system = ElevatorSystem(3)
    controller = ButtonController(system)
    first = controller.press_floor_button(5, Direction.UP)
    second = controller.press_floor_button(2, Direction.DOWN)
    assert first is system.elevators[0]
    assert second is system.elevators[1]
    assert system.elevators[0].targets == {5}
    assert system.elevators[1].targets == {2}
    assert "[Button] Floor 5 pressed UP" in capsys.readouterr().out


def test_nearest_willing_elevator_is_chosen():
    system = ElevatorSystem(2)
    system.add_elevator_request(0, 9)
    for _ in range(3):
        system.step()
    system.add_elevator_request(1, 9)
    system.step()
    assert system.elevators[0].current_floor > system.elevators[1].current_floor
    chosen = system.external_request(0, Direction.UP)
    assert chosen is system.elevators[1]
    assert 0 in system.elevators[1].targets
    assert 0 not in system.elevators[0].targets


def test_no_elevator_available_raises():
    system = ElevatorSystem(1)
    system.add_elevator_request(0, 5)
    with pytest.raises(NoElevatorAvailable):
        system.external_request(2, Direction.DOWN)


def test_step_moves_only_busy_elevators():
    system = ElevatorSystem(2)
    system.add_elevator_request(0, 1)
    system.step()
    assert system.elevators[0].current_floor == 1
    assert system.elevators[1].current_floor == 0


def test_cabin_button_adds_target():
    system = ElevatorSystem(2)
    ButtonController(system).press_elevator_button(1, 4)
    assert system.elevators[1].targets == {4}
    assert system.elevators[1].direction is Direction.UP


@pytest.mark.parametrize("elevator_id", [-1, 2])
def test_cabin_button_rejects_unknown_elevator(elevator_id):
    system = ElevatorSystem(2)
    with pytest.raises(IndexError):
        system.add_elevator_request(elevator_id, 4)


def test_main_assigns_calls(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert " Assigned Floor 5to elevator 0" in out
    assert " Assigned Floor 2to elevator 1" in out