import pytest

from algobox.rover import Orientation, Rover


def test_known_route():
    rover = Rover(3, 3, "E")
    rover.process("MMRMMRMRRM")
    assert str(rover) == "5 1 E"
    assert rover.position() == (5, 1, Orientation.EAST)


def test_orientation_letter_is_converted():
    assert Rover(0, 0, "N").orientation is Orientation.NORTH


def test_invalid_orientation_raises():
    with pytest.raises(ValueError):
        Rover(0, 0, "Q")


@pytest.mark.parametrize("facing", list(Orientation))
def test_four_turns_restore_orientation(facing):
    rover = Rover(0, 0, facing)
    rover.process("LLLL")
    assert rover.orientation is facing
    rover.process("RRRR")
    assert rover.orientation is facing


@pytest.mark.parametrize("facing", list(Orientation))
def test_left_then_right_is_identity(facing):
    rover = Rover(2, 2, facing)
    rover.rotate_left()
    rover.rotate_right()
    assert rover.position() == (2, 2, facing)


def test_right_turn_cycle():
    rover = Rover(0, 0, Orientation.NORTH)
    seen = []
    for _ in range(4):
        rover.rotate_right()
        seen.append(rover.orientation)
    assert seen == [
        Orientation.EAST,
        Orientation.SOUTH,
        Orientation.WEST,
        Orientation.NORTH,
    ]


@pytest.mark.parametrize(
    "facing, expected",
    [
        (Orientation.NORTH, (1, 2)),
        (Orientation.SOUTH, (1, 0)),
        (Orientation.EAST, (2, 1)),
        (Orientation.WEST, (0, 1)),
    ],
)
def test_move_forward_steps_one_cell(facing, expected):
    rover = Rover(1, 1, facing)
    rover.move_forward()
    assert (rover.x, rover.y) == expected
    assert rover.orientation is facing


def test_out_and_back_returns_home():
    rover = Rover(4, 7, "S")
    rover.process("MMMRRMMMRR")
    assert rover.position() == (4, 7, Orientation.SOUTH)


def test_unknown_letters_move_forward():
    rover = Rover(0, 0, "N")
    rover.process("MXZ")
    assert rover.position() == (0, 3, Orientation.NORTH)


def test_empty_message_leaves_rover_unchanged():
    rover = Rover(-2, 5, "W")
    rover.process("")
    assert str(rover) == "-2 5 W"