from __future__ import annotations

from typing import Callable, Sequence

from ship_navigation.instructions import Action, Instruction
from ship_navigation.models import Ship
from ship_navigation.rotation import rotate

HEADING_RULES = "heading"
WAYPOINT_RULES = "waypoint"


def step_heading(ship: Ship, instruction: Instruction) -> None:
    """
    Apply one instruction under the heading rules.

    - N/S/E/W move the ship directly.
    - F moves the ship along its facing vector.
    - R/L turn the facing vector (L is a negative rotation).
    """
    action, value = instruction.action, instruction.value

    if action == Action.NORTH:
        ship.north += value
    elif action == Action.SOUTH:
        ship.north -= value
    elif action == Action.EAST:
        ship.east += value
    elif action == Action.WEST:
        ship.east -= value
    elif action == Action.FORWARD:
        east, north = ship.facing
        ship.north += north * value
        ship.east += east * value
    elif action == Action.RIGHT:
        ship.facing = rotate(*ship.facing, value)
    elif action == Action.LEFT:
        ship.facing = rotate(*ship.facing, -value)
    else:
        raise ValueError(f"unhandled action: {action!r}")


def step_waypoint(ship: Ship, instruction: Instruction) -> None:
    """
    Apply one instruction under the waypoint rules.

    - N/S/E/W move the waypoint; the ship stays put.
    - F moves the ship value times the waypoint offset; the waypoint is unchanged.
    - R/L rotate the waypoint around the ship.
    """
    action, value = instruction.action, instruction.value

    if action == Action.NORTH:
        ship.waypoint_north += value
    elif action == Action.SOUTH:
        ship.waypoint_north -= value
    elif action == Action.EAST:
        ship.waypoint_east += value
    elif action == Action.WEST:
        ship.waypoint_east -= value
    elif action == Action.FORWARD:
        ship.north += value * ship.waypoint_north
        ship.east += value * ship.waypoint_east
    elif action in (Action.RIGHT, Action.LEFT):
        degrees = value if action == Action.RIGHT else -value
        ship.waypoint_east, ship.waypoint_north = rotate(
            ship.waypoint_east, ship.waypoint_north, degrees
        )
    else:
        raise ValueError(f"unhandled action: {action!r}")


def plot(ship: Ship, instructions: Sequence[Instruction]) -> tuple[int, int]:
    """
    Steer the ship by its heading through every instruction.

    Returns the final (north, east) position. The ship is mutated in place,
    so callers pass a fresh Ship per run.
    """
    for instruction in instructions:
        step_heading(ship, instruction)
    return ship.position


def plot_with_waypoint(ship: Ship, instructions: Sequence[Instruction]) -> tuple[int, int]:
    """
    Steer the ship by its waypoint through every instruction.

    Returns the final (north, east) position.
    """
    for instruction in instructions:
        step_waypoint(ship, instruction)
    return ship.position


STEPS_BY_RULES: dict[str, Callable[[Ship, Instruction], None]] = {
    HEADING_RULES: step_heading,
    WAYPOINT_RULES: step_waypoint,
}
