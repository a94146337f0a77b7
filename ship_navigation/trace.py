from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ship_navigation.engine import HEADING_RULES, STEPS_BY_RULES
from ship_navigation.instructions import Instruction
from ship_navigation.models import Ship


@dataclass(frozen=True)
class StepTrace:
    step: int
    instruction: str
    # Ship position AFTER the instruction was applied.
    north: int
    east: int
    # Facing vector (heading rules) or waypoint offset (waypoint rules), as (east, north).
    vector: tuple[int, int]


def snapshot_step(step: int, instruction: Instruction, ship: Ship, rules: str) -> StepTrace:
    """
    Capture the ship state after one instruction.

    This function does not modify simulation behavior.
    """
    vector = ship.facing if rules == HEADING_RULES else ship.waypoint
    return StepTrace(
        step=step,
        instruction=str(instruction),
        north=ship.north,
        east=ship.east,
        vector=vector,
    )


def run_with_trace(instructions: Sequence[Instruction], rules: str) -> list[StepTrace]:
    """
    Plot a fresh ship under the given rules, returning a per-instruction trace log.

    Uses the same step functions as engine.plot()/plot_with_waypoint().
    """
    try:
        step_fn = STEPS_BY_RULES[rules]
    except KeyError as e:
        raise ValueError(f"unknown rules: {rules!r}") from e

    ship = Ship()
    log: list[StepTrace] = []
    for i, instruction in enumerate(instructions, start=1):
        step_fn(ship, instruction)
        log.append(snapshot_step(i, instruction, ship, rules))
    return log


def render_trace(log: Sequence[StepTrace], rules: str) -> str:
    vector_label = "facing" if rules == HEADING_RULES else "waypoint"
    out = [f"{rules} rules"]
    width = max((len(t.instruction) for t in log), default=0)
    for t in log:
        east, north = t.vector
        out.append(
            f"  {t.step:4d}: {t.instruction:<{width}s}  "
            f"north={t.north:<7d} east={t.east:<7d} {vector_label}=(east={east}, north={north})"
        )
    return "\n".join(out) + "\n"
