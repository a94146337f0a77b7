from __future__ import annotations

from ship_navigation.engine import HEADING_RULES, WAYPOINT_RULES
from ship_navigation.instructions import read_instructions
from ship_navigation.models import manhattan_distance
from ship_navigation.trace import run_with_trace


def main() -> None:
    instructions = read_instructions(["F10", "N3", "F7", "R90", "F11", "L180", "S4", "W2", "F3"])

    for rules in (HEADING_RULES, WAYPOINT_RULES):
        log = run_with_trace(instructions, rules)
        print(f"\n{rules} rules")
        for entry in log:
            east, north = entry.vector
            # Position is the post-instruction state; vector is (east, north)
            print(
                f"  Step {entry.step:2d} | {entry.instruction:<5s} "
                f"N={entry.north:6d} E={entry.east:6d}  vec=({east:4d}, {north:4d})"
            )

        last = log[-1]
        print(f"  Manhattan distance: {manhattan_distance(last.north, last.east)}")


if __name__ == "__main__":
    main()
