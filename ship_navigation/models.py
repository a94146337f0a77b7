from dataclasses import dataclass


@dataclass
class Ship:
    # Position relative to the origin, north-positive / east-positive.
    north: int = 0
    east: int = 0
    # Waypoint offset relative to the ship (waypoint rules only).
    waypoint_north: int = 1
    waypoint_east: int = 10
    # Heading as an (east, north) vector (heading rules only).
    facing: tuple[int, int] = (1, 0)

    @property
    def position(self) -> tuple[int, int]:
        return self.north, self.east

    @property
    def waypoint(self) -> tuple[int, int]:
        return self.waypoint_east, self.waypoint_north


def manhattan_distance(north: int, east: int) -> int:
    return abs(north) + abs(east)
