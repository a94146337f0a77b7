from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable

INSTRUCTION_PATTERN = re.compile(r"^(?P<action>\w)(?P<value>\d+)")
# Values are signed 64-bit integers.
MAX_VALUE = 2**63 - 1


class InstructionFormatError(ValueError):
    """Raised when an instruction line fails validation."""

    def __init__(self, message: str, *, line: str | None = None, line_number: int | None = None):
        self.line = line
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class MalformedLineError(InstructionFormatError):
    """The line is not an action letter followed by a digit run."""


class InvalidMagnitudeError(InstructionFormatError):
    """The digit run is not ASCII decimal digits or does not fit a 64-bit value."""


class InvalidRotationError(InstructionFormatError):
    """A rotation value is not a multiple of 90 degrees."""


class UnknownActionError(InstructionFormatError):
    """The action letter is not one of N, S, E, W, F, R, L."""


class Action(str, Enum):
    """
    Navigation actions, keyed by their single-letter form.
    """

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    FORWARD = "F"
    RIGHT = "R"
    LEFT = "L"

    @property
    def is_rotation(self) -> bool:
        return self in (Action.RIGHT, Action.LEFT)


@dataclass(frozen=True, slots=True)
class Instruction:
    """
    One parsed navigation instruction.

    value is a distance for N/S/E/W/F and a number of degrees for R/L.
    """

    action: Action
    value: int

    def __str__(self) -> str:
        return f"{self.action.value}{self.value}"


def parse_instruction(line: str, *, line_number: int | None = None) -> Instruction:
    """Parse a single line such as ``F10`` or ``R90``.

    Anything after the digit run is ignored.
    """
    m = INSTRUCTION_PATTERN.match(line)
    if m is None:
        raise MalformedLineError(
            f"invalid instruction line: {line!r}", line=line, line_number=line_number
        )

    letter = m.group("action")
    digits = m.group("value")

    # \d also matches non-ASCII digits, which int() would quietly accept.
    if not digits.isascii():
        raise InvalidMagnitudeError(
            f"invalid action value: {digits!r}", line=line, line_number=line_number
        )
    value = int(digits)
    if value > MAX_VALUE:
        raise InvalidMagnitudeError(
            f"action value out of range: {digits}", line=line, line_number=line_number
        )

    try:
        action = Action(letter)
    except ValueError as e:
        raise UnknownActionError(
            f"invalid instruction: {letter}{digits}", line=line, line_number=line_number
        ) from e

    if action.is_rotation and value % 90 != 0:
        raise InvalidRotationError(
            f"invalid rotation {value}", line=line, line_number=line_number
        )

    return Instruction(action=action, value=value)


def read_instructions(lines: Iterable[str]) -> list[Instruction]:
    """Parse every line, in order.

    The first bad line aborts the whole parse. Blank lines at the end of the
    input (a trailing newline) are skipped; a blank line followed by more
    instructions is an error.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()

    instructions: list[Instruction] = []
    for i, line in enumerate(rows, start=1):
        instructions.append(parse_instruction(line, line_number=i))
    return instructions


def load_instructions(path: Path) -> list[Instruction]:
    """Load and validate an instruction file (one instruction per line)."""

    if not path.exists():
        raise InstructionFormatError(f"file not found: {path}")
    if not path.is_file():
        raise InstructionFormatError(f"not a file: {path}")

    return read_instructions(path.read_text(encoding="utf-8").splitlines())
