"""Wires carrying a three-valued logic state."""

from __future__ import annotations

VALID_STATES = frozenset("01X")

_UML_STATE = {"0": "low", "1": "high", "X": "{low,high}"}


class Wire:
    """A named signal line whose state is one of ``'0'``, ``'1'`` or ``'X'``."""

    def __init__(self, id: int, name: str = "") -> None:
        self.id = id
        self.name = name
        self.state = "X"

    def set_state(self, state: str, current_time: int) -> str:
        """Change the wire's state and return a UML trace line for the change.

        Unknown states are ignored. A line is produced only when a named
        wire actually changes state; otherwise the empty string is returned.
        """
        if state not in VALID_STATES:
            return ""
        report = ""
        if self.state != state and self.name:
            report = f"W{self.id} is {_UML_STATE[state]}\n"
        self.state = state
        return report

    def __repr__(self) -> str:
        return f"Wire(id={self.id!r}, name={self.name!r}, state={self.state!r})"