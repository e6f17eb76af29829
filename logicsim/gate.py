"""Logic gates that watch input wires and schedule output changes."""

from __future__ import annotations

from abc import ABC, abstractmethod

from logicsim.event import Event
from logicsim.wire import Wire


class Gate(ABC):
    """A gate with a fixed number of inputs driving one output wire."""

    def __init__(self, num_inputs: int, output: Wire) -> None:
        self.output = output
        self.inputs: list[Wire | None] = [None] * num_inputs
        self.delay = 0
        self.current_state = "X"

    def wire_input(self, index: int, wire: Wire) -> None:
        """Connect ``wire`` to input ``index``; out-of-range indices are ignored."""
        if 0 <= index < len(self.inputs):
            self.inputs[index] = wire

    @abstractmethod
    def update(self, current_time: int) -> Event | None:
        """Recompute the output; return an event if it changed, else None."""

    def _schedule(self, state: str, current_time: int) -> Event | None:
        if state == self.current_state:
            return None
        self.current_state = state
        return Event(current_time + self.delay, self.output, state)


class And2Gate(Gate):
    """Two-input AND gate."""

    def __init__(self, a: Wire, b: Wire, output: Wire) -> None:
        super().__init__(2, output)
        self.wire_input(0, a)
        self.wire_input(1, b)

    def update(self, current_time: int) -> Event | None:
        state = "1"
        for wire in self.inputs:
            value = wire.state
            if value == "0":
                state = "0"
                break
            if value == "X":
                state = "X"
        return self._schedule(state, current_time)


class Or2Gate(Gate):
    """Two-input OR gate."""

    def __init__(self, a: Wire, b: Wire, output: Wire) -> None:
        super().__init__(2, output)
        self.wire_input(0, a)
        self.wire_input(1, b)

    def update(self, current_time: int) -> Event | None:
        state = "0"
        for wire in self.inputs:
            value = wire.state
            if value == "1":
                state = "1"
                break
            if value == "X":
                state = "X"
        return self._schedule(state, current_time)


_NOT = {"1": "0", "0": "1", "X": "X"}


class NotGate(Gate):
    """Inverter."""

    def __init__(self, a: Wire, output: Wire) -> None:
        super().__init__(1, output)
        self.wire_input(0, a)

    def update(self, current_time: int) -> Event | None:
        state = _NOT.get(self.inputs[0].state, "0")
        return self._schedule(state, current_time)