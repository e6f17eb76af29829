"""Event-driven circuit simulation producing a PlantUML timing trace."""

from __future__ import annotations

import io
import re
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from logicsim.event import Event, event_less
from logicsim.gate import And2Gate, Gate, NotGate, Or2Gate
from logicsim.heap import Heap
from logicsim.wire import Wire

_INT = re.compile(r"\s*([+-]?\d+)")


def _stoi(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _fields(line: str, count: int) -> list[str]:
    parts = line.split(",")[:count]
    return parts + [""] * (count - len(parts))


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("unexpected end of circuit file") from None


class Circuit:
    """A set of wires and gates driven by a queue of timed events."""

    def __init__(self) -> None:
        self.current_time = 0
        self.gates: list[Gate] = []
        self.wires: list[Wire] = []
        self._pq: Heap[Event] = Heap(2, event_less)

    def load_demo(self) -> None:
        """Build a single AND gate with a fixed set of input events."""
        self.wires.extend(
            [Wire(0, "input A"), Wire(1, "input B"), Wire(2, "output")]
        )
        a, b, out = self.wires[:3]
        self.gates.append(And2Gate(a, b, out))
        for event in (
            Event(0, a, "0"),
            Event(0, b, "1"),
            Event(4, a, "1"),
            Event(6, b, "0"),
        ):
            self._pq.push(event)

    def _wire(self, text: str) -> Wire:
        index = _stoi(text)
        if not 0 <= index < len(self.wires):
            raise ValueError(f"no wire at index {index}")
        return self.wires[index]

    def parse(self, path: str | Path) -> bool:
        """Load wires, gates and injected events from a circuit file.

        Returns False if the file cannot be opened; raises ValueError if
        its contents are malformed.
        """
        try:
            handle = open(path)
        except OSError:
            return False
        with handle:
            lines = (line.rstrip("\n") for line in handle)
            for line in lines:
                if line == "WIRES":
                    self._read_wires(lines)
                elif line == "GATES":
                    self._read_gates(lines)
                elif line == "INJECT":
                    self._read_injections(lines)
        return True

    def _read_wires(self, lines: Iterator[str]) -> None:
        for _ in range(_stoi(_next_line(lines))):
            s_id, name = _fields(_next_line(lines), 2)
            self.wires.append(Wire(_stoi(s_id), name))

    def _read_gates(self, lines: Iterator[str]) -> None:
        for _ in range(_stoi(_next_line(lines))):
            line = _next_line(lines)
            kind = _fields(line, 1)[0]
            if kind in ("AND2", "OR2"):
                _, in1, in2, out = _fields(line, 4)
                cls = And2Gate if kind == "AND2" else Or2Gate
                self.gates.append(
                    cls(self._wire(in1), self._wire(in2), self._wire(out))
                )
            elif kind == "NOT":
                _, in1, out = _fields(line, 3)
                self.gates.append(NotGate(self._wire(in1), self._wire(out)))

    def _read_injections(self, lines: Iterator[str]) -> None:
        for _ in range(_stoi(_next_line(lines))):
            s_time, s_wire, s_state = _fields(_next_line(lines), 3)
            time = _stoi(s_time)
            if time < 0:
                raise ValueError(f"negative event time: {time}")
            self._pq.push(Event(time, self._wire(s_wire), s_state[:1]))

    def advance(self, out: TextIO) -> bool:
        """Apply all events at the next pending time and update the gates.

        Writes the trace for this step to ``out`` if any named wire changed.
        Returns False when no events remain.
        """
        pq = self._pq
        if not pq:
            return False
        self.current_time = pq.top().time
        trace = [f"@{self.current_time}\n"]
        updated = False
        while pq and pq.top().time == self.current_time:
            event = pq.top()
            report = event.wire.set_state(event.state, self.current_time)
            if report:
                trace.append(report + "\n")
                updated = True
            pq.pop()
        if updated:
            out.write("".join(trace))
        for gate in self.gates:
            event = gate.update(self.current_time)
            if event is not None:
                pq.push(event)
        return True

    def run(self, out: TextIO) -> None:
        """Advance until no events remain."""
        while self.advance(out):
            pass

    def start_uml(self, out: TextIO) -> None:
        """Write the PlantUML header declaring every named wire."""
        named = [w for w in self.wires if w.name]
        out.write("@startuml\n")
        for w in named:
            out.write(f'binary "{w.name}" as W{w.id}\n')
        out.write("\n@0\n")
        for w in named:
            out.write(f"W{w.id} is {{low,high}} \n")
        out.write("\n")

    def end_uml(self, out: TextIO) -> None:
        """Write the PlantUML footer."""
        out.write("@enduml\n")


def main(argv: list[str] | None = None) -> int:
    """Simulate the circuit file named first in argv and print its trace."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Please provide a circuit file to simulate.")
        return 1
    circuit = Circuit()
    if circuit.parse(args[0]):
        buf = io.StringIO()
        circuit.start_uml(buf)
        circuit.run(buf)
        circuit.end_uml(buf)
        print(buf.getvalue())
    return 0


if __name__ == "__main__":
    sys.exit(main())