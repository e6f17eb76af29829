# logicsim

An event-driven simulator for small digital circuits built from AND, OR and NOT
gates. It reads a circuit description, applies the scheduled input changes,
lets the gates react, and prints the wire transitions as a PlantUML timing
diagram.

The package also contains the data structures the simulator is built on: an
m-ary `Heap` ordered by a custom predicate, a `Stack`, and singly linked list
helpers (`llpivot`, `llfilter`).

## Installation

```
pip install .
```

## Simulating a circuit

```
logicsim circuit.txt
```

Without an argument the command prints `Please provide a circuit file to
simulate.` and exits with status 1. If the file cannot be opened nothing is
printed.

The circuit file has three sections. Each header line is followed by a count
and then that many comma-separated lines:

```
WIRES
3
0,input A
1,input B
2,output
GATES
1
AND2,0,1,2
INJECT
4
0,0,0
0,1,1
4,0,1
6,1,0
```

- `WIRES`: `id,name`. Wires with an empty name are left out of the diagram.
- `GATES`: `AND2,in1,in2,out`, `OR2,in1,in2,out` or `NOT,in,out`, where the
  numbers are positions in the wire list. Other gate types are skipped.
- `INJECT`: `time,wire,state`, where the state is `0`, `1` or `X`. States
  other than these are ignored when the event is applied.

Every wire starts in state `X`. Gates have no delay: a gate whose output
changes schedules the new state at the current time. A malformed count,
index or time raises `ValueError`.

The output is a `@startuml` … `@enduml` block that PlantUML can render. Each
time step that changed a named wire appears as `@<time>` followed by lines
such as `W2 is high`.

From Python:

```python
import io
from logicsim.circuit import Circuit

circuit = Circuit()
circuit.parse("circuit.txt")   # False if the file cannot be opened
out = io.StringIO()
circuit.start_uml(out)
circuit.run(out)
circuit.end_uml(out)
print(out.getvalue())
```

`Circuit.advance(out)` runs a single time step and returns `False` once no
events remain. `Circuit.load_demo()` sets up a built-in two-input AND example
instead of reading a file.

The building blocks are available on their own: `Wire` (in `logicsim.wire`),
`Event` and `event_less` (in `logicsim.event`), and `And2Gate`, `Or2Gate`,
`NotGate` (in `logicsim.gate`), whose `update(current_time)` returns an
`Event` when the output changes and `None` otherwise.

## Linked list pivot

```
llrec numbers.txt
```

reads whitespace-separated integers (stopping at the first token that is not
an integer) and prints the list, then the list split around the pivot 10:
values less than or equal to it and values greater than it.

```python
from logicsim.llrec import from_iterable, iter_values, llpivot, llfilter

smaller, larger = llpivot(from_iterable([3, 12, 7, 15]), 10)
list(iter_values(smaller))   # [3, 7]
list(iter_values(larger))    # [12, 15]

odd = llfilter(from_iterable([1, 2, 3, 4]), lambda v: v % 2 == 0)
list(iter_values(odd))       # [1, 3]
```

Both functions move the existing nodes rather than copying them.

## Data structures

```python
from logicsim.heap import Heap
from logicsim.stack import Stack

heap = Heap(3, lambda a, b: a > b)   # ternary max-heap
for n in (1, 2, 3):
    heap.push(n)
heap.top()    # 3
heap.pop()
len(heap)     # 2

stack = Stack()
stack.push(1)
stack.top()   # 1
```

`Heap()` with no arguments is a binary min-heap. `top()` and `pop()` on an
empty heap or stack raise `IndexError`.