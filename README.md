# vuelos

A flight board driven by line commands, together with the data structures
it is built on: a stack, a queue, a singly linked list, a binary max-heap,
a hash map with linear probing and a binary search tree with range
iteration.

## Installing

```
pip install .
```

## The command

`vuelos` reads commands from standard input, one per line. When a command
succeeds, its output lines are printed on standard output followed by
`OK`. When it fails, an error message is printed on standard error and
nothing else. The same loop can be started with `python -m vuelos.cli`.

| Command | What it does |
| --- | --- |
| `agregar_archivo <file>` | Loads flights from a CSV file. A flight whose code is already known replaces the old record. |
| `ver_tablero <n> asc\|desc <from> <to>` | Lists up to `n` flights whose dates fall in the range, as `date - code`, earliest first (`asc`) or latest first (`desc`). |
| `info_vuelo <code>` | Prints every field of one flight. |
| `prioridad_vuelos <n>` | Lists up to `n` flights by descending priority, as `priority - code`; equal priorities come out in ascending code order. |
| `siguiente_vuelo <origin> <destination> <date>` | Prints the first flight from origin to destination departing at or after the date, or a line saying there is none. |
| `borrar <from> <to>` | Deletes the flights in the date range and prints the record of each one deleted. |

Dates use the form `YYYY-MM-DDTHH:MM:SS`. A range whose end comes before
its start is an error, as is a count that is not a positive integer.

Each line of a flight file has ten comma-separated fields:

```
code,airline,origin,destination,registration,priority,date,departure_delay,flight_time,cancelled
```

`priority`, `departure_delay`, `flight_time` and `cancelled` are integers;
any non-zero `cancelled` marks the flight as cancelled. A malformed line
stops the load with an error; lines before it stay loaded.

Example session:

```
$ vuelos
agregar_archivo vuelos.csv
OK
ver_tablero 3 asc 2018-04-01T00:00:00 2018-04-30T23:59:59
2018-04-08T10:00:00 - 1234
...
OK
```

## Using it as a library

`FlightSystem` in `vuelos.sistema` holds the flights. Its query methods
return the lines to show as a list of strings, and raise `CommandError`
when a command cannot be carried out; `str()` of the error is the message.
`vuelos.cli.process_command` parses one command line and runs it.

```python
from vuelos.sistema import FlightSystem, CommandError
from vuelos.cli import process_command

system = FlightSystem()
system.add_file("vuelos.csv")
print(system.flight_info("1234"))

try:
    for line in process_command("prioridad_vuelos 5", system):
        print(line)
except CommandError as error:
    print(error)
```

A flight record is a `vuelos.vuelo.Flight` dataclass; `Flight.format()`
renders it as one space-separated line.

The data structures can be used on their own:

- `vuelos.pila.Stack`: `push`, `pop`, `peek`, `is_empty`, `len()`.
- `vuelos.cola.Queue`: `enqueue`, `dequeue`, `peek`, `is_empty`, `len()`.
- `vuelos.lista.LinkedList`: `insert_first`, `insert_last`, `delete_first`,
  `first`, `last`, iteration, `iterate(visit)`, and `iterator()`, a
  `ListIterator` that can `insert` and `delete` at its position.
- `vuelos.heap.PriorityQueue(cmp, items=())` and `heap_sort(items, cmp)`.
- `vuelos.hash_table.HashMap`: `put`, `get`, `contains`, `delete`,
  iteration over `(key, value)` pairs, `iterate(visit)`, `iterator()`.
- `vuelos.abb.BinarySearchTree(cmp)`: the same map operations in key order,
  plus `iterate_range(start, end, visit)` and `iterator_range(start, end)`
  with inclusive bounds, `None` meaning unbounded.

A comparison function `cmp(a, b)` returns a negative number, zero or a
positive number as `a` orders before, equal to or after `b`; the priority
queue returns the greatest item first.

```python
from vuelos.heap import PriorityQueue, heap_sort
from vuelos.abb import BinarySearchTree

queue = PriorityQueue(lambda a, b: a - b)
queue.enqueue(3)
queue.enqueue(7)
queue.dequeue()          # 7

items = [5, 3, 8, 1]
heap_sort(items, lambda a, b: a - b)   # items is now [1, 3, 5, 8]

tree = BinarySearchTree(lambda a, b: (a > b) - (a < b))
for key in (4, 2, 5, 1, 3):
    tree.put(key, str(key))
iterator = tree.iterator_range(2, 4)
while iterator.has_next():
    key, value = iterator.current()
    iterator.advance()
```

Reading from an empty stack, queue, list or priority queue, or from an
exhausted iterator, raises `IndexError`. Looking up or deleting a missing
key in a `HashMap` or `BinarySearchTree` raises `KeyError`.

## What it does not do

Flights live in memory only. Nothing is saved between runs, and the
command has no options: every session starts empty and is filled with
`agregar_archivo`.

## Running the tests

```
pip install ".[test]"
pytest
```