"""The flight board: loads flight records and answers queries about them."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

from vuelos.abb import BinarySearchTree
from vuelos.hash_table import HashMap
from vuelos.heap import PriorityQueue
from vuelos.vuelo import Flight, _format_date, _parse_date

_FIELD_COUNT = 10
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class CommandError(Exception):
    """A command could not be carried out; str() gives the message to report."""


def _parse_int(text: str, message: str) -> int:
    """Parse a decimal integer strictly, raising CommandError(message) otherwise."""
    if not _INT_PATTERN.fullmatch(text):
        raise CommandError(message)
    return int(text)


def _compare_text(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _board_key(flight: Flight) -> str:
    return f"{_format_date(flight.date)}|{flight.code}"


def _priority_order(a: Flight, b: Flight) -> int:
    """Higher priority first; among equal priorities the smaller code first."""
    if a.priority != b.priority:
        return a.priority - b.priority
    return _compare_text(b.code, a.code)


class FlightSystem:
    """Flights indexed by code and by departure time.

    Query methods return the lines to show; failures raise CommandError.
    """

    def __init__(self) -> None:
        self._by_code: HashMap[str, Flight] = HashMap()
        self._by_date: BinarySearchTree[str, Flight] = BinarySearchTree(_compare_text)

    def _in_range(self, start: Optional[str], end: Optional[str]) -> Iterator[Tuple[str, Flight]]:
        cursor = self._by_date.iterator_range(start, end)
        while cursor.has_next():
            yield cursor.current()
            cursor.advance()

    def _in_date_range(self, start: str, end: str) -> Iterator[Tuple[str, Flight]]:
        return self._in_range(f"{start}|", f"{end}|~")

    def add_file(self, path: str) -> None:
        """Load a CSV file of flights; a flight whose code exists replaces the old one."""
        try:
            handle = open(path, encoding="utf-8")
        except OSError as exc:
            raise CommandError("Error en comando agregar_archivo") from exc
        with handle:
            try:
                for line in handle:
                    self._add_record(line.rstrip("\n"))
            except (OSError, UnicodeDecodeError) as exc:
                raise CommandError("error al leer archivo") from exc

    def _add_record(self, line: str) -> None:
        fields = line.split(",")
        if len(fields) != _FIELD_COUNT:
            raise CommandError("formato inválido en la línea del archivo")
        code, airline, origin, destination, tail_number = fields[:5]
        priority = _parse_int(fields[5], "error al parsear prioridad")
        try:
            date = _parse_date(fields[6])
        except ValueError as exc:
            raise CommandError("error al parsear fecha") from exc
        delay = _parse_int(fields[7], "error al parsear retraso")
        flight_time = _parse_int(fields[8], "error al parsear tiempo")
        cancelled = _parse_int(fields[9], "error al parsear cancelado") != 0

        flight = Flight(
            code=code,
            airline=airline,
            origin=origin,
            destination=destination,
            tail_number=tail_number,
            priority=priority,
            date=date,
            departure_delay=delay,
            flight_time=flight_time,
            cancelled=cancelled,
        )
        if code in self._by_code:
            self._by_date.delete(_board_key(self._by_code.get(code)))
        self._by_code.put(code, flight)
        self._by_date.put(_board_key(flight), flight)

    def board(self, count: int, mode: str, start: str, end: str) -> List[str]:
        """List up to count flights departing between start and end, "asc" or "desc"."""
        if count <= 0 or mode not in ("asc", "desc") or end < start:
            raise CommandError("Error en comando ver_tablero")
        lines = [
            f"{_format_date(flight.date)} - {flight.code}"
            for _, flight in self._in_date_range(start, end)
        ]
        if mode == "desc":
            lines.reverse()
        return lines[:count]

    def flight_info(self, code: str) -> List[str]:
        """Return the full record of the flight with this code."""
        if code not in self._by_code:
            raise CommandError("Error en comando info_vuelo")
        return [self._by_code.get(code).format()]

    def priority_flights(self, k: int) -> List[str]:
        """Return up to k flights by descending priority, ties by ascending code."""
        flights = [flight for _, flight in self._by_code]
        queue = PriorityQueue(_priority_order, flights)
        lines = []
        while len(lines) < k and not queue.is_empty():
            flight = queue.dequeue()
            lines.append(f"{flight.priority} - {flight.code}")
        return lines

    def next_flight(self, origin: str, destination: str, date: datetime) -> List[str]:
        """Return the first flight from origin to destination departing at or after date."""
        date_text = _format_date(date)
        for _, flight in self._in_range(date_text, None):
            if flight.origin == origin and flight.destination == destination:
                return self.flight_info(flight.code)
        return [
            f"No hay vuelo registrado desde {origin} hacia {destination} desde {date_text}"
        ]

    def delete_range(self, start: str, end: str) -> List[str]:
        """Remove every flight departing between start and end; return their records."""
        if end < start:
            raise CommandError("Error en comando borrar")
        doomed = list(self._in_date_range(start, end))
        lines = [self._by_code.delete(flight.code).format() for _, flight in doomed]
        for key, _ in doomed:
            self._by_date.delete(key)
        return lines