"""Command interpreter: reads commands from standard input and runs them."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence

from vuelos.sistema import CommandError, FlightSystem, _parse_int
from vuelos.vuelo import _parse_date


def _expect(args: Sequence[str], count: int, message: str) -> None:
    if len(args) != count:
        raise CommandError(message)


def process_command(line: str, system: FlightSystem) -> List[str]:
    """Run one command line against system and return the lines it produces."""
    parts = line.split()
    if not parts:
        raise CommandError("comando no reconocido")
    name, args = parts[0], parts[1:]
    error = f"Error en comando {name}"

    match name:
        case "agregar_archivo":
            _expect(args, 1, error)
            system.add_file(args[0])
            return []
        case "ver_tablero":
            _expect(args, 4, error)
            count = _parse_int(args[0], error)
            return system.board(count, args[1], args[2], args[3])
        case "info_vuelo":
            _expect(args, 1, error)
            return system.flight_info(args[0])
        case "prioridad_vuelos":
            _expect(args, 1, error)
            k = _parse_int(args[0], error)
            if k <= 0:
                raise CommandError(error)
            return system.priority_flights(k)
        case "siguiente_vuelo":
            _expect(args, 3, error)
            try:
                date = _parse_date(args[2])
            except ValueError as exc:
                raise CommandError(error) from exc
            return system.next_flight(args[0], args[1], date)
        case "borrar":
            _expect(args, 2, error)
            return system.delete_range(args[0], args[1])
        case _:
            raise CommandError(error)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run commands from standard input; argv is accepted but no options are defined."""
    system = FlightSystem()
    for line in sys.stdin:
        try:
            output = process_command(line, system)
        except CommandError as exc:
            print(exc, file=sys.stderr)
        else:
            for text in output:
                print(text)
            print("OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())