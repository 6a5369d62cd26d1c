"""Loading of the initial qubit state and of gate circuits from text files."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import IO

from .parser import NumberParseError, parse_complex

__all__ = [
    "LoaderError",
    "Gate",
    "parse_initial_state",
    "parse_circuit",
    "load_initial_state",
    "load_circuit",
]

MAX_QUBITS = 30
MAX_GATE_NAME_LENGTH = 15

_WHITESPACE = " \t\n\v\f\r"
_QUBIT_COUNT = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


class LoaderError(Exception):
    """Raised when an input file is missing or malformed."""


@dataclass
class Gate:
    """A named gate with its square matrix, stored as a list of rows."""

    name: str
    matrix: list[list[complex]] = field(default_factory=list)


def _located(source: str, line: int | None, message: str) -> LoaderError:
    if line is None:
        return LoaderError(f"{source}: {message}")
    return LoaderError(f"{source}, line {line}: {message}")


def _chop_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _bracketed(line: str) -> str | None:
    left, right = line.find("["), line.find("]")
    if left < 0 or right < 0 or right < left:
        return None
    return line[left + 1 : right]


def _parse_qubit_count(text: str, source: str, line: int) -> int:
    if not _QUBIT_COUNT.fullmatch(text):
        raise _located(source, line, f"cannot parse qubit count {text.strip()!r}")
    count = int(text.lstrip(_WHITESPACE))
    if not 1 <= count <= MAX_QUBITS:
        raise _located(
            source, line, f"invalid qubit count {count} (must be 1..{MAX_QUBITS})"
        )
    return count


def _parse_entries(text: str, source: str, line: int) -> Iterable[complex]:
    """Yield the comma separated numbers of ``text``; empty fields are skipped."""
    for raw in text.split(","):
        if not raw:
            continue
        entry = raw.lstrip(" ")
        try:
            yield parse_complex(entry)
        except NumberParseError as exc:
            raise _located(source, line, f"cannot parse number {entry!r}") from exc


def parse_initial_state(
    lines: Iterable[str], source: str = "<input>"
) -> tuple[int, list[complex]]:
    """Read ``#qubits`` and ``#init`` directives; return the qubit count and state."""
    qubits: int | None = None
    init_text: str | None = None
    init_line = 0

    for number, line in enumerate(lines, start=1):
        if qubits is None and line.startswith("#qubits "):
            qubits = _parse_qubit_count(_chop_newline(line)[7:], source, number)
        if init_text is None and line.startswith("#init "):
            init_text = _bracketed(line)
            if init_text is None:
                raise _located(source, number, "malformed square brackets")
            init_line = number
        if qubits is not None and init_text is not None:
            break

    if qubits is None:
        raise _located(source, None, "qubit count missing")
    if init_text is None:
        raise _located(source, None, "init vector missing")

    dim = 1 << qubits
    state: list[complex] = []
    pieces = (piece for piece in init_text.split(",") if piece)
    for piece in pieces:
        if len(state) == dim:
            raise _located(source, init_line, "too many #init elements")
        state.extend(_parse_entries(piece, source, init_line))
    if len(state) < dim:
        raise _located(source, init_line, "too few #init elements")
    return qubits, state


def _parse_matrix(body: str, dim: int, source: str, line: int) -> list[list[complex]]:
    size = dim * dim
    flat: list[complex] = []
    cursor = 0
    for _ in range(dim):
        row_left, row_right = body.find("(", cursor), body.find(")", cursor)
        if row_left < 0 and row_right < 0:
            raise _located(source, line, "the matrix has too few rows")
        if row_left < 0 or row_right < 0 or row_right < row_left:
            raise _located(source, line, "malformed parentheses")
        row_text = body[row_left + 1 : row_right]
        flat.extend(_parse_entries(row_text, source, line))
        if len(flat) % dim or len(flat) > size:
            raise _located(source, line, "wrong number of row components")
        cursor += len(row_text) + 3
    if len(flat) != size:
        raise _located(source, line, "wrong number of row components")
    if "(" in body[cursor:]:
        raise _located(source, line, "the matrix has too many rows")
    return [flat[start : start + dim] for start in range(0, size, dim)]


def _parse_gate(
    line: str, dim: int, taken: set[str], source: str, number: int
) -> Gate:
    body = _bracketed(line)
    if body is None:
        raise _located(source, number, "malformed square brackets")
    name = line[7:].lstrip(" ").split(" ", 1)[0]
    if len(name) > MAX_GATE_NAME_LENGTH:
        raise _located(
            source,
            number,
            f"gate names are at most {MAX_GATE_NAME_LENGTH} characters long",
        )
    if name in taken:
        raise _located(source, number, f"a gate named {name!r} already exists")
    return Gate(name, _parse_matrix(body, dim, source, number))


def parse_circuit(
    lines: Iterable[str], n_qubits: int, source: str = "<input>"
) -> list[Gate]:
    """Read ``#define`` and ``#circ`` directives; return gates in circuit order."""
    dim = 1 << n_qubits
    gates: list[Gate] = []
    order: list[str] | None = None

    for number, line in enumerate(lines, start=1):
        if line.startswith("#define "):
            taken = {gate.name for gate in gates}
            gates.append(_parse_gate(line, dim, taken, source, number))
        elif order is None and line.startswith("#circ "):
            text = _chop_newline(line[5:].lstrip(" "))
            order = [word for word in text.split(" ") if word]

    if order is None:
        raise _located(source, None, "circuit not found")

    for position, name in enumerate(order):
        match = next(
            (
                index
                for index, gate in enumerate(gates[position:], start=position)
                if gate.name == name
            ),
            None,
        )
        if match is None:
            raise _located(source, None, f"unknown gate {name!r}")
        gates[position], gates[match] = gates[match], gates[position]

    if len(order) != len(gates):
        raise _located(source, None, "one or more gates are not listed in #circ")
    return gates


def _open(path: str | os.PathLike[str]) -> IO[str]:
    try:
        return open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise LoaderError(f"{os.fspath(path)}: {exc.strerror}") from exc


def load_initial_state(path: str | os.PathLike[str]) -> tuple[int, list[complex]]:
    """Load the qubit count and initial state vector from a file."""
    with _open(path) as handle:
        return parse_initial_state(handle, os.fspath(path))


def load_circuit(path: str | os.PathLike[str], n_qubits: int) -> list[Gate]:
    """Load the gates of a circuit from a file, ordered as in ``#circ``."""
    with _open(path) as handle:
        return parse_circuit(handle, n_qubits, os.fspath(path))