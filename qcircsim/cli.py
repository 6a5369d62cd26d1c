"""Command line entry point: apply a circuit to an initial state and print it."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence

from .linalg import format_vector, matvec_mul
from .loader import Gate, LoaderError, load_circuit, load_initial_state

__all__ = ["simulate", "run", "main"]


def simulate(state: Sequence[complex], circuit: Iterable[Gate]) -> list[complex]:
    """Apply the gates of ``circuit`` to ``state`` in order."""
    result = list(state)
    for gate in circuit:
        result = matvec_mul(gate.matrix, result)
    return result


def run(
    init_path: str | os.PathLike[str], circuit_path: str | os.PathLike[str]
) -> str:
    """Load both files, simulate the circuit and return the formatted final state."""
    n_qubits, state = load_initial_state(init_path)
    circuit = load_circuit(circuit_path, n_qubits)
    return format_vector(simulate(state, circuit))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator with ``<init_file> <circuit_file>`` arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Usage: qcircsim <init_file> <circuit_file>", file=sys.stderr)
        return 1
    try:
        output = run(args[0], args[1])
    except LoaderError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())