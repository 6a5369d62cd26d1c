# qcircsim

qcircsim simulates a quantum circuit on a state vector. It reads two plain-text
files. The first holds the initial state of the qubits. The second holds the gate
matrices and the order in which to apply them. It multiplies each gate matrix into
the state in that order and prints the final state vector.

## Installation

```
pip install .
```

To install with the test dependencies (pytest):

```
pip install ".[test]"
```

## Usage

```
qcircsim <init_file> <circuit_file>
```

On success the final state is printed to standard output and the exit status is 0.
If the number of arguments is wrong, a usage line goes to standard error. If either
file cannot be opened or is malformed, an `Error: ...` message goes to standard
error. The message names the file and, where it can, the line. In both cases the
exit status is 1.

### Initial state file

```
#qubits 1
#init [0.5+i0.5, 0.5-i0.5]
```

- `#qubits n` gives the number of qubits, an integer from 1 to 30.
- `#init [...]` lists exactly 2^n comma-separated complex amplitudes between
  square brackets.
- Only the first `#qubits` and the first `#init` lines are used. Other lines are
  ignored.

### Circuit file

```
#define X [(0, 1) (1, 0)]
#circ X
```

- `#define NAME [(row) (row) ...]` defines a gate with a 2^n × 2^n matrix, where
  n is the qubit count from the initial state file.
  - The rows are given one at a time in parentheses. The first `(` follows the `[`
    directly, and consecutive rows are separated by a single space.
  - Each row holds exactly 2^n comma-separated entries.
  - A gate name is at most 15 characters long and must be unique.
- `#circ NAME NAME ...` lists the gates, separated by spaces, in the order they are
  applied.
  - Each name may appear only once.
  - Every defined gate must appear in the list.
  - Only the first `#circ` line is used.

With the two example files above, the program prints:

```
[0.5-i0.5, 0.5+i0.5]
```

### Complex number syntax

Numbers are written as `a`, `ib`, or `a+ib` / `a-ib`. A bare `i` or `-i` stands for
a unit coefficient. Decimal and scientific notation such as `1e-3` are accepted in
both parts.

### Output

The final state is printed as `[c0, c1, ...]`. Each entry uses the same notation as
the input, with up to ten significant digits:

- `0` for zero.
- The coefficient is left out when the imaginary part has magnitude 1, as in `i`,
  `-i` and `2+i`.

## Library use

```python
from qcircsim.loader import load_initial_state, load_circuit
from qcircsim.cli import simulate
from qcircsim.linalg import format_vector

n_qubits, state = load_initial_state("init.txt")
circuit = load_circuit("circuit.txt", n_qubits)
print(format_vector(simulate(state, circuit)))
```

### `qcircsim.parser`

- `parse_real`, `parse_imag` and `parse_complex` turn strings into `float` or
  `complex` values.
- Each raises `NumberParseError`, a subclass of `ValueError`, when its input is
  invalid.

### `qcircsim.linalg`

- `matvec_mul(matrix, vector)` multiplies a square matrix, given as a list of rows,
  by a vector.
- `format_complex(value)` formats one number in the output notation.
- `format_vector(values)` formats a whole vector in the output notation.

### `qcircsim.loader`

- `load_initial_state(path)` returns the qubit count and the initial state.
- `load_circuit(path, n_qubits)` returns a list of `Gate` objects (`name`,
  `matrix`) in `#circ` order.
- `parse_initial_state(lines, source)` and `parse_circuit(lines, n_qubits, source)`
  do the same work on any iterable of lines.
- All of these raise `LoaderError` for missing or malformed input.

### `qcircsim.cli`

- `simulate(state, circuit)` applies the gates in order.
- `run(init_path, circuit_path)` returns the formatted final state.
- `main(argv)` is the command-line entry point.

## What it does not do

- There are no built-in gates. Every gate is written out as a full 2^n × 2^n matrix.
- Nothing checks that a gate matrix is unitary or that the state is normalised.
- There is no measurement or sampling. The output is the raw final state vector.