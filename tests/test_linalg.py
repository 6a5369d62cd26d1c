import pytest

from qcircsim.linalg import format_complex, format_vector, matvec_mul
from qcircsim.parser import parse_complex


def test_matvec_identity_keeps_vector():
    vector = [1 + 2j, -3j, 0.5, 4]
    identity = [[1 if r == c else 0 for c in range(4)] for r in range(4)]
    assert matvec_mul(identity, vector) == vector


def test_matvec_swap_matrix():
    a, b = 1 + 1j, 2 - 3j
    assert matvec_mul([[0, 1], [1, 0]], [a, b]) == [b, a]


def test_matvec_diagonal_scales_entries():
    assert matvec_mul([[2, 0], [0, 3j]], [1, 1]) == [2, 3j]


def test_matvec_applied_twice_is_involution_for_swap():
    swap = [[0, 1], [1, 0]]
    vector = [0.25 + 0.5j, -0.75]
    assert matvec_mul(swap, matvec_mul(swap, vector)) == vector


def test_matvec_rejects_bad_row_length():
    with pytest.raises(ValueError):
        matvec_mul([[1, 0], [0]], [1, 1])


def test_matvec_rejects_row_count_mismatch():
    with pytest.raises(ValueError):
        matvec_mul([[1, 0]], [1, 1])


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "0"),
        (complex(-0.0, -0.0), "0"),
        (2.5, "2.5"),
        (1j, "i"),
        (-1j, "-i"),
        (complex(0, -2), "-i2"),
        (complex(1, -1), "1-i"),
        (complex(1.5, 2), "1.5+i2"),
        (complex(-4, -0.5), "-4-i0.5"),
    ],
)
def test_format_complex(value, expected):
    assert format_complex(value) == expected


def test_format_imaginary_coefficient_uses_single_precision():
    assert format_complex(complex(0, 1 + 1e-9)) == "i"
    assert format_complex(complex(0, 0.1)) == "i0.1000000015"


@pytest.mark.parametrize(
    "value",
    [0j, 3.0, -0.5, 1j, -1j, complex(2, 0.25), complex(-1.5, -8), complex(0, 0.125)],
)
def test_format_then_parse_round_trip(value):
    assert parse_complex(format_complex(value)) == value


def test_format_vector():
    assert format_vector([1, 1j, complex(0, -2)]) == "[1, i, -i2]"


def test_format_empty_vector():
    assert format_vector([]) == "[]"


def test_format_vector_round_trip():
    values = [complex(1, 2), -3.0, complex(0, -0.5)]
    text = format_vector(values)
    assert text.startswith("[") and text.endswith("]")
    parsed = [parse_complex(part) for part in text[1:-1].split(", ")]
    assert parsed == values