"""Parsing of real, imaginary and complex numbers in the ``a+ib`` notation."""

from __future__ import annotations

import math
import re
import sys

__all__ = ["NumberParseError", "parse_real", "parse_imag", "parse_complex"]

_C_WHITESPACE = " \t\n\v\f\r"

_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_HEXADECIMAL = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
)
_SPECIAL = re.compile(
    r"(?P<sign>[+-]?)(?:(?P<inf>inf(?:inity)?)|(?P<nan>nan)(?:\([0-9A-Za-z_]*\))?)",
    re.IGNORECASE,
)


class NumberParseError(ValueError):
    """Raised when a string does not hold a number in the expected form."""


def _out_of_range(value: float, mantissa: str) -> bool:
    if math.isinf(value):
        return True
    has_nonzero_digit = any(ch in "123456789abcdefABCDEF" for ch in mantissa)
    return has_nonzero_digit and abs(value) < sys.float_info.min


def parse_real(text: str) -> float:
    """Parse a real number; the whole string must be consumed."""
    if not text:
        raise NumberParseError("empty number")
    body = text.lstrip(_C_WHITESPACE)

    special = _SPECIAL.fullmatch(body)
    if special:
        sign = -1.0 if special.group("sign") == "-" else 1.0
        base = math.inf if special.group("inf") else math.nan
        return math.copysign(base, sign)

    if _HEXADECIMAL.fullmatch(body):
        mantissa = re.split(r"[pP]", body)[0][2:].lstrip("+-")
        try:
            value = float.fromhex(body)
        except OverflowError as exc:
            raise NumberParseError(f"number out of range: {text!r}") from exc
    elif _DECIMAL.fullmatch(body):
        mantissa = re.split(r"[eE]", body)[0]
        value = float(body)
    else:
        raise NumberParseError(f"not a real number: {text!r}")

    if _out_of_range(value, mantissa):
        raise NumberParseError(f"number out of range: {text!r}")
    return value


def parse_imag(text: str) -> complex:
    """Parse a purely imaginary number written as ``ib``, ``-ib`` or ``i``."""
    if not text:
        raise NumberParseError("empty number")

    sign = 1.0
    rest = text
    if rest[0] == "+":
        rest = rest[1:]
    elif rest[0] == "-":
        sign = -1.0
        rest = rest[1:]

    if not rest.startswith("i"):
        raise NumberParseError(f"not an imaginary number: {text!r}")
    rest = rest[1:]

    if not rest:
        return complex(0.0, sign)
    return complex(0.0, parse_real(rest) * sign)


def parse_complex(text: str) -> complex:
    """Parse a number written as ``a``, ``ib`` or ``a+ib``."""
    if not text:
        raise NumberParseError("empty number")

    if "i" not in text:
        return complex(parse_real(text), 0.0)

    split_index = 0
    for index, (previous, current) in enumerate(zip(text, text[1:]), start=1):
        if current in "+-" and previous not in "eE":
            split_index = index

    if split_index == 0:
        return parse_imag(text)

    real = parse_real(text[:split_index])
    imaginary = parse_imag(text[split_index:]).imag
    return complex(real, imaginary)