"""Reading systems of inequalities from the FME input format and printing them."""

from __future__ import annotations

import math
import re
from os import PathLike
from typing import Callable, Iterator, Union

from fmelim.systems import MAX_COLS, MAX_ROWS, IntSystem, RealSystem

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

Number = Union[int, float]


class SystemFormatError(ValueError):
    """Raised when an input file does not describe a valid system."""


class _Scanner:
    """Reads whitespace-separated numbers, stopping for good at the first failure."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False

    def _take(self, pattern: re.Pattern[str]) -> str | None:
        if self._failed:
            return None
        pos = self._pos
        while pos < len(self._text) and self._text[pos].isspace():
            pos += 1
        match = pattern.match(self._text, pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        return match.group()

    def read_int(self) -> int | None:
        token = self._take(_INT_RE)
        if token is None:
            return None
        value = int(token)
        if not _INT_MIN <= value <= _INT_MAX:
            self._failed = True
            return None
        return value

    def read_float(self) -> float | None:
        token = self._take(_FLOAT_RE)
        if token is None:
            return None
        value = float(token)
        if math.isinf(value):
            self._failed = True
            return None
        return value


def _data_lines(text: str) -> Iterator[str]:
    for line in text.splitlines():
        content = line.lstrip()
        if not content or content.startswith("#"):
            continue
        yield line


def _split_key_value(line: str) -> tuple[str, str] | None:
    if ":" not in line:
        return None
    key, _, value = line.partition(":")
    return key.strip(" \t"), value.strip(" \t")


def _parse_dimensions(value: str) -> tuple[int, int]:
    scanner = _Scanner(value)
    rows = scanner.read_int()
    cols = scanner.read_int()
    if rows is None or cols is None or rows < 0 or cols < 0:
        raise SystemFormatError("Bad dimensions format")
    if rows > MAX_ROWS or cols > MAX_COLS:
        raise SystemFormatError(
            f"Dimensions exceed the supported maximum of {MAX_ROWS}x{MAX_COLS}"
        )
    return rows, cols


def _parse_row(
    payload: str, cols: int, index: int, read: Callable[[_Scanner], Number | None]
) -> tuple[list[Number], Number]:
    scanner = _Scanner(payload)
    coefficients = []
    for _ in range(cols):
        value = read(scanner)
        if value is None:
            raise SystemFormatError(f"Bad coefficient format in row {index}")
        coefficients.append(value)
    bound = read(scanner)
    if bound is None:
        raise SystemFormatError(f"Missing b value in row {index}")
    return coefficients, bound


def _parse(
    text: str, expected_type: str, read: Callable[[_Scanner], Number | None]
) -> tuple[list[list[Number]], list[Number], int]:
    got_type = False
    dimensions: tuple[int, int] | None = None
    matrix: list[list[Number]] = []
    rhs: list[Number] = []

    for line in _data_lines(text):
        pair = _split_key_value(line)
        if pair is None:
            if dimensions is None:
                raise SystemFormatError("Dimensions must be specified before row data")
            payload = line
        else:
            key, value = pair
            if key == "FME_type":
                if value != expected_type:
                    raise SystemFormatError(f"Expected FME_type: {expected_type}")
                got_type = True
                continue
            if key == "dimensions":
                dimensions = _parse_dimensions(value)
                continue
            if not key.startswith("row_"):
                continue
            if dimensions is None:
                raise SystemFormatError("Dimensions must be specified before rows")
            payload = value
        coefficients, bound = _parse_row(payload, dimensions[1], len(rhs), read)
        matrix.append(coefficients)
        rhs.append(bound)

    if not got_type:
        raise SystemFormatError("FME_type not specified")
    if dimensions is None:
        raise SystemFormatError("Dimensions not specified")
    rows, cols = dimensions
    if len(rhs) < rows:
        raise SystemFormatError(
            f"Not enough data rows. Expected {rows}, got {len(rhs)}"
        )
    return matrix[:rows], rhs[:rows], cols


def parse_real_system(text: str) -> RealSystem:
    """Parse a real-valued system from the text of an input file."""
    matrix, rhs, cols = _parse(text, "real", _Scanner.read_float)
    return RealSystem(matrix, rhs, cols)


def parse_int_system(text: str) -> IntSystem:
    """Parse an integer system from the text of an input file."""
    matrix, rhs, cols = _parse(text, "integer", _Scanner.read_int)
    return IntSystem(matrix, rhs, cols)


def _read_text(path: Union[str, PathLike[str]]) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise SystemFormatError(f"Cannot open input file {path}") from exc


def read_real_system(path: Union[str, PathLike[str]]) -> RealSystem:
    """Read a real-valued system from a file."""
    return parse_real_system(_read_text(path))


def read_int_system(path: Union[str, PathLike[str]]) -> IntSystem:
    """Read an integer system from a file."""
    return parse_int_system(_read_text(path))


def _number(value: Number) -> str:
    if isinstance(value, float):
        return "%g" % value
    return str(value)


def format_system(system: Union[RealSystem, IntSystem]) -> str:
    """Render a system as a block of text, one inequality per line."""
    lines = ["System of inequalities:"]
    for coefficients, bound in zip(system.matrix, system.rhs):
        parts = []
        last = len(coefficients) - 1
        for j, coefficient in enumerate(coefficients):
            parts.append(f"{_number(coefficient)}x{j}")
            if j < last:
                parts.append(" + " if coefficients[j + 1] >= 0 else " ")
        lines.append("".join(parts) + f" <= {_number(bound)}")
    return "\n".join(lines) + "\n\n"