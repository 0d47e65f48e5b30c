"""Fourier-Motzkin elimination over the integers, with loop-nest generation."""

from __future__ import annotations

import math
import sys
from typing import TextIO

from fmelim.systems import IntSystem

_INDENT = "    "
_DEFAULT_LOWER = 0
_DEFAULT_UPPER = 10


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of the absolute values of ``a`` and ``b``."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple, zero if either argument is zero."""
    if a == 0 or b == 0:
        return 0
    return (a // gcd(a, b)) * b


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def eliminate_variable_int(system: IntSystem, col: int, out: TextIO | None = None) -> IntSystem:
    """Project out variable ``col`` using integer multipliers.

    Each pair of rows with opposite-signed coefficients is scaled to their
    least common multiple and added. The projection is marked inexact when
    any such pair has coefficients that are not coprime. Notes are written
    to ``out`` (standard output by default).
    """
    if not 0 <= col < system.cols:
        raise IndexError(f"variable x{col} is out of range for {system.cols} variables")
    stream = sys.stdout if out is None else out

    positive: list[int] = []
    negative: list[int] = []
    zero: list[int] = []
    for index, row in enumerate(system.matrix):
        coefficient = row[col]
        if coefficient > 0:
            positive.append(index)
        elif coefficient < 0:
            negative.append(index)
        else:
            zero.append(index)

    matrix = [list(system.matrix[index]) for index in zero]
    rhs = [system.rhs[index] for index in zero]
    exact = list(system.exact)
    any_inexact = False

    for pos_index in positive:
        pos_row = system.matrix[pos_index]
        p = pos_row[col]
        for neg_index in negative:
            neg_row = system.matrix[neg_index]
            q = -neg_row[col]
            multiplier = lcm(p, q)
            m1 = multiplier // p
            m2 = multiplier // q
            matrix.append([m1 * a + m2 * b for a, b in zip(pos_row, neg_row)])
            rhs.append(m1 * system.rhs[pos_index] + m2 * system.rhs[neg_index])
            divisor = gcd(p, q)
            if divisor != 1:
                any_inexact = True
                print(
                    f"  Variable x{col}: Projection is INEXACT "
                    f"(GCD of {p} and {q} is {divisor})",
                    file=stream,
                )

    if any_inexact:
        exact[col] = False
    elif positive and negative:
        print(f"  Variable x{col}: Projection is EXACT", file=stream)

    return IntSystem(matrix, rhs, system.cols, exact)


def _bounds(system: IntSystem) -> tuple[list[int | None], list[int | None]]:
    lower: list[int | None] = [None] * system.cols
    upper: list[int | None] = [None] * system.cols

    for row, rhs in zip(system.matrix, system.rhs):
        nonzero = [j for j, coefficient in enumerate(row) if coefficient != 0]
        if len(nonzero) == 1:
            var = nonzero[0]
            coefficient = row[var]
            if coefficient > 0:
                bound = _trunc_div(rhs, coefficient)
                current = upper[var]
                if current is None or bound < current:
                    upper[var] = bound
            else:
                bound = -_trunc_div(rhs, coefficient)
                current = lower[var]
                if current is None or bound > current:
                    lower[var] = bound
        elif len(nonzero) == 2:
            first, second = nonzero
            a, b = row[first], row[second]
            if abs(a) == 1 and abs(b) == 1:
                if a > 0 and upper[first] is None:
                    upper[first] = rhs
                if b > 0 and upper[second] is None:
                    upper[second] = rhs
    return lower, upper


def generate_loop_nest(system: IntSystem) -> str:
    """Render a nest of for-loops enumerating the system's solution space.

    Bounds come from single-variable rows and from two-variable rows with
    unit coefficients; missing bounds default to ``0`` and ``10``.
    """
    lower, upper = _bounds(system)
    lines = ["", "Loop nest for solution space:", ""]

    for var in range(system.cols):
        low = _DEFAULT_LOWER if lower[var] is None else lower[var]
        high = _DEFAULT_UPPER if upper[var] is None else upper[var]
        lines.append(f"{_INDENT * var}for (int x{var} = {low}; x{var} <= {high}; x{var}++) {{")
        if not system.exact[var]:
            lines.append(f"{_INDENT * (var + 1)}// PS: Projection for x{var} was inexact")

    formats = ", ".join("%d" for _ in range(system.cols))
    names = ", ".join(f"x{var}" for var in range(system.cols))
    lines.append(f'{_INDENT * system.cols}printf("({formats})\\n", {names});')

    for var in reversed(range(system.cols)):
        lines.append(f"{_INDENT * var}}}")

    return "\n".join(lines) + "\n"


def solve_integer_fme(system: IntSystem, out: TextIO | None = None) -> IntSystem:
    """Eliminate every variable, summarise exactness and print a loop nest.

    Everything is written to ``out`` (standard output by default). Returns the
    fully projected system, whose ``exact`` flags hold the summary.
    """
    stream = sys.stdout if out is None else out
    print("Starting integer FME process...\n", file=stream)

    projected = system
    for col in range(system.cols):
        print(f"Eliminating variable x{col}:", file=stream)
        projected = eliminate_variable_int(projected, col, stream)

    print("\nSummary of projections:", file=stream)
    for col in range(system.cols):
        status = "EXACT" if projected.exact[col] else "INEXACT"
        print(f"Variable x{col}: {status} projection", file=stream)

    stream.write(generate_loop_nest(system))
    return projected