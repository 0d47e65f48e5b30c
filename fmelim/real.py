"""Fourier-Motzkin elimination over the reals."""

from __future__ import annotations

import sys
from typing import TextIO

from fmelim.systems import RealSystem


def _check_column(system: RealSystem, col: int) -> None:
    if not 0 <= col < system.cols:
        raise IndexError(f"variable x{col} is out of range for {system.cols} variables")


def has_contradiction(system: RealSystem) -> bool:
    """Return True if some row reads ``0 <= b`` with ``b`` negative."""
    return any(
        all(coefficient == 0.0 for coefficient in row) and bound < 0.0
        for row, bound in zip(system.matrix, system.rhs)
    )


def eliminate_variable(system: RealSystem, col: int) -> RealSystem:
    """Project out variable ``col``, returning a new system.

    Rows where the variable is absent are kept first; then every pair of a
    row with a positive and a row with a negative coefficient is combined
    after scaling both so the variable's coefficient becomes +1 and -1.
    """
    _check_column(system, col)
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

    for pos_index in positive:
        pos_row = system.matrix[pos_index]
        pos_coeff = pos_row[col]
        for neg_index in negative:
            neg_row = system.matrix[neg_index]
            neg_coeff = -neg_row[col]
            matrix.append(
                [p / pos_coeff + n / neg_coeff for p, n in zip(pos_row, neg_row)]
            )
            rhs.append(system.rhs[pos_index] / pos_coeff + system.rhs[neg_index] / neg_coeff)

    return RealSystem(matrix, rhs, system.cols)


def solve_fme(system: RealSystem, out: TextIO | None = None) -> bool:
    """Eliminate every variable in turn and report whether the system is feasible.

    Progress is written to ``out`` (standard output by default).
    """
    stream = sys.stdout if out is None else out
    print("Starting real-valued FME process...\n", file=stream)
    for col in range(system.cols):
        print(f"Eliminating variable x{col}", file=stream)
        system = eliminate_variable(system, col)
        if has_contradiction(system):
            print(f"Contradiction found after eliminating x{col}", file=stream)
            return False
    return True