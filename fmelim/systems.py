"""Systems of linear inequalities ``matrix @ x <= rhs``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MAX_ROWS = 100
MAX_COLS = 20


def _check_shape(matrix: Sequence[Sequence[object]], rhs: Sequence[object], num_vars: int) -> None:
    if num_vars < 0:
        raise ValueError(f"number of variables must not be negative, got {num_vars}")
    if len(matrix) != len(rhs):
        raise ValueError(
            f"matrix has {len(matrix)} rows but right-hand side has {len(rhs)} values"
        )
    for index, row in enumerate(matrix):
        if len(row) != num_vars:
            raise ValueError(
                f"row {index} has {len(row)} coefficients, expected {num_vars}"
            )


@dataclass
class RealSystem:
    """Inequalities over the reals: each row ``sum(a[j] * x[j]) <= b``."""

    matrix: list[list[float]]
    rhs: list[float]
    num_vars: int

    def __post_init__(self) -> None:
        _check_shape(self.matrix, self.rhs, self.num_vars)

    @property
    def rows(self) -> int:
        """Number of inequalities."""
        return len(self.rhs)

    @property
    def cols(self) -> int:
        """Number of variables."""
        return self.num_vars


@dataclass
class IntSystem:
    """Inequalities over the integers, tracking per-variable projection exactness."""

    matrix: list[list[int]]
    rhs: list[int]
    num_vars: int
    exact: list[bool] | None = None

    def __post_init__(self) -> None:
        _check_shape(self.matrix, self.rhs, self.num_vars)
        if self.exact is None:
            self.exact = [True] * self.num_vars
        elif len(self.exact) != self.num_vars:
            raise ValueError(
                f"exactness flags cover {len(self.exact)} variables, expected {self.num_vars}"
            )

    @property
    def rows(self) -> int:
        """Number of inequalities."""
        return len(self.rhs)

    @property
    def cols(self) -> int:
        """Number of variables."""
        return self.num_vars