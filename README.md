# fmelim

Fourier-Motzkin elimination for systems of linear inequalities `A @ x <= b`.

fmelim does two kinds of elimination:

- **real** (`fmelim.real`): removes the variables one at a time over the reals.
  After each step it checks for a contradiction, which is a row `0 <= b` with
  `b < 0`, and reports whether the system has a solution.
- **integer** (`fmelim.integer`): removes the variables with integer
  combinations scaled to the least common multiple of the two coefficients. A
  variable's projection is marked inexact when some pair of coefficients is not
  coprime. It then prints a C-style loop nest over the solution space, with
  bounds taken from the original rows that hold one variable, or two variables
  with coefficients of ±1. A bound that cannot be found this way defaults to
  `0` (lower) or `10` (upper).

## Installation

```
pip install .
```

## Input format

```
# comments and blank lines are ignored
FME_type: integer
dimensions: 3 2
row_1: 1 0 5
row_2: -1 0 0
row_3: 0 1 4
```

- `FME_type` is `real` or `integer`, in lower case.
- `dimensions` gives the number of inequalities (m), then the number of
  variables (n). At most 100 inequalities and 20 variables are accepted.
- Each row holds n coefficients and then the right-hand side b. A row may start
  with a `row_<k>:` prefix, or it may be a bare line of numbers. Integer systems
  take whole numbers only. Rows beyond the m-th are ignored.
- Lines with any other `key:` are ignored.

## Command line

```
fme --input=integer_input.txt --output=results.txt
```

The same command is available as `python -m fmelim.cli`.

| Option              | Meaning                           | Default      |
|---------------------|-----------------------------------|--------------|
| `--input=filename`  | Input file                        | `input.txt`  |
| `--output=filename` | File that receives the full trace | `output.txt` |
| `--help`            | Show usage                        |              |

The elimination trace and its result are written to the output file. On
success the console shows only `Results written to <file>`, and the exit status
is 0. An unknown option, a missing or unsupported `FME_type`, or an input file
that cannot be read prints an error and the usage text and exits with status 1.

## Library use

```python
import sys

from fmelim.reader import parse_real_system, parse_int_system, format_system
from fmelim.real import solve_fme
from fmelim.integer import solve_integer_fme, generate_loop_nest

real = parse_real_system("FME_type: real\ndimensions: 2 1\n1 3\n-1 -5\n")
print(format_system(real))
print(solve_fme(real, sys.stdout))   # False: x0 <= 3 and x0 >= 5 conflict

ints = parse_int_system("FME_type: integer\ndimensions: 2 1\n2 6\n-3 -3\n")
projected = solve_integer_fme(ints, sys.stdout)
print(projected.exact)               # per-variable exactness flags
print(generate_loop_nest(ints))
```

- `fmelim.systems` holds `RealSystem` and `IntSystem` (`matrix`, `rhs`,
  `num_vars`, and for integers `exact`), with `rows` and `cols` properties.
- `fmelim.reader` has `parse_real_system`, `parse_int_system`,
  `read_real_system`, `read_int_system` and `format_system`. Input that cannot
  be read raises `fmelim.reader.SystemFormatError`.
- `fmelim.real` has `has_contradiction`, `eliminate_variable` and `solve_fme`.
- `fmelim.integer` has `gcd`, `lcm`, `eliminate_variable_int`,
  `generate_loop_nest` and `solve_integer_fme`.

Functions that report progress write to the `out` stream they are given, or to
standard output.

## What it does not do

The loop nest is produced as text only; fmelim does not compile or run it, and
does not list the integer points of the solution space itself.