import io

import pytest

from fmelim.integer import (
    eliminate_variable_int,
    gcd,
    generate_loop_nest,
    lcm,
    solve_integer_fme,
)
from fmelim.systems import IntSystem


@pytest.mark.parametrize("a,b", [(12, 18), (-12, 18), (7, 13), (100, 75), (9, -3)])
def test_gcd_divides_both_and_ignores_sign(a, b):
    g = gcd(a, b)
    assert g > 0
    assert a % g == 0 and b % g == 0
    assert gcd(-a, -b) == g
    assert gcd(b, a) == g


def test_gcd_with_zero_is_absolute_value():
    assert gcd(-15, 0) == 15
    assert gcd(0, 8) == 8


@pytest.mark.parametrize("a,b", [(4, 6), (3, 5), (12, 18), (7, 7)])
def test_lcm_is_common_multiple(a, b):
    m = lcm(a, b)
    assert m % a == 0 and m % b == 0
    assert m * gcd(a, b) == a * b


def test_lcm_with_zero():
    assert lcm(0, 7) == 0
    assert lcm(7, 0) == 0


def test_elimination_shape_and_zero_column():
    matrix = [[1, 2], [3, -1], [-2, 1], [-1, 0], [0, 5]]
    system = IntSystem(matrix, [1, 2, 3, 4, 5], 2)
    positive = sum(1 for row in matrix if row[0] > 0)
    negative = sum(1 for row in matrix if row[0] < 0)
    zero = sum(1 for row in matrix if row[0] == 0)
    result = eliminate_variable_int(system, 0, io.StringIO())
    assert result.rows == positive * negative + zero
    assert all(row[0] == 0 for row in result.matrix)
    assert result.matrix[0] == [0, 5]
    assert result.rhs[0] == 5


def test_unit_combination():
    system = IntSystem([[1, 1], [-1, 2]], [4, 1], 2)
    result = eliminate_variable_int(system, 0, io.StringIO())
    assert result.matrix == [[0, 3]]
    assert result.rhs == [5]


def test_exact_projection_message():
    system = IntSystem([[2, 1], [-3, 1]], [3, 6], 2)
    out = io.StringIO()
    result = eliminate_variable_int(system, 0, out)
    assert out.getvalue() == "  Variable x0: Projection is EXACT\n"
    assert result.exact == [True, True]


def test_inexact_projection_marks_variable():
    system = IntSystem([[2, 0], [-2, 1]], [4, 0], 2)
    out = io.StringIO()
    result = eliminate_variable_int(system, 0, out)
    assert out.getvalue() == "  Variable x0: Projection is INEXACT (GCD of 2 and 2 is 2)\n"
    assert result.exact == [False, True]
    assert system.exact == [True, True]


def test_no_message_without_opposite_pairs():
    system = IntSystem([[1, 0], [2, 1]], [1, 1], 2)
    out = io.StringIO()
    result = eliminate_variable_int(system, 0, out)
    assert out.getvalue() == ""
    assert result.rows == 0


def test_column_out_of_range_raises():
    with pytest.raises(IndexError):
        eliminate_variable_int(IntSystem([[1]], [1], 1), 3, io.StringIO())


def test_loop_nest_defaults_and_layout():
    nest = generate_loop_nest(IntSystem([], [], 2))
    assert nest == (
        "\nLoop nest for solution space:\n\n"
        "for (int x0 = 0; x0 <= 10; x0++) {\n"
        "    for (int x1 = 0; x1 <= 10; x1++) {\n"
        '        printf("(%d, %d)\\n", x0, x1);\n'
        "    }\n"
        "}\n"
    )


def test_loop_nest_single_variable_bounds():
    system = IntSystem([[1, 0], [-1, 0], [0, 1]], [5, 7, 8], 2)
    nest = generate_loop_nest(system)
    assert "for (int x0 = 7; x0 <= 5; x0++) {" in nest
    assert "    for (int x1 = 0; x1 <= 8; x1++) {" in nest


def test_loop_nest_upper_bound_truncates_toward_zero():
    nest = generate_loop_nest(IntSystem([[2]], [7], 1))
    assert "for (int x0 = 0; x0 <= 3; x0++) {" in nest
    nest = generate_loop_nest(IntSystem([[2]], [-7], 1))
    assert "for (int x0 = 0; x0 <= -3; x0++) {" in nest


def test_loop_nest_two_variable_unit_row():
    nest = generate_loop_nest(IntSystem([[1, 1]], [8], 2))
    assert "for (int x0 = 0; x0 <= 8; x0++) {" in nest
    assert "for (int x1 = 0; x1 <= 8; x1++) {" in nest


def test_loop_nest_marks_inexact_variable():
    nest = generate_loop_nest(IntSystem([], [], 2, [True, False]))
    assert "        // PS: Projection for x1 was inexact\n" in nest
    assert "Projection for x0" not in nest


def test_solve_integer_fme_report():
    system = IntSystem([[2, 0], [-2, 1], [0, -1]], [4, 0, 0], 2)
    out = io.StringIO()
    projected = solve_integer_fme(system, out)
    text = out.getvalue()
    assert text.startswith("Starting integer FME process...\n\nEliminating variable x0:\n")
    assert "Eliminating variable x1:\n" in text
    assert "\nSummary of projections:\n" in text
    assert "Variable x0: INEXACT projection\n" in text
    assert "Variable x1: EXACT projection\n" in text
    assert projected.exact == [False, True]
    assert text.endswith(generate_loop_nest(system))
    assert "// PS:" not in text


def test_solve_integer_fme_defaults_to_stdout(capsys):
    solve_integer_fme(IntSystem([[1]], [3], 1))
    assert "Variable x0: EXACT projection" in capsys.readouterr().out