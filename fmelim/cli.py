"""Command-line entry point: read a system, run elimination, write a report."""

from __future__ import annotations

import sys
from os import PathLike
from typing import Sequence, Union

from fmelim.integer import solve_integer_fme
from fmelim.reader import SystemFormatError, format_system, read_int_system, read_real_system
from fmelim.real import solve_fme

DEFAULT_INPUT = "input.txt"
DEFAULT_OUTPUT = "output.txt"
_RULE = "=" * 67


def get_fme_type(path: Union[str, PathLike[str]]) -> str | None:
    """Return the value of the ``FME_type`` key in a file, or None if absent.

    Lines that are empty or start with ``#`` are skipped. An unreadable file
    counts as having no type.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.rstrip("\n")
                if not line or line.startswith("#"):
                    continue
                if ":" not in line:
                    continue
                key, _, value = line.partition(":")
                if key.strip(" \t") == "FME_type":
                    return value.strip(" \t")
    except OSError:
        return None
    return None


def usage() -> str:
    """Return the help text."""
    lines = [
        _RULE,
        "Usage: ./fme [options]",
        "Options:",
        f"  --input=filename        Input file (default: {DEFAULT_INPUT})",
        f"  --output=filename       Output file (default: {DEFAULT_OUTPUT})",
        "  --help                  Display this message for help",
        "",
        "input file format:",
        "  FME_type: real/integer  Specify FME type",
        "  dimensions: mXn         Number of inequalities (m) and variables (n)",
        "  row_1: a11 a12 ... a1n b1",
        "  row_2: a21 a22 ... a2n b2",
        "",
        "Example: ./fme --input=integer_input.txt --output=results.txt",
        _RULE,
    ]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_file = DEFAULT_INPUT
    output_file = DEFAULT_OUTPUT

    for arg in args:
        if arg == "--help":
            sys.stdout.write(usage())
            return 0
        if arg.startswith("--input="):
            input_file = arg[len("--input="):]
        elif arg.startswith("--output="):
            output_file = arg[len("--output="):]
        else:
            print(f"Gee! I don't know this option: {arg}")
            print("Can you input an option which is present in my configuration?")
            sys.stdout.write(usage())
            return 1

    fme_type = get_fme_type(input_file)
    if not fme_type:
        print("Error: write something in the fme_type, no!")
        sys.stdout.write(usage())
        return 1

    fme_type = fme_type.lower()
    if fme_type not in ("real", "integer"):
        print(f"Error: FME type must be 'real' or 'integer', got '{fme_type}'")
        sys.stdout.write(usage())
        return 1

    try:
        out = open(output_file, "w", encoding="utf-8")
    except OSError:
        print(f"Error: Cannot open output file {output_file}")
        return 1

    with out:
        try:
            if fme_type == "real":
                real_system = read_real_system(input_file)
            else:
                int_system = read_int_system(input_file)
        except SystemFormatError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            print("Error reading input file.")
            return 1

        if fme_type == "real":
            out.write(
                f"Processing real-valued system with {real_system.rows} inequalities "
                f"and {real_system.cols} variables\n\n"
            )
            out.write(format_system(real_system))
            feasible = solve_fme(real_system, out)
            out.write(f"\nReal-valued system has solution: {'YES' if feasible else 'NO'}\n")
        else:
            out.write(
                f"Processing integer valued system with {int_system.rows} inequalities "
                f"and {int_system.cols} variables\n\n"
            )
            out.write(format_system(int_system))
            solve_integer_fme(int_system, out)

    print(f"Results written to {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())