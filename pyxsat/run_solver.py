# *************************************************************************
# SPDX-License-Identifier: Apache-2.0
# Licensed under the Apache License, Version 2.0.
# See the LICENSE file in the project root for the full license text.
# *************************************************************************
"""
Solve a DIMACS CNF (with optional XOR lines) from the command line.

Exit status follows the SAT competition convention: 10 SAT, 20 UNSAT, 0 otherwise.
"""
import sys
import time
import psutil
import argparse

from pyxsat.dimacs import load_dimacs
from pyxsat.exceptions import IndeterminateResult
from pyxsat.solver import Solver


def print_stats(stats, start_time):
    cpu_time = time.process_time() - start_time

    process = psutil.Process()
    mem_used = process.memory_info().rss / (1024 * 1024)  # in MB

    # Avoid division by zero:
    conflicts_per_sec = stats["conflicts"] / cpu_time if cpu_time > 0 else 0
    decisions_per_sec = stats["decisions"] / cpu_time if cpu_time > 0 else 0
    propagations_per_sec = stats["propagations"] / cpu_time if cpu_time > 0 else 0

    # If max_literals == tot_literals, then no literals were deleted.
    max_literals = stats["max_literals"]
    deleted_percent = ((max_literals - stats["tot_literals"]) * 100 / max_literals) if max_literals > 0 else 0.0

    print("restarts              : {}".format(stats["restarts"]))
    print("conflicts             : {:<14} ({:.0f} /sec)".format(stats["conflicts"], conflicts_per_sec))
    print("decisions             : {:<14} ({:.0f} /sec)".format(stats["decisions"], decisions_per_sec))
    print("propagations          : {:<14} ({:.0f} /sec)".format(stats["propagations"], propagations_per_sec))
    print("conflict literals     : {:<14} ({:.2f} % deleted)".format(stats["tot_literals"], deleted_percent))
    print("learnt clauses        : {}".format(stats["learnts"]))
    print("Memory used           : {:.2f} MB".format(mem_used))
    print("CPU time              : {:.3f} s".format(cpu_time))


def format_model(solution):
    """Raw solution tuple -> DIMACS 'v' line."""
    return "v " + " ".join(str(lit) for lit in solution) + " 0"


def write_result(output_file, status_line, models=()):
    if not output_file:
        return
    lines = [status_line] + [format_model(model) for model in models]
    if output_file == '-':
        print("\n".join(lines))
        return
    with open(output_file, 'w') as rf:
        rf.write("\n".join(lines) + "\n")


def parse_selected(text, n_vars):
    if not text:
        return list(range(1, n_vars + 1))
    return [int(token) for token in text.replace(',', ' ').split()]


def build_parser():
    parser = argparse.ArgumentParser(
        description="Solve a DIMACS CNF with the pyxsat incremental solver."
    )
    parser.add_argument(
        "-i", "--input_file", required=True,
        help="Path to input CNF file (.cnf or .cnf.gz)."
    )
    parser.add_argument(
        "-o", "--output_file", default=None,
        help="Path to write result (SAT/UNSAT + model). Use '-' for stdout."
    )
    parser.add_argument("--verbose", type=int, default=0, help="Verbosity level.")
    parser.add_argument("--time_limit", type=float, default=0.0, help="Seconds per solve call, 0 = unlimited.")
    parser.add_argument("--confl_limit", type=int, default=0, help="Conflicts per solve call, 0 = unlimited.")
    parser.add_argument("--threads", type=int, default=1, help="Number of threads.")
    parser.add_argument(
        "--max_solutions", type=int, default=1,
        help="Enumerate up to this many solutions (banning each one found)."
    )
    parser.add_argument(
        "--selected", default=None,
        help="Comma separated variables the enumerated solutions must differ on (default: all)."
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    start_time = time.process_time()

    S = Solver(verbose=args.verbose, time_limit=args.time_limit,
               confl_limit=args.confl_limit, threads=args.threads)
    load_dimacs(args.input_file, S)

    if args.max_solutions > 1:
        selected = parse_selected(args.selected, S.nb_vars())
        try:
            models = S.msolve_selected(args.max_solutions, selected, raw=True)
        except IndeterminateResult as exc:
            print_stats(S.get_stats(), start_time)
            print("INDETERMINATE ({})".format(exc))
            write_result(args.output_file, "INDET")
            return 0
        print_stats(S.get_stats(), start_time)
        if models:
            print("SATISFIABLE ({} solutions)".format(len(models)))
            write_result(args.output_file, "SAT", models)
            return 10
        print("UNSATISFIABLE")
        write_result(args.output_file, "UNSAT")
        return 20

    sat, solution = S.solve()
    print_stats(S.get_stats(), start_time)

    if sat is True:
        print("SATISFIABLE")
        raw = tuple(i if value else -i for i, value in enumerate(solution) if value is not None)
        write_result(args.output_file, "SAT", [raw])
        return 10
    elif sat is False:
        print("UNSATISFIABLE")
        write_result(args.output_file, "UNSAT")
        return 20
    else:
        print("INDETERMINATE")
        write_result(args.output_file, "INDET")
        return 0


if __name__ == "__main__":
    sys.exit(main())
