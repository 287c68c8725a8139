from .core import solve_puzzle, time_solver, run_solvers, results_agree
from .io import format_result, write_csv, write_manifest

__all__ = [
    "solve_puzzle", "time_solver", "run_solvers", "results_agree",
    "format_result", "write_csv", "write_manifest",
]
