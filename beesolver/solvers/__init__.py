from __future__ import annotations
from typing import List
from .base import BaseSolver, REGISTRY, register

from . import brute_force  # noqa: F401
from . import parallel_brute_force  # noqa: F401
from . import letter_map  # noqa: F401
from . import parallel_letter_map  # noqa: F401


def create_solver(solver_id: str, dictionary, **options) -> BaseSolver:
    """
    Factory: build a registered solver by id for `dictionary`.
    Worker options (max_workers, chunk_size) only reach parallel solvers;
    sequential solvers take none.
    """
    try:
        cls = REGISTRY[solver_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown solver id: {solver_id}. Available: {sorted(REGISTRY.keys())}") from e
    if not cls.parallel:
        return cls(dictionary)
    return cls(dictionary, **options)


def get_solver_ids() -> List[str]:
    """
    Return all registered solver ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
