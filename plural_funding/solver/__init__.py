"""Funding allocation solvers.

Provides allocation rules that turn proposal vote scores and funding
requests into funding amounts, a shared preprocessing pipeline, and the
``FundingSolver`` protocol that all rules satisfy.

Convenience function ``allocate_funding`` wraps preprocessing + the greedy
rule in a single call and returns only the allocation and the remaining
pool.
"""

from typing import Any

from plural_funding.solver._common import (
    empty_funding_result,
    parse_funding_request,
    parse_vote_score,
    preprocess,
)
from plural_funding.solver._types import FundingResult, FundingSolver
from plural_funding.solver.greedy import GreedySolver
from plural_funding.solver.knapsack import KnapsackSolver

__all__ = [
    "FundingResult",
    "FundingSolver",
    "GreedySolver",
    "KnapsackSolver",
    "allocate_funding",
    "empty_funding_result",
    "parse_funding_request",
    "parse_vote_score",
    "preprocess",
]


def allocate_funding(
    total_funding: int,
    max_funding_per_proposal: int,
    proposals: list[dict[str, Any]],
    solver: FundingSolver | None = None,
) -> dict[str, Any]:
    """Preprocess and allocate funding in one call.

    Parameters
    ----------
    total_funding : int
        Pool available for this cycle.
    max_funding_per_proposal : int
        Requests above this amount are never funded.
    proposals : list[dict[str, Any]]
        Each dict must have ``id`` and ``vote_score``; ``funding_request``
        may be missing or ``None``.
    solver : FundingSolver, optional
        Allocation rule. Defaults to :class:`GreedySolver`.

    Returns
    -------
    dict[str, Any]
        ``{"allocated_funding": {id: amount}, "remaining_funding": amount}``.

    Raises
    ------
    ValueError
        If ``total_funding`` is negative or a vote score is not numeric.
    """
    if total_funding < 0:
        raise ValueError("Total funding must be non-negative.")
    processed = preprocess(proposals, max_funding_per_proposal)
    result = (solver or GreedySolver())(processed, total_funding)
    return {
        "allocated_funding": result["allocated_funding"],
        "remaining_funding": result["remaining_funding"],
    }
