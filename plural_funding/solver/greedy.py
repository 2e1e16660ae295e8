"""Greedy score-ranked allocation rule.

Walks proposals from the highest vote score down and funds each request in
full while it fits in the remaining pool. A request that does not fit gets
nothing, and a cheaper proposal further down the ranking may still be
funded.
"""

import logging
from typing import Any

from plural_funding.solver._types import FundingResult

logger = logging.getLogger(__name__)


class GreedySolver:
    """Greedy, capped, all-or-nothing allocation rule.

    Receives **preprocessed** proposals (scores parsed, requests parsed and
    capped by the shared preprocessing step). Proposals with equal scores
    are visited in input order.
    """

    rule = "greedy"

    def __call__(
        self,
        proposals: list[dict[str, Any]],
        total_funding: int,
    ) -> FundingResult:
        """Allocate the pool across proposals.

        Parameters
        ----------
        proposals : list[dict[str, Any]]
            Preprocessed proposals with ``id``, ``vote_score`` (float) and
            ``funding_request`` (int).
        total_funding : int
            Pool to distribute.

        Returns
        -------
        FundingResult
        """
        allocated = {p["id"]: 0 for p in proposals}
        ranking = sorted(proposals, key=lambda p: p["vote_score"], reverse=True)

        remaining = total_funding
        skipped: list[str] = []
        objective_value = 0.0
        for proposal in ranking:
            if remaining <= 0:
                break
            request = proposal["funding_request"]
            if request <= remaining:
                allocated[proposal["id"]] = request
                remaining -= request
                if request > 0:
                    objective_value += proposal["vote_score"]
            else:
                skipped.append(proposal["id"])

        logger.info(
            "Greedy allocation: funded=%d proposals, remaining=%d",
            sum(1 for amount in allocated.values() if amount > 0),
            remaining,
        )

        return {
            "status": "Optimal",
            "allocated_funding": allocated,
            "remaining_funding": remaining,
            "total_allocated": total_funding - remaining,
            "objective_value": objective_value,
            "rule": self.rule,
            "detail": {
                "ranking": [p["id"] for p in ranking],
                "skipped": skipped,
                "excluded": [p["id"] for p in proposals if not p.get("eligible", True)],
            },
        }
