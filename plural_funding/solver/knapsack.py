"""Exact score-maximizing allocation rule.

Selects the set of fully-funded proposals that maximizes their summed vote
score within the pool, as a binary knapsack solved with PuLP and CBC.
Unlike the greedy rule it may pass over a high-scoring expensive proposal
when two cheaper ones together score more.
"""

import logging
from typing import Any

import pulp as lp

from plural_funding.solver._common import empty_funding_result
from plural_funding.solver._types import FundingResult

logger = logging.getLogger(__name__)


class KnapsackSolver:
    """Binary knapsack over proposal vote scores.

    Receives **preprocessed** proposals. Capped-out proposals and proposals
    without a request are never selected.
    """

    rule = "knapsack"

    def __call__(
        self,
        proposals: list[dict[str, Any]],
        total_funding: int,
    ) -> FundingResult:
        """Solve the score-maximizing allocation problem.

        Parameters
        ----------
        proposals : list[dict[str, Any]]
            Preprocessed proposals with ``id``, ``vote_score`` and
            ``funding_request``.
        total_funding : int
            Pool to distribute.

        Returns
        -------
        FundingResult
        """
        allocated = {p["id"]: 0 for p in proposals}
        candidates = [
            idx for idx, p in enumerate(proposals) if p.get("eligible", True) and p["funding_request"] > 0
        ]
        if not candidates or total_funding <= 0:
            return {
                **empty_funding_result("Optimal", self.rule, proposals, total_funding),
                "objective_value": 0.0,
                "detail": {"selected": []},
            }

        logger.info("Formulating knapsack allocation problem over %d proposals", len(candidates))
        prob = lp.LpProblem("Score_Maximizing_Allocation", lp.LpMaximize)
        x = lp.LpVariable.dicts("Fund", candidates, 0, 1, lp.LpBinary)
        prob += lp.lpSum(x[idx] * proposals[idx]["vote_score"] for idx in candidates)
        prob += lp.lpSum(x[idx] * proposals[idx]["funding_request"] for idx in candidates) <= total_funding

        logger.info("Solving the knapsack allocation problem")
        try:
            prob.solve(lp.PULP_CBC_CMD(msg=False))
        except Exception:
            logger.exception("Error solving knapsack allocation problem")
            return empty_funding_result("Error solving main problem", self.rule, proposals, total_funding)

        status = lp.LpStatus[prob.status]
        if prob.status != lp.LpStatusOptimal:
            logger.warning("Knapsack allocation: status = %s", status)
            return empty_funding_result(status, self.rule, proposals, total_funding)

        selected: list[str] = []
        for idx in candidates:
            if x[idx].varValue > 0.5:
                proposal = proposals[idx]
                allocated[proposal["id"]] = proposal["funding_request"]
                selected.append(proposal["id"])

        total_allocated = sum(allocated.values())
        return {
            "status": status,
            "allocated_funding": allocated,
            "remaining_funding": total_funding - total_allocated,
            "total_allocated": total_allocated,
            "objective_value": lp.value(prob.objective),
            "rule": self.rule,
            "detail": {"selected": selected},
        }
