"""Pipeline components: vote scoring and funding allocation for one question."""

import logging
from dataclasses import asdict
from typing import Any, Protocol

from plural_funding.models import AllocationResult, EngineSettings
from plural_funding.scoring import QuadraticScorer, Scorer
from plural_funding.solver._common import preprocess
from plural_funding.solver._types import FundingSolver
from plural_funding.solver.greedy import GreedySolver
from plural_funding.votes import apply_multipliers, calculate_plural_score, contributions_dictionary

logger = logging.getLogger(__name__)


class PipelineComponent(Protocol):
    """Structural interface for pipeline stage components."""

    def execute(self, event: dict) -> dict:
        """Process event and return result."""
        ...


_FIELD_MAP_IN: dict[str, str] = {
    "voteScore": "vote_score",
    "fundingRequest": "funding_request",
    "optionId": "id",
}


def _to_solver_format(proposal: dict[str, Any]) -> dict[str, Any]:
    """Map a persistence-layer proposal dict to solver field names.

    Parameters
    ----------
    proposal : dict[str, Any]
        Proposal dict with persistence-layer field names.

    Returns
    -------
    dict[str, Any]
        Proposal dict with solver field names.
    """
    return {_FIELD_MAP_IN.get(key, key): value for key, value in proposal.items()}


class ScoreComponent(PipelineComponent):
    """Score every option of a question.

    Applies vote multipliers and zero-vote filtering, then computes the
    plurality score with the configured scorer and the quadratic score
    alongside it for reporting.

    Parameters
    ----------
    scorer : Scorer, optional
        Plurality rule. Defaults to cluster match.
    """

    def __init__(self, scorer: Scorer | None = None) -> None:
        self._scorer = scorer
        self._quadratic = QuadraticScorer()

    def execute(self, event: dict) -> dict:
        """Return plurality and quadratic scores per option.

        Parameters
        ----------
        event : dict
            Must contain ``groups`` (group id to member ids) and ``votes``
            (option id to voter id to hearts). May contain ``multipliers``
            (voter id to multiplier).

        Returns
        -------
        dict
            ``plurality_scores`` and ``quadratic_scores``, each keyed by
            option id.
        """
        groups = event["groups"]
        multipliers = event.get("multipliers") or {}

        plurality_scores: dict[str, float] = {}
        quadratic_scores: dict[str, float] = {}
        for option_id, option_votes in event["votes"].items():
            contributions = contributions_dictionary(apply_multipliers(option_votes, multipliers))
            plurality_scores[option_id] = calculate_plural_score(groups, contributions, self._scorer)
            quadratic_scores[option_id] = self._quadratic(groups, option_votes)

        logger.info("Scored %d options", len(plurality_scores))
        return {"plurality_scores": plurality_scores, "quadratic_scores": quadratic_scores}


class FundingComponent(PipelineComponent):
    """Allocate the funding pool via a pluggable allocation rule.

    Handles field mapping and preprocessing (request parsing, per-proposal
    cap), then delegates allocation to the configured solver.

    Parameters
    ----------
    solver : FundingSolver, optional
        Allocation rule to use. Defaults to :class:`GreedySolver`.
    settings : EngineSettings, optional
        Pool and cap used when the event does not carry them.
    """

    def __init__(
        self,
        solver: FundingSolver | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self._solver = solver or GreedySolver()
        self.settings = settings or EngineSettings()

    def execute(self, event: dict) -> dict:
        """Run allocation and return an ``AllocationResult`` dict with solver detail.

        Parameters
        ----------
        event : dict
            Must contain ``proposals`` (list of dicts with ``id``,
            ``voteScore`` and ``fundingRequest``). May override
            ``total_funding`` and ``max_funding``.

        Returns
        -------
        dict
            Serialized ``AllocationResult`` with ``allocated_funding`` and
            ``remaining_funding``, plus ``solver_detail``.
        """
        total_funding = event.get("total_funding", self.settings.total_funding)
        max_funding = event.get("max_funding", self.settings.max_funding_per_proposal)

        proposals = [_to_solver_format(p) for p in event["proposals"]]
        processed = preprocess(proposals, max_funding)
        solver_result = self._solver(processed, total_funding)

        status = solver_result["status"]
        if status != "Optimal":
            logger.warning("Solver returned non-optimal status: %s, nothing allocated", status)
        else:
            logger.info(
                "Allocation complete: status=%s, allocated=%d, remaining=%d",
                status,
                solver_result["total_allocated"],
                solver_result["remaining_funding"],
            )

        result = asdict(
            AllocationResult(
                allocated_funding=solver_result["allocated_funding"],
                remaining_funding=solver_result["remaining_funding"],
            )
        )
        result["solver_detail"] = {
            "rule": solver_result["rule"],
            "status": status,
            "objective_value": solver_result["objective_value"],
            "detail": solver_result["detail"],
        }
        return result
