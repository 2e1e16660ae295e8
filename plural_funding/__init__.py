"""Vote scoring and funding allocation for participatory budgeting."""

from plural_funding.adapter import FundingComponent, ScoreComponent
from plural_funding.hearts import available_hearts
from plural_funding.models import AllocationResult, EngineSettings, OptionStatistics, QuestionStatistics, VoteRecord
from plural_funding.scoring import ClusterMatchScorer, QuadraticScorer, cluster_match, quadratic_voting
from plural_funding.solver import GreedySolver, KnapsackSolver, allocate_funding

__all__ = [
    "AllocationResult",
    "ClusterMatchScorer",
    "EngineSettings",
    "FundingComponent",
    "GreedySolver",
    "KnapsackSolver",
    "OptionStatistics",
    "QuadraticScorer",
    "QuestionStatistics",
    "ScoreComponent",
    "VoteRecord",
    "allocate_funding",
    "available_hearts",
    "cluster_match",
    "quadratic_voting",
]
