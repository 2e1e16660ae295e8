"""Vote scorers.

Provides the collusion-resistant cluster match score, the quadratic voting
score, the group membership index they build on, and the ``Scorer``
protocol both satisfy.
"""

from plural_funding.scoring._common import (
    MissingContributionError,
    MissingMembershipError,
    ScoringError,
    normalize_contributions,
    normalize_groups,
)
from plural_funding.scoring._types import Scorer
from plural_funding.scoring.cluster_match import ClusterMatchScorer, attenuate, cluster_match
from plural_funding.scoring.memberships import common_group, create_group_memberships, remove_duplicate_groups
from plural_funding.scoring.quadratic import QuadraticScorer, quadratic_voting

__all__ = [
    "ClusterMatchScorer",
    "MissingContributionError",
    "MissingMembershipError",
    "QuadraticScorer",
    "Scorer",
    "ScoringError",
    "attenuate",
    "cluster_match",
    "common_group",
    "create_group_memberships",
    "normalize_contributions",
    "normalize_groups",
    "quadratic_voting",
    "remove_duplicate_groups",
]
