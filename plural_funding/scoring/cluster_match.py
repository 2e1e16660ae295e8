"""Connection-oriented cluster match.

Computes a plurality score for one proposal from the contributions of its
voters and the groups they belong to. Votes from an agent who is in, or
shares a group with a member of, the group being compared against are
square-root attenuated, so coordinated blocs gain less than independent
supporters.
"""

import logging
import math
from collections.abc import Hashable, Mapping, Sequence

from plural_funding.scoring._common import (
    ContributionsInput,
    GroupsInput,
    MissingContributionError,
    MissingMembershipError,
    normalize_contributions,
    normalize_groups,
)
from plural_funding.scoring.memberships import common_group, create_group_memberships, remove_duplicate_groups

logger = logging.getLogger(__name__)


def _contribution(agent: Hashable, contributions: Mapping[Hashable, float]) -> float:
    value = contributions.get(agent)
    if value is None:
        raise MissingContributionError(agent)
    amount = float(value)
    if amount < 0:
        raise ValueError(f"Contribution for agent {agent!r} must be non-negative.")
    return amount


def _membership_count(agent: Hashable, memberships: Mapping[Hashable, Sequence[Hashable]]) -> int:
    groups = memberships.get(agent)
    if not groups:
        raise MissingMembershipError(agent)
    return len(groups)


def attenuate(
    agent: Hashable,
    other_group: Sequence[Hashable],
    memberships: Mapping[Hashable, Sequence[Hashable]],
    contributions: Mapping[Hashable, float],
) -> float:
    """Return the effective contribution of ``agent`` against ``other_group``.

    Parameters
    ----------
    agent : Hashable
        Voter whose contribution is weighed.
    other_group : Sequence[Hashable]
        Members of the group being compared against.
    memberships : Mapping[Hashable, Sequence[Hashable]]
        Voter id to group ids.
    contributions : Mapping[Hashable, float]
        Voter id to vote amount.

    Returns
    -------
    float
        ``sqrt(contribution)`` if ``agent`` belongs to ``other_group`` or
        shares a group with any of its members, else the raw contribution.

    Raises
    ------
    MissingContributionError
        If ``agent`` has no contribution.
    MissingMembershipError
        If ``agent`` or a compared member has no memberships.
    ValueError
        If the contribution is negative.
    """
    contribution = _contribution(agent, contributions)
    _membership_count(agent, memberships)

    if agent in other_group or any(common_group(agent, other, memberships) for other in other_group):
        return math.sqrt(contribution)
    return contribution


def _interaction_sum(
    group: Sequence[Hashable],
    other_group: Sequence[Hashable],
    memberships: Mapping[Hashable, Sequence[Hashable]],
    contributions: Mapping[Hashable, float],
) -> float:
    total = 0.0
    for agent in group:
        total += attenuate(agent, other_group, memberships, contributions) / _membership_count(agent, memberships)
    return total


def cluster_match(groups: GroupsInput, contributions: ContributionsInput) -> float:
    """Calculate the plurality score according to connection-oriented cluster match.

    Parameters
    ----------
    groups : Mapping or Sequence
        Group id to members (``{"g0": ["u0", "u1"]}``), or a list of member
        lists whose positions serve as group ids.
    contributions : Mapping or Sequence
        Voter id to vote amount, or a list indexed by voter.

    Returns
    -------
    float
        Non-negative plurality score.

    Raises
    ------
    MissingContributionError
        If a group member has no contribution.
    MissingMembershipError
        If a voter being compared has no memberships.
    ValueError
        If a contribution is negative.
    """
    unique_groups = remove_duplicate_groups(normalize_groups(groups))
    amounts = normalize_contributions(contributions)
    memberships = create_group_memberships(unique_groups)

    result = 0.0
    for members in unique_groups.values():
        for agent in members:
            result += _contribution(agent, amounts) / _membership_count(agent, memberships)

    for group_id, group in unique_groups.items():
        for other_id, other_group in unique_groups.items():
            if group_id == other_id:
                continue
            term1 = math.sqrt(_interaction_sum(group, other_group, memberships, amounts))
            term2 = math.sqrt(_interaction_sum(other_group, group, memberships, amounts))
            result += term1 * term2

    score = math.sqrt(result)
    logger.debug("Cluster match over %d groups: %.6f", len(unique_groups), score)
    return score


class ClusterMatchScorer:
    """Collusion-resistant plurality scorer.

    Callable wrapper around :func:`cluster_match` satisfying the
    :class:`~plural_funding.scoring._types.Scorer` protocol. Missing
    contributions or memberships abort scoring.
    """

    rule = "cluster_match"

    def __call__(self, groups: GroupsInput, contributions: ContributionsInput) -> float:
        """Score one proposal.

        Parameters
        ----------
        groups : Mapping or Sequence
            Group id to members.
        contributions : Mapping or Sequence
            Voter id to vote amount.

        Returns
        -------
        float
        """
        return cluster_match(groups, contributions)
