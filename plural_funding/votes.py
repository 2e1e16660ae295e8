"""Vote ledger helpers.

Turn raw vote records into the per-proposal contribution mappings the
scorers consume.
"""

import logging
from collections.abc import Hashable, Iterable, Mapping, Sequence

from plural_funding.models import VoteRecord
from plural_funding.scoring import Scorer, cluster_match

logger = logging.getLogger(__name__)


def latest_votes(records: Iterable[VoteRecord]) -> dict[str, dict[str, float]]:
    """Keep the newest vote per voter per option.

    Parameters
    ----------
    records : Iterable[VoteRecord]
        Ledger rows, possibly several per ``(user_id, option_id)``.

    Returns
    -------
    dict[str, dict[str, float]]
        Option id to voter id to hearts. Records with equal ``updated_at``
        resolve to the one appearing later in ``records``.
    """
    newest: dict[tuple[str, str], VoteRecord] = {}
    for record in records:
        key = (record.option_id, record.user_id)
        current = newest.get(key)
        if current is None or record.updated_at >= current.updated_at:
            newest[key] = record

    votes: dict[str, dict[str, float]] = {}
    for (option_id, user_id), record in newest.items():
        votes.setdefault(option_id, {})[user_id] = record.num_of_votes
    return votes


def apply_multipliers(
    votes: Mapping[str, float],
    multipliers: Mapping[str, float | str],
) -> dict[str, float]:
    """Scale each voter's hearts by their multiplier.

    Parameters
    ----------
    votes : Mapping[str, float]
        Voter id to hearts.
    multipliers : Mapping[str, float | str]
        Voter id to multiplier; numeric strings such as ``"2"`` are
        accepted. Voters without a multiplier count once.

    Returns
    -------
    dict[str, float]
    """
    return {user_id: num * float(multipliers.get(user_id, 1)) for user_id, num in votes.items()}


def contributions_dictionary(votes: Mapping[str, float]) -> dict[str, float]:
    """Drop voters with zero votes, unless nobody voted above zero.

    When every voter has zero votes the mapping is returned whole, so the
    proposal still scores 0 rather than having no voters at all.
    """
    non_zero = {user_id: num for user_id, num in votes.items() if num != 0}
    return non_zero if non_zero else dict(votes)


def restrict_groups(
    groups: Mapping[Hashable, Sequence[Hashable]],
    contributions: Mapping[Hashable, float],
) -> dict[Hashable, list[Hashable]]:
    """Keep only group members that have a contribution.

    Groups left without members are dropped.
    """
    restricted: dict[Hashable, list[Hashable]] = {}
    for group_id, members in groups.items():
        voters = [member for member in members if member in contributions]
        if voters:
            restricted[group_id] = voters
    return restricted


def calculate_plural_score(
    groups: Mapping[Hashable, Sequence[Hashable]],
    contributions: Mapping[Hashable, float],
    scorer: Scorer | None = None,
) -> float:
    """Cluster match score of one proposal over the groups of its voters.

    Parameters
    ----------
    groups : Mapping[Hashable, Sequence[Hashable]]
        Every group of the question, including members who did not vote on
        this proposal.
    contributions : Mapping[Hashable, float]
        Voter id to hearts for this proposal.
    scorer : Scorer, optional
        Scoring rule applied to the restricted groups. Defaults to
        :func:`~plural_funding.scoring.cluster_match`.

    Returns
    -------
    float
        Plurality score, 0.0 if no voter belongs to any group. Voters
        outside every group do not contribute.
    """
    relevant = restrict_groups(groups, contributions)
    if not relevant:
        logger.debug("No grouped voters among %d contributions", len(contributions))
        return 0.0
    return (scorer or cluster_match)(relevant, contributions)
