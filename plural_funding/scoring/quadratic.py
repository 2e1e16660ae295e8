"""Quadratic voting scorer.

Informational secondary metric: each voter's hearts are square-rooted and
summed, with no regard to group structure.
"""

import math
from collections.abc import Hashable, Mapping

from plural_funding.scoring._common import ContributionsInput, GroupsInput, normalize_contributions


def quadratic_voting(votes: Mapping[Hashable, float | None]) -> tuple[dict[Hashable, float], float]:
    """Calculate quadratic votes per voter and their sum.

    Parameters
    ----------
    votes : Mapping[Hashable, float | None]
        Voter id to number of votes. ``None`` counts as zero votes.

    Returns
    -------
    tuple[dict[Hashable, float], float]
        ``(per_voter, total)`` where ``per_voter[v] = sqrt(votes[v])``.

    Raises
    ------
    ValueError
        If a vote is negative.
    """
    quadratic_votes: dict[Hashable, float] = {}
    for voter, vote in votes.items():
        amount = float(vote or 0)
        if amount < 0:
            raise ValueError(f"Vote for user {voter!r} must be non-negative.")
        quadratic_votes[voter] = math.sqrt(amount)
    return quadratic_votes, sum(quadratic_votes.values())


class QuadraticScorer:
    """Quadratic-voting scorer.

    Satisfies the :class:`~plural_funding.scoring._types.Scorer` protocol;
    ``groups`` is accepted for interface compatibility and ignored.
    """

    rule = "quadratic"

    def __call__(self, groups: GroupsInput, contributions: ContributionsInput) -> float:
        """Score one proposal.

        Parameters
        ----------
        groups : Mapping or Sequence
            Ignored.
        contributions : Mapping or Sequence
            Voter id to vote amount, or a list indexed by voter.

        Returns
        -------
        float
            Sum of the square roots of every contribution.
        """
        _, total = quadratic_voting(normalize_contributions(contributions))
        return total
