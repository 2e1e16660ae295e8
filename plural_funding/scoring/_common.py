"""Shared utilities for the vote scorers.

Contains the error taxonomy raised on incomplete scoring input and the
normalization of the two accepted input shapes (mapping and indexed).
"""

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

GroupsInput = Mapping[Hashable, Sequence[Hashable]] | Sequence[Sequence[Hashable]]
ContributionsInput = Mapping[Hashable, float] | Sequence[float]


class ScoringError(LookupError):
    """Base class for data-integrity failures during scoring.

    Parameters
    ----------
    agent : Hashable
        Voter id that could not be resolved.
    message : str
        Human-readable description.
    """

    def __init__(self, agent: Hashable, message: str) -> None:
        super().__init__(message)
        self.agent = agent


class MissingMembershipError(ScoringError):
    """A voter referenced during scoring has no group memberships."""

    def __init__(self, agent: Hashable) -> None:
        super().__init__(agent, f"Group memberships for agent {agent!r} are undefined.")


class MissingContributionError(ScoringError):
    """A voter referenced during scoring has no recorded contribution."""

    def __init__(self, agent: Hashable) -> None:
        super().__init__(agent, f"Contributions for agent {agent!r} are undefined.")


def normalize_groups(groups: GroupsInput) -> dict[Hashable, list[Hashable]]:
    """Convert either groups shape to ``{group_id: [members]}``.

    A mapping keeps its keys as group ids. A sequence of sequences uses the
    list index as group id. Members repeated within one group are collapsed,
    keeping the first occurrence.

    Parameters
    ----------
    groups : Mapping or Sequence
        ``{"group0": ["user0", "user1"]}`` or ``[[0, 1], [1, 2]]``.

    Returns
    -------
    dict[Hashable, list[Hashable]]
        New dict; the input is not mutated.
    """
    items = groups.items() if isinstance(groups, Mapping) else enumerate(groups)
    return {group_id: list(dict.fromkeys(members)) for group_id, members in items}


def normalize_contributions(contributions: ContributionsInput) -> dict[Hashable, Any]:
    """Convert either contributions shape to ``{voter_id: amount}``.

    A sequence is keyed by position, matching the indexed groups shape.
    """
    if isinstance(contributions, Mapping):
        return dict(contributions)
    return dict(enumerate(contributions))
