"""Type definitions for the scorer protocol."""

from typing import Protocol

from plural_funding.scoring._common import ContributionsInput, GroupsInput


class Scorer(Protocol):
    """Protocol for per-proposal vote scorers.

    Implementations receive the voter groups and one proposal's
    contributions and return a single non-negative score. ``rule`` names
    the scoring rule in reports.
    """

    rule: str

    def __call__(self, groups: GroupsInput, contributions: ContributionsInput) -> float: ...
