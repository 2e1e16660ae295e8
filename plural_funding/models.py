"""Data models for the scoring and funding stages."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class AllocationResult:
    """Funding allocation for one voting cycle.

    Parameters
    ----------
    allocated_funding : dict[str, int]
        Funding per proposal id, 0 for unfunded proposals.
    remaining_funding : int
        Part of the pool left unallocated.
    """

    allocated_funding: dict[str, int]
    remaining_funding: int

    def __post_init__(self) -> None:
        """Validate that no amount is negative."""
        if any(amount < 0 for amount in self.allocated_funding.values()):
            raise ValueError("allocated_funding amounts must be non-negative")
        if self.remaining_funding < 0:
            raise ValueError("remaining_funding must be non-negative")

    @property
    def funded_proposals(self) -> list[str]:
        """Ids of proposals that received funding, in input order."""
        return [pid for pid, amount in self.allocated_funding.items() if amount > 0]


@dataclass(frozen=True)
class VoteRecord:
    """One row of the vote ledger."""

    user_id: str
    option_id: str
    num_of_votes: float
    updated_at: datetime


@dataclass
class OptionStatistics:
    """Result-page figures for one proposal.

    Parameters
    ----------
    option_id : str
        Proposal id.
    distinct_users : int
        Number of voters who voted on the proposal.
    allocated_hearts : int
        Total hearts spent on the proposal.
    quadratic_score : float
        Sum of the square roots of each voter's hearts.
    plurality_score : float
        Cluster match score, as computed by the caller.
    distinct_groups : int
        Number of distinct groups the proposal's voters belong to.
    list_of_group_names : list[str]
        Sorted names of those groups.
    """

    option_id: str
    distinct_users: int
    allocated_hearts: int
    quadratic_score: float
    plurality_score: float = 0.0
    distinct_groups: int = 0
    list_of_group_names: list[str] = field(default_factory=list)


@dataclass
class QuestionStatistics:
    """Result-page figures for one question.

    Parameters
    ----------
    num_proposals : int
        Number of proposals on the question.
    sum_num_of_hearts : int
        Hearts spent across all proposals.
    num_of_participants : int
        Distinct voters on any proposal.
    num_of_groups : int
        Distinct groups those voters belong to.
    option_stats : dict[str, OptionStatistics]
        Per-proposal figures keyed by proposal id.
    """

    num_proposals: int
    sum_num_of_hearts: int
    num_of_participants: int
    num_of_groups: int
    option_stats: dict[str, OptionStatistics] = field(default_factory=dict)


@dataclass(frozen=True)
class EngineSettings:
    """Default parameters for heart budgets and funding allocation.

    Parameters
    ----------
    total_funding : int
        Pool available per cycle.
    max_funding_per_proposal : int
        Requests above this amount are never funded.
    base_numerator : int
        Heart budget numerator, see :func:`~plural_funding.hearts.available_hearts`.
    base_denominator : int
        Heart budget denominator.
    max_ratio : float
        Maximum preference ratio; must equal ``base_numerator / base_denominator``.
    """

    total_funding: int = 100_000
    max_funding_per_proposal: int = 10_000
    base_numerator: int = 4
    base_denominator: int = 5
    max_ratio: float = 0.8

    def __post_init__(self) -> None:
        """Validate funding bounds."""
        if self.total_funding < 0:
            raise ValueError("total_funding must be non-negative")
        if self.max_funding_per_proposal < 0:
            raise ValueError("max_funding_per_proposal must be non-negative")
