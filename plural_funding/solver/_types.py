"""Type definitions for the funding solver protocol and result contract."""

from typing import Any, Protocol, TypedDict


class FundingResult(TypedDict):
    """Common output contract all allocation rules must satisfy.

    Parameters
    ----------
    status : str
        Solver termination status (e.g. ``"Optimal"``).
    allocated_funding : dict[str, int]
        Funding per proposal id. Every input proposal is present; unfunded
        proposals map to 0.
    remaining_funding : int
        Part of the pool left unallocated.
    total_allocated : int
        Sum of ``allocated_funding``.
    objective_value : float | None
        Summed vote score of funded proposals, or ``None`` if non-optimal.
    rule : str
        Identifier for the allocation rule (e.g. ``"greedy"``).
    detail : dict[str, Any]
        Rule-specific diagnostics, opaque to the adapter.
    """

    status: str
    allocated_funding: dict[str, int]
    remaining_funding: int
    total_allocated: int
    objective_value: float | None
    rule: str
    detail: dict[str, Any]


class FundingSolver(Protocol):
    """Protocol for funding allocation rules.

    Implementations receive preprocessed proposals (scores parsed, requests
    parsed and capped) and return a :class:`FundingResult`.
    """

    def __call__(
        self,
        proposals: list[dict[str, Any]],
        total_funding: int,
    ) -> FundingResult: ...
