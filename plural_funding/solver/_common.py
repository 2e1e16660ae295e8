"""Shared utilities for funding allocation solvers.

Contains preprocessing (request and score parsing, per-proposal cap) and
the empty result builder.
"""

import logging
from typing import Any

from plural_funding.solver._types import FundingResult

logger = logging.getLogger(__name__)


def parse_funding_request(value: Any) -> int:
    """Convert a funding request to an integer amount.

    Parameters
    ----------
    value : Any
        ``None``, a number, or a numeric string such as ``"8500"``.

    Returns
    -------
    int
        Parsed amount, truncated toward zero. ``None``, unparsable and
        negative requests yield 0.
    """
    if value is None or value == "":
        return 0
    try:
        amount = int(value)
    except (TypeError, ValueError, OverflowError):
        try:
            amount = int(float(value))
        except (TypeError, ValueError, OverflowError):
            logger.warning("Unparsable funding request %r treated as 0", value)
            return 0
    if amount < 0:
        logger.warning("Negative funding request %r treated as 0", value)
        return 0
    return amount


def parse_vote_score(value: Any) -> float:
    """Convert a vote score to float.

    Raises
    ------
    ValueError
        If ``value`` is not numeric.
    """
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Vote score must be numeric, got {value!r}.") from exc


def preprocess(
    proposals: list[dict[str, Any]],
    max_funding_per_proposal: int,
) -> list[dict[str, Any]]:
    """Parse scores and requests and disqualify requests above the cap.

    Does not mutate input.

    Parameters
    ----------
    proposals : list[dict[str, Any]]
        Each dict must have ``id`` and ``vote_score``; ``funding_request``
        may be missing or ``None``.
    max_funding_per_proposal : int
        Requests above this amount are zeroed.

    Returns
    -------
    list[dict[str, Any]]
        New dicts with ``vote_score`` as float, ``funding_request`` as int
        and an ``eligible`` flag, in input order.
    """
    result = []
    for proposal in proposals:
        request = parse_funding_request(proposal.get("funding_request"))
        eligible = request <= max_funding_per_proposal
        if not eligible:
            logger.info(
                "Proposal %s requests %d above the cap of %d, excluded from funding",
                proposal["id"],
                request,
                max_funding_per_proposal,
            )
            request = 0
        result.append(
            {
                **proposal,
                "vote_score": parse_vote_score(proposal["vote_score"]),
                "funding_request": request,
                "eligible": eligible,
            }
        )
    return result


def empty_funding_result(
    status: str,
    rule: str,
    proposals: list[dict[str, Any]],
    total_funding: int,
) -> FundingResult:
    """Build a ``FundingResult`` that funds nothing.

    Parameters
    ----------
    status : str
        Descriptive status string.
    rule : str
        Allocation rule identifier.
    proposals : list[dict[str, Any]]
        Proposals to report with 0 funding.
    total_funding : int
        Pool, returned untouched as ``remaining_funding``.

    Returns
    -------
    FundingResult
    """
    return {
        "status": status,
        "allocated_funding": {p["id"]: 0 for p in proposals},
        "remaining_funding": total_funding,
        "total_allocated": 0,
        "objective_value": None,
        "rule": rule,
        "detail": {},
    }
