"""Heart budget: how many votes a participant may spread across proposals."""

import logging

from plural_funding.models import EngineSettings

logger = logging.getLogger(__name__)

MIN_CUSTOM_HEARTS = 2


def available_hearts(
    num_proposals: int,
    base_numerator: int,
    base_denominator: int,
    max_ratio: float,
    custom_hearts: int | None = None,
) -> int:
    """Calculate the number of hearts available to each participant.

    Assumes a participant must assign at least one heart to every
    proposal. ``base_numerator / base_denominator`` must equal
    ``max_ratio``, the preference ratio a participant can express between
    two proposals.

    Parameters
    ----------
    num_proposals : int
        Number of proposals that can be voted on.
    base_numerator : int
        Minimum hearts a participant must allocate to a proposal to satisfy
        the max ratio.
    base_denominator : int
        Minimum hearts a participant must hold to satisfy the max ratio.
    max_ratio : float
        Target maximum preference ratio.
    custom_hearts : int, optional
        Administrative override. Returned unchanged when at least 2.

    Returns
    -------
    int
        Heart budget, or 0 if there are fewer than two proposals or the
        ratio inputs disagree.
    """
    if custom_hearts is not None and custom_hearts >= MIN_CUSTOM_HEARTS:
        return custom_hearts

    if num_proposals < 2:
        logger.error("Number of proposals must be at least 2, got %d", num_proposals)
        return 0

    max_votes = base_numerator + (num_proposals - 2) * base_numerator
    min_hearts = base_denominator + (num_proposals - 2) * base_denominator

    if min_hearts <= 0:
        logger.error("base_denominator must be positive, got %s", base_denominator)
        return 0

    if max_votes / min_hearts != max_ratio:
        logger.error(
            "base_numerator/base_denominator (%s/%s) does not equal the specified max ratio %s",
            base_numerator,
            base_denominator,
            max_ratio,
        )
        return 0

    return min_hearts


def hearts_for_question(
    num_proposals: int,
    settings: EngineSettings | None = None,
    custom_hearts: int | None = None,
) -> int:
    """Heart budget for a question using the configured ratio parameters."""
    settings = settings or EngineSettings()
    return available_hearts(
        num_proposals,
        settings.base_numerator,
        settings.base_denominator,
        settings.max_ratio,
        custom_hearts,
    )
