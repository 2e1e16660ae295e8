"""Per-option and per-question result statistics for the results page."""

from collections.abc import Hashable, Iterable, Mapping, Sequence

from plural_funding.models import OptionStatistics, QuestionStatistics
from plural_funding.scoring import quadratic_voting


def summarize_option(
    option_id: str,
    option_votes: Mapping[str, float],
    user_groups: Mapping[str, Sequence[Hashable]],
    group_names: Mapping[Hashable, str] | None = None,
    plurality_score: float = 0.0,
) -> OptionStatistics:
    """Summarize the votes cast on one option.

    Parameters
    ----------
    option_id : str
        Proposal id.
    option_votes : Mapping[str, float]
        Latest hearts per voter on this option.
    user_groups : Mapping[str, Sequence[Hashable]]
        Voter id to the ids of the groups they belong to. Voters without
        groups are counted as voters only.
    group_names : Mapping[Hashable, str], optional
        Group id to display name. Ids are used when a name is missing.
    plurality_score : float
        Cluster match score stored for the option.

    Returns
    -------
    OptionStatistics
    """
    group_names = group_names or {}
    _, quadratic_score = quadratic_voting(option_votes)

    group_ids: set[Hashable] = set()
    for user_id in option_votes:
        group_ids.update(user_groups.get(user_id, ()))

    return OptionStatistics(
        option_id=option_id,
        distinct_users=len(option_votes),
        allocated_hearts=int(sum(option_votes.values())),
        quadratic_score=quadratic_score,
        plurality_score=plurality_score,
        distinct_groups=len(group_ids),
        list_of_group_names=sorted(str(group_names.get(gid, gid)) for gid in group_ids),
    )


def summarize_options(
    votes_by_option: Mapping[str, Mapping[str, float]],
    user_groups: Mapping[str, Sequence[Hashable]],
    group_names: Mapping[Hashable, str] | None = None,
    plurality_scores: Mapping[str, float] | None = None,
) -> dict[str, OptionStatistics]:
    """Apply :func:`summarize_option` to every option."""
    plurality_scores = plurality_scores or {}
    return {
        option_id: summarize_option(
            option_id,
            option_votes,
            user_groups,
            group_names,
            plurality_scores.get(option_id, 0.0),
        )
        for option_id, option_votes in votes_by_option.items()
    }


def summarize_question(
    votes_by_option: Mapping[str, Mapping[str, float]],
    user_groups: Mapping[str, Sequence[Hashable]],
    group_names: Mapping[Hashable, str] | None = None,
    plurality_scores: Mapping[str, float] | None = None,
    option_ids: Iterable[str] | None = None,
) -> QuestionStatistics:
    """Summarize a whole question: totals plus per-option figures.

    Parameters
    ----------
    votes_by_option : Mapping[str, Mapping[str, float]]
        Option id to latest hearts per voter.
    user_groups : Mapping[str, Sequence[Hashable]]
        Voter id to the ids of the groups they belong to.
    group_names : Mapping[Hashable, str], optional
        Group id to display name.
    plurality_scores : Mapping[str, float], optional
        Stored cluster match score per option.
    option_ids : Iterable[str], optional
        Every proposal on the question. Proposals without votes are
        reported with zero figures. Defaults to the keys of
        ``votes_by_option``.

    Returns
    -------
    QuestionStatistics
    """
    all_options = list(option_ids) if option_ids is not None else list(votes_by_option)
    votes = {option_id: votes_by_option.get(option_id, {}) for option_id in all_options}
    option_stats = summarize_options(votes, user_groups, group_names, plurality_scores)

    participants: set[str] = set()
    for option_votes in votes.values():
        participants.update(option_votes)
    group_ids: set[Hashable] = set()
    for user_id in participants:
        group_ids.update(user_groups.get(user_id, ()))

    return QuestionStatistics(
        num_proposals=len(all_options),
        sum_num_of_hearts=sum(stats.allocated_hearts for stats in option_stats.values()),
        num_of_participants=len(participants),
        num_of_groups=len(group_ids),
        option_stats=option_stats,
    )
