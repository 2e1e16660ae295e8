"""Group membership index.

Turns a group -> members mapping into a member -> groups mapping, after
collapsing groups whose member sets are identical.
"""

from collections.abc import Hashable, Mapping, Sequence

from plural_funding.scoring._common import MissingMembershipError


def remove_duplicate_groups(
    groups: Mapping[Hashable, Sequence[Hashable]],
) -> dict[Hashable, list[Hashable]]:
    """Collapse groups that have the same member set.

    Member order is irrelevant to the comparison. The first group seen with
    a given member set keeps its id; later duplicates are dropped.

    Parameters
    ----------
    groups : Mapping[Hashable, Sequence[Hashable]]
        Group id to members.

    Returns
    -------
    dict[Hashable, list[Hashable]]
        Unique groups, in first-seen order.
    """
    seen: set[frozenset] = set()
    unique: dict[Hashable, list[Hashable]] = {}
    for group_id, members in groups.items():
        key = frozenset(members)
        if key in seen:
            continue
        seen.add(key)
        unique[group_id] = list(dict.fromkeys(members))
    return unique


def create_group_memberships(
    groups: Mapping[Hashable, Sequence[Hashable]],
) -> dict[Hashable, list[Hashable]]:
    """Build the member -> group ids index.

    Parameters
    ----------
    groups : Mapping[Hashable, Sequence[Hashable]]
        Group id to members.

    Returns
    -------
    dict[Hashable, list[Hashable]]
        Voter id to the ids of every group listing that voter, in discovery
        order. Voters in no group do not appear.
    """
    memberships: dict[Hashable, list[Hashable]] = {}
    for group_id, members in groups.items():
        for member in members:
            memberships.setdefault(member, []).append(group_id)
    return memberships


def common_group(
    agent_a: Hashable,
    agent_b: Hashable,
    memberships: Mapping[Hashable, Sequence[Hashable]],
) -> bool:
    """Return whether two agents share at least one group.

    Raises
    ------
    MissingMembershipError
        If either agent is absent from ``memberships``.
    """
    for agent in (agent_a, agent_b):
        if not memberships.get(agent):
            raise MissingMembershipError(agent)
    return not set(memberships[agent_a]).isdisjoint(memberships[agent_b])
