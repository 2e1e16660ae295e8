"""Unit tests for connection-oriented cluster match."""

import copy
import math

import pytest

from plural_funding.scoring import (
    ClusterMatchScorer,
    MissingContributionError,
    MissingMembershipError,
    attenuate,
    cluster_match,
)


def _memberships(rows):
    return dict(enumerate(rows))


class TestAttenuate:
    CONTRIBUTIONS = {0: 4, 1: 9, 2: 16}

    def test_unrelated_agent_not_attenuated(self):
        result = attenuate(0, [1], _memberships([[0], [1, 2]]), self.CONTRIBUTIONS)
        assert result == 4

    def test_shared_group_with_member_attenuates(self):
        result = attenuate(0, [1], _memberships([[0, 1], [1, 2]]), self.CONTRIBUTIONS)
        assert result == 2

    def test_agent_in_other_group_attenuates(self):
        result = attenuate(0, [0, 1], _memberships([[0], [1]]), self.CONTRIBUTIONS)
        assert result == 2

    def test_both_conditions_attenuate_once(self):
        result = attenuate(0, [0, 1], _memberships([[0, 1], [0, 1, 2]]), self.CONTRIBUTIONS)
        assert result == 2

    def test_missing_contribution_raises(self):
        with pytest.raises(MissingContributionError) as excinfo:
            attenuate(5, [1], _memberships([[0], [1]]), self.CONTRIBUTIONS)
        assert excinfo.value.agent == 5

    def test_missing_agent_membership_raises(self):
        with pytest.raises(MissingMembershipError):
            attenuate(2, [1], _memberships([[0], [1]]), self.CONTRIBUTIONS)

    def test_missing_compared_membership_raises(self):
        with pytest.raises(MissingMembershipError):
            attenuate(0, [7], _memberships([[0], [1]]), self.CONTRIBUTIONS)


    def test_negative_contribution_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            attenuate(0, [1], _memberships([[0], [1]]), {0: -4, 1: 9})


class TestClusterMatch:
    def test_independent_singleton_groups(self):
        assert cluster_match([[0], [1]], [4, 4]) == 4.0

    def test_overlapping_groups(self, sample_groups, sample_contributions):
        result = cluster_match(sample_groups, sample_contributions)
        assert result == pytest.approx(4.597873224984399)

    def test_indexed_shape_matches_mapping_shape(self, sample_groups, sample_contributions):
        indexed = cluster_match([[0, 1], [1, 2, 3], [0, 2]], [1, 2, 3, 4])
        assert indexed == pytest.approx(cluster_match(sample_groups, sample_contributions))

    def test_all_zero_votes(self, sample_groups):
        contributions = {"user0": 0, "user1": 0, "user2": 0, "user3": 0}
        assert cluster_match(sample_groups, contributions) == 0

    def test_single_group(self):
        assert cluster_match({"g": ["a", "b"]}, {"a": 4, "b": 5}) == pytest.approx(3.0)

    def test_duplicate_groups_collapsed(self):
        duplicated = cluster_match({"a": ["u0", "u1"], "b": ["u1", "u0"]}, {"u0": 2, "u1": 2})
        single = cluster_match({"a": ["u0", "u1"]}, {"u0": 2, "u1": 2})
        assert duplicated == pytest.approx(single) == pytest.approx(2.0)

    def test_bloc_scores_below_independent_voters(self):
        bloc = cluster_match({"g0": ["a", "b"], "g1": ["a", "b", "c"]}, {"a": 9, "b": 9, "c": 9})
        independent = cluster_match({"g0": ["a"], "g1": ["b"], "g2": ["c"]}, {"a": 9, "b": 9, "c": 9})
        assert bloc < independent

    def test_missing_contribution_raises(self):
        with pytest.raises(MissingContributionError) as excinfo:
            cluster_match({"g": ["u0", "u1"]}, {"u0": 1})
        assert excinfo.value.agent == "u1"

    def test_negative_contribution_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            cluster_match({"g": ["a"]}, {"a": -1})

    def test_non_negative(self, sample_groups):
        for scale in (0, 0.25, 1, 100):
            contributions = {u: scale for u in ("user0", "user1", "user2", "user3")}
            assert cluster_match(sample_groups, contributions) >= 0

    def test_empty_groups(self):
        assert cluster_match({}, {}) == 0.0

    def test_idempotent(self, sample_groups, sample_contributions):
        r1 = cluster_match(sample_groups, sample_contributions)
        r2 = cluster_match(sample_groups, sample_contributions)
        assert r1 == r2

    def test_no_mutation(self, sample_groups, sample_contributions):
        groups, contributions = copy.deepcopy(sample_groups), copy.deepcopy(sample_contributions)
        cluster_match(sample_groups, sample_contributions)
        assert sample_groups == groups
        assert sample_contributions == contributions


class TestClusterMatchScorer:
    def test_rule_identifier(self):
        assert ClusterMatchScorer().rule == "cluster_match"

    def test_delegates(self, sample_groups, sample_contributions):
        scorer = ClusterMatchScorer()
        assert scorer(sample_groups, sample_contributions) == cluster_match(sample_groups, sample_contributions)

    def test_fully_connected_formula(self, sample_groups, sample_contributions):
        # Every voter is connected to every group, so all interaction votes are attenuated.
        per_group = {
            gid: sum(math.sqrt(sample_contributions[u]) / (1 if u == "user3" else 2) for u in members)
            for gid, members in sample_groups.items()
        }
        first = sum(
            sample_contributions[u] / (1 if u == "user3" else 2) for members in sample_groups.values() for u in members
        )
        interaction = sum(
            math.sqrt(per_group[g]) * math.sqrt(per_group[h]) for g in per_group for h in per_group if g != h
        )
        expected = math.sqrt(first + interaction)
        assert ClusterMatchScorer()(sample_groups, sample_contributions) == pytest.approx(expected)
