"""Unit tests for the quadratic voting scorer."""

import pytest

from plural_funding.scoring import QuadraticScorer, quadratic_voting


class TestQuadraticVoting:
    def test_per_voter_and_sum(self):
        per_voter, total = quadratic_voting({"user1": 4, "user2": 9, "user3": 16})
        assert per_voter == {"user1": 2, "user2": 3, "user3": 4}
        assert total == 9

    def test_missing_vote_counts_as_zero(self):
        per_voter, total = quadratic_voting({"user1": None, "user2": 9})
        assert per_voter == {"user1": 0, "user2": 3}
        assert total == 3

    def test_empty(self):
        assert quadratic_voting({}) == ({}, 0)

    def test_fractional_votes(self):
        _, total = quadratic_voting({"a": 2, "b": 2})
        assert total == pytest.approx(2 * 2**0.5)

    def test_negative_vote_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            quadratic_voting({"user1": -1})

    def test_idempotent(self):
        votes = {"user1": 3, "user2": 7}
        assert quadratic_voting(votes) == quadratic_voting(votes)


class TestQuadraticScorer:
    def test_ignores_groups(self):
        scorer = QuadraticScorer()
        assert scorer({"g": ["user1"]}, {"user1": 4, "user2": 9}) == 5

    def test_rule_identifier(self):
        assert QuadraticScorer().rule == "quadratic"

    def test_indexed_contributions(self):
        assert QuadraticScorer()([[0], [1]], [4, 9]) == 5
