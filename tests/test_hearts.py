"""Unit tests for the heart budget."""

import logging

import pytest

from plural_funding.hearts import available_hearts, hearts_for_question
from plural_funding.models import EngineSettings


class TestAvailableHearts:
    def test_two_proposals(self):
        assert available_hearts(2, 4, 5, 0.8) == 5

    def test_ratio_mismatch_returns_zero(self):
        assert available_hearts(2, 4, 5, 0.9) == 0

    def test_ratio_mismatch_logs_error(self, caplog):
        with caplog.at_level(logging.ERROR, logger="plural_funding.hearts"):
            available_hearts(2, 4, 5, 0.9)
        assert "does not equal the specified max ratio" in caplog.text

    def test_custom_hearts_override(self):
        assert available_hearts(2, 4, 5, 0.8, custom_hearts=10) == 10

    def test_custom_hearts_override_skips_ratio_check(self):
        assert available_hearts(2, 4, 5, 0.9, custom_hearts=10) == 10

    def test_custom_hearts_below_two_ignored(self):
        assert available_hearts(2, 4, 5, 0.8, custom_hearts=1) == 5

    @pytest.mark.parametrize("num_proposals, expected", [(3, 10), (4, 15), (10, 45)])
    def test_scales_with_proposals(self, num_proposals, expected):
        assert available_hearts(num_proposals, 4, 5, 0.8) == expected

    @pytest.mark.parametrize("num_proposals", [0, 1])
    def test_fewer_than_two_proposals(self, num_proposals, caplog):
        with caplog.at_level(logging.ERROR, logger="plural_funding.hearts"):
            assert available_hearts(num_proposals, 4, 5, 0.8) == 0
        assert "at least 2" in caplog.text


    def test_zero_denominator_returns_zero(self, caplog):
        with caplog.at_level(logging.ERROR, logger="plural_funding.hearts"):
            assert available_hearts(2, 4, 0, 0.8) == 0
        assert "must be positive" in caplog.text


class TestHeartsForQuestion:
    def test_default_settings(self):
        assert hearts_for_question(3) == 10

    def test_custom_settings(self):
        settings = EngineSettings(base_numerator=1, base_denominator=2, max_ratio=0.5)
        assert hearts_for_question(2, settings) == 2

    def test_custom_hearts(self):
        assert hearts_for_question(3, custom_hearts=7) == 7
