"""Shared fixtures for scoring and allocation tests."""

import pytest


@pytest.fixture()
def sample_groups():
    """Three overlapping groups of four voters."""
    return {
        "group0": ["user0", "user1"],
        "group1": ["user1", "user2", "user3"],
        "group2": ["user0", "user2"],
    }


@pytest.fixture()
def sample_contributions():
    """Hearts per voter on one proposal."""
    return {"user0": 1, "user1": 2, "user2": 3, "user3": 4}


@pytest.fixture()
def sample_proposals():
    """Three proposals with string scores and requests, as stored."""
    return [
        {"id": "ID1", "vote_score": "5.5", "funding_request": "10000"},
        {"id": "ID2", "vote_score": "6", "funding_request": "8500"},
        {"id": "ID3", "vote_score": "8", "funding_request": "2500"},
    ]


@pytest.fixture()
def sample_event(sample_proposals):
    """Persistence-layer-shaped funding event with field mapping applied."""
    proposals = [
        {"id": p["id"], "voteScore": p["vote_score"], "fundingRequest": p["funding_request"]}
        for p in sample_proposals
    ]
    return {"proposals": proposals, "total_funding": 15000, "max_funding": 10000}
