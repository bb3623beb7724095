"""Tests for review anonymity rules."""

from __future__ import annotations

import pytest

from folio.models import ReviewMode
from folio.policy.anonymity import can_author_see_reviewer, can_reviewer_see_author


def test_single_blind_reviewer_sees_author():
    assert can_reviewer_see_author(ReviewMode.SINGLE)
    assert can_reviewer_see_author("single")
    assert can_reviewer_see_author()


def test_double_blind_hides_author():
    assert not can_reviewer_see_author(ReviewMode.DOUBLE)
    assert not can_reviewer_see_author("double")


def test_unknown_mode_hides_author():
    assert not can_reviewer_see_author("triple")


def test_author_never_sees_reviewer():
    assert can_author_see_reviewer() is False


def test_mode_strings_are_case_insensitive():
    assert can_reviewer_see_author("SINGLE")
    assert can_reviewer_see_author(" Single ")
    assert not can_reviewer_see_author("DOUBLE")


def test_review_mode_parse():
    assert ReviewMode.parse("SINGLE") is ReviewMode.SINGLE
    assert ReviewMode.parse(ReviewMode.DOUBLE) is ReviewMode.DOUBLE
    with pytest.raises(ValueError):
        ReviewMode.parse("triple")
