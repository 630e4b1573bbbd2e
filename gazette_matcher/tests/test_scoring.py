"""Tests for similarity scoring and best-match selection."""
import pytest

from ..processors.extractor import CandidateSet
from ..processors.scoring import NO_MATCH, MatchResult, best_match, score


@pytest.mark.parametrize('name', ['jane mary smith', 'a', 'peter otieno odhiambo'])
def test_identical_names_score_100(name):
    assert score(name, name) == 100


@pytest.mark.parametrize('a,b', [
    ('jane mary smith', 'jane mary smyth'),
    ('peter odhiambo', 'peter otieno odhiambo'),
    ('abc', 'xyz'),
    ('', 'john doe'),
])
def test_score_is_symmetric(a, b):
    assert score(a, b) == score(b, a)


def test_score_range_and_type():
    value = score('jane mary smith', 'jane mary smyth')
    assert isinstance(value, int)
    assert 0 < value < 100
    assert score('abc', 'xyz') == 0


def test_score_with_empty_strings():
    assert score('', 'john doe') == 0
    assert score('', '') == 100
    assert score(None, 'john doe') == 0


def test_best_match_picks_highest_score():
    result = best_match('jane smith', ['john doe', 'jane smyth', 'jane smith'])
    assert result == MatchResult('jane smith', 100)


def test_best_match_ties_go_to_first_candidate():
    # "aa" scores 50 against both candidates
    assert best_match('aa', CandidateSet(['ab', 'ba'])).best_candidate == 'ab'
    assert best_match('aa', CandidateSet(['ba', 'ab'])).best_candidate == 'ba'


def test_best_match_returns_first_candidate_when_nothing_is_similar():
    assert best_match('abc', ['xyz', 'uvw']) == MatchResult('xyz', 0)


def test_best_match_empty_candidates():
    assert best_match('jane smith', []) == NO_MATCH
    assert best_match('jane smith', CandidateSet()) == MatchResult('', 0)
