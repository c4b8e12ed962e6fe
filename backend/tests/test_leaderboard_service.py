import pytest

from slidepuzzle.models import Score
from slidepuzzle.services.scores.leaderboard import parse_score, seed_demo_scores, top_scores


@pytest.mark.parametrize('raw, expected', [
    (930, 930),
    (-5, -5),
    (12.9, 12),
    (-12.9, -12),
    ('42', 42),
    ('  42', 42),
    ('42abc', 42),
    ('+7', 7),
    ('3.75', 3),
])
def test_parse_score_accepts_leading_integers(raw, expected):
    assert parse_score(raw) == expected


@pytest.mark.parametrize('raw', ['abc', '', ' ', None, True, False, float('nan'), float('inf'), [], {}, '٤٢'])
def test_parse_score_rejects_non_numbers(raw):
    assert parse_score(raw) is None


def test_seed_only_fills_empty_table(flask_app):
    assert seed_demo_scores() == 3
    assert seed_demo_scores() == 0
    assert Score.query.count() == 3
    assert [s.name for s in top_scores()] == ['Charlie', 'Alice', 'Bob']


def test_top_scores_breaks_ties_by_insertion(flask_app):
    from slidepuzzle import db
    for name in ('first', 'second'):
        db.session.add(Score(name=name, score=500))
    db.session.commit()
    assert [s.name for s in top_scores(2)] == ['first', 'second']


def test_parse_score_bounds():
    assert parse_score(2 ** 63 - 1) == 2 ** 63 - 1
    assert parse_score(-(2 ** 63)) == -(2 ** 63)
    assert parse_score(2 ** 63) is None
    assert parse_score(-(2 ** 63) - 1) is None
    assert parse_score(str(10 ** 20)) is None
    assert parse_score(1e19) is None
