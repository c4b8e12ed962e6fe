import pytest

from slidepuzzle.game.levels import LEVELS, Level, max_total_score, resolve_image
from slidepuzzle.game.scoring import cleared_score, failed_score, performance_comment


def test_cleared_score():
    assert cleared_score(0) == 1000
    assert cleared_score(10) == 980
    assert cleared_score(25) == 950


@pytest.mark.parametrize('moves', [500, 501, 1000, 10 ** 6])
def test_scores_never_negative(moves):
    assert cleared_score(moves) == 0
    assert failed_score(0, 3, moves) == 0
    assert failed_score(9, 3, moves) == 0


def test_failed_score_partial_credit():
    # 4/9 of 1000 = 444.4 -> 444
    assert failed_score(4, 3, 0) == 444
    assert failed_score(4, 3, 10) == 424
    # 1/16 of 1000 = 62.5 rounds half up
    assert failed_score(1, 4, 0) == 63
    assert failed_score(0, 5, 0) == 0


def test_performance_comment_bands():
    top = max_total_score()
    assert top == 3000
    assert performance_comment(2700, top) == 'Legendary!'
    assert performance_comment(2100, top) == 'Great job!'
    assert performance_comment(2099, top) == 'Nice effort!'
    assert performance_comment(1500, top) == 'Nice effort!'
    assert performance_comment(1499, top) == 'Keep practicing!'
    assert performance_comment(0, top) == 'Keep practicing!'


def test_level_table():
    assert [(lv.size, lv.time_limit) for lv in LEVELS] == [(3, 60), (4, 120), (5, 180)]


def test_resolve_image_falls_back_to_placeholder(tmp_path):
    level = Level(id=2, size=4, time_limit=120, image='images/image2.jpg')
    assert resolve_image(level, None).endswith('text=Puzzle+2')
    assert resolve_image(level, str(tmp_path)).startswith('https://via.placeholder.com/')

    (tmp_path / 'images').mkdir()
    (tmp_path / 'images' / 'image2.jpg').write_bytes(b'jpg')
    assert resolve_image(level, str(tmp_path)) == 'images/image2.jpg'
