import random

import pytest

from slidepuzzle.game.board import Board, ClickOutcome, Selection


@pytest.mark.parametrize('n', [1, 2, 3, 4, 5, 8])
def test_built_board_is_solved(n):
    board = Board.build(n)
    assert len(board) == n * n
    assert board.is_solved()
    assert board.correct_tiles() == n * n


@pytest.mark.parametrize('n', [2, 3, 4, 5])
def test_shuffle_never_returns_solved_board(n):
    rng = random.Random(n)
    board = Board.build(n)
    for _ in range(200):
        board.shuffle(rng)
        assert not board.is_solved()
        assert sorted(board.grid) == list(range(1, n * n + 1))
        assert board.moves == 0


def test_shuffle_rejects_single_tile_board():
    with pytest.raises(ValueError):
        Board.build(1).shuffle()


def test_swap_is_an_involution():
    board = Board(3, [3, 1, 2, 4, 5, 6, 9, 8, 7])
    before = list(board.grid)
    board.swap(0, 8)
    assert board.grid != before
    board.swap(0, 8)
    assert board.grid == before


def test_two_phase_click_swaps_and_counts_moves():
    board = Board(2, [2, 1, 3, 4])
    assert board.click(0) is ClickOutcome.SELECTED
    assert board.selection is Selection.ONE_SELECTED
    assert board.selected_index == 0
    assert board.click(1) is ClickOutcome.SOLVED
    assert board.grid == [1, 2, 3, 4]
    assert board.moves == 1
    assert board.selection is Selection.NO_SELECTION
    assert board.selected_index is None


def test_clicking_selected_tile_again_deselects():
    board = Board(2, [2, 1, 3, 4])
    board.click(3)
    assert board.click(3) is ClickOutcome.DESELECTED
    assert board.selection is Selection.NO_SELECTION
    assert board.moves == 0
    assert board.grid == [2, 1, 3, 4]


def test_swap_that_does_not_solve():
    board = Board(2, [2, 1, 3, 4])
    board.click(2)
    assert board.click(3) is ClickOutcome.SWAPPED
    assert board.grid == [2, 1, 4, 3]
    assert board.moves == 1


def test_click_out_of_range():
    with pytest.raises(IndexError):
        Board.build(3).click(9)


def test_invalid_grid_rejected():
    with pytest.raises(ValueError):
        Board(2, [1, 1, 2, 3])
    with pytest.raises(ValueError):
        Board(0)


def test_tiles_carry_image_offsets():
    board = Board(3, [9, 2, 3, 4, 5, 6, 7, 8, 1])
    tiles = board.tiles('images/image1.jpg')
    first = tiles[0]
    assert (first.value, first.row, first.col) == (9, 2, 2)
    assert (first.offset_x, first.offset_y) == (100.0, 100.0)
    last = tiles[8]
    assert (last.offset_x, last.offset_y) == (0.0, 0.0)
    assert tiles[4].offset_x == 50.0
    assert all(t.image == 'images/image1.jpg' for t in tiles)


def test_single_tile_offsets_are_zero():
    (tile,) = Board.build(1).tiles()
    assert (tile.offset_x, tile.offset_y) == (0.0, 0.0)
