"""
Tests for the alpha-beta AI.
"""

from functools import lru_cache

import pytest

from logic.board import Cell, apply_move, board_from_string, empty_board, is_full, legal_moves
from logic.game_state import side_to_move
from logic.win_checker import is_terminal, is_win
from search.ai_player import AIPlayer
from search.config import SearchConfig


@lru_cache(maxsize=None)
def solve(board, to_move, computer):
    """Plain minimax value of a position from the computer's point of view."""
    if is_win(board, computer):
        return 10
    if is_win(board, computer.opposite()):
        return -10
    if is_full(board):
        return 0

    values = [
        solve(apply_move(board, move, to_move), to_move.opposite(), computer)
        for move in legal_moves(board)
    ]
    return max(values) if to_move == computer else min(values)


def reachable_positions():
    """Every non-terminal position reachable from the empty board, X first."""
    seen = set()
    frontier = [empty_board()]
    while frontier:
        board = frontier.pop()
        if board in seen or is_terminal(board):
            continue
        seen.add(board)
        player = side_to_move(board)
        for move in legal_moves(board):
            frontier.append(apply_move(board, move, player))
    return sorted(seen, key=lambda b: [cell.value for cell in b])


@pytest.fixture
def ai():
    return AIPlayer()


def test_takes_immediate_win_as_x(ai):
    board = board_from_string("XX_OO____")
    result = ai.get_best_move(board, Cell.X, Cell.O)

    assert result.move == 3
    assert result.value == 10
    assert ai.choose_move(board, Cell.X, Cell.O) == 3


def test_takes_immediate_win_as_o(ai):
    # X threatens 6, but O completes its own row first
    board = board_from_string("OO_XX____")
    result = ai.get_best_move(board, Cell.O, Cell.X)

    assert result.move == 3
    assert result.value == 10


def test_blocks_opponent(ai):
    assert ai.choose_move(board_from_string("XX__O____"), Cell.O, Cell.X) == 3

    # Human O threatens 9
    assert ai.choose_move(board_from_string("_X_X__OO_"), Cell.X, Cell.O) == 9


@pytest.mark.parametrize("computer, human", [(Cell.X, Cell.O), (Cell.O, Cell.X)])
def test_first_move_keeps_lowest_of_equal_values(ai, computer, human):
    result = ai.get_best_move(empty_board(), computer, human)

    # Every opening draws, so the first one wins the tie
    assert result.move in (1, 3, 5, 7, 9)
    assert result.move == 1
    assert result.value == 0


def test_answers_corner_with_center(ai):
    board = board_from_string("X________")
    assert ai.choose_move(board, Cell.O, Cell.X) == 5


def test_last_empty_cell(ai):
    board = board_from_string("XOXXOOOX_")
    result = ai.get_best_move(board, Cell.X, Cell.O)

    assert result.move == 9
    assert result.value == 0
    assert result.nodes_explored == 2  # root + one child


def test_two_empty_cells(ai):
    board = board_from_string("XOXXOO_X_")
    result = ai.get_best_move(board, Cell.O, Cell.X)

    # O at 9 lets X finish the first column
    assert result.move == 7
    assert result.value == 0
    assert result.nodes_explored == 5


def test_optimal_from_every_reachable_position(ai):
    for board in reachable_positions():
        computer = side_to_move(board)
        human = computer.opposite()

        result = ai.get_best_move(board, computer, human)
        best = solve(board, computer, computer)

        assert board[result.move - 1] == Cell.EMPTY
        assert result.value == best
        after = apply_move(board, result.move, computer)
        assert solve(after, human, computer) == best


def test_deterministic(ai):
    board = board_from_string("X___O____")
    first = ai.get_best_move(board, Cell.X, Cell.O)
    second = AIPlayer().get_best_move(board, Cell.X, Cell.O)

    assert first.move == second.move
    assert first.value == second.value
    assert first.nodes_explored == second.nodes_explored
    assert ai.nodes_explored == first.nodes_explored


@pytest.mark.parametrize("opening", range(1, 10))
def test_self_play_is_a_draw(ai, opening):
    board = apply_move(empty_board(), opening, Cell.X)
    player = Cell.O

    while not is_terminal(board):
        move = ai.choose_move(board, player, player.opposite())
        board = apply_move(board, move, player)
        player = player.opposite()

    assert not is_win(board, Cell.X)
    assert not is_win(board, Cell.O)


@pytest.mark.parametrize("first", [Cell.X, Cell.O])
def test_self_play_from_empty_board(ai, first):
    board = empty_board()
    player = first

    while not is_terminal(board):
        board = apply_move(board, ai.choose_move(board, player, player.opposite()), player)
        player = player.opposite()

    assert is_full(board)
    assert not is_win(board, Cell.X)
    assert not is_win(board, Cell.O)


def test_tree_matches_node_count():
    ai = AIPlayer(keep_tree=True)
    result = ai.get_best_move(empty_board(), Cell.X, Cell.O)

    tree = result.tree
    assert tree is ai.last_tree
    assert tree.move is None
    assert tree.count_nodes() == result.nodes_explored
    assert [child.move for child in tree.children] == list(range(1, 10))


def test_tree_keeps_pruned_siblings():
    ai = AIPlayer(keep_tree=True)
    tree = ai.get_best_move(empty_board(), Cell.X, Cell.O).tree

    pruned = 0
    for node in tree.walk():
        # Every node the search created was also evaluated
        assert node.value is not None
        for child in node.children:
            changed = [i for i in range(9) if child.board[i] != node.board[i]]
            assert changed == [child.move - 1]
        if not is_terminal(node.board) and len(node.children) < len(legal_moves(node.board)):
            pruned += 1

    assert pruned > 0


def test_tree_dropped_by_default(ai):
    result = ai.get_best_move(board_from_string("XX_OO____"), Cell.X, Cell.O)
    assert result.tree is None
    assert ai.last_tree is None


def test_keep_tree_from_config():
    class KeepTree(SearchConfig):
        KEEP_TREE = True

    ai = AIPlayer(KeepTree())
    assert ai.get_best_move(board_from_string("XX_OO____"), Cell.X, Cell.O).tree is not None


def test_utility(ai):
    assert ai.utility(board_from_string("XXXOO____"), Cell.X, Cell.O) == 10
    assert ai.utility(board_from_string("XXXOO____"), Cell.O, Cell.X) == -10
    assert ai.utility(board_from_string("XOXXOOOXX"), Cell.X, Cell.O) == 0
    assert ai.utility(empty_board(), Cell.X, Cell.O) == 0


def test_finished_game(ai):
    board = board_from_string("XXXOO____")

    assert ai.get_best_move(board, Cell.O, Cell.X) is None
    assert ai.nodes_explored == 0
    with pytest.raises(ValueError):
        ai.choose_move(board, Cell.O, Cell.X)


@pytest.mark.parametrize("computer, human", [
    (Cell.X, Cell.X),
    (Cell.O, Cell.O),
    (Cell.EMPTY, Cell.X),
    (Cell.X, Cell.EMPTY),
])
def test_invalid_symbols(ai, computer, human):
    with pytest.raises(ValueError):
        ai.choose_move(empty_board(), computer, human)
