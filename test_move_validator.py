"""
Tests for console input validation.
"""

import pytest

from logic.board import Cell
from logic.config import GameConfig
from logic.game_state import GameState
from logic.move_validator import MoveValidator


@pytest.fixture
def validator():
    return MoveValidator()


@pytest.mark.parametrize("text, symbol", [("X", Cell.X), ("O", Cell.O), (" O\n", Cell.O)])
def test_valid_symbol(validator, text, symbol):
    choice = validator.validate_symbol(text)
    assert choice.is_valid
    assert choice.symbol == symbol


@pytest.mark.parametrize("text", ["x", "o", "XO", "", "0", "Y"])
def test_invalid_symbol(validator, text):
    choice = validator.validate_symbol(text)
    assert not choice.is_valid
    assert choice.symbol is None
    assert choice.error_message == GameConfig.SYMBOL_RETRY


def test_valid_move(validator):
    result = validator.validate_input(GameState.new(Cell.X), "5")
    assert result.is_valid
    assert result.position == 5
    assert result.error_message is None


@pytest.mark.parametrize("text", ["", "0", "10", "55", "a", "-1", "5a"])
def test_invalid_input(validator, text):
    result = validator.validate_input(GameState.new(Cell.X), text)
    assert not result.is_valid
    assert result.position is None
    assert result.error_message == GameConfig.INVALID_INPUT


def test_position_taken(validator):
    game = GameState.new(Cell.X).make_move(5)

    result = validator.validate_input(game, "5")
    assert not result.is_valid
    assert result.error_message == GameConfig.POSITION_TAKEN

    assert validator.validate_input(game, "4").is_valid


def test_validate_move_range(validator):
    game = GameState.new(Cell.X)
    assert not validator.validate_move(game, 0).is_valid
    assert not validator.validate_move(game, 10).is_valid
    assert validator.validate_move(game, 9).is_valid


def test_game_over(validator):
    game = GameState.new(Cell.X)
    for position in (1, 4, 2, 5, 3):
        game = game.make_move(position)

    result = validator.validate_input(game, "9")
    assert not result.is_valid
