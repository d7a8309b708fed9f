import random

import pygame
import pytest

from components.movement.facing import Facing
from components.position import Position
from entities.entity_id import EntityID
from game_instances.session import GameSession
from schemas.game import GamePhase
from systems.errors import ChainIntegrityError

from conftest import add_tail


def cells(positions):
    return [position.as_tuple() for position in positions]


def face(game: GameSession, facing: Facing):
    game.snake.movement.facing = facing


def test_new_game_is_centered_with_empty_tail(config):
    game = GameSession(config)
    assert game.phase is GamePhase.RUNNING
    assert game.snake.position == Position(x=5, y=5)
    assert game.snake.facing is Facing.UP
    assert len(game.snake) == 0
    assert game.score == 0
    assert game.fruit.position.in_bounds(game.grid)
    assert len(list(game.world.entities(EntityID.FRUIT))) == 1


def test_move_up_with_empty_tail(session):
    session.tick()
    assert session.snake.position == Position(x=5, y=4)
    assert session.snake.tail_positions() == []


def test_move_left_drags_tail(session):
    add_tail(session, (5, 6))
    face(session, Facing.LEFT)
    session.tick()
    assert session.snake.position.as_tuple() == (4, 5)
    assert cells(session.snake.tail_positions()) == [(5, 5)]


def test_chain_shift_uses_pre_move_positions(session):
    add_tail(session, (5, 6), (5, 7), (6, 7), (7, 7))
    before = [session.snake.position] + session.snake.tail_positions()
    face(session, Facing.RIGHT)

    session.tick()

    assert session.snake.position.as_tuple() == (6, 5)
    assert session.snake.tail_positions() == before[:-1]
    assert session.snake.movement.previous_position == before[0]


def test_movement_is_deterministic(config):
    def run_game():
        game = GameSession(config, rng=random.Random(3))
        game.fruit.position = Position(x=0, y=0)
        add_tail(game, (5, 6), (5, 7))
        for facing in (Facing.LEFT, Facing.LEFT, Facing.DOWN, Facing.RIGHT):
            face(game, facing)
            game.tick()
        return game.snapshot()

    assert run_game() == run_game()


def test_eating_grows_scores_and_moves_fruit(session):
    session.snake.position = Position(x=4, y=5)
    session.fruit.position = Position(x=4, y=4)

    session.tick()

    assert session.score == 1
    assert cells(session.snake.tail_positions()) == [(4, 5)]
    assert session.fruit.position.in_bounds(session.grid)
    assert session.phase is GamePhase.RUNNING


def test_new_segment_joins_the_end_of_the_chain(session):
    add_tail(session, (5, 6), (5, 7))
    session.fruit.position = Position(x=5, y=4)

    session.tick()

    # Segment 0 also takes the vacated head cell during the shift
    assert cells(session.snake.tail_positions()) == [(5, 5), (5, 6), (5, 5)]
    assert len(session.snake) == 3


def test_growth_law_over_several_fruit(session):
    for expected in range(1, 4):
        next_cell = session.snake.position.shifted(session.snake.facing)
        session.fruit.position = next_cell
        session.tick()
        assert session.score == expected
        assert len(session.snake) == expected
        assert session.fruit.position.in_bounds(session.grid)


def test_no_change_without_overlap(session):
    session.tick()
    assert session.score == 0
    assert len(session.snake) == 0
    assert session.fruit.position == Position(x=0, y=0)


def test_leaving_the_grid_ends_the_game(session):
    session.snake.position = Position(x=9, y=3)
    face(session, Facing.RIGHT)

    assert session.tick() is GamePhase.GAME_OVER
    assert session.is_over
    assert session.result.score == 0
    assert session.result.head == Position(x=10, y=3)


def test_game_over_keeps_final_score_and_freezes(session):
    session.fruit.position = Position(x=5, y=4)
    session.tick()
    session.fruit.position = Position(x=0, y=0)
    for _ in range(10):
        session.tick()

    assert session.is_over
    assert session.result.score == 1
    frozen = session.snapshot()

    session.sample_input({pygame.K_DOWN})
    assert session.tick() is GamePhase.GAME_OVER
    assert session.snapshot() == frozen


def test_head_may_overlap_its_tail(session):
    add_tail(session, (5, 6), (4, 6), (4, 5))
    face(session, Facing.DOWN)
    session.tick()
    assert session.snake.position.as_tuple() == (5, 6)
    assert session.phase is GamePhase.RUNNING


def test_snapshot(session):
    add_tail(session, (5, 6))
    snapshot = session.snapshot()
    assert snapshot.phase is GamePhase.RUNNING
    assert snapshot.head == Position(x=5, y=5)
    assert cells(snapshot.tail) == [(5, 6)]
    assert snapshot.fruit == Position(x=0, y=0)
    assert snapshot.facing is Facing.UP
    assert snapshot.result is None


def test_restart(session):
    session.snake.position = Position(x=0, y=0)
    session.tick()
    assert session.is_over

    session.restart()
    assert session.phase is GamePhase.RUNNING
    assert session.result is None
    assert session.score == 0
    assert session.snake.position == Position(x=5, y=5)


def test_dangling_tail_handle_fails_loudly(session):
    session.snake.tail.append("not-an-entity")
    with pytest.raises(ChainIntegrityError):
        session.tick()
