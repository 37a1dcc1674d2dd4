import random

import pytest

from flappy_arcade.data_models import GameConfig, Pipe
from flappy_arcade.game_engine import GameEngine
from flappy_arcade.scheduler import FrameQueue


def run_until_idle(frames, limit=10_000):
    """Pumps scheduled frames until the engine stops asking for more."""
    ticks = 0
    while frames.run_pending():
        ticks += 1
        assert ticks < limit
    return ticks


def test_tick_before_start_is_an_error(engine):
    with pytest.raises(RuntimeError):
        engine.tick()


def test_start_builds_fresh_session(engine, frames):
    engine.start()
    state = engine.state
    assert engine.running
    assert state.score == 0
    assert state.tick_count == 0
    assert state.pipes == []
    assert len(state.clouds) == 3
    assert state.bird.y == 150
    assert state.bird.velocity == -4.6
    assert frames.pending


def test_tick_advances_and_requests_next_frame(engine, frames):
    engine.start()
    frames.run_pending()
    assert engine.state.tick_count == 1
    assert engine.state.bird.velocity == pytest.approx(-4.35)
    assert engine.state.bird.y == pytest.approx(145.65)
    assert frames.pending


def test_pipe_spawns_on_interval(frames, rng):
    config = GameConfig(gravity=0.0, jump_velocity=0.0, pipe_spawn_interval=5)
    engine = GameEngine(config=config, scheduler=frames, rng=rng)
    engine.start()
    for _ in range(4):
        frames.run_pending()
    assert engine.state.pipes == []
    frames.run_pending()
    assert len(engine.state.pipes) == 1
    # Spawned after this tick's move, so it sits at the right edge
    assert engine.state.pipes[0].x == 320.0


def test_falling_without_input_ends_on_ground(engine, frames):
    engine.start()
    ticks = run_until_idle(frames)
    state = engine.state
    # Rises on the opening flap, then falls 230px to the ground
    assert 60 <= ticks <= 70
    assert state.ended
    assert state.score == 0
    assert state.final_score == 0
    assert state.pipes == []
    assert state.bird.y == 380
    assert state.bird.velocity == 0.0
    assert not frames.pending


def test_bird_stays_in_bounds_and_clamps_stop_it():
    frames = FrameQueue()
    engine = GameEngine(scheduler=frames, rng=random.Random(5))
    inputs = random.Random(11)
    engine.start()
    floor = engine.config.bird_floor
    for _ in range(3000):
        if inputs.random() < 0.12:
            engine.activate()
        before = engine.state.bird.velocity + engine.config.gravity
        if not frames.pending:
            engine.activate()
            continue
        frames.run_pending()
        bird = engine.state.bird
        assert 0 <= bird.y <= floor
        if bird.y in (0, floor):
            assert bird.velocity == 0.0
        elif not engine.state.ended:
            assert bird.velocity == pytest.approx(before)


def test_activate_overwrites_velocity(engine):
    engine.start()
    engine.state.bird.velocity = 3.0
    engine.activate()
    assert engine.state.bird.velocity == -4.6
    engine.activate()
    assert engine.state.bird.velocity == -4.6


def test_activate_before_start_starts(engine, frames):
    engine.activate()
    assert engine.running
    assert frames.pending


def test_pipe_collision_ends_session(still_config, frames, rng):
    engine = GameEngine(config=still_config, scheduler=frames, rng=rng)
    engine.start()
    # Lower pipe starts at y=150, exactly the bird's top edge
    engine.state.pipes.append(Pipe(x=82.0, gap_y=0))
    engine.state.score = 4
    frames.run_pending()
    assert engine.state.ended
    assert engine.state.final_score == 4
    assert engine.best_score == 4
    assert not frames.pending


def test_tick_after_game_over_changes_nothing(engine, frames):
    engine.start()
    run_until_idle(frames)
    state = engine.state
    snapshot = (state.tick_count, state.bird.y, [c.x for c in state.clouds], state.score)
    engine.tick()
    assert (state.tick_count, state.bird.y, [c.x for c in state.clouds], state.score) == snapshot
    assert not frames.pending


def test_activate_after_game_over_resets(frames, rng):
    engine = GameEngine(config=GameConfig(pipe_spawn_interval=20), scheduler=frames, rng=rng)
    engine.start()
    run_until_idle(frames)
    assert engine.state.ended
    old_state = engine.state

    engine.activate()
    state = engine.state
    assert state is not old_state
    assert not state.ended
    assert state.score == 0
    assert state.tick_count == 0
    assert state.pipes == []
    assert state.final_score is None
    assert len(state.clouds) == 3
    assert state.bird.y == 150
    assert state.bird.velocity == -4.6
    assert frames.pending


def test_reset_twice_keeps_one_loop(engine, frames):
    engine.start()
    engine.reset()
    engine.reset()
    frames.run_pending()
    assert engine.state.tick_count == 1
    assert engine.state.bird.velocity == pytest.approx(-4.35)


def test_safe_passage_scores_and_survives(still_config, frames, rng):
    engine = GameEngine(config=still_config, scheduler=frames, rng=rng)
    engine.start()
    engine.state.pipes.append(Pipe(x=320.0, gap_y=100))
    for _ in range(200):
        frames.run_pending()
    assert engine.running
    assert engine.state.score == 1
    assert engine.state.pipes == []
    assert engine.state.tick_count == 200


def test_best_score_survives_restart(still_config, frames, rng):
    engine = GameEngine(config=still_config, scheduler=frames, rng=rng)
    engine.start()
    engine.state.score = 7
    engine.state.pipes.append(Pipe(x=60.0, gap_y=200))
    frames.run_pending()
    assert engine.best_score == 7
    engine.activate()
    assert engine.state.score == 0
    assert engine.best_score == 7
