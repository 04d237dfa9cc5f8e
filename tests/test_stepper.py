"""
Tests for stepper.py - the tick loop.
"""

import random
from collections import deque
from unittest.mock import Mock

from termsnake.config import STEP_ATE, STEP_DIED, STEP_MOVED
from termsnake.geometry import Direction, SegmentShape
from termsnake.model import GameState, Segment
from termsnake.stepper import Simulation

EW, NS = SegmentShape.EAST_WEST, SegmentShape.NORTH_SOUTH
N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST


def _cells(state):
    return [seg.cell for seg in state.body]


def _place(state, segments, direction):
    state.body = deque(segments)
    state.head = state.body[-1].cell
    state.direction = direction


class _RacingLock:
    """Runs a callback just before a chosen acquisition, as the input thread would."""

    def __init__(self, lock, before):
        self._lock = lock
        self._before = before
        self.acquisitions = 0

    def __enter__(self):
        self.acquisitions += 1
        callback = self._before.pop(self.acquisitions, None)
        if callback:
            callback()
        return self._lock.__enter__()

    def __exit__(self, *exc):
        return self._lock.__exit__(*exc)

    def locked(self):
        return self._lock.locked()


class TestTick:
    """Tests for Simulation.tick."""

    def test_plain_tick_translates(self, state):
        """With no input the snake moves one cell east and keeps its length."""
        view = Mock()
        outcome = Simulation(state, view).tick()

        assert outcome == STEP_MOVED
        assert list(state.body) == [Segment(1, 0, EW, E), Segment(2, 0, EW, E)]
        assert state.head == (2, 0)
        view.render.assert_called_once_with(state)

    def test_eating_tick_grows(self, state):
        """Reaching the apple grows the body by one and moves the apple in bounds."""
        state.apple = (2, 0)
        outcome = Simulation(state, Mock()).tick()

        assert outcome == STEP_ATE
        assert _cells(state) == [(0, 0), (1, 0), (2, 0)]
        ax, ay = state.apple
        assert 0 <= ax < 10 and 0 <= ay < 10

    def test_growth_with_fixed_seed_is_repeatable(self):
        """Two games with the same seed place the apple identically."""
        apples = []
        for _ in range(2):
            state = GameState(rng=random.Random(42))
            state.apple = (2, 0)
            Simulation(state, Mock()).tick()
            apples.append(state.apple)
        assert apples[0] == apples[1]

    def test_live_direction_change_applies_next_tick(self, state):
        """A steer between ticks is picked up on the following tick."""
        sim = Simulation(state, Mock())
        sim.tick()
        state.steer(S)
        sim.tick()
        assert state.head == (2, 1)
        assert state.body[0].shape is SegmentShape.SOUTH_WEST

    def test_wall_death_without_wrap(self):
        """Moving off the board with wrap off kills the snake."""
        state = GameState(width=2, height=2)
        view = Mock()
        outcome = Simulation(state, view).tick()

        assert outcome == STEP_DIED
        assert state.alive is False
        assert _cells(state) == [(0, 0), (1, 0)]
        assert state.head == (1, 0)
        view.render.assert_called_once_with(state)

    def test_wall_death_fixes_up_head_shape(self):
        """The final frame shows the head bent toward the fatal direction."""
        state = GameState(width=2, height=2)
        state.steer(N)
        Simulation(state, Mock()).tick()
        assert state.body[-1].shape is SegmentShape.NORTH_WEST

    def test_wrap_reenters_opposite_edge(self):
        """On a wrapped 3x3 board a head at (2,1) heading east lands on (0,1)."""
        state = GameState(width=3, height=3, wrap=True)
        _place(state, [Segment(1, 1, EW, E), Segment(2, 1, EW, E)], E)
        outcome = Simulation(state, Mock()).tick()

        assert outcome == STEP_MOVED
        assert state.head == (0, 1)
        assert _cells(state) == [(2, 1), (0, 1)]

    def test_self_collision(self, state):
        """Turning into the body kills the snake without moving it."""
        segments = [
            Segment(3, 1, EW, W),
            Segment(2, 1, SegmentShape.SOUTH_EAST, W),
            Segment(2, 2, SegmentShape.NORTH_WEST, S),
            Segment(1, 2, SegmentShape.NORTH_EAST, W),
            Segment(1, 1, NS, N),
        ]
        _place(state, segments, E)
        apple = state.apple
        outcome = Simulation(state, Mock()).tick()

        assert outcome == STEP_DIED
        assert state.alive is False
        assert _cells(state) == [(3, 1), (2, 1), (2, 2), (1, 2), (1, 1)]
        assert state.head == (1, 1)
        assert state.apple == apple
        assert state.body[-1].shape is SegmentShape.SOUTH_EAST

    def test_render_happens_under_lock(self, state):
        """The frame is drawn while the state lock is held."""
        held = []
        view = Mock()
        view.render.side_effect = lambda s: held.append(s.lock.locked())
        Simulation(state, view).tick()
        assert held == [True]

    def test_counts_ticks(self, state):
        """Every tick, fatal or not, is counted."""
        sim = Simulation(state, Mock())
        sim.tick()
        sim.tick()
        assert sim.ticks == 2


class TestRun:
    """Tests for Simulation.run."""

    def test_runs_until_death_and_sleeps_between_ticks(self):
        """On a 4-wide board the snake moves twice then hits the wall."""
        state = GameState(width=4, height=1, delay_ms=100)
        sleep = Mock()
        sim = Simulation(state, Mock(), sleep=sleep)
        sim.run()

        assert state.alive is False
        assert sim.ticks == 3
        assert sleep.call_count == 2
        sleep.assert_called_with(0.1)

    def test_sleep_never_holds_the_lock(self):
        """The input thread can always get the lock while the simulation sleeps."""
        state = GameState(width=5, height=1)
        held = []
        sleep = Mock(side_effect=lambda _: held.append(state.lock.locked()))
        Simulation(state, Mock(), sleep=sleep).run()
        assert held and not any(held)

    def test_delay_is_reread_each_tick(self):
        """A speed change during the game sets the very next sleep."""
        state = GameState(width=4, height=1, delay_ms=100)
        delays = []

        def sleep(seconds):
            delays.append(seconds)
            state.change_delay(-20)

        Simulation(state, Mock(), sleep=sleep).run()
        assert delays == [0.1, 0.08]

    def test_wrap_toggle_mid_game_keeps_snake_alive(self):
        """Turning wrap on between ticks changes the next boundary check."""
        state = GameState(width=3, height=1)
        sim = Simulation(state, Mock())
        assert sim.tick() == STEP_MOVED
        state.toggle_wrap()
        assert sim.tick() == STEP_MOVED
        assert state.head == (0, 0)


class TestSteeringRace:
    """Tests for key presses landing between a tick's read and its move."""

    def test_reversal_between_read_and_move_is_refused(self):
        """South pressed after a northward move is committed never reaches geometry."""
        state = GameState()
        _place(state, [Segment(0, 5, EW, E), Segment(1, 5, EW, E)], E)
        state.steer(N)
        responses = []
        state.lock = _RacingLock(state.lock, {2: lambda: responses.append(state.steer(S))})
        sim = Simulation(state, Mock())

        assert sim.tick() == STEP_MOVED
        assert responses == [False]
        assert state.direction is N
        assert state.body[-1] == Segment(1, 4, NS, N)

        assert sim.tick() == STEP_MOVED
        assert state.head == (1, 3)

    def test_perpendicular_between_read_and_move_applies_next_tick(self):
        """A legal turn pressed mid-tick is kept for the following tick."""
        state = GameState()
        _place(state, [Segment(0, 5, EW, E), Segment(1, 5, EW, E)], E)
        state.steer(N)
        state.lock = _RacingLock(state.lock, {2: lambda: state.steer(E)})
        sim = Simulation(state, Mock())

        sim.tick()
        assert state.direction is E
        sim.tick()
        assert state.head == (2, 4)
        assert state.body[0].shape is SegmentShape.SOUTH_EAST
