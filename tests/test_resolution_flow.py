from collections import defaultdict

from puyo.components.color import Color, Pair
from puyo.components.game_config import GameConfig
from puyo.components.game_state import GamePhase
from puyo.components.grid import Point
from puyo.components.position import Direction
from puyo.events.bus import (
    EVENT_COMBO_COMPLETE,
    EVENT_GAME_OVER,
    EVENT_GRAVITY_APPLIED,
    EVENT_GROUPS_POPPED,
    EVENT_PAIR_SPAWNED,
    EVENT_PIECE_LANDED,
    EVENT_PIECE_MOVED,
)
from puyo.session import GameSession, KeyEvent
from puyo.utils.snapshot import format_snapshot

from tests.helpers import colors_at, fixed_randomizer, place

WATCHED = (
    EVENT_PIECE_MOVED,
    EVENT_PIECE_LANDED,
    EVENT_GRAVITY_APPLIED,
    EVENT_GROUPS_POPPED,
    EVENT_COMBO_COMPLETE,
    EVENT_PAIR_SPAWNED,
    EVENT_GAME_OVER,
)


def record_events(session):
    seen = defaultdict(list)
    for name in WATCHED:
        session.event_bus.subscribe(name, lambda sender, _name=name, **kw: seen[_name].append(kw))
    return seen


def column_zero_session(offset=0):
    session = GameSession(
        config=GameConfig(chain_score_offset=offset),
        randomizer=fixed_randomizer([Pair.of(Color.RED, Color.RED)]),
    )
    place(session.board.grid, [(0, 11, Color.RED), (0, 10, Color.RED)])
    row = [Color.YELLOW, Color.GREEN, Color.BLUE, Color.YELLOW, Color.GREEN]
    place(session.board.grid, [(x, 11, color) for x, color in enumerate(row, start=1)])
    return session


def steer_to_column_zero(session):
    session.step(KeyEvent("down"))
    session.step(KeyEvent("down", pressed=False))
    for _ in range(2):
        session.step(KeyEvent("left"))
        session.step(KeyEvent("left", pressed=False))
    assert session.board.position.anchor == Point(0, 1)


def test_dropping_pair_onto_two_reds_pops_column():
    session = column_zero_session()
    seen = record_events(session)
    steer_to_column_zero(session)

    steps = 0
    while session.state.combo is None:
        session.step()
        steps += 1
    assert steps == 9
    assert seen[EVENT_PIECE_LANDED] == [{"anchor": Point(0, 9), "facing": Direction.UP}]
    assert session.state.phase is GamePhase.RESOLVING

    snapshot = session.step()
    assert seen[EVENT_GROUPS_POPPED][0]["sizes"] == [4]
    assert seen[EVENT_GROUPS_POPPED][0]["chain_length"] == 1
    assert snapshot.combo.chain_length == 1
    assert snapshot.combo.score == 0
    assert colors_at(session.board.grid, [(0, y) for y in range(8, 12)]) == [None] * 4

    snapshot = session.step()
    assert seen[EVENT_COMBO_COMPLETE] == [{"chain_length": 1, "score": 0, "total_score": 0}]
    assert len(seen[EVENT_PAIR_SPAWNED]) == 1
    assert snapshot.combo is None
    assert snapshot.phase is GamePhase.CONTROLLABLE
    assert snapshot.color_at(2, 0) is Color.RED
    assert snapshot.color_at(1, 11) is Color.YELLOW


def test_chain_offset_scores_first_pop():
    session = column_zero_session(offset=1)
    steer_to_column_zero(session)
    while session.state.combo is None:
        session.step()
    session.step()
    assert session.state.combo.score == 4
    session.step()
    assert session.state.score == 4
    assert session.state.combo is None


def test_gravity_runs_before_pop_after_landing():
    session = GameSession(randomizer=fixed_randomizer([Pair.of(Color.BLUE, Color.GREEN)]))
    seen = record_events(session)
    place(session.board.grid, [(3, 11, Color.YELLOW)])
    session.step(KeyEvent("down"))
    session.step(KeyEvent("down", pressed=False))
    session.step(KeyEvent("x"))
    # Pair lies flat over columns 2 and 3; the green half rests on the yellow unit.
    while session.state.combo is None:
        session.step()
    assert session.board.position.anchor == Point(2, 10)
    session.step()
    assert len(seen[EVENT_GRAVITY_APPLIED]) == 1
    assert session.state.gravity_active
    assert colors_at(session.board.grid, [(2, 11), (3, 10)]) == [Color.BLUE, Color.GREEN]
    session.step()
    assert not session.state.gravity_active
    assert seen[EVENT_GROUPS_POPPED] == []
    assert len(seen[EVENT_COMBO_COMPLETE]) == 1


def blocked_spawn_session():
    session = GameSession(randomizer=fixed_randomizer([Pair.of(Color.RED, Color.RED)]))
    stack = [Color.BLUE if y % 2 else Color.GREEN for y in range(1, 12)]
    place(session.board.grid, [(2, y, color) for y, color in enumerate(stack, start=1)])
    return session


def test_blocked_spawn_ends_the_game():
    session = blocked_spawn_session()
    seen = record_events(session)
    for _ in range(3):
        session.step()
    assert session.state.dead
    assert seen[EVENT_GAME_OVER] == [{"score": 0}]
    assert seen[EVENT_PAIR_SPAWNED] == []
    snapshot = session.snapshot()
    assert snapshot.dead
    assert snapshot.phase is GamePhase.DEAD
    assert format_snapshot(snapshot).endswith("GAME OVER")


def test_steps_after_death_change_nothing():
    session = blocked_spawn_session()
    for _ in range(3):
        session.step()
    before = session.snapshot()
    seen = record_events(session)
    for _ in range(5):
        session.step()
    session.step(KeyEvent("left"))
    assert session.snapshot() == before
    assert all(not events for events in seen.values())


def test_gravity_descent_reports_moves():
    session = GameSession()
    seen = record_events(session)
    session.step()
    moved = seen[EVENT_PIECE_MOVED]
    assert len(moved) == 1
    assert moved[0]["source"] == "gravity"
    assert moved[0]["success"] is True
    assert moved[0]["anchor"] == Point(2, 1)


def test_gravity_between_pops_builds_a_two_step_chain():
    session = GameSession(randomizer=fixed_randomizer([Pair.of(Color.GREEN, Color.YELLOW)]))
    seen = record_events(session)
    place(session.board.grid, [(0, 8, Color.RED), (0, 9, Color.RED), (0, 10, Color.RED), (1, 10, Color.RED)])
    place(session.board.grid, [(0, 11, Color.BLUE), (1, 11, Color.BLUE), (0, 6, Color.BLUE), (0, 7, Color.BLUE)])
    # Park the pair in column 4, away from the chain.
    session.step(KeyEvent("down"))
    session.step(KeyEvent("down", pressed=False))
    for _ in range(2):
        session.step(KeyEvent("right"))
        session.step(KeyEvent("right", pressed=False))
    while session.state.combo is None:
        session.step()
    while session.state.combo is not None:
        session.step()

    popped = seen[EVENT_GROUPS_POPPED]
    assert [event["sizes"] for event in popped] == [[4], [4]]
    assert [event["chain_length"] for event in popped] == [1, 2]
    assert [event["combo_score"] for event in popped] == [0, 4]
    # The two blues above the reds drop three rows onto the remaining blues.
    assert len(seen[EVENT_GRAVITY_APPLIED]) == 3
    assert seen[EVENT_COMBO_COMPLETE] == [{"chain_length": 2, "score": 4, "total_score": 4}]
    assert session.state.score == 4
    assert colors_at(session.board.grid, [(0, y) for y in range(6, 12)]) == [None] * 6
    assert colors_at(session.board.grid, [(4, 10), (4, 11)]) == [Color.YELLOW, Color.GREEN]
