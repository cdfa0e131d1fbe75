"""Tests for grid layout, arrival checks and the arrival system."""
from __future__ import annotations

from geomart.components import Mover
from geomart.config import Settings
from geomart.formation import Formation, make_arrival_system
from geomart.types import Direction, FrameContext


def _ctx(move: float = 20.0) -> FrameContext:
    return FrameContext(frame_number=1, elapsed_ms=0.0, step=0.0, move=move, request_stop=lambda: None)


def _at_rest(x: float, y: float, direction: Direction = Direction.RIGHT) -> Mover:
    return Mover(position=(x, y), destination=(x, y), direction=direction)


# --- Layout ---

def test_default_grid_size():
    formation = Formation.build(Settings())
    assert len(formation) == 16 * 16


def test_first_row_heads_right():
    formation = Formation.build(Settings())
    first = formation[0]
    assert first.position == (10.0, 15.0)
    assert first.destination == (30.0, 15.0)
    assert first.direction is Direction.RIGHT


def test_second_row_heads_left():
    formation = Formation.build(Settings())
    mover = formation[16]
    assert mover.position == (-10.0, 55.0)
    assert mover.destination == (-30.0, 55.0)
    assert mover.direction is Direction.LEFT


def test_columns_spaced_by_pitch():
    formation = Formation.build(Settings())
    xs = [formation[i].position[0] for i in range(16)]
    assert xs == [10.0 + 40.0 * c for c in range(16)]
    assert formation[15].position[1] == 15.0


def test_custom_layout():
    settings = Settings(window_width=100, window_height=50, circle_radius=5, circle_margin=20)
    formation = Formation.build(settings)
    # pitch 25: 100 // 25 + 1 columns, 50 // 25 + 1 rows
    assert len(formation) == 5 * 3
    assert formation[0].position == (5.0, 10.0)
    assert formation[5].position == (-5.0, 35.0)
    assert formation[10].position == (5.0, 60.0)


def test_every_mover_starts_one_step_from_destination():
    formation = Formation.build(Settings())
    for mover in formation:
        dx = mover.destination[0] - mover.position[0]
        assert abs(dx) == 20.0
        assert mover.destination[1] == mover.position[1]
        assert mover.direction is (Direction.LEFT if dx < 0 else Direction.RIGHT)


# --- Arrival checks ---

class TestArrived:
    def test_fresh_formation_not_arrived(self):
        assert not Formation.build(Settings()).arrived()

    def test_representative_decides(self):
        formation = Formation([
            _at_rest(0.0, 0.0),
            Mover(position=(0.0, 0.0), destination=(5.0, 0.0), direction=Direction.RIGHT),
        ])
        assert formation.representative is formation[0]
        assert formation.arrived()
        assert not formation.all_arrived()

    def test_exact_equality_on_both_axes(self):
        mover = Mover(position=(1.0, 2.0), destination=(1.0, 2.0000000001), direction=Direction.LEFT)
        assert not Formation([mover]).arrived()

    def test_empty_formation_never_arrives(self):
        formation = Formation()
        assert formation.representative is None
        assert not formation.arrived()
        assert not formation.all_arrived()


class TestArrivalSystem:
    def test_advances_every_mover_on_arrival(self):
        formation = Formation([_at_rest(0.0, 0.0), _at_rest(40.0, 0.0)])
        make_arrival_system()(formation, _ctx())
        assert formation[0].destination == (-40.0, 40.0)
        assert formation[1].destination == (0.0, 40.0)
        assert all(m.direction is Direction.BOTTOM_LEFT for m in formation)

    def test_no_change_before_arrival(self):
        mover = Mover(position=(0.0, 0.0), destination=(20.0, 0.0), direction=Direction.RIGHT)
        make_arrival_system()(Formation([mover]), _ctx())
        assert mover.destination == (20.0, 0.0)
        assert mover.direction is Direction.RIGHT

    def test_uses_context_move(self):
        mover = _at_rest(0.0, 0.0, Direction.TOP_RIGHT)
        make_arrival_system()(Formation([mover]), _ctx(move=6.0))
        assert mover.destination == (6.0, 0.0)

    def test_on_arrival_called_after_advance(self):
        seen = []

        def on_arrival(formation, ctx):
            seen.append(formation[0].direction)

        formation = Formation([_at_rest(0.0, 0.0, Direction.LEFT)])
        system = make_arrival_system(on_arrival=on_arrival)
        system(formation, _ctx())
        assert seen == [Direction.TOP_RIGHT]
        system(formation, _ctx())
        assert seen == [Direction.TOP_RIGHT]

    def test_strict_waits_for_every_mover(self):
        lagging = Mover(position=(0.0, 0.0), destination=(5.0, 0.0), direction=Direction.RIGHT)
        formation = Formation([_at_rest(0.0, 0.0), lagging])
        make_arrival_system(strict=True)(formation, _ctx())
        assert formation[0].direction is Direction.RIGHT

        lagging.position = lagging.destination
        make_arrival_system(strict=True)(formation, _ctx())
        assert formation[0].direction is Direction.BOTTOM_LEFT
        assert lagging.direction is Direction.BOTTOM_LEFT
