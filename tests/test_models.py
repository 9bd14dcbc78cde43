"""
Unit tests for the grid surface, entities and shared helpers.

Covers bounded grid writes, centring, diffed flushes, the origin-point
hit test, sprites, per-kind movement and the probe / scoring helpers.
"""

import dataclasses

import pytest

from text_invaders.config import GameConfig, Glyphs, KeyBindings
from text_invaders.models.bounds import Bounds
from text_invaders.models.entity import (
    Bomb,
    EntityKind,
    Invader,
    Rocket,
    Ship,
    first_hit,
)
from text_invaders.ui.grid import GridSurface, OutOfBounds
from text_invaders.ui.text import format_level_intro, format_status
from text_invaders.utils.functions import (
    bounds_from_cell_size,
    countdown_message,
    level_bonus,
    level_difficulty,
    scale_for_difficulty,
)
from text_invaders.utils.input_handler import GameAction, actions_for_key


# ── Bounds ──────────────────────────────────────────────────────────────────


class TestBounds:
    def test_grid_dimensions(self):
        b = Bounds(right=21, bottom=10)
        assert b.columns == 21
        assert b.rows == 11

    def test_contains_edges(self):
        b = Bounds(right=21, bottom=10)
        assert b.contains(0, 0)
        assert b.contains(21, 10)
        assert not b.contains(22, 0)
        assert not b.contains(0, -1)


# ── Grid surface ────────────────────────────────────────────────────────────


class TestGridSurface:
    @pytest.fixture
    def grid(self):
        return GridSurface(Bounds(right=21, bottom=10))

    def test_starts_blank(self, grid):
        assert len(grid.rows) == 11
        assert all(row == " " * 21 for row in grid.rows)

    def test_draw_overwrites_exact_cells(self, grid):
        grid.draw(3, 2, "abc")
        assert grid.rows[2] == "   abc" + " " * 15
        assert all(row == " " * 21 for i, row in enumerate(grid.rows) if i != 2)

    def test_draw_overwrites_existing_text(self, grid):
        grid.draw(0, 0, "hello")
        grid.draw(1, 0, "EL")
        assert grid.rows[0].startswith("hELlo ")

    def test_draw_truncates_coordinates(self, grid):
        grid.draw(2.9, 1.7, "x")
        assert grid.rows[1][2] == "x"

    def test_draw_past_right_edge_is_truncated(self, grid):
        grid.draw(19, 0, "abcd")
        assert grid.rows[0].endswith("ab")
        assert len(grid.rows[0]) == 21

    def test_draw_at_right_bound_is_allowed(self, grid):
        grid.draw(21, 10, "x")
        assert grid.rows[10] == " " * 21

    @pytest.mark.parametrize("x, y", [(-1, 0), (22, 0), (0, -1), (0, 11)])
    def test_out_of_bounds_origin(self, grid, x, y):
        with pytest.raises(OutOfBounds):
            grid.draw(x, y, "a")

    def test_out_of_bounds_is_index_error(self, grid):
        with pytest.raises(IndexError):
            grid.draw(100, 100, "a")

    def test_clear_resets_cells(self, grid):
        grid.draw(0, 0, "abc")
        grid.clear()
        assert grid.rows[0] == " " * 21

    def test_draw_center(self, grid):
        grid.draw_center("abc")
        assert grid.rows[5][9:12] == "abc"

    def test_draw_center_long_text_starts_at_zero(self, grid):
        text = "x" * 25
        grid.draw_center(text)
        assert grid.rows[5] == "x" * 21

    def test_content_joins_rows(self, grid):
        assert grid.content.count("\n") == 10

    def test_flush_only_on_change(self, grid):
        written = []
        assert grid.flush(written.append) is True
        assert grid.flush(written.append) is False
        assert len(written) == 1

        grid.draw(0, 0, "a")
        assert grid.flush(written.append) is True
        assert written[-1].startswith("a")


# ── Entities ────────────────────────────────────────────────────────────────


class TestHitTest:
    def test_same_origin_hits(self):
        assert Rocket(x=5, y=5).hit(Invader(x=5, y=5))

    def test_origin_outside_misses(self):
        # attacker (5, 5) lies before the victim's box at (6, 6)
        assert not Rocket(x=5, y=5).hit(Invader(x=6, y=6))

    def test_upper_edge_is_inclusive(self):
        assert Rocket(x=6, y=6).hit(Invader(x=5, y=5))

    def test_just_past_upper_edge_misses(self):
        assert not Rocket(x=6.01, y=5).hit(Invader(x=5, y=5))

    def test_only_attacker_origin_counts(self):
        wide = Bomb(x=3, y=5, width=3)
        assert not wide.hit(Ship(x=5, y=5))

    def test_first_hit_returns_first_match(self):
        ship = Ship(x=10, y=10)
        bombs = [Bomb(x=0, y=0), Bomb(x=10, y=10), Bomb(x=10.5, y=10)]
        assert first_hit(ship, bombs) is bombs[1]

    def test_first_hit_none(self):
        assert first_hit(Ship(x=10, y=10), [Bomb(x=0, y=0)]) is None


class TestEntity:
    def test_kinds(self):
        assert Ship(x=0, y=0).kind == EntityKind.SHIP
        assert Rocket(x=0, y=0).kind == EntityKind.ROCKET
        assert Invader(x=0, y=0).kind == EntityKind.INVADER
        assert Bomb(x=0, y=0).kind == EntityKind.BOMB

    def test_center_narrow(self):
        assert Ship(x=4.5, y=0).center() == 4.5

    def test_center_wide(self):
        assert Ship(x=4, y=0, width=3).center() == 5.5

    def test_sprite_repeats_glyph(self):
        assert Invader(x=0, y=0, width=3).sprite("Y") == "YYY"

    def test_sprite_is_cached(self):
        invader = Invader(x=0, y=0, width=2)
        invader.sprite("Y")
        assert invader.sprite("Z") == "YY"

    def test_draw_every_row(self):
        grid = GridSurface(Bounds(right=10, bottom=5))
        Invader(x=2.7, y=1.2, width=2, height=2).draw(grid, Glyphs())
        assert grid.rows[1][2:4] == "YY"
        assert grid.rows[2][2:4] == "YY"
        assert grid.rows[3] == " " * 10

    def test_invader_provenance(self):
        invader = Invader(x=5, y=4, column=1, row=1)
        assert (invader.column, invader.row) == (1, 1)


class TestMovement:
    bounds = Bounds(right=40, bottom=20)

    def test_ship_steer(self):
        ship = Ship(x=10, y=20, velocity=20)
        ship.steer(-1, 0.25)
        assert ship.x == pytest.approx(5)

    def test_ship_clamp(self):
        ship = Ship(x=-3, y=20)
        ship.clamp(self.bounds)
        assert ship.x == 0
        ship.x = 45
        ship.clamp(self.bounds)
        assert ship.x == 39

    def test_rocket_leaves_top(self):
        rocket = Rocket(x=5, y=0.5, velocity=20)
        assert rocket.advance(0.1, self.bounds) is False

    def test_rocket_moves_up(self):
        rocket = Rocket(x=5, y=10, velocity=20)
        assert rocket.advance(0.1, self.bounds) is True
        assert rocket.y == pytest.approx(8)

    def test_bomb_kept_one_row_past_bottom(self):
        bomb = Bomb(x=5, y=20.5, velocity=5)
        assert bomb.advance(0.1, self.bounds) is True

    def test_bomb_removed_past_bottom(self):
        bomb = Bomb(x=5, y=20.9, velocity=10)
        assert bomb.advance(0.1, self.bounds) is False

    def test_invader_bounces_off_right_wall(self):
        invader = Invader(x=40, y=2, velocity=12)
        assert invader.advance(0.1, self.bounds) is True
        assert invader.velocity == -12
        assert invader.y == 3
        assert invader.x <= 40

    def test_invader_bounces_off_left_wall(self):
        invader = Invader(x=0.5, y=2, velocity=-12)
        invader.advance(0.1, self.bounds)
        assert invader.x == 0
        assert invader.y == 3
        assert invader.velocity == 12

    def test_invader_lands(self):
        invader = Invader(x=10, y=21, velocity=0)
        assert invader.advance(0.1, self.bounds) is False


# ── Config ──────────────────────────────────────────────────────────────────


class TestConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.initial_lives == 3
        assert config.invader_columns == 4
        assert config.invader_rows == 2
        assert config.invader_points == 5

    def test_read_only(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GameConfig().initial_lives = 9

    def test_rocket_cooldown(self):
        assert GameConfig(rocket_max_fire_rate=2).rocket_cooldown_ms == 500

    def test_glyph_for_kind(self):
        glyphs = Glyphs()
        assert glyphs.for_kind(EntityKind.SHIP) == "8"
        assert glyphs.for_kind(EntityKind.BOMB) == "O"

    def test_fire_and_start_share_space(self):
        keys = KeyBindings()
        assert keys.fire == keys.start == 32


# ── Helpers ─────────────────────────────────────────────────────────────────


class TestHelpers:
    def test_bounds_from_cell_size(self):
        b = bounds_from_cell_size(800, 600, 12, 24)
        assert (b.left, b.top, b.right, b.bottom) == (0, 0, 66, 25)

    def test_difficulty(self):
        assert level_difficulty(3, 0.2) == pytest.approx(0.6)
        assert scale_for_difficulty(10, 0.2) == pytest.approx(12)

    def test_level_bonus(self):
        assert level_bonus(1) == 50
        assert level_bonus(4) == 200

    @pytest.mark.parametrize("countdown, expected", [
        (3.0, "3"), (2.0, "3"), (1.99, "2"), (1.0, "2"), (0.5, "1"), (-1, "1"),
    ])
    def test_countdown_message(self, countdown, expected):
        assert countdown_message(countdown) == expected

    def test_status_line(self):
        assert format_status(2, 1, 75) == "Level 2 - Lives 1 - Score 75"

    def test_level_intro_text(self):
        assert format_level_intro(3, "2") == "Start Level 3 in 2"

    def test_space_maps_to_fire_and_start(self):
        actions = actions_for_key(32, KeyBindings())
        assert actions == {GameAction.FIRE, GameAction.START}

    def test_unknown_key_has_no_action(self):
        assert actions_for_key(65, KeyBindings()) == frozenset()
