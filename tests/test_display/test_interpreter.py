"""Tests for the command interpreter."""

from __future__ import annotations

import pytest

from pixelgrid.display.colors import Color
from pixelgrid.display.commands import MoveCursor, SetColor
from pixelgrid.display.grid import Grid
from pixelgrid.display.interpreter import (
    Cursor,
    Interpreter,
    create_display,
    process_commands,
)
from pixelgrid.errors import CursorOutOfBounds, InvalidColor


class TestHappyPath:
    def test_move_and_paint(self, red_grid: Grid) -> None:
        result = process_commands(red_grid, [1, 2, 2, 2, 3])

        expected = Grid.create(4, 4, Color.RED)
        expected.set_color(2, 2, Color.CYAN)
        assert result == expected

    def test_order_is_preserved(self, red_grid: Grid) -> None:
        process_commands(red_grid, [1, 1, 1, 2, 2, 1, 2, 2, 2, 3])

        expected = Grid.create(4, 4, Color.RED)
        expected.set_color(1, 1, Color.GREEN)
        expected.set_color(2, 2, Color.CYAN)
        assert red_grid == expected

    def test_paint_without_move_uses_origin(self, red_grid: Grid) -> None:
        process_commands(red_grid, [2, 2])
        assert red_grid.get_color(0, 0) is Color.GREEN

    def test_repeated_set_colour_is_idempotent(self) -> None:
        once = process_commands(Grid.create(4, 4, Color.RED), [1, 3, 0, 2, 2])
        twice = process_commands(Grid.create(4, 4, Color.RED), [1, 3, 0, 2, 2, 2, 2])
        assert once == twice

    def test_last_colour_wins(self, red_grid: Grid) -> None:
        process_commands(red_grid, [2, 2, 2, 3])
        assert red_grid.get_color(0, 0) is Color.CYAN

    def test_edge_cells_reachable(self, wide_grid: Grid) -> None:
        process_commands(wide_grid, [1, 4, 1, 2, 1])
        assert wide_grid.get_color(4, 1) is Color.RED

    def test_empty_queue_leaves_default(self, red_grid: Grid) -> None:
        assert process_commands(red_grid, []) == Grid.create(4, 4, Color.RED)


class TestFailures:
    def test_cursor_out_of_bounds(self, red_grid: Grid) -> None:
        with pytest.raises(CursorOutOfBounds) as info:
            process_commands(red_grid, [1, 5, 5, 2, 3])
        assert (info.value.x, info.value.y) == (5, 5)
        assert red_grid == Grid.create(4, 4, Color.RED)

    def test_x_equal_to_width_is_out_of_bounds(self, wide_grid: Grid) -> None:
        with pytest.raises(CursorOutOfBounds):
            process_commands(wide_grid, [1, 5, 0])

    def test_y_equal_to_height_is_out_of_bounds(self, wide_grid: Grid) -> None:
        with pytest.raises(CursorOutOfBounds):
            process_commands(wide_grid, [1, 0, 2])

    def test_invalid_colour(self, red_grid: Grid) -> None:
        with pytest.raises(InvalidColor):
            process_commands(red_grid, [1, 2, 2, 2, 5])
        assert red_grid == Grid.create(4, 4, Color.RED)

    def test_earlier_commands_stay_applied(self, interpreter: Interpreter) -> None:
        commands = [MoveCursor(1, 1), SetColor(2), MoveCursor(9, 9), SetColor(3)]
        with pytest.raises(CursorOutOfBounds):
            interpreter.run(commands)

        expected = Grid.create(4, 4, Color.RED)
        expected.set_color(1, 1, Color.GREEN)
        assert interpreter.grid == expected
        assert interpreter.applied == 2
        assert interpreter.cursor == Cursor(1, 1)

    def test_unvalidated_colour_rejected_before_write(self, interpreter: Interpreter) -> None:
        with pytest.raises(InvalidColor):
            interpreter.run([SetColor(4)])
        assert interpreter.grid == Grid.create(4, 4, Color.RED)

    def test_unknown_command_type(self, interpreter: Interpreter) -> None:
        with pytest.raises(TypeError):
            interpreter.apply("paint")  # type: ignore[arg-type]


class TestCursor:
    def test_starts_at_origin(self, interpreter: Interpreter) -> None:
        assert interpreter.cursor == Cursor(0, 0)

    def test_move_updates_cursor_only(self, interpreter: Interpreter) -> None:
        interpreter.apply(MoveCursor(3, 2))
        assert interpreter.cursor == Cursor(3, 2)
        assert interpreter.grid == Grid.create(4, 4, Color.RED)

    def test_failed_move_keeps_cursor(self, interpreter: Interpreter) -> None:
        interpreter.apply(MoveCursor(1, 2))
        with pytest.raises(CursorOutOfBounds):
            interpreter.apply(MoveCursor(4, 0))
        assert interpreter.cursor == Cursor(1, 2)


class TestCreateDisplay:
    def test_builds_filled_grid(self) -> None:
        display = create_display(3, 2, 2)
        assert display.width == 3
        assert display.height == 2
        assert display.grid == Grid.create(3, 2, Color.GREEN)

    def test_rejects_bad_default(self) -> None:
        with pytest.raises(InvalidColor):
            create_display(4, 4, 7)
