from types import SimpleNamespace

import numpy as np
import pytest

from phenoadapt.motion import DEFAULT_MOTION_MAP, MotionGridInterpreter


def grid_with(*cells, value=1.0):
    grid = np.zeros((7, 7))
    for row, col in cells:
        grid[row, col] = value
    return grid


class TestMotionGridInterpreter:
    def setup_method(self):
        self.interpreter = MotionGridInterpreter()

    def test_all_zero_grid(self):
        assert self.interpreter.interpret(np.zeros((7, 7))) == []

    def test_center_cell(self):
        assert self.interpreter.interpret(grid_with((3, 3), value=0.6)) == ["select_center"]

    def test_row_major_order(self):
        grid = grid_with((6, 6), (6, 0), (3, 3), (0, 6), (0, 0))
        assert self.interpreter.interpret(grid) == [
            "menu_open",
            "help_request",
            "select_center",
            "settings_toggle",
            "escape_action",
        ]

    def test_order_ignores_magnitude(self):
        grid = grid_with((0, 0), value=0.51)
        grid[6, 6] = 1.0
        assert self.interpreter.interpret(grid) == ["menu_open", "escape_action"]

    def test_threshold_is_strict(self):
        assert self.interpreter.interpret(grid_with((3, 3), value=0.5)) == []

    def test_unmapped_cells_are_skipped(self):
        grid = [
            [0, 0, 0, 0.8, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0.9, 0, 0, 0, 0, 0, 0.7],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0, 0, 0, 0],
            [0, 0, 0, 0.6, 0, 0, 0],
        ]
        assert self.interpreter.interpret(grid) == []

    def test_preferred_map_replaces_default(self):
        phenotype = SimpleNamespace(preferred_motion_map={"1,1": "zoom_in"})
        grid = grid_with((1, 1), (0, 0))
        assert self.interpreter.interpret(grid, phenotype) == ["zoom_in"]

    def test_empty_preferred_map_maps_nothing(self):
        phenotype = SimpleNamespace(preferred_motion_map={})
        assert self.interpreter.interpret(grid_with((3, 3)), phenotype) == []

    def test_profile_without_map_uses_default(self, full_profile):
        assert self.interpreter.interpret(grid_with((6, 0)), full_profile) == ["settings_toggle"]

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            self.interpreter.interpret(np.zeros((5, 7)))

    def test_default_map(self):
        assert self.interpreter.default_motion_map == {
            "0,0": "menu_open",
            "3,3": "select_center",
            "6,6": "escape_action",
            "0,6": "help_request",
            "6,0": "settings_toggle",
        }

    def test_default_map_is_a_copy(self):
        self.interpreter.default_motion_map["1,1"] = "oops"
        assert "1,1" not in DEFAULT_MOTION_MAP
