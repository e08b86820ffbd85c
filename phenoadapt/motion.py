"""
Motion grid interpretation.

A motion sensor reports a 7x7 grid of activations. Cells above
``ACTIVATION_THRESHOLD`` are looked up by ``"<row>,<col>"`` in the
phenotype's preferred motion map, or in ``DEFAULT_MOTION_MAP`` when the
phenotype has none. Active cells without a mapping are skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import numpy as np

logger = logging.getLogger(__name__)

GRID_SIZE = 7
ACTIVATION_THRESHOLD = 0.5

DEFAULT_MOTION_MAP: Dict[str, str] = {
    "0,0": "menu_open",
    "3,3": "select_center",
    "6,6": "escape_action",
    "0,6": "help_request",
    "6,0": "settings_toggle",
}


class MotionGridInterpreter:
    """Map active motion grid cells to phenotype-specific actions."""

    @property
    def default_motion_map(self) -> Dict[str, str]:
        return dict(DEFAULT_MOTION_MAP)

    def motion_map_for(self, phenotype: Any) -> Mapping[str, str]:
        mapping: Optional[Mapping[str, str]] = getattr(phenotype, "preferred_motion_map", None)
        if mapping is None:
            return DEFAULT_MOTION_MAP
        return mapping

    def interpret(self, grid: Any, phenotype: Any = None) -> List[str]:
        """Return actions for the active cells of ``grid`` in row-major order."""
        cells = np.asarray(grid, dtype=float)
        if cells.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(
                f"motion grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {cells.shape}"
            )

        mapping = self.motion_map_for(phenotype)
        actions: List[str] = []
        # argwhere yields indices in row-major order
        for row, col in np.argwhere(cells > ACTIVATION_THRESHOLD):
            action = mapping.get(f"{row},{col}")
            if action:
                actions.append(action)
        logger.debug("Motion grid produced %d actions", len(actions))
        return actions
