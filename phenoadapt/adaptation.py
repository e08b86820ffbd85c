"""
Rule-based interface adaptation.

``ADAPTATION_RULES`` pairs a primary trait with a directive function. The
engine walks the rules in order and applies every directive whose trait the
profile carries, then hands the adapted interface to the learning tracker.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .genes import (
    ALTERNATIVE_COMMUNICATION_PREFERENCE,
    DETAIL_ORIENTED_FOCUS,
    HEIGHTENED_SENSORY_PROCESSING,
)
from .learning import BidirectionalLearningTracker
from .surface import UICapabilitySurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdaptationRecord:
    timestamp: float
    adaptation: str
    success: bool


# -----------------------------------------------------------------------------
# Directive sets
# -----------------------------------------------------------------------------

def reduce_sensory_stimuli(ui: UICapabilitySurface) -> None:
    """Lower visual, auditory and density load."""
    ui.set_animations("minimal")
    ui.set_color_palette("low_contrast")
    ui.set_transitions("instant")

    ui.set_sound_effects("disabled")
    ui.set_notification_style("visual_only")

    ui.set_layout_density("spacious")
    ui.set_text_size("large")


def enhance_detail_visibility(ui: UICapabilitySurface) -> None:
    """Support pattern recognition and make focus easy to follow."""
    ui.enable_grid_overlay(True)
    ui.set_element_borders("visible")
    ui.set_data_visualization("detailed")

    ui.set_focus_style("high_contrast_outline")
    ui.set_active_element_tracking(True)


def enable_alternative_communication(ui: UICapabilitySurface) -> None:
    """Open up non-keyboard input and make feedback explicit."""
    ui.enable_gesture_control(True)
    ui.enable_voice_commands(True)
    ui.enable_symbol_communication(True)

    ui.set_feedback_mode("multimodal")
    ui.set_confirmation_style("explicit")


# Applied in this order; several rules may fire for one profile.
ADAPTATION_RULES: List[Tuple[str, Callable[[UICapabilitySurface], None]]] = [
    (HEIGHTENED_SENSORY_PROCESSING, reduce_sensory_stimuli),
    (DETAIL_ORIENTED_FOCUS, enhance_detail_visibility),
    (ALTERNATIVE_COMMUNICATION_PREFERENCE, enable_alternative_communication),
]


class AdaptationRuleEngine:
    """Apply trait-driven directives to a UI and feed the result to learning."""

    def __init__(
        self,
        tracker: Optional[BidirectionalLearningTracker] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.tracker = tracker if tracker is not None else BidirectionalLearningTracker()
        self.adaptation_memory: List[AdaptationRecord] = []
        self._clock = clock

    def adapt(self, profile: Any, ui: UICapabilitySurface) -> UICapabilitySurface:
        """Adapt ``ui`` for ``profile`` and record an observation.

        ``profile`` only needs a ``primary_traits`` sequence. Errors raised by
        the UI propagate and no observation is recorded for that pass.
        """
        traits = profile.primary_traits
        applied = []
        for trait, directive in ADAPTATION_RULES:
            if trait not in traits:
                continue
            directive(ui)
            applied.append(directive.__name__)
            if directive is reduce_sensory_stimuli:
                self.adaptation_memory.append(
                    AdaptationRecord(
                        timestamp=self._clock(),
                        adaptation="reduced_stimuli",
                        success=True,
                    )
                )

        logger.info("Adaptation pass applied %s", applied or "no directives")
        self.tracker.observe(ui, profile)
        return ui
