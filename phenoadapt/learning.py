"""
Bidirectional learning for phenoadapt.

The tracker watches adapted interfaces. Each observation captures the UI
state, the phenotype that drove the adaptation and a handful of interaction
metrics read from the capability surface. High-satisfaction states in the
recent window are counted in a success index that lives as long as the
tracker, so states that keep pleasing the user rise to the top.
"""

from __future__ import annotations

import json
import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple

from .surface import UICapabilitySurface

logger = logging.getLogger(__name__)

PATTERN_WINDOW = 10
TOP_PATTERNS = 5
SATISFACTION_THRESHOLD = 0.8


@dataclass(frozen=True)
class InteractionMetrics:
    task_completion_time: float
    error_rate: float
    navigation_efficiency: float
    cognitive_load: float
    user_satisfaction: float


@dataclass(frozen=True)
class Observation:
    """One adapted interface as seen by the tracker."""

    timestamp: float
    ui_state_snapshot: Dict[str, Any]
    phenotype_state: Any
    interaction_metrics: InteractionMetrics
    state_key: str


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"UI state value of type {type(value).__name__} is not serialisable")


def canonical_state_key(state: Dict[str, Any]) -> str:
    """Serialise ``state`` so that equal content always gives the same key.

    Keys are sorted at every level, sets become sorted lists and tuples become
    lists. Anything JSON cannot represent raises ``TypeError``.
    """
    return json.dumps(state, sort_keys=True, separators=(",", ":"), default=_json_default)


def capture_metrics(ui: UICapabilitySurface) -> InteractionMetrics:
    return InteractionMetrics(
        task_completion_time=ui.get_task_time(),
        error_rate=ui.get_error_count(),
        navigation_efficiency=ui.get_navigation_score(),
        cognitive_load=ui.get_cognitive_load_estimate(),
        user_satisfaction=ui.get_satisfaction_score(),
    )


class BidirectionalLearningTracker:
    """Observation log plus a lifetime success index over UI states.

    Not safe for concurrent use; keep one tracker per session or guard
    ``observe`` and ``analyze_pattern`` with a lock.
    """

    def __init__(
        self,
        window: int = PATTERN_WINDOW,
        top_k: int = TOP_PATTERNS,
        satisfaction_threshold: float = SATISFACTION_THRESHOLD,
        max_observations: Optional[int] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if window <= 0:
            raise ValueError("window must be positive")
        if top_k <= 0:
            raise ValueError("top_k must be positive")
        if max_observations is not None and max_observations < window:
            raise ValueError("max_observations must be at least the pattern window")
        self.window = window
        self.top_k = top_k
        self.satisfaction_threshold = satisfaction_threshold
        self._clock = clock
        self._observations: Deque[Observation] = deque(maxlen=max_observations)
        self._success: Dict[str, int] = {}

    @property
    def observations(self) -> Tuple[Observation, ...]:
        return tuple(self._observations)

    @property
    def success_index(self) -> Dict[str, int]:
        return dict(self._success)

    def observe(self, ui: UICapabilitySurface, phenotype: Any) -> Observation:
        """Record the current state of ``ui`` and refresh the success index.

        The state is serialised before anything is recorded, so a state that
        cannot be serialised raises ``TypeError`` and leaves the tracker as it
        was. The stored snapshot is rebuilt from that key and shares nothing
        with the UI.
        """
        key = canonical_state_key(ui.get_current_state())
        observation = Observation(
            timestamp=self._clock(),
            ui_state_snapshot=json.loads(key),
            phenotype_state=phenotype,
            interaction_metrics=capture_metrics(ui),
            state_key=key,
        )
        self._observations.append(observation)
        logger.debug(
            "Observation %d recorded (satisfaction=%s)",
            len(self._observations),
            observation.interaction_metrics.user_satisfaction,
        )
        self.analyze_pattern()
        return observation

    def ranked_states(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Known states by descending success count without counting again."""
        ranked = sorted(self._success.items(), key=lambda item: item[1], reverse=True)
        if limit is None:
            limit = self.top_k
        return [json.loads(key) for key, _count in ranked[:limit]]

    def analyze_pattern(self) -> List[Dict[str, Any]]:
        """Count satisfying states in the recent window and rank all states.

        Every call adds the window's satisfying states to the success index
        again; counts are never reset. Returns at most ``top_k`` states by
        descending count, ties kept in first-seen order.
        """
        recent = list(self._observations)[-self.window:]
        for obs in recent:
            if obs.interaction_metrics.user_satisfaction > self.satisfaction_threshold:
                self._success[obs.state_key] = self._success.get(obs.state_key, 0) + 1
        return self.ranked_states()
