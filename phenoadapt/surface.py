"""
UI capability surface.

The adaptation engine never touches a rendered interface directly. It calls
into a ``UICapabilitySurface``: a fixed set of fire-and-forget setters and
pure-read accessors that a concrete UI adapter implements.

``InMemoryUI`` is a complete adapter that keeps the applied settings in a
plain mapping and records every setter call in order. It backs the test
suite and the Streamlit dashboard.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple


class UICapabilitySurface(ABC):
    """Capabilities an interface must expose to be adapted and observed."""

    # -- sensory -----------------------------------------------------------
    @abstractmethod
    def set_animations(self, level: str) -> None: ...

    @abstractmethod
    def set_color_palette(self, palette: str) -> None: ...

    @abstractmethod
    def set_transitions(self, kind: str) -> None: ...

    @abstractmethod
    def set_sound_effects(self, state: str) -> None: ...

    @abstractmethod
    def set_notification_style(self, style: str) -> None: ...

    @abstractmethod
    def set_layout_density(self, density: str) -> None: ...

    @abstractmethod
    def set_text_size(self, size: str) -> None: ...

    # -- detail ------------------------------------------------------------
    @abstractmethod
    def enable_grid_overlay(self, enabled: bool) -> None: ...

    @abstractmethod
    def set_element_borders(self, borders: str) -> None: ...

    @abstractmethod
    def set_data_visualization(self, mode: str) -> None: ...

    @abstractmethod
    def set_focus_style(self, style: str) -> None: ...

    @abstractmethod
    def set_active_element_tracking(self, enabled: bool) -> None: ...

    # -- communication -----------------------------------------------------
    @abstractmethod
    def enable_gesture_control(self, enabled: bool) -> None: ...

    @abstractmethod
    def enable_voice_commands(self, enabled: bool) -> None: ...

    @abstractmethod
    def enable_symbol_communication(self, enabled: bool) -> None: ...

    @abstractmethod
    def set_feedback_mode(self, mode: str) -> None: ...

    @abstractmethod
    def set_confirmation_style(self, style: str) -> None: ...

    # -- accessors ---------------------------------------------------------
    @abstractmethod
    def get_current_state(self) -> Dict[str, Any]: ...

    @abstractmethod
    def get_task_time(self) -> float: ...

    @abstractmethod
    def get_error_count(self) -> float: ...

    @abstractmethod
    def get_navigation_score(self) -> float: ...

    @abstractmethod
    def get_cognitive_load_estimate(self) -> float: ...

    @abstractmethod
    def get_satisfaction_score(self) -> float: ...


# Setter name -> key under which InMemoryUI exposes the applied value.
STATE_KEYS: Dict[str, str] = {
    "set_animations": "animations",
    "set_color_palette": "color_palette",
    "set_transitions": "transitions",
    "set_sound_effects": "sound_effects",
    "set_notification_style": "notification_style",
    "set_layout_density": "layout_density",
    "set_text_size": "text_size",
    "enable_grid_overlay": "grid_overlay",
    "set_element_borders": "element_borders",
    "set_data_visualization": "data_visualization",
    "set_focus_style": "focus_style",
    "set_active_element_tracking": "active_element_tracking",
    "enable_gesture_control": "gesture_control",
    "enable_voice_commands": "voice_commands",
    "enable_symbol_communication": "symbol_communication",
    "set_feedback_mode": "feedback_mode",
    "set_confirmation_style": "confirmation_style",
}


class InMemoryUI(UICapabilitySurface):
    """Capability surface that stores settings in memory and logs calls."""

    def __init__(
        self,
        initial_state: Optional[Mapping[str, Any]] = None,
        task_time: float = 45.0,
        error_count: float = 1,
        navigation_score: float = 0.85,
        cognitive_load: float = 0.4,
        satisfaction: float = 0.9,
    ) -> None:
        self._state: Dict[str, Any] = dict(initial_state or {})
        self.calls: List[Tuple[str, Any]] = []
        self.task_time = task_time
        self.error_count = error_count
        self.navigation_score = navigation_score
        self.cognitive_load = cognitive_load
        self.satisfaction = satisfaction

    def set_metrics(self, **values: float) -> None:
        """Update one or more metric values reported by the accessors."""
        for name, value in values.items():
            if name not in (
                "task_time",
                "error_count",
                "navigation_score",
                "cognitive_load",
                "satisfaction",
            ):
                raise AttributeError(f"unknown metric: {name}")
            setattr(self, name, value)

    def _apply(self, method: str, value: Any) -> None:
        self.calls.append((method, value))
        self._state[STATE_KEYS[method]] = value

    def set_animations(self, level: str) -> None:
        self._apply("set_animations", level)

    def set_color_palette(self, palette: str) -> None:
        self._apply("set_color_palette", palette)

    def set_transitions(self, kind: str) -> None:
        self._apply("set_transitions", kind)

    def set_sound_effects(self, state: str) -> None:
        self._apply("set_sound_effects", state)

    def set_notification_style(self, style: str) -> None:
        self._apply("set_notification_style", style)

    def set_layout_density(self, density: str) -> None:
        self._apply("set_layout_density", density)

    def set_text_size(self, size: str) -> None:
        self._apply("set_text_size", size)

    def enable_grid_overlay(self, enabled: bool) -> None:
        self._apply("enable_grid_overlay", enabled)

    def set_element_borders(self, borders: str) -> None:
        self._apply("set_element_borders", borders)

    def set_data_visualization(self, mode: str) -> None:
        self._apply("set_data_visualization", mode)

    def set_focus_style(self, style: str) -> None:
        self._apply("set_focus_style", style)

    def set_active_element_tracking(self, enabled: bool) -> None:
        self._apply("set_active_element_tracking", enabled)

    def enable_gesture_control(self, enabled: bool) -> None:
        self._apply("enable_gesture_control", enabled)

    def enable_voice_commands(self, enabled: bool) -> None:
        self._apply("enable_voice_commands", enabled)

    def enable_symbol_communication(self, enabled: bool) -> None:
        self._apply("enable_symbol_communication", enabled)

    def set_feedback_mode(self, mode: str) -> None:
        self._apply("set_feedback_mode", mode)

    def set_confirmation_style(self, style: str) -> None:
        self._apply("set_confirmation_style", style)

    def get_current_state(self) -> Dict[str, Any]:
        return dict(self._state)

    def get_task_time(self) -> float:
        return self.task_time

    def get_error_count(self) -> float:
        return self.error_count

    def get_navigation_score(self) -> float:
        return self.navigation_score

    def get_cognitive_load_estimate(self) -> float:
        return self.cognitive_load

    def get_satisfaction_score(self) -> float:
        return self.satisfaction
