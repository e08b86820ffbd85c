import pytest

from phenoadapt.surface import STATE_KEYS, InMemoryUI, UICapabilitySurface


class TestInMemoryUI:
    def test_surface_is_abstract(self):
        with pytest.raises(TypeError):
            UICapabilitySurface()

    def test_every_setter_has_a_state_key(self):
        setters = {
            name
            for name in UICapabilitySurface.__abstractmethods__
            if name.startswith(("set_", "enable_"))
        }
        assert setters == set(STATE_KEYS)

    def test_setter_records_call_and_state(self):
        ui = InMemoryUI(initial_state={"theme": "dark"})
        ui.set_text_size("large")
        assert ui.calls == [("set_text_size", "large")]
        assert ui.get_current_state() == {"theme": "dark", "text_size": "large"}

    def test_state_is_a_copy(self):
        ui = InMemoryUI()
        ui.get_current_state()["animations"] = "full"
        assert ui.get_current_state() == {}

    def test_default_metrics(self):
        ui = InMemoryUI()
        assert ui.get_task_time() == 45.0
        assert ui.get_error_count() == 1
        assert ui.get_navigation_score() == 0.85
        assert ui.get_cognitive_load_estimate() == 0.4
        assert ui.get_satisfaction_score() == 0.9

    def test_set_metrics(self):
        ui = InMemoryUI()
        ui.set_metrics(satisfaction=0.2, task_time=12.0)
        assert ui.get_satisfaction_score() == 0.2
        assert ui.get_task_time() == 12.0

    def test_set_unknown_metric(self):
        with pytest.raises(AttributeError):
            InMemoryUI().set_metrics(happiness=1.0)
