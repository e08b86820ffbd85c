import logging

from phenoadapt.logging_config import setup_logging


class TestSetupLogging:
    def test_quiets_web_stack_loggers(self):
        setup_logging("debug")
        for name in ("streamlit", "tornado", "urllib3"):
            assert logging.getLogger(name).level == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        setup_logging()
        assert logging.getLogger("streamlit").level == logging.WARNING
