import structlog
from structlog.testing import capture_logs

from attrguard import ValidationEngine, configure_logging
from attrguard.config import Settings, get_settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("LOG_LEVEL", "DEBUG", "LOG_EVALUATIONS", "MAX_VALUE_REPR"):
            monkeypatch.delenv(f"ATTRGUARD_{name}", raising=False)
        settings = Settings()
        assert settings.LOG_LEVEL == "info"
        assert settings.DEBUG is False
        assert settings.LOG_EVALUATIONS is False
        assert settings.MAX_VALUE_REPR == 80

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("ATTRGUARD_MAX_VALUE_REPR", "12")
        monkeypatch.setenv("ATTRGUARD_LOG_EVALUATIONS", "true")
        settings = Settings()
        assert settings.MAX_VALUE_REPR == 12
        assert settings.LOG_EVALUATIONS is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_engine_uses_settings(self, monkeypatch):
        monkeypatch.setenv("ATTRGUARD_MAX_VALUE_REPR", "12")
        monkeypatch.setenv("ATTRGUARD_LOG_EVALUATIONS", "true")
        engine = ValidationEngine()
        assert engine.max_value_repr == 12
        assert engine.log_evaluations is True

    def test_explicit_arguments_win(self, monkeypatch):
        monkeypatch.setenv("ATTRGUARD_LOG_EVALUATIONS", "true")
        engine = ValidationEngine(max_value_repr=5, log_evaluations=False)
        assert engine.max_value_repr == 5
        assert engine.log_evaluations is False


class TestLogging:

    def test_configure_logging_filters_below_level(self):
        configure_logging(Settings(LOG_LEVEL="warning"))
        logger = structlog.get_logger()
        with capture_logs() as logs:
            logger.info("dropped")
            logger.warning("kept")
        assert [e["event"] for e in logs] == ["kept"]

    def test_configure_logging_debug_renderer(self):
        configure_logging(Settings(DEBUG=True))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_configure_logging_json_renderer(self):
        configure_logging(Settings(DEBUG=False))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
