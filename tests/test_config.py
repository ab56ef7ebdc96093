from cv_importer.core.config import get_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("CV_IMPORTER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("CV_IMPORTER_MAX_UPLOAD_MB", raising=False)
    get_config.cache_clear()
    try:
        config = get_config()
        assert config.log_level == "INFO"
        assert config.max_upload_bytes == 10 * 1024 * 1024
    finally:
        get_config.cache_clear()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CV_IMPORTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("CV_IMPORTER_MAX_UPLOAD_MB", "2")
    get_config.cache_clear()
    try:
        config = get_config()
        assert config.log_level == "DEBUG"
        assert config.max_upload_bytes == 2 * 1024 * 1024
    finally:
        get_config.cache_clear()
