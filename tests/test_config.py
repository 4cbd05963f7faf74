from regcodec.config import CodecSettings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_RING_SIZE", "LOG_JSON", "ENCODE_ALL_PARAMS"):
        monkeypatch.delenv(name, raising=False)
    settings = CodecSettings()
    assert settings.log_level == "INFO"
    assert settings.log_ring_size == 200
    assert settings.log_json is False
    assert settings.encode_all_params is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ENCODE_ALL_PARAMS", "true")
    monkeypatch.setenv("LOG_RING_SIZE", "10")
    settings = CodecSettings()
    assert settings.encode_all_params is True
    assert settings.log_ring_size == 10
