import pytest

from eventemitter.config import EmitterConfig


def test_defaults(monkeypatch):
    for name in ("MAX_LISTENERS", "LEAK_WARNINGS", "LOGGER"):
        monkeypatch.delenv(f"EVENTEMITTER_{name}", raising=False)
    config = EmitterConfig.from_env()
    assert config == EmitterConfig()
    assert config.max_listeners == 10
    assert config.effective_max_listeners() == 10


def test_from_env(monkeypatch):
    monkeypatch.setenv("EVENTEMITTER_MAX_LISTENERS", "25")
    monkeypatch.setenv("EVENTEMITTER_LEAK_WARNINGS", "no")
    monkeypatch.setenv("EVENTEMITTER_LOGGER", "app.events")
    config = EmitterConfig.from_env()
    assert config.max_listeners == 25
    assert not config.leak_warnings
    assert config.logger_name == "app.events"
    assert config.effective_max_listeners() == 0


@pytest.mark.parametrize("raw", ["many", "-1"])
def test_from_env_rejects_bad_limit(monkeypatch, raw):
    monkeypatch.setenv("EVENTEMITTER_MAX_LISTENERS", raw)
    with pytest.raises(ValueError, match="EVENTEMITTER_MAX_LISTENERS"):
        EmitterConfig.from_env()
