import pytest

from weightemit.config import EmitterConfig


def test_defaults():
    config = EmitterConfig()
    assert config.separator == "."
    assert not config.prune_empty_buckets
    assert not config.log_dispatch


def test_from_env(monkeypatch):
    monkeypatch.setenv("WEIGHTEMIT_SEPARATOR", ":")
    monkeypatch.setenv("WEIGHTEMIT_PRUNE_EMPTY_BUCKETS", "yes")
    monkeypatch.setenv("WEIGHTEMIT_LOG_DISPATCH", "1")
    config = EmitterConfig.from_env()
    assert config == EmitterConfig(separator=":", prune_empty_buckets=True, log_dispatch=True)


def test_from_env_defaults(monkeypatch):
    for name in ("SEPARATOR", "PRUNE_EMPTY_BUCKETS", "LOG_DISPATCH"):
        monkeypatch.delenv(f"WEIGHTEMIT_{name}", raising=False)
    assert EmitterConfig.from_env() == EmitterConfig()


@pytest.mark.parametrize("separator", ["", "ab", "x", "1", "-", "+"])
def test_invalid_separator(separator):
    with pytest.raises(ValueError):
        EmitterConfig(separator=separator)
