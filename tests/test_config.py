"""
Tests for environment-driven settings.
"""

from icacher import KeyedCache, Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ICACHER_DEFAULT_TTL_SECONDS", raising=False)
        monkeypatch.delenv("ICACHER_KEYED_MAX_SIZE", raising=False)
        config = Settings(_env_file=None)
        assert config.default_ttl_seconds == 300.0
        assert config.keyed_max_size is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ICACHER_DEFAULT_TTL_SECONDS", "1.5")
        monkeypatch.setenv("ICACHER_KEYED_MAX_SIZE", "8")
        config = Settings(_env_file=None)
        assert config.default_ttl_seconds == 1.5
        assert config.keyed_max_size == 8

    def test_keyed_cache_uses_settings_default(self, monkeypatch):
        from icacher.caching import keyed_cache

        monkeypatch.setattr(keyed_cache.settings, "keyed_max_size", 2)
        cache = KeyedCache(lambda x: x)
        assert cache.get_max_size() == 2
