import importlib

import pytest

import passgen.config as config_module


@pytest.fixture
def reload_config(monkeypatch):
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config_module).Config

    yield _reload
    monkeypatch.delenv("PASSGEN_MAX_ATTEMPTS", raising=False)
    importlib.reload(config_module)


class TestMaxAttempts:
    """PASSGEN_MAX_ATTEMPTS never breaks the import."""

    def test_default(self, monkeypatch, reload_config):
        monkeypatch.delenv("PASSGEN_MAX_ATTEMPTS", raising=False)
        assert reload_config().MAX_ATTEMPTS == 1000

    def test_valid_value(self, reload_config):
        assert reload_config(PASSGEN_MAX_ATTEMPTS="25").MAX_ATTEMPTS == 25

    def test_not_a_number_falls_back(self, reload_config):
        assert reload_config(PASSGEN_MAX_ATTEMPTS="lots").MAX_ATTEMPTS == 1000

    @pytest.mark.parametrize("raw", ["0", "-3"])
    def test_too_small_is_raised_to_one(self, raw, reload_config):
        assert reload_config(PASSGEN_MAX_ATTEMPTS=raw).MAX_ATTEMPTS == 1

    def test_blank_uses_default(self, reload_config):
        assert reload_config(PASSGEN_MAX_ATTEMPTS="  ").MAX_ATTEMPTS == 1000
