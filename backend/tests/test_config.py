"""Settings — verifies defaults and environment overrides."""

from modroster.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.max_member_mods == 200
    assert settings.validate_catalog_on_startup is True


def test_environment_override(monkeypatch):
    monkeypatch.setenv("MODROSTER_MAX_MEMBER_MODS", "5")
    monkeypatch.setenv("MODROSTER_LOG_LEVEL", "debug")
    settings = Settings(_env_file=None)
    assert settings.max_member_mods == 5
    assert settings.log_level == "DEBUG"
