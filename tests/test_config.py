"""Tests for settings"""

from seatkit.config import Settings


def test_test_environment_uses_test_database():
    settings = Settings(
        environment="test",
        database_url="postgresql+asyncpg://db/main",
        test_database_url="sqlite+aiosqlite:///:memory:",
    )

    assert settings.effective_database_url == "sqlite+aiosqlite:///:memory:"


def test_other_environments_use_main_database():
    settings = Settings(
        environment="production",
        database_url="postgresql+asyncpg://db/main",
        test_database_url="sqlite+aiosqlite:///:memory:",
    )

    assert settings.effective_database_url == "postgresql+asyncpg://db/main"


def test_pool_options_follow_environment():
    assert Settings(environment="production").pool_options["pool_size"] == 30
    assert Settings(environment="test").pool_options["pool_timeout"] == 5
    assert Settings(environment="development", db_pool_size=7).pool_options["pool_size"] == 7


def test_cors_origins_list():
    settings = Settings(cors_origins="http://a.test, http://b.test")

    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
