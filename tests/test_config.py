"""Tests for configuration loading."""

from config import (
    COMPARE_KEY,
    FAVORITES_KEY,
    FEATURE_FLAG_IDS,
    MAX_COMPARE_ITEMS,
    config,
    get_default_feature_flags,
    get_popular_tags,
    get_seed_categories,
    get_sort_options,
)


class TestDirectoryConfig:
    """Tests for the YAML catalogue."""

    def test_seed_categories(self):
        categories = get_seed_categories()
        slugs = [c.slug for c in categories]

        assert len(categories) == 5
        assert "software-technology" in slugs
        assert len(set(c.id for c in categories)) == 5

    def test_feature_flags_are_known(self):
        """Test that every configured flag is one the application checks."""
        flags = get_default_feature_flags()
        assert set(flags) == set(FEATURE_FLAG_IDS)
        assert flags["reviews_system"] is True
        assert flags["ai_comparison"] is False

    def test_sort_options(self):
        assert [o["value"] for o in get_sort_options()] == ["name", "rating", "newest", "popular"]

    def test_popular_tags(self):
        assert "CRM" in get_popular_tags()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_selection_defaults(self):
        assert config.storage.compare_capacity == MAX_COMPARE_ITEMS == 3
        assert config.storage.favorites_key == FAVORITES_KEY
        assert config.storage.compare_key == COMPARE_KEY

    def test_api_settings_from_environment(self, monkeypatch):
        from api.config import Settings

        monkeypatch.setenv("DIRECTORY_MAX_PAGE_SIZE", "50")
        monkeypatch.setenv("DIRECTORY_DEBUG", "true")

        settings = Settings()
        assert settings.max_page_size == 50
        assert settings.debug is True


class TestLogging:
    """Tests for logger setup."""

    def test_child_loggers(self):
        from config.logging_config import get_logger

        assert get_logger("listing").name == "supplier_directory.listing"
        assert get_logger().name == "supplier_directory"

    def test_setup_logging_to_file(self, tmp_path):
        from config.logging_config import setup_logging

        log_file = tmp_path / "logs" / "directory.log"
        logger = setup_logging(log_level="debug", log_file=log_file, log_to_console=False)
        logger.debug("hello from the directory")

        for handler in logger.handlers:
            handler.flush()
        assert "hello from the directory" in log_file.read_text(encoding="utf-8")

        setup_logging(log_level="INFO")

    def test_unknown_level(self):
        import pytest

        from config.logging_config import setup_logging

        with pytest.raises(ValueError):
            setup_logging(log_level="LOUD")

    def test_daily_log_file(self):
        from datetime import date

        from config.logging_config import daily_log_file

        path = daily_log_file("api", day=date(2024, 6, 1))
        assert path.name == "api_20240601.log"
