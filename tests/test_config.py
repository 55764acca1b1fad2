"""Unit tests for settings validation."""
import pytest
from pydantic import ValidationError

from weddingsite.config import Settings


def test_platform_domains_are_parsed():
    s = Settings(PLATFORM_DOMAINS=" Localhost, weddings.test ,,")
    assert s.platform_domains == ["localhost", "weddings.test"]


def test_database_url_overrides_postgres_parts():
    s = Settings(DATABASE_URL="sqlite:///./dev.db")
    assert s.SQLALCHEMY_DATABASE_URI == "sqlite:///./dev.db"


def test_postgres_uri_from_parts():
    s = Settings(DATABASE_URL="", POSTGRES_USER="u", POSTGRES_PASSWORD="p", POSTGRES_SERVER="db", POSTGRES_DB="sites")
    assert s.SQLALCHEMY_DATABASE_URI == "postgresql://u:p@db/sites"


def test_unknown_match_mode_is_rejected():
    with pytest.raises(ValidationError):
        Settings(PLATFORM_DOMAIN_MATCH="regex")


def test_production_rejects_default_secret():
    with pytest.raises(ValidationError):
        Settings(APP_ENV="production", SECRET_KEY="change_this", DATABASE_URL="postgresql://x:y@db/z")


def test_production_warns_on_substring_matching():
    with pytest.warns(UserWarning):
        Settings(
            APP_ENV="production",
            SECRET_KEY="k" * 40,
            DATABASE_URL="postgresql://x:y@db/z",
            PLATFORM_DOMAIN_MATCH="substring",
        )


def test_edge_targets_are_configurable():
    s = Settings(EDGE_A_RECORD_IP="10.0.0.1", EDGE_CNAME_TARGET="edge.staging.test")
    assert s.EDGE_A_RECORD_IP == "10.0.0.1"
    assert s.EDGE_CNAME_TARGET == "edge.staging.test"
