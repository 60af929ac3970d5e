"""Settings validation tests."""

import pytest

from restboard.config import DEFAULT_JWT_SECRET, Settings


def test_defaults():
    s = Settings()
    assert s.jwt_secret == DEFAULT_JWT_SECRET
    assert s.token_expire_seconds == 30
    assert s.protected_operations == ["create_message"]
    assert s.port == 3000


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("RESTBOARD_TOKEN_EXPIRE_SECONDS", "120")
    monkeypatch.setenv("RESTBOARD_PROTECTED_OPERATIONS", '["create_message", "delete_message"]')
    s = Settings()
    assert s.token_expire_seconds == 120
    assert s.protected_operations == ["create_message", "delete_message"]


def test_default_secret_refused_in_production():
    with pytest.raises(ValueError, match="RESTBOARD_JWT_SECRET"):
        Settings(environment="production")


def test_custom_secret_allowed_in_production():
    s = Settings(environment="production", jwt_secret="s3cret-value")
    assert s.jwt_secret == "s3cret-value"


def test_unknown_operation_refused():
    with pytest.raises(ValueError, match="rename_user"):
        Settings(protected_operations=["rename_user"])


def test_debug_flag_reaches_app(monkeypatch):
    from restboard.config import settings
    from restboard.main import create_app

    monkeypatch.setattr(settings, "debug", True)
    assert create_app().debug is True
