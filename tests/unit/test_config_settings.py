"""Unit tests for application settings configuration."""

from pathlib import Path

import blog_api.config
from blog_api.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(blog_api.config.__file__).resolve().parents[1] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.jwt_issuer == "BlogApi"
    assert settings.jwt_audience == "BlogApiAudience"
    assert settings.jwt_expire_minutes == 15
    assert settings.login_rate_limit == "5/minute"
    assert settings.upload_default_prefix == "blog"
    assert "image/png" in settings.upload_allowed_content_types
    assert settings.max_upload_size_bytes == 20 * 1024 * 1024


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("MAX_UPLOAD_SIZE_MB", "3")
    settings = Settings(_env_file=None)

    assert settings.jwt_secret == "from-env"
    assert settings.max_upload_size_bytes == 3 * 1024 * 1024
