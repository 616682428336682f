"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from claude_md_sync.utils.constants import (
    DEFAULT_DIFF_EXECUTABLE,
    DEFAULT_EXPECTED_MARKER,
    DEFAULT_GH_EXECUTABLE,
    DEFAULT_GIT_EXECUTABLE,
    DEFAULT_GITHUB_API_URL,
)


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL

    # External executables
    GH_EXECUTABLE: str = DEFAULT_GH_EXECUTABLE
    GIT_EXECUTABLE: str = DEFAULT_GIT_EXECUTABLE
    DIFF_EXECUTABLE: str = DEFAULT_DIFF_EXECUTABLE

    # Verification settings
    EXPECTED_MARKER: str = DEFAULT_EXPECTED_MARKER


settings = Settings()
