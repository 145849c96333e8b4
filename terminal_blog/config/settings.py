"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from terminal_blog.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_CONTENT_API_URL = (
    "https://api.github.com/repos/bigdaditor/bigdaditor.github.io/contents"
)
CONTENT_BACKENDS = ("http", "static")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.content_backend: str = self._get_choice_env(
            "BLOG_CONTENT_BACKEND", "http", CONTENT_BACKENDS
        )
        self.content_api_url: str = self._get_env(
            "BLOG_CONTENT_API_URL", DEFAULT_CONTENT_API_URL
        ).rstrip("/")
        self.content_token: str | None = os.getenv("BLOG_CONTENT_TOKEN") or None
        self.posts_dir: str = self._get_env("BLOG_POSTS_DIR", "_posts").strip("/")
        self.http_timeout: float = self._get_positive_float_env(
            "BLOG_HTTP_TIMEOUT", 10.0
        )
        self.prompt_user: str = self._get_env("BLOG_PROMPT_USER", "bigdaditor")
        self.prompt_host: str = self._get_env("BLOG_PROMPT_HOST", "blog")
        self.max_sessions: int = self._get_positive_int_env("BLOG_MAX_SESSIONS", 1000)

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_choice_env(self, key: str, default: str, choices: tuple[str, ...]) -> str:
        """Get an environment variable restricted to a set of values."""
        value = self._get_env(key, default).strip().lower()
        if value not in choices:
            raise ConfigurationError(
                f"{key} must be one of {', '.join(choices)} (got {value!r})"
            )
        return value

    def _get_positive_float_env(self, key: str, default: float) -> float:
        """Get a strictly positive number from the environment."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be a number (got {raw!r})")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive (got {raw!r})")
        return value

    def _get_positive_int_env(self, key: str, default: int) -> int:
        """Get a strictly positive integer from the environment."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer (got {raw!r})")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive (got {raw!r})")
        return value


# Global settings instance
settings = Settings()
