"""
Catalog client configuration loaded from environment or defaults.

The getters are only called at the deployment edge (Streamlit page,
scripts). Core components receive a CatalogConfig instance explicitly.
"""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w200"
PLACEHOLDER_IMAGE = "https://via.placeholder.com/200x300?text=No+Image"


def get_api_key() -> str:
    """Get catalog API key from env or default."""
    return os.getenv("TMDB_API_KEY", "")


def get_access_token() -> str:
    """Get catalog bearer access token from env or default."""
    return os.getenv("TMDB_ACCESS_TOKEN", "")


def get_api_base_url() -> str:
    """Get catalog API base URL from env or default."""
    return os.getenv("TMDB_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")


def get_image_base_url() -> str:
    """Get poster image base URL from env or default."""
    return os.getenv("TMDB_IMAGE_BASE_URL", DEFAULT_IMAGE_BASE_URL).rstrip("/")


def get_request_timeout() -> float:
    """Get HTTP timeout in seconds."""
    return float(os.getenv("TMDB_TIMEOUT", "10"))


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


class CatalogConfig(BaseModel):
    """Connection settings for the remote movie catalog."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_API_BASE_URL
    api_key: str = ""
    access_token: str = ""
    image_base_url: str = DEFAULT_IMAGE_BASE_URL
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("base_url", "image_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_catalog_config() -> CatalogConfig:
    """Build a CatalogConfig from the environment."""
    return CatalogConfig(
        base_url=get_api_base_url(),
        api_key=get_api_key(),
        access_token=get_access_token(),
        image_base_url=get_image_base_url(),
        timeout=get_request_timeout(),
    )
