"""Runtime configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from product_view.domain.product import DEFAULT_PAGE_SIZE

CATALOG_BACKENDS = ("json", "postgres")


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {value!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Application settings.

    The stock-only default differs between the two consumption modes:
    discrete queries do not filter by stock unless asked, the windowed
    browse session shows in-stock products only until the user opts out.
    Both are explicit here so neither mode silently inherits the other.
    """

    catalog_backend: str = "json"
    catalog_path: Path = Path("data/items.json")
    default_page_size: int = DEFAULT_PAGE_SIZE
    query_in_stock_default: bool = False
    browse_in_stock_default: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        backend = os.getenv("CATALOG_BACKEND", "json").strip().lower()
        if backend not in CATALOG_BACKENDS:
            raise RuntimeError(
                f"CATALOG_BACKEND must be one of {', '.join(CATALOG_BACKENDS)}, got {backend!r}"
            )

        page_size = _env_int("DEFAULT_PAGE_SIZE", DEFAULT_PAGE_SIZE)
        if page_size < 1:
            raise RuntimeError("DEFAULT_PAGE_SIZE must be >= 1")

        return cls(
            catalog_backend=backend,
            catalog_path=Path(os.getenv("CATALOG_PATH", "data/items.json")),
            default_page_size=page_size,
            query_in_stock_default=_env_flag("QUERY_IN_STOCK_DEFAULT", False),
            browse_in_stock_default=_env_flag("BROWSE_IN_STOCK_DEFAULT", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings.from_env()
