"""Process configuration, read from the environment (and a local .env file)."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_RESOURCES = [
    "Conference Room A",
    "Conference Room B",
    "Projector",
    "Laptop Cart",
    "Video Equipment",
]


class Settings(BaseModel):
    resources: list[str] = Field(default_factory=lambda: list(DEFAULT_RESOURCES))
    seed_sample_data: bool = False
    log_level: str = "INFO"


def _parse_resources(raw: str | None) -> list[str]:
    if not raw:
        return list(DEFAULT_RESOURCES)
    names = [name.strip() for name in raw.split(",")]
    return [name for name in names if name] or list(DEFAULT_RESOURCES)


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        resources=_parse_resources(os.getenv("BOOKING_RESOURCES")),
        seed_sample_data=os.getenv("BOOKING_SEED_DATA", "false").lower()
        in ("1", "true", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
