import json
import os
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from fekit.logger.logger import logger


class Settings(BaseModel):
    TIMEZONE: Optional[str] = None
    RANDOM_SEED: Optional[int] = None
    CONFIG_PATH: Path = Field(default_factory=lambda: Path().home() / ".fekit.json")

    @field_validator("TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA time zone: {value!r}") from e
        return value

    @property
    def tzinfo(self) -> Optional[ZoneInfo]:
        """Configured local zone, or None to follow the system zone."""
        return ZoneInfo(self.TIMEZONE) if self.TIMEZONE else None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        config_path = config_path or Path().home() / ".fekit.json"

        values: dict = {}
        if config_path.exists():
            with open(config_path, "r") as f:
                values.update(json.load(f))
            logger.debug(f"Loaded fekit settings from {config_path}")

        # Environment wins over the file
        if os.getenv("FEKIT_TIMEZONE"):
            values["TIMEZONE"] = os.environ["FEKIT_TIMEZONE"]
        if os.getenv("FEKIT_RANDOM_SEED"):
            values["RANDOM_SEED"] = os.environ["FEKIT_RANDOM_SEED"]

        values["CONFIG_PATH"] = config_path
        return cls(**values)


settings = Settings.load()
