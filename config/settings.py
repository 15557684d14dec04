from __future__ import annotations

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field

from search.engine import ScoringConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class Settings(BaseModel):
    log_level: str = Field(default="INFO", description="Root logging level.")
    author_weight: float = Field(default=100.0, description="Weight of an author match.")
    title_weight: float = Field(default=10.0, description="Weight of a title tag match.")
    description_weight: float = Field(default=1.0, description="Weight of a description tag match.")
    prefix_bonus: float = Field(default=10.0, description="Multiplier for matches at tag start.")

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            log_level=os.getenv("FINDIT_LOG_LEVEL", "INFO").upper(),
            author_weight=float(os.getenv("FINDIT_AUTHOR_WEIGHT", "100")),
            title_weight=float(os.getenv("FINDIT_TITLE_WEIGHT", "10")),
            description_weight=float(os.getenv("FINDIT_DESCRIPTION_WEIGHT", "1")),
            prefix_bonus=float(os.getenv("FINDIT_PREFIX_BONUS", "10")),
        )

    def scoring(self) -> ScoringConfig:
        return ScoringConfig(
            author_weight=self.author_weight,
            title_weight=self.title_weight,
            description_weight=self.description_weight,
            prefix_bonus=self.prefix_bonus,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


def setup_logging(level: str | None = None) -> None:
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
