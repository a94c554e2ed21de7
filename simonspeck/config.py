from __future__ import annotations

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Evaluation defaults
    default_variant: str = Field(default="Speck64/128")
    roundtrip_vectors: int = Field(default=1000, ge=1)
    sac_trials: int = Field(default=200, ge=1)
    batch_workers: int = Field(default=4, ge=1, le=64)

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Logging
    log_level: str = Field(default="WARNING")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_variant=os.getenv("SIMONSPECK_DEFAULT_VARIANT", "Speck64/128"),
        roundtrip_vectors=int(os.getenv("SIMONSPECK_ROUNDTRIP_VECTORS", "1000")),
        sac_trials=int(os.getenv("SIMONSPECK_SAC_TRIALS", "200")),
        batch_workers=int(os.getenv("SIMONSPECK_BATCH_WORKERS", "4")),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        log_level=os.getenv("SIMONSPECK_LOG_LEVEL", "WARNING").strip().upper(),
    )


def configure_logging(settings: Settings | None = None) -> None:
    s = settings or load_settings()
    level = logging.getLevelName(s.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("simonspeck").setLevel(level)
