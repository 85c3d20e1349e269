from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Machine used by the CLI when no --config is given
    default_config: str = Field(default="B;I-A-A,II-A-A,III-A-A;", description="Machine configuration string")

    # Logging
    log_level: str = Field(default="WARNING")

    # Reproducibility
    global_seed: int = Field(default=1337)

    # Evaluation
    roundtrip_vectors: int = Field(default=200, ge=1, le=100_000)
    roundtrip_text_length: int = Field(default=120, ge=1, le=10_000)

    # Paths
    project_root: str = Field(default=os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir)))
    runs_dir: str = Field(default="runs")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        default_config=os.getenv("ENIGMA_CONFIG", "B;I-A-A,II-A-A,III-A-A;"),
        log_level=os.getenv("ENIGMA_LOG_LEVEL", "WARNING").strip().upper(),
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("ROUNDTRIP_VECTORS", "200")),
        roundtrip_text_length=int(os.getenv("ROUNDTRIP_TEXT_LENGTH", "120")),
        runs_dir=os.getenv("RUNS_DIR", "runs"),
    )
