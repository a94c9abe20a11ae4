"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., ROUND_ROBIN_TIME_QUANTUM env var → Settings.ROUND_ROBIN_TIME_QUANTUM)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Policies and the simulation engine read their defaults from `settings`
instead of hardcoding values. Anything passed explicitly to a constructor
wins over the value configured here.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: str = "round_robin"
    ROUND_ROBIN_TIME_QUANTUM: int = Field(default=2, gt=0)  # dispatch cycles per slice

    # ── Simulation ──────────────────────────────────────────────
    SIMULATION_MAX_CYCLES: int = Field(default=10_000, gt=0)  # safety cap for SimulationEngine.run()

    # ── App ─────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import this everywhere
settings = Settings()
