from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent
STATIC_DIR = BASE_DIR / "static"


class Settings(BaseSettings):
    # --- app ---
    app_name: str = "Host Stats"
    debug: bool = False

    # --- server ---
    host: str = "0.0.0.0"
    port: int = 8086
    static_dir: str = str(STATIC_DIR)

    # --- package update markers ---
    update_stamp_file: str = "/var/lib/apt/periodic/update-success-stamp"
    update_lists_dir: str = "/var/lib/apt/lists"

    # --- container runtime ---
    docker_command: list[str] = ["docker", "ps", "-q"]
    container_query_timeout: float | None = 5.0  # seconds, None waits forever

    model_config = {"env_file": ".env", "env_prefix": "HOSTSTATS_"}


settings = Settings()
