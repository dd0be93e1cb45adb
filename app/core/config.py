# app/core/config.py
"""
Application settings read from environment variables.

Values are resolved when ``Settings`` is instantiated, so set the
environment before importing this module.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# Shipped inside the package so installed copies find it too.
DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "cities.json"


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    project_name: str = os.getenv("PROJECT_NAME", "States & Cities API")
    api_version: str = os.getenv("API_VERSION", "0.1.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Relative paths are resolved against the current working directory.
    data_file: str = os.getenv("CITIES_DATA_FILE", str(DEFAULT_DATA_FILE))

    cors_origins: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )

    def data_path(self) -> Path:
        return Path(self.data_file)


settings = Settings()
