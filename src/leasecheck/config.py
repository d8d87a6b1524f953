"""Configuration from environment variables."""

import os
from pathlib import Path

import dotenv

dotenv.load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent
DEFAULT_INSTRUMENT_TYPES_FILE = PACKAGE_DIR / "config" / "instrument_types.yaml"


class Settings:
    """Lease check settings read from the environment."""

    def __init__(self):
        # Acreage used when a caller does not send total_acres
        self.DEFAULT_TOTAL_ACRES: float = float(
            os.environ.get("LEASECHECK_DEFAULT_TOTAL_ACRES", "160")
        )
        # Minimum rapidfuzz ratio for a near-miss instrument type label
        self.FUZZY_THRESHOLD: float = float(os.environ.get("LEASECHECK_FUZZY_THRESHOLD", "90"))
        self.INSTRUMENT_TYPES_FILE: str = os.environ.get(
            "LEASECHECK_INSTRUMENT_TYPES_FILE", str(DEFAULT_INSTRUMENT_TYPES_FILE)
        )

        self.LOG_LEVEL: str = os.environ.get("LEASECHECK_LOG_LEVEL", "INFO").upper()
        self.CORS_ORIGINS: list[str] = os.environ.get("LEASECHECK_CORS_ORIGINS", "*").split(",")

    def validate(self) -> list[str]:
        """Validate settings. Returns list of problems."""
        problems = []
        if self.DEFAULT_TOTAL_ACRES < 0:
            problems.append("LEASECHECK_DEFAULT_TOTAL_ACRES must not be negative")
        if not 0 <= self.FUZZY_THRESHOLD <= 100:
            problems.append("LEASECHECK_FUZZY_THRESHOLD must be between 0 and 100")
        if not Path(self.INSTRUMENT_TYPES_FILE).is_file():
            problems.append(f"Instrument types file not found: {self.INSTRUMENT_TYPES_FILE}")
        return problems


SETTINGS = Settings()
