"""Configuration settings for MetroLog."""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_DIR = Path(os.getenv("METROLOG_DATA_DIR", PROJECT_ROOT / "data"))
DB_PATH = Path(os.getenv("METROLOG_DB_PATH", DATA_DIR / "metrolog.db"))

# Logging
LOG_LEVEL = os.getenv("METROLOG_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL):
    """Configure root logging for the CLI and API entry points."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
