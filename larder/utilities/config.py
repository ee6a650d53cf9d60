"""Configuration management for the Larder application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Matching / cooking defaults
DEFAULT_PER_INGREDIENT: Final[int] = int(os.getenv('DEFAULT_PER_INGREDIENT', '1'))
DEFAULT_RANK_LIMIT: Final[int] = int(os.getenv('DEFAULT_RANK_LIMIT', '20'))

# Items at or below this quantity after a cook raise a low stock alert
LOW_STOCK_THRESHOLD: Final[int] = int(os.getenv('LOW_STOCK_THRESHOLD', '1'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('LARDER_DATA_DIR', str(BASE_DIR / 'data')))
STORE_FILE: Final[Path] = Path(os.getenv('LARDER_STORE_FILE', str(DATA_DIR / 'store.json')))
