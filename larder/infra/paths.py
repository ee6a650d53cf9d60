from pathlib import Path
from larder.utilities.config import DATA_DIR as _CONFIG_DATA_DIR, STORE_FILE as _CONFIG_STORE_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR: Path = _CONFIG_DATA_DIR.resolve()
STORE_FILE: Path = _CONFIG_STORE_FILE.resolve()

__all__ = ['DATA_DIR', 'STORE_FILE']
