from __future__ import annotations
import os
from pathlib import Path
from typing import Optional
PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / 'config'
DEFAULT_SCORE_TABLE = CONFIG_DIR / 'score_table.yaml'
SCORE_TABLE_ENV = 'JITADVISOR_SCORE_TABLE'

def score_table_override() -> Optional[Path]:
    raw = (os.getenv(SCORE_TABLE_ENV) or '').strip()
    if not raw:
        return None
    return Path(raw).expanduser()
__all__ = ['PACKAGE_ROOT', 'CONFIG_DIR', 'DEFAULT_SCORE_TABLE', 'SCORE_TABLE_ENV', 'score_table_override']
