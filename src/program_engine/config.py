"""Environment-variable-based configuration for the program engine."""

from __future__ import annotations

import os

LOG_LEVEL: str = os.environ.get("PROGRAM_ENGINE_LOG_LEVEL", "INFO").upper()
SIGNAL_FETCH_LIMIT: int = int(os.environ.get("PROGRAM_ENGINE_SIGNAL_FETCH_LIMIT", "50"))
HISTORY_LIMIT: int = int(os.environ.get("PROGRAM_ENGINE_HISTORY_LIMIT", "10"))
