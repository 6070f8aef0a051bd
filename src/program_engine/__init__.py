"""Adaptive strength-training program engine."""

from program_engine.engine import ProgramEngine
from program_engine.exceptions import (
    ConfigurationError,
    InvalidConfigError,
    ProgramEngineError,
    SignalStoreError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidConfigError",
    "ProgramEngine",
    "ProgramEngineError",
    "SignalStoreError",
]
