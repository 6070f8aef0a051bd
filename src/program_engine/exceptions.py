"""Custom exception hierarchy for the program engine."""

from __future__ import annotations


class ProgramEngineError(Exception):
    """Base exception for all program_engine errors."""


class ConfigurationError(ProgramEngineError):
    """The reference catalog cannot satisfy a request (data-integrity bug).

    Raised when, for example, no periodization template or training split
    exists for a goal. This is never caused by user input.
    """


class InvalidConfigError(ProgramEngineError, ValueError):
    """A caller-supplied value is outside the engine's input contract."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SignalStoreError(ProgramEngineError):
    """A journey-signal store could not read or write (table missing, offline)."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code
