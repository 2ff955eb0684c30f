"""
App package - Application configuration and core utilities.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    AppError,
    LoadSupersededError,
    NotFoundError,
    ConflictError,
    CompositionNotReadyError,
    NetworkError,
    LoadError,
    RegistryError,
    OrderSubmissionError,
)

__all__ = [
    "settings",
    "AppError",
    "LoadSupersededError",
    "NotFoundError",
    "ConflictError",
    "CompositionNotReadyError",
    "NetworkError",
    "LoadError",
    "RegistryError",
    "OrderSubmissionError",
]
