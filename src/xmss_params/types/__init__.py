"""Reusable type definitions for the parameter registries."""

from .base import StrictBaseModel
from .exceptions import (
    RegistryIntegrityError,
    UnknownParameterSetError,
    UnsupportedAlgorithmIdError,
    XmssParameterError,
)

__all__ = [
    "StrictBaseModel",
    # Exceptions
    "XmssParameterError",
    "UnknownParameterSetError",
    "UnsupportedAlgorithmIdError",
    "RegistryIntegrityError",
]
