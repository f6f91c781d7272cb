"""Field, curve and pairing arithmetic."""

from .backend import BackendError, PairingBackend
from .params import get_backend

__all__ = [
    "BackendError",
    "PairingBackend",
    "get_backend",
]
