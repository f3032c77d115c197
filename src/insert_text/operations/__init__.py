"""Edit operations and the engine that applies them."""

from .engine import apply
from .models import Append, Clear, ClearRange, DefaultAppendEmpty, Insert, Operation

__all__ = [
    "Append",
    "Clear",
    "ClearRange",
    "DefaultAppendEmpty",
    "Insert",
    "Operation",
    "apply",
]
