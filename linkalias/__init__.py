"""In-process registry of short, time-limited URL aliases."""

from .config import Config, load_config
from .errors import (
    AliasNotFound,
    CodeSpaceExhausted,
    ErrorKind,
    ValidationError,
    ValidationFailed,
)
from .models import AliasRecord, CreationRequest
from .shortcode import ShortCodeGenerator
from .registry import AliasRegistry
from .worker import PurgeWorker
from .app import create_registry

__all__ = [
    "Config",
    "load_config",
    "AliasNotFound",
    "CodeSpaceExhausted",
    "ErrorKind",
    "ValidationError",
    "ValidationFailed",
    "AliasRecord",
    "CreationRequest",
    "ShortCodeGenerator",
    "AliasRegistry",
    "PurgeWorker",
    "create_registry",
]
