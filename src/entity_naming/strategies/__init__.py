"""Resolution strategies, in default chain order."""

from .namer import NamerStrategy
from .reflect import ReflectStrategy, name_for_type, strip_type_params
from .registry import RegistryStrategy

__all__ = [
    "NamerStrategy",
    "RegistryStrategy",
    "ReflectStrategy",
    "name_for_type",
    "strip_type_params",
]
