"""Type introspection: descriptors and normalization."""

from .descriptor import Kind, TypeDescriptor, describe
from .normalization import normalize

__all__ = ["Kind", "TypeDescriptor", "describe", "normalize"]
