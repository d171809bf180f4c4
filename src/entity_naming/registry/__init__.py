"""Explicit type -> entity name registry."""

from .registry import TypeRegistry

__all__ = ["TypeRegistry"]
