from .default import DefaultBuilder

__all__ = ["DefaultBuilder"]
