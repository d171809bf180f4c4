from .strategy import CacheStrategy

__all__ = ["CacheStrategy"]
