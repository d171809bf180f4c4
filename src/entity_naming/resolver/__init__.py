from .chain import ChainResolver

__all__ = ["ChainResolver"]
