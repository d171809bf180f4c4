from .fields import entity_fields

__all__ = ["entity_fields"]
