"""Import targets of the form ``"package.module:Qual.Name"``."""

import importlib
from typing import Any

from entity_naming.base.errors import ConfigurationError


def load_target(target: str) -> Any:
    """Import ``module:attribute.path`` and return the attribute.

    Args:
        target: Module path and dotted attribute path separated by a colon

    Returns:
        The resolved object (usually a class)

    Raises:
        ConfigurationError: If the target is malformed or cannot be imported

    Examples:
        >>> load_target("collections:OrderedDict")
        <class 'collections.OrderedDict'>
    """
    module_name, sep, attr_path = target.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(f"Invalid target {target!r}, expected 'module:QualName'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr_path!r}") from e
    return obj
