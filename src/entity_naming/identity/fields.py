"""Structured entity fields for log records and metric labels."""

from typing import Any

from entity_naming.base.protocols import Describer, Identifier, implements
from entity_naming.state.default import get_service
from entity_naming.state.service import NamingService


def entity_fields(value: Any, service: NamingService | None = None) -> dict[str, str]:
    """Collect the naming metadata of ``value`` as flat string fields.

    Empty values are omitted, so the result can be splatted into ``extra=``
    or a metrics label set without producing blank labels.

    Args:
        value: Any runtime value
        service: Service used to resolve the name, defaults to the process default

    Returns:
        Subset of ``entity``, ``entity_id``, ``entity_description``,
        ``entity_category`` and ``entity_version``

    Examples:
        >>> entity_fields(Order("o-1"))
        {'entity': 'shop.order', 'entity_id': 'o-1'}
    """
    service = service if service is not None else get_service()

    fields = {"entity": service.resolve(value)}
    if implements(value, Identifier):
        fields["entity_id"] = value.entity_id()
    if implements(value, Describer):
        fields["entity_description"] = value.entity_description()
        fields["entity_category"] = value.entity_category()
        fields["entity_version"] = value.entity_version()

    return {key: text for key, text in fields.items() if text}
