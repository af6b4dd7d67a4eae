from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import ImmutableFieldViolationError

log = logging.getLogger(__name__)

#: Fields assigned by the registration server which a client never sends
#: back in an update request, per RFC7592 section 2.2.
PRIVATE_PROPERTIES = frozenset(["client_secret_expires_at", "client_id_issued_at"])

IMMUTABLE_PROPERTIES = ("client_id", "client_secret")


def check_immutable_fields(current: Mapping[str, Any], new: Mapping[str, Any]):
    """Refuse a ``new`` metadata document changing ``client_id`` or
    ``client_secret``. A field absent from ``new`` is left unchanged and
    is accepted.

    :raise: ImmutableFieldViolationError
    """
    for field in IMMUTABLE_PROPERTIES:
        value = new.get(field)
        if value is not None and value != current.get(field):
            raise ImmutableFieldViolationError(field)


def merge_client_metadata(
    current: Mapping[str, Any], new: Mapping[str, Any]
) -> dict[str, Any]:
    """Compute the body of an update request, per `Section 2.2`_.

    Fields of the ``current`` metadata come first, in their order, taking
    the value of ``new`` when it defines them. Fields only known by ``new``
    are appended in their order. Private fields are never included.

    .. _`Section 2.2`: https://tools.ietf.org/html/rfc7592#section-2.2
    """
    log.debug("Current client metadata: %r", current)

    merged = {}
    for key, value in current.items():
        if key in PRIVATE_PROPERTIES:
            continue
        merged[key] = new[key] if key in new else value

    for key, value in new.items():
        if key in PRIVATE_PROPERTIES or key in current:
            continue
        merged[key] = value

    log.debug("Updated client metadata: %r", merged)
    return merged
