from __future__ import annotations

import enum
from collections.abc import Mapping


class EndpointType(enum.Enum):
    """Kind of authorization server endpoint a request filter applies to."""

    ALL = "all"
    DISCOVERY = "discovery"
    TOKEN = "token"
    TOKEN_REVOCATION = "token_revocation"
    INTROSPECTION = "introspection"
    JWKS = "jwks"
    USERINFO = "userinfo"
    CLIENT_REGISTRATION = "client_registration"
    CLIENT_CONFIGURATION = "client_configuration"


class RequestContextProperties(dict):
    """Properties shared by the filters of a single request."""


class RequestFilter:
    """Customize requests sent to the authorization server. Filters are
    called in registration order right before a request is sent::

        class TenantFilter(RequestFilter):
            ENDPOINT_TYPES = (EndpointType.CLIENT_CONFIGURATION,)

            def apply(self, request, body, context):
                request.headers["X-Tenant"] = "acme"

    ``body`` is a ``bytearray`` which may be changed in place.
    """

    #: Endpoint types this filter is registered for
    ENDPOINT_TYPES = (EndpointType.ALL,)

    def apply(self, request, body: bytearray, context: RequestContextProperties):
        raise NotImplementedError()


def group_request_filters(filters):
    """Build the ``EndpointType -> [filter]`` mapping of ``filters``.
    A mapping is returned as a copy, keeping its lists in order.
    """
    if not filters:
        return {}

    if isinstance(filters, Mapping):
        return {EndpointType(key): list(value) for key, value in filters.items()}

    grouped = {}
    for request_filter in filters:
        for endpoint_type in request_filter.ENDPOINT_TYPES:
            grouped.setdefault(EndpointType(endpoint_type), []).append(request_filter)
    return grouped


def normalize_request_filters(filters):
    """Copy ``filters`` as given: a list keeps the registration order of
    its filters, a mapping is copied by :func:`group_request_filters`.
    """
    if not filters:
        return []
    if isinstance(filters, Mapping):
        return group_request_filters(filters)
    return list(filters)


def get_matching_filters(filters, endpoint_type: EndpointType) -> list[RequestFilter]:
    """Filters applying to ``endpoint_type``.

    From a list, the filters registered for ``endpoint_type`` or for every
    endpoint are returned in registration order. From a mapping, the filters
    registered for every endpoint come first, then the ones registered for
    ``endpoint_type``.
    """
    if isinstance(filters, Mapping):
        matched = list(filters.get(EndpointType.ALL, ()))
        if endpoint_type is not EndpointType.ALL:
            matched.extend(filters.get(endpoint_type, ()))
        return matched

    accepted = {EndpointType.ALL, endpoint_type}
    return [
        request_filter
        for request_filter in filters
        if any(EndpointType(t) in accepted for t in request_filter.ENDPOINT_TYPES)
    ]
