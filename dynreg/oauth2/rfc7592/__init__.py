"""dynreg.oauth2.rfc7592.
~~~~~~~~~~~~~~~~~~~~~~

This module represents the client side of
OAuth 2.0 Dynamic Client Registration Management Protocol.

https://tools.ietf.org/html/rfc7592
"""

from .client import REGISTRATION_ACCESS_TOKEN
from .client import REGISTRATION_CLIENT_URI
from .client import BaseRegisteredClient
from .client import parse_registration_response
from .config import ClientRegistrationConfig
from .errors import ClientRegistrationError
from .errors import ClosedError
from .errors import ImmutableFieldViolationError
from .errors import NoManagementEndpointError
from .errors import RegistrationUpdateError
from .errors import ServerUnavailableError
from .filters import EndpointType
from .filters import RequestContextProperties
from .filters import RequestFilter
from .filters import get_matching_filters
from .filters import group_request_filters
from .filters import normalize_request_filters
from .merge import PRIVATE_PROPERTIES
from .merge import check_immutable_fields
from .merge import merge_client_metadata
from .metadata import ClientMetadata
from .requests import RegistrationRequest

__all__ = [
    "REGISTRATION_ACCESS_TOKEN",
    "REGISTRATION_CLIENT_URI",
    "PRIVATE_PROPERTIES",
    "BaseRegisteredClient",
    "ClientMetadata",
    "ClientRegistrationConfig",
    "RegistrationRequest",
    "EndpointType",
    "RequestContextProperties",
    "RequestFilter",
    "get_matching_filters",
    "group_request_filters",
    "normalize_request_filters",
    "check_immutable_fields",
    "merge_client_metadata",
    "parse_registration_response",
    "ClientRegistrationError",
    "ClosedError",
    "NoManagementEndpointError",
    "RegistrationUpdateError",
    "ImmutableFieldViolationError",
    "ServerUnavailableError",
]
