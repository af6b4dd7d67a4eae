from ...oauth2.rfc7592 import ClientMetadata
from ...oauth2.rfc7592 import ClientRegistrationConfig
from ...oauth2.rfc7592 import ClientRegistrationError
from ...oauth2.rfc7592 import ClosedError
from ...oauth2.rfc7592 import EndpointType
from ...oauth2.rfc7592 import ImmutableFieldViolationError
from ...oauth2.rfc7592 import NoManagementEndpointError
from ...oauth2.rfc7592 import RegistrationUpdateError
from ...oauth2.rfc7592 import RequestFilter
from ...oauth2.rfc7592 import ServerUnavailableError
from .registered_client import RegisteredClient

__all__ = [
    "RegisteredClient",
    "ClientMetadata",
    "ClientRegistrationConfig",
    "EndpointType",
    "RequestFilter",
    "ClientRegistrationError",
    "ClosedError",
    "NoManagementEndpointError",
    "RegistrationUpdateError",
    "ImmutableFieldViolationError",
    "ServerUnavailableError",
]
