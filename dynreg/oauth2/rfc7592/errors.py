from dynreg.common.errors import DynRegError

__all__ = [
    "ClientRegistrationError",
    "ClosedError",
    "NoManagementEndpointError",
    "RegistrationUpdateError",
    "ImmutableFieldViolationError",
    "ServerUnavailableError",
]


class ClientRegistrationError(DynRegError):
    """Base error of the client configuration endpoint operations. The
    string value of these errors is their description only, so that a
    message authored by the registration server reaches the caller as is.
    """

    def __init__(self, description=None, error=None):
        super().__init__(error=error, description=description)
        self.args = (self.description,)

    def __str__(self):
        return self.description or ""


class ClosedError(ClientRegistrationError):
    error = "client_closed"
    description = "Registered client is closed"


class NoManagementEndpointError(ClientRegistrationError):
    error = "no_management_endpoint"
    description = (
        "Registered client can not make requests to the client configuration "
        "endpoint"
    )


class RegistrationUpdateError(ClientRegistrationError):
    """The client configuration endpoint rejected a read or update request.
    ``description`` holds the response body of the registration server.
    """

    error = "registration_update_failed"

    def __init__(self, description=None, status_code=None, error=None):
        super().__init__(description, error=error)
        self.status_code = status_code


class ImmutableFieldViolationError(RegistrationUpdateError):
    error = "immutable_field"

    def __init__(self, field, description=None):
        if description is None:
            description = f"{_FIELD_LABELS.get(field, field)} can not be modified"
        super().__init__(description)
        self.field = field


class ServerUnavailableError(ClientRegistrationError):
    error = "server_unavailable"
    description = "Registration server is not available"


_FIELD_LABELS = {
    "client_id": "Client id",
    "client_secret": "Client secret",
}
