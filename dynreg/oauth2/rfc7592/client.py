"""
dynreg.oauth2.rfc7592.client
~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Base class for a registered client managed through its client
configuration endpoint. It knows nothing about the HTTP library, see
``dynreg.integrations`` for the implementations sending the requests.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from dynreg.common.encoding import json_dumps

from .config import ClientRegistrationConfig
from .errors import ClosedError
from .errors import NoManagementEndpointError
from .errors import RegistrationUpdateError
from .errors import ServerUnavailableError
from .filters import EndpointType
from .filters import RequestContextProperties
from .filters import get_matching_filters
from .filters import normalize_request_filters
from .merge import check_immutable_fields
from .merge import merge_client_metadata
from .metadata import ClientMetadata
from .requests import RegistrationRequest

log = logging.getLogger(__name__)

REGISTRATION_CLIENT_URI = "registration_client_uri"
REGISTRATION_ACCESS_TOKEN = "registration_access_token"
APPLICATION_JSON = "application/json"


def parse_registration_response(data: Mapping[str, Any]):
    """Split a registration or client configuration response into the
    client metadata, the ``registration_client_uri`` and the
    ``registration_access_token``.
    """
    data = dict(data)
    registration_client_uri = data.pop(REGISTRATION_CLIENT_URI, None)
    registration_access_token = data.pop(REGISTRATION_ACCESS_TOKEN, None)
    return ClientMetadata(data), registration_client_uri, registration_access_token


class BaseRegisteredClient:
    """A client registered with RFC7591, which can be read, updated and
    deleted with RFC7592. Every successful read or update creates a new
    registered client, sharing the HTTP client of this one::

        client = client.read()
        client = client.update(ClientMetadata({"client_name": "New name"}))
        client.delete()
        client.close()

    :param metadata: registered client metadata, JSON text or mapping
    :param registration_client_uri: URI of the client configuration endpoint
    :param registration_access_token: bearer token of that endpoint
    :param config: a :class:`ClientRegistrationConfig`
    :param request_filters: list of :class:`RequestFilter`, or a mapping
        of :class:`EndpointType` to such lists
    """

    #: Errors of the HTTP library raised when a connection can not be made,
    #: the request is sent again on these errors
    CONNECTION_ERRORS: tuple[type[BaseException], ...] = ()

    def __init__(
        self,
        metadata,
        registration_client_uri: str | None = None,
        registration_access_token: str | None = None,
        config: ClientRegistrationConfig | None = None,
        request_filters=None,
    ):
        self._metadata = ClientMetadata(metadata)
        self._registration_client_uri = registration_client_uri
        self._registration_access_token = registration_access_token
        self.config = config or ClientRegistrationConfig()
        self.request_filters = normalize_request_filters(request_filters)
        self._closed = False

    @classmethod
    def from_registration_response(cls, data: Mapping[str, Any], **kwargs):
        """Create a registered client from the response body of the client
        registration endpoint.
        """
        metadata, uri, token = parse_registration_response(data)
        return cls(metadata, uri, token, **kwargs)

    @property
    def registration_uri(self) -> str | None:
        return self._registration_client_uri

    @property
    def registration_token(self) -> str | None:
        return self._registration_access_token

    @property
    def closed(self) -> bool:
        return self._closed

    def metadata(self) -> ClientMetadata:
        """A copy of the registered client metadata."""
        self._check_closed()
        return self._metadata.copy()

    def get_transport_kwargs(self) -> dict[str, Any]:
        """Keyword arguments passing the HTTP client of this registered
        client to a new one.
        """
        raise NotImplementedError()

    def _check_closed(self):
        if self._closed:
            raise ClosedError()

    def _check_client_request_uri(self):
        if self._registration_client_uri is None:
            raise NoManagementEndpointError()

    def _check_request_allowed(self):
        self._check_closed()
        self._check_client_request_uri()

    def prepare_read_request(self) -> RegistrationRequest:
        self._check_request_allowed()
        return RegistrationRequest(
            "GET",
            self._registration_client_uri,
            headers={"Accept": APPLICATION_JSON},
        )

    def prepare_update_request(self, new_metadata) -> RegistrationRequest:
        self._check_request_allowed()
        new_metadata = ClientMetadata(new_metadata)
        check_immutable_fields(self._metadata, new_metadata)

        body = merge_client_metadata(self._metadata, new_metadata)
        return RegistrationRequest(
            "PUT",
            self._registration_client_uri,
            headers={"Content-Type": APPLICATION_JSON, "Accept": APPLICATION_JSON},
            body=json_dumps(body),
        )

    def prepare_delete_request(self) -> RegistrationRequest:
        self._check_request_allowed()
        return RegistrationRequest("DELETE", self._registration_client_uri)

    def apply_request_filters(self, request: RegistrationRequest):
        """Add the bearer token, then run the request filters registered for
        the client configuration endpoint.
        """
        if self._registration_access_token is not None:
            request.headers["Authorization"] = (
                f"Bearer {self._registration_access_token}"
            )

        if self.request_filters:
            context = RequestContextProperties()
            for request_filter in get_matching_filters(
                self.request_filters, EndpointType.CLIENT_CONFIGURATION
            ):
                request_filter.apply(request, request.body, context)
        return request

    def is_connection_error(self, error: BaseException) -> bool:
        return isinstance(error, self.CONNECTION_ERRORS)

    def handle_send_error(self, error: BaseException) -> ServerUnavailableError:
        # the cause is only logged, it may reveal details of the transport
        log.warning("Registration server is not available: %r", error, exc_info=error)
        return ServerUnavailableError()

    def parse_response(self, resp):
        """Create the new registered client from a read or update response.

        :raise: RegistrationUpdateError
        """
        status_code = resp.status_code
        if not 200 <= status_code < 300:
            message = resp.text
            log.debug(
                "Client configuration request has failed: status: %d, error message: %s",
                status_code,
                message,
            )
            raise RegistrationUpdateError(message, status_code=status_code)

        try:
            data = resp.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            log.debug("Client configuration response is not a JSON object: %s", resp.text)
            raise RegistrationUpdateError(resp.text, status_code=status_code)

        log.debug("Client metadata has been successfully updated: %r", data)
        metadata, uri, token = parse_registration_response(data)
        return self.__class__(
            metadata,
            uri if uri is not None else self._registration_client_uri,
            token if token is not None else self._registration_access_token,
            config=self.config,
            request_filters=self.request_filters,
            **self.get_transport_kwargs(),
        )

    def parse_delete_response(self, resp):
        """A failed deletion is logged, it is not raised."""
        if resp.status_code == 200:
            log.debug("Client has been successfully deleted")
        else:
            log.warning(
                "Client delete request has failed: status: %d, error message: %s",
                resp.status_code,
                resp.text,
            )
        return None

    def mark_closed(self):
        self._closed = True

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._registration_client_uri!r}>"
