from __future__ import annotations

import logging
import time

from requests import Session
from requests.exceptions import ConnectionError as RequestsConnectionError

from dynreg.consts import default_user_agent

from ...oauth2.rfc7592 import BaseRegisteredClient
from ...oauth2.rfc7592 import ClientMetadata
from ...oauth2.rfc7592 import RegistrationRequest

__all__ = ["RegisteredClient"]

log = logging.getLogger(__name__)


class RegisteredClient(BaseRegisteredClient):
    """Manage a registered client with a ``requests.Session``::

        with RegisteredClient.from_registration_response(data) as client:
            client = client.read()
            client = client.update(ClientMetadata({"client_name": "New name"}))
            client.delete()
    """

    CONNECTION_ERRORS = (RequestsConnectionError,)

    def __init__(
        self,
        metadata,
        registration_client_uri=None,
        registration_access_token=None,
        config=None,
        request_filters=None,
        session: Session | None = None,
    ):
        super().__init__(
            metadata,
            registration_client_uri,
            registration_access_token,
            config=config,
            request_filters=request_filters,
        )
        if session is None:
            session = Session()
            session.headers["User-Agent"] = default_user_agent
        self.session = session

    def get_transport_kwargs(self):
        return {"session": self.session}

    def read(self) -> RegisteredClient:
        request = self.prepare_read_request()
        return self.parse_response(self._send(request))

    def update(self, new_metadata: ClientMetadata) -> RegisteredClient:
        request = self.prepare_update_request(new_metadata)
        return self.parse_response(self._send(request))

    def delete(self) -> None:
        request = self.prepare_delete_request()
        return self.parse_delete_response(self._send(request))

    def close(self):
        if self.closed:
            return
        try:
            self.session.close()
        except Exception as error:
            log.debug("Failed to close the client: %r", error)
        self.mark_closed()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _send(self, request: RegistrationRequest):
        request = self.apply_request_filters(request)
        attempts = self.config.connection_retry_count + 1
        for attempt in range(1, attempts + 1):
            try:
                return self.session.request(
                    request.method,
                    request.uri,
                    headers=request.headers,
                    data=request.data,
                )
            except Exception as e:
                error = e
            if not self.is_connection_error(error) or attempt == attempts:
                break
            log.debug(
                "Connection to %s failed, retrying (%d/%d)",
                request.uri,
                attempt,
                attempts - 1,
            )
            time.sleep(self.config.connection_delay)
        # the transport error must not become the context of the raised error
        raise self.handle_send_error(error)
