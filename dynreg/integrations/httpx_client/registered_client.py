from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable

import httpx

from dynreg.consts import default_user_agent

from ...oauth2.rfc7592 import BaseRegisteredClient
from ...oauth2.rfc7592 import ClientMetadata
from ...oauth2.rfc7592 import RegistrationRequest

__all__ = ["AsyncRegisteredClient"]

log = logging.getLogger(__name__)


class AsyncRegisteredClient(BaseRegisteredClient):
    """Manage a registered client with an ``httpx.AsyncClient``::

        async with AsyncRegisteredClient.from_registration_response(
            registration_response
        ) as client:
            client = await client.read()
            client = await client.update(
                ClientMetadata({"client_name": "New name"})
            )
            await client.delete()

    Registered clients created by :meth:`read` and :meth:`update` share the
    ``http_client``; closing any of them closes it.
    """

    CONNECTION_ERRORS = (httpx.ConnectError,)

    def __init__(
        self,
        metadata,
        registration_client_uri=None,
        registration_access_token=None,
        config=None,
        request_filters=None,
        http_client: httpx.AsyncClient | None = None,
        **client_kwargs,
    ):
        super().__init__(
            metadata,
            registration_client_uri,
            registration_access_token,
            config=config,
            request_filters=request_filters,
        )
        if http_client is None:
            client_kwargs.setdefault("headers", {"User-Agent": default_user_agent})
            http_client = httpx.AsyncClient(**client_kwargs)
        self.http_client = http_client

    def get_transport_kwargs(self):
        return {"http_client": self.http_client}

    def read(self) -> Awaitable[AsyncRegisteredClient]:
        """Fetch the current metadata of this client from the server.

        The client is checked when this method is called, the returned
        awaitable sends the request.
        """
        request = self.prepare_read_request()
        return self._execute(request, self.parse_response)

    def update(self, new_metadata: ClientMetadata) -> Awaitable[AsyncRegisteredClient]:
        """Replace the metadata of this client with the merge of its current
        metadata and ``new_metadata``. A changed ``client_id`` or
        ``client_secret`` is refused when this method is called.
        """
        request = self.prepare_update_request(new_metadata)
        return self._execute(request, self.parse_response)

    def delete(self) -> Awaitable[None]:
        request = self.prepare_delete_request()
        return self._execute(request, self.parse_delete_response)

    async def aclose(self):
        if self.closed:
            return
        try:
            await self.http_client.aclose()
        except Exception as error:
            log.debug("Failed to close the client: %r", error)
        self.mark_closed()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()

    async def _execute(self, request: RegistrationRequest, parse):
        resp = await self._send(request)
        return parse(resp)

    async def _send(self, request: RegistrationRequest) -> httpx.Response:
        request = self.apply_request_filters(request)
        attempts = self.config.connection_retry_count + 1
        for attempt in range(1, attempts + 1):
            try:
                return await self.http_client.request(
                    request.method,
                    request.uri,
                    headers=request.headers,
                    content=request.data,
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
            await asyncio.sleep(self.config.connection_delay)
        # the transport error must not become the context of the raised error
        raise self.handle_send_error(error)
