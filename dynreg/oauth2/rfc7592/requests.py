from __future__ import annotations

from dynreg.common.encoding import to_bytes


class RegistrationRequest:
    """A request to the client configuration endpoint before it is sent.
    Request filters change its ``headers`` and ``body`` in place; the HTTP
    integration sends what it holds at that point.
    """

    def __init__(self, method: str, uri: str, headers=None, body=None):
        self.method = method.upper()
        self.uri = uri
        self.headers = dict(headers or {})
        self.body = bytearray(to_bytes(body) or b"")

    @property
    def data(self) -> bytes:
        return bytes(self.body)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.method} {self.uri}>"
