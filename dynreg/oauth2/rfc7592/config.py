from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import fields


@dataclass(frozen=True)
class ClientRegistrationConfig:
    """Settings of the requests sent to the client configuration endpoint."""

    #: How many times a request is sent again when the connection fails
    connection_retry_count: int = 3
    #: Seconds to wait before sending a request again
    connection_delay: float = 1.0

    def __post_init__(self):
        retry_count = self.connection_retry_count
        if isinstance(retry_count, bool) or not isinstance(retry_count, int):
            raise ValueError('"connection_retry_count" MUST be an integer')
        if retry_count < 0:
            raise ValueError('"connection_retry_count" MUST NOT be negative')
        delay = self.connection_delay
        if isinstance(delay, bool) or not isinstance(delay, (int, float)):
            raise ValueError('"connection_delay" MUST be a number')
        if delay < 0:
            raise ValueError('"connection_delay" MUST NOT be negative')

    @classmethod
    def from_mapping(cls, config: Mapping, prefix: str = ""):
        """Load the settings from a mapping such as ``app.config`` or
        ``os.environ``::

            config = ClientRegistrationConfig.from_mapping(
                os.environ, prefix="DYNREG_"
            )

        reads ``DYNREG_CONNECTION_RETRY_COUNT`` and ``DYNREG_CONNECTION_DELAY``.
        """
        converters = {"connection_retry_count": int, "connection_delay": float}
        kwargs = {}
        for field in fields(cls):
            key = f"{prefix}{field.name}".upper()
            if key not in config:
                continue
            value = config[key]
            try:
                kwargs[field.name] = converters[field.name](value)
            except (TypeError, ValueError) as error:
                raise ValueError(f'Invalid value for "{key}": {value!r}') from error
        return cls(**kwargs)
