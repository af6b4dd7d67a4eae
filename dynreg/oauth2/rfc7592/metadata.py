from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from dynreg.common.encoding import json_dumps
from dynreg.common.encoding import json_loads
from dynreg.common.encoding import to_unicode


class ClientMetadata(Mapping):
    """Metadata of a registered client, as defined by RFC7591 and returned
    by the client configuration endpoint of RFC7592. It is read only and
    keeps the order of the fields, a changed document is a new instance::

        metadata = ClientMetadata('{"client_id": "c1", "client_name": "Demo"}')
        metadata.client_id  # "c1"
        metadata["client_name"]  # "Demo"

        # a partial document for an update request
        changes = ClientMetadata({"client_name": "New Demo"})
    """

    REGISTERED_CLAIMS = [
        "client_id",
        "client_secret",
        "client_name",
        "redirect_uris",
        "post_logout_redirect_uris",
    ]

    def __init__(self, metadata: str | bytes | Mapping[str, Any] | None = None):
        if metadata is None:
            metadata = {}

        if isinstance(metadata, ClientMetadata):
            text = metadata.metadata_string
        elif isinstance(metadata, Mapping):
            try:
                text = json_dumps(dict(metadata))
            except TypeError as error:
                raise ValueError(
                    f"Client metadata is not JSON serializable: {error}"
                ) from error
        else:
            text = to_unicode(metadata)

        data = json_loads(text)
        if not isinstance(data, dict):
            raise ValueError("Client metadata must be a JSON object")

        self._metadata_string = text
        self._data = data

    @property
    def metadata_string(self) -> str:
        """The JSON text this metadata was built from."""
        return self._metadata_string

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._metadata_string}>"

    def __getattr__(self, key):
        if key in self.REGISTERED_CLAIMS:
            return self.get(key)
        raise AttributeError(
            f"{self.__class__.__name__!r} object has no attribute {key!r}"
        )

    def copy(self) -> ClientMetadata:
        return self.__class__(self._metadata_string)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._data)
