import pytest

from dynreg.oauth2.rfc7592 import ClientMetadata


def test_create_from_json_text():
    metadata = ClientMetadata('{"client_id": "c1", "client_name": "Demo"}')
    assert metadata.client_id == "c1"
    assert metadata.client_name == "Demo"
    assert metadata.client_secret is None
    assert metadata["client_name"] == "Demo"
    assert metadata.metadata_string == '{"client_id": "c1", "client_name": "Demo"}'


def test_create_from_bytes_and_mapping():
    metadata = ClientMetadata(b'{"client_id": "c1"}')
    assert metadata.client_id == "c1"

    metadata = ClientMetadata({"redirect_uris": ["https://client.test/cb"]})
    assert metadata.redirect_uris == ["https://client.test/cb"]
    assert ClientMetadata(metadata) == metadata

    assert len(ClientMetadata()) == 0


def test_keep_order_of_fields():
    text = '{"z": 1, "client_id": "c1", "a": 2, "m": 3}'
    metadata = ClientMetadata(text)
    assert list(metadata) == ["z", "client_id", "a", "m"]
    assert list(ClientMetadata(metadata.to_dict())) == ["z", "client_id", "a", "m"]


def test_invalid_metadata():
    with pytest.raises(ValueError):
        ClientMetadata("[1, 2]")

    with pytest.raises(ValueError):
        ClientMetadata("not json")

    with pytest.raises(ValueError, match="JSON serializable"):
        ClientMetadata({"grant_types": {"authorization_code"}})


def test_metadata_is_read_only():
    metadata = ClientMetadata({"client_name": "Demo", "redirect_uris": ["a"]})
    with pytest.raises(TypeError):
        metadata["client_name"] = "Other"

    data = metadata.to_dict()
    data["client_name"] = "Other"
    data["redirect_uris"].append("b")
    assert metadata["client_name"] == "Demo"
    assert metadata.redirect_uris == ["a"]


def test_copy():
    metadata = ClientMetadata('{"client_id": "c1", "extra": {"k": "v"}}')
    copied = metadata.copy()
    assert copied is not metadata
    assert copied == metadata
    assert copied.metadata_string == metadata.metadata_string
    assert copied["extra"] == {"k": "v"}


def test_unknown_attribute():
    metadata = ClientMetadata({"client_id": "c1"})
    with pytest.raises(AttributeError):
        metadata.logo_uri
