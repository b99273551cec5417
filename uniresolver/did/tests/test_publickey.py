"""Public key tests."""

from unittest import TestCase

import pytest
from marshmallow import ValidationError

from ..publickey import PublicKey

PUBLIC_KEY = {
    "id": "did:example:123#keys-1",
    "type": "RsaVerificationKey2018",
    "controller": "did:example:123",
    "publicKeyPem": "-----BEGIN PUBLIC X...",
    "usage": "signing",
}


class TestPublicKey(TestCase):
    def test_serde(self):
        public_key = PublicKey.deserialize(PUBLIC_KEY)
        assert type(public_key) == PublicKey
        assert public_key.id == PUBLIC_KEY["id"]
        assert public_key.type == "RsaVerificationKey2018"
        assert public_key.controller == "did:example:123"
        assert public_key.public_key_pem == PUBLIC_KEY["publicKeyPem"]
        assert public_key.extra == {"usage": "signing"}

        assert public_key.serialize() == PUBLIC_KEY

    def test_value_encodings(self):
        assert PublicKey(public_key_hex="02b97c30").value == "02b97c30"
        assert PublicKey(public_key_base64="AAEC").value == "AAEC"
        jwk = {"kty": "OKP", "crv": "Ed25519", "x": "11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo"}
        public_key = PublicKey.deserialize({"id": "did:example:123#jwk", "publicKeyJwk": jwk})
        assert public_key.value == jwk
        assert PublicKey(id="did:example:123#keys-1").value is None

    def test_types(self):
        assert PublicKey().types == []
        assert PublicKey(type="Ed25519VerificationKey2018").types == [
            "Ed25519VerificationKey2018"
        ]
        public_key = PublicKey.deserialize(
            {"id": "did:example:123#keys-1", "type": ["A", "B"]}
        )
        assert public_key.types == ["A", "B"]
        assert public_key.serialize()["type"] == ["A", "B"]

    def test_did(self):
        assert PublicKey(id="did:example:123#keys-1").did == "did:example:123"
        assert PublicKey(id="https://example.com/keys/1").did is None
        assert PublicKey().did is None

    def test_none_fields_not_serialized(self):
        assert PublicKey(id="did:example:123#keys-1").serialize() == {
            "id": "did:example:123#keys-1"
        }

    def test_malformed(self):
        with pytest.raises(ValidationError):
            PublicKey.deserialize({"id": 5})
        with pytest.raises(ValidationError):
            PublicKey.deserialize({"type": {"not": "a type"}})
        with pytest.raises(ValidationError):
            PublicKey.deserialize({"publicKeyJwk": "not a dict"})

    def test_equality(self):
        assert PublicKey.deserialize(PUBLIC_KEY) == PublicKey.deserialize(PUBLIC_KEY)
        assert PublicKey.deserialize(PUBLIC_KEY) != PublicKey(id=PUBLIC_KEY["id"])
        assert PublicKey() != "PublicKey"
