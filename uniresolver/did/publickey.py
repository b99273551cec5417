"""
DID Document Public Key classes.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from typing import List, Mapping, Optional, Union

from pydid import DIDUrl

from .schemas.publickeyschema import PublicKeySchema


class PublicKey:
    """
    Public key specification to embed in DID document.

    Key material is held in whichever of the publicKey* encodings the
    entry carries; keys the schema does not know are kept in extra.
    """

    def __init__(
        self,
        id: str = None,
        type: Union[str, List[str]] = None,
        controller: str = None,
        public_key_base58: str = None,
        public_key_base64: str = None,
        public_key_hex: str = None,
        public_key_pem: str = None,
        public_key_jwk: dict = None,
        **extra,
    ) -> None:
        """
        Retain key specification particulars.

        Args:
            id: key identifier, usually a DID URL (did:example:123#keys-1)
            type: key type or types (Ed25519VerificationKey2018 etc)
            controller: controller DID
            public_key_base58: key material, base58 encoded
            public_key_base64: key material, base64 encoded
            public_key_hex: key material, hex encoded
            public_key_pem: key material, PEM encoded
            public_key_jwk: key material as a JWK
            extra: any other JSON-LD terms of the entry

        """
        self.id = id
        self.type = type
        self.controller = controller
        self.public_key_base58 = public_key_base58
        self.public_key_base64 = public_key_base64
        self.public_key_hex = public_key_hex
        self.public_key_pem = public_key_pem
        self.public_key_jwk = public_key_jwk
        self.extra = dict(extra)

    @classmethod
    def deserialize(cls, value: Mapping) -> "PublicKey":
        """
        Build a public key from its JSON-LD mapping.

        Raises:
            marshmallow.ValidationError: if a known term has the wrong shape.
        """
        return PublicKeySchema().load(dict(value))

    def serialize(self) -> dict:
        """Return dict representation of public key to embed in DID document."""
        return PublicKeySchema().dump(self)

    @property
    def types(self) -> List[str]:
        """Accessor for the key types as a list."""

        if self.type is None:
            return []
        if isinstance(self.type, str):
            return [self.type]
        return list(self.type)

    @property
    def value(self) -> Optional[Union[str, dict]]:
        """Accessor for the key material, whatever its encoding."""

        for candidate in (
            self.public_key_base58,
            self.public_key_base64,
            self.public_key_hex,
            self.public_key_pem,
            self.public_key_jwk,
        ):
            if candidate is not None:
                return candidate
        return None

    @property
    def did(self) -> Optional[str]:
        """Accessor for the DID the key identifier belongs to."""

        if not self.id or not DIDUrl.is_valid(self.id):
            return None
        return str(DIDUrl.parse(self.id).did)

    def __eq__(self, other):
        """Test equality."""
        if not isinstance(other, PublicKey):
            return False
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        """Return string representation of the public key instance."""

        return "PublicKey({}, {}, {}, {})".format(
            self.id, self.type, self.controller, self.value
        )
