"""
DID Document classes.

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

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from marshmallow import ValidationError
from pydid import DID
from pyld import jsonld
from pyld.jsonld import JsonLdError

from .constants import JSONLD_TERM_ID, JSONLD_TERM_PUBLICKEY, JSONLD_TERM_SERVICE
from .error import CompactionError, DecodingError
from .publickey import PublicKey
from .resources import DIDDocumentResources, get_resources
from .service import Service
from .values import TermKind, kind_of

LOGGER = logging.getLogger(__name__)

Entity = TypeVar("Entity", PublicKey, Service)


class DIDDocument:
    """
    DID document, grouping a DID with public keys and services.

    The document is kept as its raw JSON-LD object; typed accessors read from
    it leniently and return None when a term is missing or has the wrong
    shape. Serialization merges the skeleton underneath the object and
    compacts the result against the DID context.
    """

    def __init__(self, json_ld_object: Any = None) -> None:
        """
        Initialize the DIDDocument instance.

        Prefer build() or create().

        Args:
            json_ld_object: raw JSON-LD object, kept as is (not copied)

        """
        self._json_ld_object = {} if json_ld_object is None else json_ld_object

    @classmethod
    def build(cls, json_ld_object: Any) -> "DIDDocument":
        """Wrap an already parsed JSON-LD object without validating it."""
        return cls(json_ld_object)

    @classmethod
    def create(
        cls,
        id: Optional[str],
        public_keys: Optional[Sequence[PublicKey]] = None,
        services: Optional[Sequence[Service]] = None,
    ) -> "DIDDocument":
        """
        Build a fresh DID document from typed fields.

        The id term is always present, even when id is None. A publicKey or
        service term is only added when the matching argument is not None; an
        empty sequence yields an empty list.

        Args:
            id: DID of the document subject
            public_keys: public keys, in order
            services: services, in order

        Returns: the new DID document

        """
        json_ld_object = {JSONLD_TERM_ID: id}

        if public_keys is not None:
            json_ld_object[JSONLD_TERM_PUBLICKEY] = [
                public_key.serialize() for public_key in public_keys
            ]

        if services is not None:
            json_ld_object[JSONLD_TERM_SERVICE] = [
                service.serialize() for service in services
            ]

        return cls(json_ld_object)

    @classmethod
    def from_json(cls, source: Any, encoding: str = "utf-8") -> "DIDDocument":
        """
        Parse a DID document from JSON.

        Args:
            source: JSON as str, bytes, a binary stream or a text stream
            encoding: encoding of bytes input

        Returns: the DID document wrapping the parsed value

        Raises:
            DecodingError: if the input cannot be decoded or is not JSON

        """
        if hasattr(source, "read"):
            source = source.read()

        try:
            if isinstance(source, (bytes, bytearray)):
                source = source.decode(encoding)
            if not isinstance(source, str):
                raise DecodingError(
                    "Cannot decode DID document from {}".format(type(source).__name__)
                )
            json_ld_object = json.loads(source)
        except (UnicodeDecodeError, LookupError) as err:
            raise DecodingError(
                "Cannot decode DID document with encoding {}".format(encoding)
            ) from err
        except json.JSONDecodeError as err:
            raise DecodingError("DID document is not well-formed JSON") from err

        if not isinstance(json_ld_object, Mapping):
            LOGGER.debug(
                "Parsed DID document root is a %s, not an object",
                type(json_ld_object).__name__,
            )
        return cls.build(json_ld_object)

    def to_json_ld(self, resources: DIDDocumentResources = None) -> dict:
        """
        Merge the skeleton underneath this document and compact the result.

        Args:
            resources: context and skeleton to use, the process-wide ones
                by default

        Returns: the compacted JSON-LD object

        Raises:
            CompactionError: if compaction rejects the merged document
            InitializationError: if no resources were given or initialized

        """
        if resources is None:
            resources = get_resources()

        merged = resources.skeleton_copy()
        if isinstance(self._json_ld_object, Mapping):
            merged.update(self._json_ld_object)

        try:
            compacted = jsonld.compact(
                merged,
                resources.context_copy(),
                {"base": None, "documentLoader": resources.document_loader},
            )
        except JsonLdError as err:
            raise CompactionError(
                "Cannot compact DID document {}".format(self.get_id())
            ) from err

        LOGGER.debug("Compacted DID document %s", self.get_id())
        return compacted

    def to_json(self, resources: DIDDocumentResources = None) -> str:
        """
        Serialize to pretty-printed compacted JSON.

        Raises:
            CompactionError: if compaction rejects the merged document
            InitializationError: if no resources were given or initialized

        """
        return json.dumps(self.to_json_ld(resources), indent=2)

    @property
    def json_ld_object(self) -> Any:
        """Accessor for the raw JSON-LD object."""

        return self._json_ld_object

    def set_field(self, key: str, value: Any) -> None:
        """Set a raw JSON-LD term, without any checking."""

        self._json_ld_object[key] = value

    def _get(self, key: str) -> Any:
        if not isinstance(self._json_ld_object, Mapping):
            return None
        return self._json_ld_object.get(key)

    def get_id(self) -> Optional[str]:
        """Return the document id if present and a URI, else None."""

        value = self._get(JSONLD_TERM_ID)
        if kind_of(value) is TermKind.URI:
            return value
        return None

    @property
    def id(self) -> Optional[str]:
        """Accessor for the document id."""

        return self.get_id()

    @property
    def did(self) -> Optional[DID]:
        """Accessor for the document id as a DID, if it is one."""

        id = self.get_id()
        if id is None or not DID.is_valid(id):
            return None
        return DID(id)

    def _get_entities(
        self, key: str, build: Callable[[Mapping], Entity]
    ) -> Optional[List[Entity]]:
        value = self._get(key)
        if kind_of(value) is not TermKind.SEQUENCE:
            return None

        entities = []
        for entry in value:
            if kind_of(entry) is not TermKind.MAPPING:
                continue
            try:
                entities.append(build(entry))
            except ValidationError as err:
                LOGGER.warning("Skipping malformed %s entry: %s", key, err.messages)
        return entities

    def get_public_keys(self) -> Optional[List[PublicKey]]:
        """
        Return the public keys of the document.

        Returns: None if publicKey is missing or not a list, otherwise the
            keys built from its object entries (other entries are skipped)

        """
        return self._get_entities(JSONLD_TERM_PUBLICKEY, PublicKey.deserialize)

    def get_services(self) -> Optional[List[Service]]:
        """
        Return the services of the document.

        Returns: None if service is missing or not a list, otherwise the
            services built from its object entries (other entries are skipped)

        """
        return self._get_entities(JSONLD_TERM_SERVICE, Service.deserialize)

    def __eq__(self, other):
        """Test equality of the raw JSON-LD objects."""
        if not isinstance(other, DIDDocument):
            return False
        return self._json_ld_object == other._json_ld_object

    def __str__(self) -> str:
        """
        Return the serialized document; see to_json().

        Unlike most __str__ implementations this can raise CompactionError
        or InitializationError. Use to_json() where failure must be handled.
        """
        return self.to_json()

    def __repr__(self) -> str:
        """Return debug representation."""
        return "<DIDDocument id={}>".format(self.get_id())
