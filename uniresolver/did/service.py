"""
DID Document Service classes.

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

from typing import List, Mapping, Union

from .schemas.serviceschema import ServiceSchema


class Service:
    """Service specification to embed in DID document."""

    def __init__(
        self,
        id: str = None,
        type: Union[str, List[str]] = None,
        service_endpoint: Union[str, list, dict] = None,
        priority: int = None,
        recipient_keys: List[str] = None,
        routing_keys: List[str] = None,
        **extra,
    ):
        """
        Initialize the Service instance.

        Args:
            id: service identifier
            type: service type or types
            service_endpoint: service endpoint URI, list or map
            priority: service priority
            recipient_keys: recipient key references
            routing_keys: routing key references
            extra: any other JSON-LD terms of the entry

        """
        self.id = id
        self.type = type
        self.service_endpoint = service_endpoint
        self.priority = priority
        self.recipient_keys = recipient_keys
        self.routing_keys = routing_keys
        self.extra = dict(extra)

    @classmethod
    def deserialize(cls, value: Mapping) -> "Service":
        """
        Build a service from its JSON-LD mapping.

        Raises:
            marshmallow.ValidationError: if a known term has the wrong shape.
        """
        return ServiceSchema().load(dict(value))

    def serialize(self) -> dict:
        """Return dict representation of service to embed in DID document."""
        return ServiceSchema().dump(self)

    @property
    def types(self) -> List[str]:
        """Accessor for the service types as a list."""

        if self.type is None:
            return []
        if isinstance(self.type, str):
            return [self.type]
        return list(self.type)

    def __eq__(self, other):
        """Test equality."""
        if not isinstance(other, Service):
            return False
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        """Return string representation of the service instance."""

        return "Service({}, {}, {})".format(self.id, self.type, self.service_endpoint)
