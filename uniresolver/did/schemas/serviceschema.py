from marshmallow import INCLUDE, Schema, fields, post_dump, post_load

from .unionfield import ListOrStringField, ListOrStringOrDictField


class ServiceSchema(Schema):
    """
    Service entry of a DID document.

    Example
    {"id": "did:example:123;agent",
     "type": "AgentService",
     "priority": 1,
     "recipientKeys": ["did:example:123#keys-1"],
     "routingKeys": ["did:example:456#keys-4"],
     "serviceEndpoint": "https://agent.example.com/"}
    """

    class Meta:
        unknown = INCLUDE

    id = fields.Str()
    type = ListOrStringField()
    priority = fields.Int()
    recipient_keys = fields.List(fields.Str(), data_key="recipientKeys")
    routing_keys = fields.List(fields.Str(), data_key="routingKeys")
    service_endpoint = ListOrStringOrDictField(data_key="serviceEndpoint")

    @post_load
    def make_service(self, data, **kwargs):
        from ..service import Service
        return Service(**data)

    @post_dump(pass_original=True)
    def add_extra(self, data, original, **kwargs):
        result = {key: value for key, value in data.items() if value is not None}
        for key, value in original.extra.items():
            result.setdefault(key, value)
        return result
