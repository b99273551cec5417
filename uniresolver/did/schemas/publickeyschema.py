from marshmallow import INCLUDE, Schema, fields, post_dump, post_load

from .unionfield import ListOrStringField


class PublicKeySchema(Schema):
    """
    Public key entry of a DID document.

    Example
    {"id": "did:example:123#keys-1",
     "type": "Ed25519VerificationKey2018",
     "controller": "did:example:123",
     "publicKeyBase58": "H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV"}
    """

    class Meta:
        unknown = INCLUDE

    id = fields.Str()
    type = ListOrStringField()
    controller = fields.Str()

    public_key_base58 = fields.Str(data_key="publicKeyBase58")
    public_key_base64 = fields.Str(data_key="publicKeyBase64")
    public_key_hex = fields.Str(data_key="publicKeyHex")
    public_key_pem = fields.Str(data_key="publicKeyPem")
    public_key_jwk = fields.Dict(data_key="publicKeyJwk")

    @post_load
    def make_public_key(self, data, **kwargs):
        from ..publickey import PublicKey
        return PublicKey(**data)

    @post_dump(pass_original=True)
    def add_extra(self, data, original, **kwargs):
        result = {key: value for key, value in data.items() if value is not None}
        for key, value in original.extra.items():
            result.setdefault(key, value)
        return result
